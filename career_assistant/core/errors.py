"""
Exceptions raised by the career assistant.
"""

from typing import Optional


class CareerAssistantError(Exception):
    """Base class for all career assistant errors."""


class CompletionError(CareerAssistantError):
    """The completion endpoint could not be reached or returned an error."""

    DEFAULT_MESSAGE = "AI service unavailable. Please check your API key and try again."

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)


class BackendError(CareerAssistantError):
    """The hosted backend rejected a request."""

    def __init__(self, message: str, code: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.status = status


class RecordNotFoundError(BackendError):
    """No row matched an owner-scoped lookup."""


class AuthError(CareerAssistantError):
    """Sign-in, sign-up or session problem."""


class JobSearchError(CareerAssistantError):
    """Every job search provider failed."""


class ValidationError(CareerAssistantError):
    """A form was submitted without its required fields."""


class RequestInFlightError(CareerAssistantError):
    """A form already has a request outstanding."""
