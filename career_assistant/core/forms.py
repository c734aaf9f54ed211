"""
Form state - runs one action per form and records its notification.

Each feature form may have at most one request outstanding. Failures of the
request are not raised to the caller: they become a destructive notification
and the action is abandoned, and the user re-submits to retry.
"""

from typing import Any, Callable, Optional
import logging
import threading

from .errors import (
    BackendError,
    AuthError,
    CompletionError,
    JobSearchError,
    RequestInFlightError,
    ValidationError,
)
from .models import Notification

# Errors that abandon the action with a notification
HANDLED_ERRORS = (CompletionError, BackendError, AuthError, JobSearchError, ValidationError)


class FormState:
    """Single-flight guard plus notification log for one feature form."""

    def __init__(self, name: str, on_notify: Optional[Callable[[Notification], None]] = None):
        """
        Initialize the form state.

        Args:
            name: Form name used in logs
            on_notify: Optional callback invoked with every notification
        """
        self.name = name
        self.notifications: list[Notification] = []
        self._lock = threading.Lock()
        self._on_notify = on_notify
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def busy(self) -> bool:
        """Whether a request is currently in flight."""
        return self._lock.locked()

    @property
    def last_notification(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None

    def notify(self, title: str, description: str = "", variant: str = "default") -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self.notifications.append(notification)
        if self._on_notify:
            self._on_notify(notification)
        return notification

    def submit(
        self,
        action: Callable[..., Any],
        *args,
        success: Optional[Callable[[Any], tuple[str, str]]] = None,
        failure: Optional[tuple[str, str]] = None,
        **kwargs,
    ) -> Any:
        """
        Run ``action`` unless another request from this form is in flight.

        Args:
            action: The request to perform
            success: Builds (title, description) from the result
            failure: (title, description) shown when the request fails
                (default: "Error" and the error message)

        Returns:
            The action's result, or None if the action failed

        Raises:
            RequestInFlightError: If the form already has a request outstanding
        """
        if not self._lock.acquire(blocking=False):
            raise RequestInFlightError(f"{self.name}: a request is already in progress")

        try:
            result = action(*args, **kwargs)
        except ValidationError as e:
            self.logger.info(f"{self.name}: {e}")
            self.notify("Missing information", str(e), variant="destructive")
            return None
        except HANDLED_ERRORS as e:
            self.logger.error(f"{self.name} failed: {e}")
            title, description = failure or ("Error", str(e))
            self.notify(title, description, variant="destructive")
            return None
        finally:
            self._lock.release()

        if success:
            title, description = success(result)
            self.notify(title, description)

        return result
