"""Core models, errors and form state for the career assistant."""

from .models import (
    UserProfile,
    JobAlert,
    Portfolio,
    PortfolioContent,
    CVData,
    CoverLetterRequest,
    OptimizationResult,
    InterviewQuestion,
    InterviewSession,
    PerformanceAnalysis,
    SkillGapAnalysis,
    LearningPhase,
    JobListing,
    ChatMessage,
    Notification,
    AuthUser,
    Tone,
    PortfolioTemplate,
)
from .errors import (
    CareerAssistantError,
    CompletionError,
    BackendError,
    RecordNotFoundError,
    AuthError,
    JobSearchError,
    ValidationError,
    RequestInFlightError,
)
from .forms import FormState
from .resume_reader import ResumeReader, read_resume

__all__ = [
    "UserProfile",
    "JobAlert",
    "Portfolio",
    "PortfolioContent",
    "CVData",
    "CoverLetterRequest",
    "OptimizationResult",
    "InterviewQuestion",
    "InterviewSession",
    "PerformanceAnalysis",
    "SkillGapAnalysis",
    "LearningPhase",
    "JobListing",
    "ChatMessage",
    "Notification",
    "AuthUser",
    "Tone",
    "PortfolioTemplate",
    "CareerAssistantError",
    "CompletionError",
    "BackendError",
    "RecordNotFoundError",
    "AuthError",
    "JobSearchError",
    "ValidationError",
    "RequestInFlightError",
    "FormState",
    "ResumeReader",
    "read_resume",
]
