"""Core package initialization."""

from focus_coach.core.config import FocusConfig, LLMConfig
from focus_coach.core.errors import (
    ExtractionError,
    FocusCoachError,
    ModelInvocationError,
    ModelTimeoutError,
    NoCurrentTaskError,
    PreconditionError,
    TaskMismatchError,
    ValidationError,
)

__all__ = [
    "ExtractionError",
    "FocusCoachError",
    "FocusConfig",
    "LLMConfig",
    "ModelInvocationError",
    "ModelTimeoutError",
    "NoCurrentTaskError",
    "PreconditionError",
    "TaskMismatchError",
    "ValidationError",
]
