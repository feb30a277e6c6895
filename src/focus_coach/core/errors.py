"""Error taxonomy for first-step generation.

Every failure of `FocusService.generate_first_step` is one of these kinds, and
none of them leave a user's suggestion state mutated.
"""

from __future__ import annotations


class FocusCoachError(Exception):
    """Base class for all focus coach errors."""


class PreconditionError(FocusCoachError):
    """The user's focus state does not allow the requested operation."""

    reason: str = "precondition_failed"

    def __init__(self, message: str, *, user_id: str) -> None:
        super().__init__(message)
        self.user_id = user_id


class NoCurrentTaskError(PreconditionError):
    reason = "no_current_task"

    def __init__(self, user_id: str) -> None:
        super().__init__(
            f"Cannot generate first step for user {user_id}: no current task is set",
            user_id=user_id,
        )


class TaskMismatchError(PreconditionError):
    reason = "task_mismatch"

    def __init__(self, user_id: str, *, requested: str, current: str) -> None:
        super().__init__(
            f"Cannot generate first step for user {user_id}: "
            f"requested task {requested!r} is not the current task {current!r}",
            user_id=user_id,
        )
        self.requested = requested
        self.current = current


class ModelInvocationError(FocusCoachError):
    """The model client failed (network, auth, quota, ...)."""

    def __init__(self, message: str, *, user_id: str | None = None) -> None:
        super().__init__(message)
        self.user_id = user_id


class ModelTimeoutError(ModelInvocationError):
    def __init__(self, timeout_seconds: float, *, user_id: str | None = None) -> None:
        super().__init__(
            f"Model call did not complete within {timeout_seconds:g}s", user_id=user_id
        )
        self.timeout_seconds = timeout_seconds


class ExtractionError(FocusCoachError):
    """The raw model response has no usable `{"suggestion": ...}` object."""

    def __init__(self, message: str, *, raw_response: str) -> None:
        super().__init__(message)
        self.raw_response = raw_response

    def __str__(self) -> str:
        return f"{self.args[0]} Raw response: {self.raw_response!r}"


class ValidationError(FocusCoachError):
    """A candidate suggestion failed one of the content validators.

    Not to be confused with `pydantic.ValidationError`, which signals bad
    configuration or payload shape.
    """

    def __init__(self, validator: str, text: str, detail: str = "") -> None:
        message = f"Suggestion failed {validator!r} check"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(f"{message}. Got: {text!r}")
        self.validator = validator
        self.text = text
        self.detail = detail
