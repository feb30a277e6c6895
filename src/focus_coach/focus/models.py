from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True)
class Task:
    """A task a user can focus on.

    `task_id` is optional. When both sides of a comparison carry one, identity
    is the id; otherwise it falls back to the exact description text.
    """

    description: str
    task_id: str | None = None

    def __post_init__(self) -> None:
        if not self.description.strip():
            raise ValueError("Task description must not be empty")

    def matches(self, other: Task) -> bool:
        if self.task_id is not None and other.task_id is not None:
            return self.task_id == other.task_id
        return self.description == other.description


@dataclass(frozen=True, slots=True)
class FirstStepSuggestion:
    """A validated five-minute starting action for `for_task`."""

    for_task: Task
    suggestion_text: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True, slots=True)
class FocusSnapshot:
    """Point-in-time view of one user's focus state."""

    user_id: str
    task: Task | None
    suggestion: FirstStepSuggestion | None


def format_focus(snapshot: FocusSnapshot) -> str:
    lines = [f"Current focus for user: {snapshot.user_id}"]
    if snapshot.task is None:
        lines.append("No task currently in focus.")
        return "\n".join(lines)

    lines.append(f"TASK: {snapshot.task.description}")
    if snapshot.suggestion is not None:
        lines.append(f"FIRST STEP: {snapshot.suggestion.suggestion_text}")
    else:
        lines.append("(No first step generated yet)")
    return "\n".join(lines)
