"""Per-user focus state.

The service depends only on `FocusStateStore`; `InMemoryFocusStore` is the
process-local implementation. State does not survive a restart.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from focus_coach.focus.models import FirstStepSuggestion, Task

logger = logging.getLogger(__name__)


class FocusStateStore(Protocol):
    """Storage boundary for current tasks and first-step suggestions.

    Implementations must clear a user's suggestion in the same atomic step
    that changes or clears the user's current task.
    """

    def get_current_task(self, user_id: str) -> Task | None: ...

    def set_current_task(self, user_id: str, task: Task) -> None: ...

    def clear_current_task(self, user_id: str) -> None: ...

    def get_suggestion(self, user_id: str) -> FirstStepSuggestion | None: ...

    def set_suggestion(self, user_id: str, suggestion: FirstStepSuggestion) -> bool:
        """Store `suggestion` if its task is still the user's current task.

        Returns:
            False (and stores nothing) when the task changed or was cleared.
        """
        ...


class InMemoryFocusStore:
    """Thread-safe dictionary-backed `FocusStateStore`."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[str, Task] = {}
        self._suggestions: dict[str, FirstStepSuggestion] = {}

    def get_current_task(self, user_id: str) -> Task | None:
        with self._lock:
            return self._tasks.get(user_id)

    def set_current_task(self, user_id: str, task: Task) -> None:
        with self._lock:
            self._tasks[user_id] = task
            self._suggestions.pop(user_id, None)
        logger.info(
            "Current task set", extra={"user_id": user_id, "task": task.description}
        )

    def clear_current_task(self, user_id: str) -> None:
        with self._lock:
            self._tasks.pop(user_id, None)
            self._suggestions.pop(user_id, None)
        logger.info("Current task cleared", extra={"user_id": user_id})

    def get_suggestion(self, user_id: str) -> FirstStepSuggestion | None:
        with self._lock:
            return self._suggestions.get(user_id)

    def set_suggestion(self, user_id: str, suggestion: FirstStepSuggestion) -> bool:
        with self._lock:
            current = self._tasks.get(user_id)
            if current is None or not current.matches(suggestion.for_task):
                return False
            self._suggestions[user_id] = suggestion
            return True
