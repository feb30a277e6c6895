"""First-step generation for a user's current task."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from focus_coach.core.errors import (
    ExtractionError,
    ModelInvocationError,
    ModelTimeoutError,
    NoCurrentTaskError,
    PreconditionError,
    TaskMismatchError,
    ValidationError,
)
from focus_coach.focus.extraction import extract_suggestion
from focus_coach.focus.models import FirstStepSuggestion, FocusSnapshot, Task
from focus_coach.focus.prompt import build_first_step_prompt
from focus_coach.focus.validators import validate_suggestion
from focus_coach.llm.provider import ModelClient
from focus_coach.state.store import FocusStateStore

logger = logging.getLogger(__name__)


class FocusService:
    """Tracks each user's current task and its AI-generated first step.

    A suggestion only becomes visible after it has been extracted from the
    model response and passed every validator. Any failure leaves the user's
    previous suggestion in place.
    """

    def __init__(
        self,
        store: FocusStateStore,
        model: ModelClient,
        *,
        model_timeout_seconds: float | None = None,
    ) -> None:
        self.store = store
        self.model = model
        self.model_timeout_seconds = model_timeout_seconds
        # user_id -> (lock, number of calls holding or waiting on it)
        self._user_locks: dict[str, tuple[asyncio.Lock, int]] = {}

    def set_current_task(self, user_id: str, task: Task) -> None:
        self.store.set_current_task(user_id, task)

    def clear_current_task(self, user_id: str) -> None:
        self.store.clear_current_task(user_id)

    def get_current_task(self, user_id: str) -> Task | None:
        return self.store.get_current_task(user_id)

    def get_suggestion(self, user_id: str) -> FirstStepSuggestion | None:
        return self.store.get_suggestion(user_id)

    def describe_focus(self, user_id: str) -> FocusSnapshot:
        return FocusSnapshot(
            user_id=user_id,
            task=self.store.get_current_task(user_id),
            suggestion=self.store.get_suggestion(user_id),
        )

    async def generate_first_step(self, user_id: str, task: Task) -> FirstStepSuggestion:
        """Ask the model for a first step on `task` and store it if it passes.

        Requests for the same user run one at a time; the last successful one
        wins.

        Raises:
            NoCurrentTaskError: The user has no current task.
            TaskMismatchError: `task` is not the user's current task, or the
                current task changed while the model was answering.
            ModelInvocationError: The model call failed or timed out.
            ExtractionError: The response held no usable JSON suggestion.
            ValidationError: The suggestion failed a quality check.
        """
        async with self._user_lock(user_id):
            try:
                self._require_current(user_id, task)
            except PreconditionError as e:
                logger.warning(
                    "First step request rejected",
                    extra={"user_id": user_id, "reason": e.reason},
                )
                raise

            prompt = build_first_step_prompt(task)
            logger.info(
                "Requesting first step",
                extra={"user_id": user_id, "task": task.description},
            )
            raw = await self._invoke(user_id, prompt)
            logger.debug("Raw model response", extra={"user_id": user_id, "raw_response": raw})

            try:
                candidate = extract_suggestion(raw)
                accepted = validate_suggestion(candidate)
            except ExtractionError as e:
                logger.warning(
                    "Model response could not be parsed",
                    extra={"user_id": user_id, "raw_response": e.raw_response},
                )
                raise
            except ValidationError as e:
                logger.warning(
                    "Suggestion rejected",
                    extra={"user_id": user_id, "validator": e.validator, "candidate": e.text},
                )
                raise

            suggestion = FirstStepSuggestion(for_task=task, suggestion_text=accepted)
            if not self.store.set_suggestion(user_id, suggestion):
                current = self.store.get_current_task(user_id)
                logger.warning(
                    "Current task changed during generation; discarding suggestion",
                    extra={"user_id": user_id, "candidate": accepted},
                )
                if current is None:
                    raise NoCurrentTaskError(user_id)
                raise TaskMismatchError(
                    user_id, requested=task.description, current=current.description
                )

            logger.info(
                "Stored first step",
                extra={"user_id": user_id, "suggestion": accepted},
            )
            return suggestion

    @asynccontextmanager
    async def _user_lock(self, user_id: str) -> AsyncIterator[None]:
        """Hold `user_id`'s lock; the entry is dropped once no call needs it."""
        lock, users = self._user_locks.get(user_id) or (asyncio.Lock(), 0)
        self._user_locks[user_id] = (lock, users + 1)
        try:
            async with lock:
                yield
        finally:
            lock, users = self._user_locks[user_id]
            if users == 1:
                del self._user_locks[user_id]
            else:
                self._user_locks[user_id] = (lock, users - 1)

    def _require_current(self, user_id: str, task: Task) -> None:
        current = self.store.get_current_task(user_id)
        if current is None:
            raise NoCurrentTaskError(user_id)
        if not current.matches(task):
            raise TaskMismatchError(
                user_id, requested=task.description, current=current.description
            )

    async def _invoke(self, user_id: str, prompt: str) -> str:
        timeout = self.model_timeout_seconds
        try:
            if timeout is None:
                return await self.model.invoke(prompt)
            try:
                return await asyncio.wait_for(self.model.invoke(prompt), timeout=timeout)
            except TimeoutError as e:
                raise ModelTimeoutError(timeout, user_id=user_id) from e
        except ModelInvocationError as e:
            logger.warning(
                "Model call failed",
                extra={"user_id": user_id, "error": str(e)},
            )
            raise
        except Exception as e:
            logger.warning(
                "Model call failed",
                extra={"user_id": user_id, "error": str(e)},
            )
            raise ModelInvocationError(f"Model call failed: {e}", user_id=user_id) from e
