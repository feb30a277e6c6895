"""Test configuration and fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import pytest

from focus_coach.core.config import FocusConfig, LLMConfig
from focus_coach.focus.models import Task
from focus_coach.focus.service import FocusService
from focus_coach.state.store import InMemoryFocusStore


class FakeModel:
    """Scripted `ModelClient` double.

    Each queued reply is either response text or an exception to raise.
    """

    def __init__(self, *replies: str | BaseException, delay: float = 0.0) -> None:
        self.replies: list[str | BaseException] = list(replies)
        self.delay = delay
        self.prompts: list[str] = []
        self.before_reply: Callable[[], None] | None = None

    async def invoke(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.before_reply is not None:
            self.before_reply()
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply


@pytest.fixture
def llm_config() -> LLMConfig:
    """Provide a test LLM configuration."""
    return LLMConfig(
        provider="openai",
        openai_api_key="test-key",
        openai_model="gpt-4o-mini",
    )


@pytest.fixture
def focus_config(llm_config: LLMConfig) -> FocusConfig:
    """Provide a test focus configuration."""
    return FocusConfig(
        log_level="DEBUG",
        debug=True,
        llm=llm_config,
    )


@pytest.fixture
def store() -> InMemoryFocusStore:
    return InMemoryFocusStore()


@pytest.fixture
def weekly_task() -> Task:
    return Task(description="Get organized for the week")


@pytest.fixture
def make_model() -> type[FakeModel]:
    return FakeModel


@pytest.fixture
def make_service(store: InMemoryFocusStore) -> Callable[..., FocusService]:
    def _make(model: FakeModel, **kwargs: object) -> FocusService:
        return FocusService(store=store, model=model, **kwargs)  # type: ignore[arg-type]

    return _make
