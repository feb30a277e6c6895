"""LLM package initialization."""

from focus_coach.llm.factory import LLMFactory
from focus_coach.llm.provider import LLMProvider, ModelClient

__all__ = [
    "LLMFactory",
    "LLMProvider",
    "ModelClient",
]
