"""Model invocation boundary and the abstract base class for LLM providers."""

from abc import ABC, abstractmethod
from typing import Any, Protocol


class ModelClient(Protocol):
    """Anything that can turn a prompt into response text.

    This is the only surface the focus service depends on; transport,
    authentication and provider details stay behind it.
    """

    async def invoke(self, prompt: str) -> str: ...


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This interface allows pluggable LLM backends (OpenAI, LLaMA, etc.)
    """

    async def invoke(self, prompt: str) -> str:
        """Single-shot completion using the provider's default settings."""
        return await self.generate(prompt)

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        **kwargs: Any,
    ) -> str:
        """Generate text completion from a prompt.

        Args:
            prompt: The input prompt.
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.
            **kwargs: Additional provider-specific parameters.

        Returns:
            Generated text completion.
        """
        pass
