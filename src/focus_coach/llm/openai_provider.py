"""OpenAI LLM provider implementation."""

import logging
from typing import Any

from openai import AsyncOpenAI

from focus_coach.core.config import LLMConfig
from focus_coach.llm.provider import LLMProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI API provider implementation."""

    def __init__(self, config: LLMConfig, client: AsyncOpenAI | None = None) -> None:
        """Initialize the OpenAI provider.

        Args:
            config: LLM configuration.
            client: Pre-built client (tests inject a mock here).

        Raises:
            ValueError: If API key is not provided.
        """
        if client is None and not config.openai_api_key:
            raise ValueError("OpenAI API key is required")

        self.config = config
        self.client = client or AsyncOpenAI(api_key=config.openai_api_key)
        self.model = config.openai_model
        self.temperature = config.openai_temperature
        self.max_tokens = config.openai_max_tokens

        logger.info(f"OpenAI provider initialized with model: {self.model}")

    async def generate(
        self,
        prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        **kwargs: Any,
    ) -> str:
        """Generate text completion using OpenAI API.

        Args:
            prompt: The input prompt.
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.
            **kwargs: Additional OpenAI-specific parameters.

        Returns:
            Generated text completion.
        """
        temp = temperature if temperature is not None else self.temperature

        logger.debug(f"Generating completion for prompt: {prompt[:100]}...")

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens or self.max_tokens,
            temperature=temp,
            **kwargs,
        )

        content = response.choices[0].message.content or ""
        logger.debug(f"Generated {len(content)} characters")

        return content
