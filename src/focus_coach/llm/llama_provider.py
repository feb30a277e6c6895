"""Local LLaMA LLM provider implementation."""

import asyncio
import logging
from typing import Any

from focus_coach.core.config import LLMConfig
from focus_coach.llm.provider import LLMProvider

logger = logging.getLogger(__name__)


class LLaMAProvider(LLMProvider):
    """Local LLaMA model provider implementation.

    Requires llama-cpp-python to be installed:
        pip install "focus-coach[llama]"
    """

    def __init__(self, config: LLMConfig) -> None:
        """Initialize the LLaMA provider.

        Args:
            config: LLM configuration.

        Raises:
            ValueError: If model path is not provided.
            ImportError: If llama-cpp-python is not installed.
        """
        if not config.llama_model_path:
            raise ValueError("LLaMA model path is required")

        try:
            from llama_cpp import Llama
        except ImportError as e:
            raise ImportError(
                "llama-cpp-python is required for LLaMA provider. "
                'Install it with: pip install "focus-coach[llama]"'
            ) from e

        self.config = config

        logger.info(f"Loading LLaMA model from: {config.llama_model_path}")

        self.llm = Llama(
            model_path=str(config.llama_model_path),
            n_ctx=config.llama_n_ctx,
            n_threads=config.llama_n_threads,
            verbose=False,
        )

        logger.info("LLaMA model loaded successfully")

    async def generate(
        self,
        prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        **kwargs: Any,
    ) -> str:
        """Generate text completion using local LLaMA model.

        Inference is CPU-bound and blocking, so it runs in a worker thread.
        """
        logger.debug(f"Generating completion for prompt: {prompt[:100]}...")

        result = await asyncio.to_thread(
            self.llm.create_chat_completion,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens or 512,
            temperature=temperature if temperature is not None else 0.7,
            **kwargs,
        )

        content = result["choices"][0]["message"]["content"] or ""
        logger.debug(f"Generated {len(content)} characters")

        return content
