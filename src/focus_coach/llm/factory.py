"""Builds the model client the focus service talks to."""

import logging

from focus_coach.core.config import FocusConfig
from focus_coach.llm.llama_provider import LLaMAProvider
from focus_coach.llm.openai_provider import OpenAIProvider
from focus_coach.llm.provider import LLMProvider

logger = logging.getLogger(__name__)

PROVIDERS: dict[str, type[LLMProvider]] = {
    "openai": OpenAIProvider,
    "llama": LLaMAProvider,
}


class LLMFactory:
    @staticmethod
    def create(config: FocusConfig) -> LLMProvider:
        """Return the provider named by `FOCUS_LLM_PROVIDER`.

        Raises:
            ValueError: The provider is unknown, or its settings are
                incomplete (missing API key or model path).
        """
        name = config.llm.provider
        provider_cls = PROVIDERS.get(name)
        if provider_cls is None:
            raise ValueError(
                f"Unsupported model provider {name!r}; "
                f"set FOCUS_LLM_PROVIDER to one of: {', '.join(PROVIDERS)}"
            )

        logger.info(
            "Creating model client",
            extra={"provider": name, "timeout_seconds": config.model_timeout_seconds},
        )
        return provider_cls(config.llm)
