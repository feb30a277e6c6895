"""Configuration for the focus coach.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Pydantic-settings supports overriding the env file in tests via:
`FocusConfig(_env_file=path_to_env)`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMConfig(BaseSettings):
    """Configuration for LLM providers."""

    provider: Literal["openai", "llama"] = Field(
        default="openai",
        description="LLM provider to use",
    )

    # OpenAI settings
    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model to use",
    )
    openai_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Temperature for OpenAI model",
    )
    openai_max_tokens: int = Field(
        default=200,
        gt=0,
        description="Completion token limit; a first step is one sentence",
    )

    # LLaMA settings
    llama_model_path: Path | None = Field(
        default=None,
        description="Path to LLaMA model file",
    )
    llama_n_ctx: int = Field(
        default=4096,
        gt=0,
        description="Context window size for LLaMA",
    )
    llama_n_threads: int | None = Field(
        default=None,
        description="Number of threads for LLaMA (None = auto)",
    )

    model_config = SettingsConfigDict(
        env_prefix="FOCUS_LLM_",
        env_file=".env",
        extra="ignore",
    )


class FocusConfig(BaseSettings):
    """Main configuration for the focus coach."""

    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging for focus_coach loggers",
    )
    model_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Upper bound on a single model call (None = no timeout)",
    )

    llm: LLMConfig = Field(
        default_factory=LLMConfig,
        description="LLM configuration",
    )

    model_config = SettingsConfigDict(
        env_prefix="FOCUS_",
        env_file=".env",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _normalise_log_level(self) -> FocusConfig:
        self.log_level = self.log_level.strip().upper() or "INFO"
        return self

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level
