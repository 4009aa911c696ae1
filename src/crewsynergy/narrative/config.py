"""Configuration loading for narrative generation.

Settings come from environment variables and an optional .env file. The API
key is kept as a SecretStr and never logged.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class NarrativeConfig(BaseSettings):
    """Configuration for the narrative provider.

    Environment Variables:
        OPENAI_API_KEY: OpenAI API key (narratives fall back to defaults without it)
        NARRATIVE_ENABLED: Set to false to always use fallback narratives
        NARRATIVE_MODEL: Chat model to use (default: gpt-4o-mini)
        NARRATIVE_MAX_TOKENS: Maximum tokens in response (default: 1000)
        NARRATIVE_TEMPERATURE: Response randomness 0.0-2.0 (default: 0.95)
        NARRATIVE_TIMEOUT: Request timeout in seconds (default: 30.0)

    Example:
        >>> config = NarrativeConfig()  # Loads from environment
        >>> config = NarrativeConfig(_env_file=".env")  # Explicit .env file
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openai_api_key: SecretStr | None = Field(
        default=None,
        description="OpenAI API key",
    )
    narrative_enabled: bool = Field(
        default=True,
        description="Query the provider at all; false means always use fallbacks",
    )
    narrative_model: str = Field(
        default="gpt-4o-mini",
        min_length=1,
        description="Chat model identifier",
    )
    narrative_max_tokens: int = Field(
        default=1000,
        ge=1,
        le=100000,
        description="Maximum tokens in response",
    )
    narrative_temperature: float = Field(
        default=0.95,
        ge=0.0,
        le=2.0,
        description="Response randomness (0.0 to 2.0)",
    )
    narrative_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )

    def get_api_key(self) -> str | None:
        """Return the API key value, or None if not configured."""
        return self.openai_api_key.get_secret_value() if self.openai_api_key else None

    def __repr__(self) -> str:
        """Safe representation that never exposes the API key."""
        return (
            f"NarrativeConfig("
            f"enabled={self.narrative_enabled}, "
            f"model={self.narrative_model}, "
            f"max_tokens={self.narrative_max_tokens}, "
            f"temperature={self.narrative_temperature}, "
            f"timeout={self.narrative_timeout}s, "
            f"openai_key={'*****' if self.openai_api_key else 'not set'}"
            f")"
        )


@lru_cache
def get_narrative_config() -> NarrativeConfig:
    """Get the cached narrative configuration.

    To reload configuration, call get_narrative_config.cache_clear() first.
    """
    config = NarrativeConfig()
    logger.info("Loaded narrative configuration: %r", config)
    return config
