"""Application configuration using Pydantic Settings.

All configuration is loaded from environment variables.
No secrets are hardcoded.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LLMSettings(BaseSettings):
    """Completion provider configuration.

    Targets any OpenAI-compatible chat completions endpoint.
    """

    model_config = SettingsConfigDict(env_prefix="LLM_")

    base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Chat completions API base URL",
    )
    model: str = Field(
        default="gpt-4o-mini",
        description="Model name to use for generation",
    )
    api_key: SecretStr = Field(
        default=SecretStr("not-required"),
        description="API key (not required for local endpoints)",
    )
    timeout: float = Field(
        default=120.0,
        description="Request timeout in seconds",
    )


class SessionSettings(BaseSettings):
    """Safety limits applied to every completion session."""

    model_config = SettingsConfigDict(env_prefix="SESSION_")

    max_prompts: int = Field(
        default=5,
        ge=1,
        description="Maximum prompts sent in one session",
    )
    max_conversation_tokens: int = Field(
        default=4000,
        ge=1,
        description="Maximum estimated tokens of the whole conversation",
    )
    token_encoding: str = Field(
        default="cl100k_base",
        description="tiktoken encoding used to estimate conversation size",
    )


class Settings(BaseSettings):
    """Main application settings.

    Aggregates all configuration sections.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    # Nested settings
    llm: LLMSettings = Field(default_factory=LLMSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()
