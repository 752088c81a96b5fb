"""Tests for application configuration."""

import os
from unittest.mock import patch

import pydantic
import pytest

from chat_session.config import (
    Environment,
    LLMSettings,
    SessionSettings,
    Settings,
    get_settings,
)


class TestLLMSettings:
    """Tests for LLM configuration."""

    def test_default_values(self) -> None:
        """Default values point to the OpenAI API."""
        settings = LLMSettings()
        assert settings.base_url == "https://api.openai.com/v1"
        assert settings.model == "gpt-4o-mini"
        assert settings.timeout == 120.0

    def test_api_key_is_secret(self) -> None:
        """API key should be masked when printed."""
        settings = LLMSettings()
        assert "not-required" not in str(settings.api_key)
        assert settings.api_key.get_secret_value() == "not-required"

    def test_env_override(self) -> None:
        """Environment variables override defaults."""
        with patch.dict(os.environ, {"LLM_MODEL": "mistral:latest"}):
            settings = LLMSettings()
            assert settings.model == "mistral:latest"


class TestSessionSettings:
    """Tests for session limit configuration."""

    def test_default_values(self) -> None:
        """Default limits are 5 prompts and 4000 tokens."""
        settings = SessionSettings()
        assert settings.max_prompts == 5
        assert settings.max_conversation_tokens == 4000
        assert settings.token_encoding == "cl100k_base"

    def test_env_override(self) -> None:
        """Environment variables override defaults."""
        env = {
            "SESSION_MAX_PROMPTS": "10",
            "SESSION_MAX_CONVERSATION_TOKENS": "8000",
        }
        with patch.dict(os.environ, env):
            settings = SessionSettings()
            assert settings.max_prompts == 10
            assert settings.max_conversation_tokens == 8000

    def test_rejects_zero_limit(self) -> None:
        """Limits must be positive."""
        with patch.dict(os.environ, {"SESSION_MAX_PROMPTS": "0"}):
            with pytest.raises(pydantic.ValidationError):
                SessionSettings()


class TestSettings:
    """Tests for main application settings."""

    def test_default_environment(self) -> None:
        """Default environment is development."""
        settings = Settings()
        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"

    def test_nested_settings_loaded(self) -> None:
        """Nested settings are initialized."""
        settings = Settings()
        assert isinstance(settings.llm, LLMSettings)
        assert isinstance(settings.session, SessionSettings)

    def test_environment_enum(self) -> None:
        """Environment can be set via string."""
        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            settings = Settings()
            assert settings.environment == Environment.PRODUCTION


class TestGetSettings:
    """Tests for settings singleton."""

    def test_returns_settings_instance(self) -> None:
        """get_settings returns a Settings instance."""
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_caching(self) -> None:
        """Settings are cached."""
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
