"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterator
from unittest.mock import AsyncMock

import pytest

from chat_session.config import get_settings
from chat_session.llm.client import CompletionProvider
from chat_session.llm.models import (
    CompletionChoice,
    CompletionResult,
    CompletionUsage,
    GenerationParams,
)
from chat_session.session.models import SessionOptions
from chat_session.tokens.estimator import TokenEstimator


class WordCountEstimator(TokenEstimator):
    """Deterministic estimator: one token per whitespace-separated word."""

    def count(self, text: str) -> int:
        return len(text.split())

    def is_within_limit(self, text: str, limit: int) -> bool:
        return self.count(text) <= limit


def make_result(
    content: str | None = "Hi there",
    total_tokens: int | None = 42,
) -> CompletionResult:
    """Build a provider result with a single choice."""
    usage = (
        CompletionUsage(prompt_tokens=30, completion_tokens=12, total_tokens=total_tokens)
        if total_tokens is not None
        else None
    )
    return CompletionResult(
        choices=[CompletionChoice(content=content)],
        model="test-model",
        usage=usage,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Reset cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def estimator() -> WordCountEstimator:
    """Deterministic token estimator."""
    return WordCountEstimator()


@pytest.fixture
def result_factory() -> Callable[..., CompletionResult]:
    """Factory for provider results."""
    return make_result


@pytest.fixture
def provider() -> AsyncMock:
    """Completion provider that always answers "Hi there".

    Returns:
        AsyncMock implementing CompletionProvider.
    """
    mock = AsyncMock(spec=CompletionProvider)
    mock.complete.return_value = make_result()
    return mock


@pytest.fixture
def options() -> SessionOptions:
    """Session options with default limits."""
    return SessionOptions(generation=GenerationParams(model="test-model"))
