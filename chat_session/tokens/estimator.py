"""Token length estimation for conversation budgets."""

from abc import ABC, abstractmethod

import tiktoken

from chat_session.exceptions import ConfigurationError
from chat_session.logging_config import get_logger

logger = get_logger(__name__)


class TokenEstimator(ABC):
    """Abstract base class for token length estimators."""

    @abstractmethod
    def is_within_limit(self, text: str, limit: int) -> bool:
        """Check whether text encodes to at most ``limit`` tokens.

        Args:
            text: Text to check. Callers prefix a non-empty sentinel.
            limit: Maximum allowed token count.

        Returns:
            True if the encoded length does not exceed the limit.
        """
        ...

    @abstractmethod
    def count(self, text: str) -> int:
        """Count the exact number of tokens in text."""
        ...


class TiktokenEstimator(TokenEstimator):
    """Token estimator backed by a tiktoken encoding.

    The encoding is loaded on first use, since tiktoken may fetch
    its BPE ranks over the network.
    """

    def __init__(self, encoding_name: str = "cl100k_base") -> None:
        self._encoding_name = encoding_name
        self._encoding: tiktoken.Encoding | None = None

    @property
    def encoding_name(self) -> str:
        return self._encoding_name

    def _get_encoding(self) -> tiktoken.Encoding:
        if self._encoding is None:
            try:
                self._encoding = tiktoken.get_encoding(self._encoding_name)
            except ValueError as e:
                raise ConfigurationError(
                    f"Unknown token encoding: {self._encoding_name}",
                    details={"encoding": self._encoding_name},
                ) from e
            logger.debug(f"Loaded token encoding {self._encoding_name}")
        return self._encoding

    def count(self, text: str) -> int:
        return len(self._get_encoding().encode(text, disallowed_special=()))

    def is_within_limit(self, text: str, limit: int) -> bool:
        if limit <= 0 or not text:
            return False
        return self.count(text) <= limit
