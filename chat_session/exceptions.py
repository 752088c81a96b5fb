"""Session exception hierarchy.

All custom exceptions inherit from ChatSessionError.
Each exception has an error code for structured error handling.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # General errors (1xxx)
    INTERNAL_ERROR = "SES-1000"
    CONFIGURATION_ERROR = "SES-1001"

    # Session limit errors (2xxx)
    PROMPT_LIMIT_EXCEEDED = "SES-2000"
    TOKEN_LIMIT_EXCEEDED = "SES-2001"

    # LLM errors (3xxx)
    LLM_SERVICE_ERROR = "SES-3000"
    LLM_TIMEOUT = "SES-3001"
    LLM_RATE_LIMIT = "SES-3002"
    LLM_EMPTY_RESPONSE = "SES-3003"


class ChatSessionError(Exception):
    """Base exception for all completion session errors.

    Attributes:
        message: Human-readable error message.
        code: Structured error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a serializable dictionary."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details,
            }
        }


class ConfigurationError(ChatSessionError):
    """Configuration or environment error."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class SessionLimitError(ChatSessionError):
    """A session safety limit was exceeded.

    Attributes:
        limit: The configured limit that was crossed.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        limit: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.limit = limit
        super().__init__(message, code, {"limit": limit, **(details or {})})


class PromptLimitExceededError(SessionLimitError):
    """More prompts were attempted than the session allows."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        super().__init__(
            f"Too many prompts in this session ({count}/{limit})",
            ErrorCode.PROMPT_LIMIT_EXCEEDED,
            limit,
            {"count": count},
        )


class TokenLimitExceededError(SessionLimitError):
    """The conversation grew beyond its token budget."""

    def __init__(self, token_count: int, limit: int) -> None:
        self.token_count = token_count
        super().__init__(
            f"Total tokens in this session exceeded limit. {token_count}/{limit}",
            ErrorCode.TOKEN_LIMIT_EXCEEDED,
            limit,
            {"token_count": token_count},
        )


class LLMError(ChatSessionError):
    """LLM service error."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LLM_SERVICE_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EmptyResponseError(LLMError):
    """The provider answered without any usable generated text."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            "Response message content is empty",
            ErrorCode.LLM_EMPTY_RESPONSE,
            details,
        )
