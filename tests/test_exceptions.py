"""Tests for session exceptions."""

from chat_session.exceptions import (
    ChatSessionError,
    ConfigurationError,
    EmptyResponseError,
    ErrorCode,
    LLMError,
    PromptLimitExceededError,
    SessionLimitError,
    TokenLimitExceededError,
)


class TestErrorCode:
    """Tests for error codes."""

    def test_error_code_format(self) -> None:
        """Error codes follow SES-XXXX format."""
        for code in ErrorCode:
            assert code.value.startswith("SES-")
            assert len(code.value) == 8  # SES-XXXX

    def test_error_code_uniqueness(self) -> None:
        """All error codes are unique."""
        codes = [code.value for code in ErrorCode]
        assert len(codes) == len(set(codes))


class TestChatSessionError:
    """Tests for base exception."""

    def test_basic_exception(self) -> None:
        """Base exception stores message and code."""
        error = ChatSessionError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {}

    def test_to_dict(self) -> None:
        """Exception converts to a serializable dict."""
        error = ChatSessionError(
            "Something went wrong",
            details={"trace_id": "abc123"},
        )

        assert error.to_dict() == {
            "error": {
                "code": "SES-1000",
                "message": "Something went wrong",
                "details": {"trace_id": "abc123"},
            }
        }

    def test_str_representation(self) -> None:
        """Exception string is the message."""
        assert str(ChatSessionError("Test error")) == "Test error"


class TestConfigurationError:
    """Tests for configuration exception."""

    def test_default_code(self) -> None:
        """ConfigurationError has correct default code."""
        error = ConfigurationError("Unknown encoding")
        assert error.code == ErrorCode.CONFIGURATION_ERROR
        assert isinstance(error, ChatSessionError)


class TestPromptLimitExceededError:
    """Tests for the prompt limit exception."""

    def test_values_and_message(self) -> None:
        """Error reports the attempted count and the limit."""
        error = PromptLimitExceededError(count=6, limit=5)

        assert error.count == 6
        assert error.limit == 5
        assert error.message == "Too many prompts in this session (6/5)"
        assert error.code == ErrorCode.PROMPT_LIMIT_EXCEEDED
        assert error.details == {"limit": 5, "count": 6}

    def test_is_session_limit_error(self) -> None:
        """Prompt limit is a session limit error."""
        assert isinstance(PromptLimitExceededError(2, 1), SessionLimitError)


class TestTokenLimitExceededError:
    """Tests for the token limit exception."""

    def test_values_and_message(self) -> None:
        """Error reports the exact token count and the limit."""
        error = TokenLimitExceededError(token_count=4123, limit=4000)

        assert error.token_count == 4123
        assert error.limit == 4000
        assert error.message == (
            "Total tokens in this session exceeded limit. 4123/4000"
        )
        assert error.code == ErrorCode.TOKEN_LIMIT_EXCEEDED
        assert error.to_dict()["error"]["details"] == {
            "limit": 4000,
            "token_count": 4123,
        }

    def test_not_an_llm_error(self) -> None:
        """Token limit is raised before any request, not by the provider."""
        error = TokenLimitExceededError(10, 5)
        assert isinstance(error, SessionLimitError)
        assert not isinstance(error, LLMError)


class TestLLMError:
    """Tests for LLM exceptions."""

    def test_default_code(self) -> None:
        """LLMError has correct default code."""
        assert LLMError("Model unavailable").code == ErrorCode.LLM_SERVICE_ERROR

    def test_timeout_code(self) -> None:
        """LLMError can indicate timeout."""
        error = LLMError("Request timed out", code=ErrorCode.LLM_TIMEOUT)
        assert error.code == ErrorCode.LLM_TIMEOUT

    def test_empty_response(self) -> None:
        """EmptyResponseError carries a fixed message."""
        error = EmptyResponseError()
        assert error.message == "Response message content is empty"
        assert error.code == ErrorCode.LLM_EMPTY_RESPONSE
        assert isinstance(error, LLMError)
