"""Bounded chat completion sessions over OpenAI-compatible APIs."""

__version__ = "0.1.0"

from chat_session.exceptions import (
    ChatSessionError,
    EmptyResponseError,
    LLMError,
    PromptLimitExceededError,
    SessionLimitError,
    TokenLimitExceededError,
)
from chat_session.llm import GenerationParams, Message, OpenAICompatibleClient, Role
from chat_session.session import (
    CompletionSession,
    SendPromptResponse,
    SessionOptions,
    create_completion_session,
)
from chat_session.tokens import TiktokenEstimator, TokenEstimator

__all__ = [
    "ChatSessionError",
    "CompletionSession",
    "EmptyResponseError",
    "GenerationParams",
    "LLMError",
    "Message",
    "OpenAICompatibleClient",
    "PromptLimitExceededError",
    "Role",
    "SendPromptResponse",
    "SessionLimitError",
    "SessionOptions",
    "TiktokenEstimator",
    "TokenEstimator",
    "TokenLimitExceededError",
    "__version__",
    "create_completion_session",
]
