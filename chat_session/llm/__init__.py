"""LLM client module."""

from chat_session.llm.client import CompletionProvider, OpenAICompatibleClient
from chat_session.llm.models import (
    CompletionChoice,
    CompletionResult,
    CompletionUsage,
    GenerationParams,
    Message,
    Role,
)

__all__ = [
    "CompletionChoice",
    "CompletionProvider",
    "CompletionResult",
    "CompletionUsage",
    "GenerationParams",
    "Message",
    "OpenAICompatibleClient",
    "Role",
]
