"""Completion session module."""

from chat_session.session.models import SendPromptResponse, SessionOptions
from chat_session.session.session import (
    SYSTEM_PROMPT,
    CompletionSession,
    build_token_probe,
    create_completion_session,
)

__all__ = [
    "SYSTEM_PROMPT",
    "CompletionSession",
    "SendPromptResponse",
    "SessionOptions",
    "build_token_probe",
    "create_completion_session",
]
