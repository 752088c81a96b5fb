"""Completion session data models."""

from pydantic import BaseModel, Field

from chat_session.config import Settings
from chat_session.llm.models import GenerationParams, Message


class SessionOptions(BaseModel):
    """Configuration of a single completion session.

    Attributes:
        generation: Parameters passed through to the completion provider.
        max_prompts: Maximum prompts allowed in the session.
        max_conversation_tokens: Maximum estimated tokens of the whole
            conversation, checked before every request.
    """

    generation: GenerationParams = Field(description="Generation parameters")
    max_prompts: int = Field(
        default=5,
        ge=1,
        description="Maximum prompts per session",
    )
    max_conversation_tokens: int = Field(
        default=4000,
        ge=1,
        description="Maximum conversation tokens per session",
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionOptions":
        """Build options from application settings.

        Args:
            settings: Loaded application settings.

        Returns:
            SessionOptions using the configured model and limits.
        """
        return cls(
            generation=GenerationParams(model=settings.llm.model),
            max_prompts=settings.session.max_prompts,
            max_conversation_tokens=settings.session.max_conversation_tokens,
        )


class SendPromptResponse(BaseModel):
    """Result of a successful ``send_prompt`` call.

    Attributes:
        response: The assistant's reply.
        conversation: Snapshot of the conversation after the reply.
        token_count: Total tokens reported by the provider for this call only.
    """

    response: str = Field(description="Assistant reply")
    conversation: list[Message] = Field(description="Conversation so far")
    token_count: int | None = Field(
        default=None,
        description="Provider-reported tokens for this call",
    )
