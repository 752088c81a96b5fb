"""LLM data models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A message in a conversation.

    Messages are frozen: once appended to a conversation they never change.

    Attributes:
        role: The role of the message sender.
        content: The message content.
    """

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Message role")
    content: str = Field(description="Message content")


class GenerationParams(BaseModel):
    """Generation parameters passed through verbatim to the provider.

    Only ``model`` is required; every other field is sent only when set.
    """

    model: str = Field(description="Model identifier")
    seed: int | None = Field(default=None, description="Sampling seed")
    temperature: float | None = Field(default=None, description="Sampling temperature")
    top_p: float | None = Field(default=None, description="Nucleus sampling probability")
    frequency_penalty: float | None = Field(default=None, description="Frequency penalty")
    presence_penalty: float | None = Field(default=None, description="Presence penalty")
    max_tokens: int | None = Field(default=None, description="Maximum generated tokens")
    stop: str | None = Field(default=None, description="Stop sequence")

    def to_payload(self) -> dict[str, Any]:
        """Request fields for the chat completions API."""
        return self.model_dump(exclude_none=True)


class CompletionChoice(BaseModel):
    """One generated alternative returned by the provider."""

    content: str | None = Field(default=None, description="Generated text")


class CompletionUsage(BaseModel):
    """Token usage reported by the provider for a single request."""

    prompt_tokens: int | None = Field(default=None, description="Prompt token count")
    completion_tokens: int | None = Field(
        default=None, description="Completion token count"
    )
    total_tokens: int | None = Field(default=None, description="Total token count")


class CompletionResult(BaseModel):
    """Result of a chat completion request.

    Attributes:
        choices: Generated alternatives; callers consult only the first.
        model: Model reported by the provider.
        usage: Token usage for this request, when reported.
    """

    choices: list[CompletionChoice] = Field(
        default_factory=list,
        description="Generated alternatives",
    )
    model: str | None = Field(default=None, description="Model used")
    usage: CompletionUsage | None = Field(default=None, description="Token usage")
