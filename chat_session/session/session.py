"""Bounded, stateful chat completion session."""

import json
import uuid

from chat_session.config import get_settings
from chat_session.exceptions import (
    EmptyResponseError,
    PromptLimitExceededError,
    TokenLimitExceededError,
)
from chat_session.llm.client import CompletionProvider
from chat_session.llm.models import Message, Role
from chat_session.logging_config import get_logger
from chat_session.observability.metrics import track_prompt_outcome
from chat_session.session.models import SendPromptResponse, SessionOptions
from chat_session.tokens.estimator import TiktokenEstimator, TokenEstimator

logger = get_logger(__name__)

SYSTEM_PROMPT = "You are an AI assistant that helps people find information."

# Keeps the probe non-empty; some estimators reject empty input outright.
TOKEN_PROBE_SENTINEL = "_ "


def build_token_probe(messages: list[Message]) -> str:
    """Build the text whose token count stands in for the conversation size.

    Args:
        messages: Conversation messages.

    Returns:
        Sentinel followed by a compact JSON array of message contents.
    """
    contents = json.dumps(
        [msg.content for msg in messages],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return f"{TOKEN_PROBE_SENTINEL}{contents}"


class CompletionSession:
    """A single linear exchange with a completion provider.

    The session owns its conversation and prompt counter. It is meant for
    one caller awaiting each ``send_prompt`` before issuing the next; there
    is no locking. After any error the session should be discarded.
    """

    def __init__(
        self,
        provider: CompletionProvider,
        options: SessionOptions,
        estimator: TokenEstimator,
    ) -> None:
        """Initialize the session.

        Args:
            provider: Completion provider used for every prompt.
            options: Generation parameters and safety limits.
            estimator: Token estimator for the conversation budget.
        """
        self._provider = provider
        self._options = options
        self._estimator = estimator
        self._conversation: list[Message] = [
            Message(role=Role.SYSTEM, content=SYSTEM_PROMPT)
        ]
        self._prompt_count = 0
        self._session_id = uuid.uuid4().hex[:12]

    @property
    def conversation(self) -> list[Message]:
        """Copy of the conversation so far."""
        return list(self._conversation)

    @property
    def prompt_count(self) -> int:
        """Number of ``send_prompt`` calls attempted, including failed ones."""
        return self._prompt_count

    @property
    def options(self) -> SessionOptions:
        return self._options

    @property
    def session_id(self) -> str:
        return self._session_id

    async def send_prompt(self, prompt: str) -> SendPromptResponse:
        """Send a user prompt and return the assistant's reply.

        The user message is appended before the token budget is checked, so
        a TokenLimitExceededError leaves it in the conversation. Nothing is
        rolled back on failure.

        Args:
            prompt: User prompt text.

        Returns:
            SendPromptResponse with the reply and the conversation snapshot.

        Raises:
            PromptLimitExceededError: If the prompt count exceeds max_prompts.
            TokenLimitExceededError: If the conversation exceeds its token budget.
            EmptyResponseError: If the provider returned no usable text.
            LLMError: If the provider request fails.
        """
        model = self._options.generation.model
        self._prompt_count += 1
        logger.info(
            "Sending prompt",
            extra={
                "session_id": self._session_id,
                "prompt_number": self._prompt_count,
            },
        )

        if self._prompt_count > self._options.max_prompts:
            logger.warning(
                "Prompt limit exceeded",
                extra={
                    "session_id": self._session_id,
                    "count": self._prompt_count,
                    "limit": self._options.max_prompts,
                },
            )
            track_prompt_outcome(model, "prompt_limit")
            raise PromptLimitExceededError(
                self._prompt_count, self._options.max_prompts
            )

        self._conversation.append(Message(role=Role.USER, content=prompt))

        self._check_token_budget(model)

        try:
            result = await self._provider.complete(
                list(self._conversation),
                self._options.generation,
                stream=False,
            )
        except Exception:
            track_prompt_outcome(model, "error")
            raise

        completion = result.choices[0].content if result.choices else None
        if not completion or not completion.strip():
            logger.warning(
                "Empty completion received",
                extra={"session_id": self._session_id, "choices": len(result.choices)},
            )
            track_prompt_outcome(model, "empty_response")
            raise EmptyResponseError(details={"model": result.model or model})

        self._conversation.append(Message(role=Role.ASSISTANT, content=completion))
        track_prompt_outcome(model, "success", len(self._conversation))

        return SendPromptResponse(
            response=completion,
            conversation=list(self._conversation),
            token_count=result.usage.total_tokens if result.usage else None,
        )

    def _check_token_budget(self, model: str) -> None:
        limit = self._options.max_conversation_tokens
        probe = build_token_probe(self._conversation)
        if self._estimator.is_within_limit(probe, limit):
            return

        token_count = self._estimator.count(probe)
        logger.warning(
            "Conversation token limit exceeded",
            extra={
                "session_id": self._session_id,
                "token_count": token_count,
                "limit": limit,
            },
        )
        track_prompt_outcome(model, "token_limit")
        raise TokenLimitExceededError(token_count, limit)


def create_completion_session(
    provider: CompletionProvider,
    options: SessionOptions | None = None,
    estimator: TokenEstimator | None = None,
) -> CompletionSession:
    """Create a completion session.

    Missing options and estimator are resolved once from application
    settings. No I/O happens here.

    Args:
        provider: Completion provider.
        options: Generation parameters and safety limits.
        estimator: Token estimator for the conversation budget.

    Returns:
        A new CompletionSession seeded with the system message.
    """
    if options is None or estimator is None:
        settings = get_settings()
        options = options or SessionOptions.from_settings(settings)
        estimator = estimator or TiktokenEstimator(settings.session.token_encoding)

    return CompletionSession(provider, options, estimator)
