"""Completion provider interface and implementations."""

import time
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any

import httpx

from chat_session.config import LLMSettings, get_settings
from chat_session.exceptions import ErrorCode, LLMError
from chat_session.llm.models import (
    CompletionChoice,
    CompletionResult,
    CompletionUsage,
    GenerationParams,
    Message,
)
from chat_session.logging_config import get_logger
from chat_session.observability.metrics import track_llm_request

logger = get_logger(__name__)


class CompletionProvider(ABC):
    """Abstract base class for chat completion providers.

    Defines the single operation a completion session needs.
    """

    @abstractmethod
    async def complete(
        self,
        messages: list[Message],
        params: GenerationParams,
        *,
        stream: bool = False,
    ) -> CompletionResult:
        """Generate a completion for a conversation.

        Args:
            messages: Conversation messages, in order.
            params: Generation parameters.
            stream: Whether to stream the result. Must be False.

        Returns:
            CompletionResult with generated choices and usage.

        Raises:
            LLMError: If generation fails.
        """
        ...


class OpenAICompatibleClient(CompletionProvider):
    """Completion provider for OpenAI-compatible chat completions APIs.

    Works with:
    - OpenAI API
    - Ollama (localhost:11434/v1)
    - vLLM
    - Any OpenAI-compatible endpoint
    """

    def __init__(
        self,
        settings: LLMSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the OpenAI-compatible client.

        Args:
            settings: LLM configuration.
            client: HTTP client (for testing).
        """
        self._settings = settings or get_settings().llm
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._settings.timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "OpenAICompatibleClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def model_name(self) -> str:
        """Get the configured default model name.

        Requests use the model in their GenerationParams instead.
        """
        return self._settings.model

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        api_key = self._settings.api_key.get_secret_value()
        if api_key and api_key != "not-required":
            headers["Authorization"] = f"Bearer {api_key}"
        return headers

    async def complete(
        self,
        messages: list[Message],
        params: GenerationParams,
        *,
        stream: bool = False,
    ) -> CompletionResult:
        """Generate a completion using the chat completions API."""
        if stream:
            raise ValueError("Streaming completions are not supported")

        client = await self._get_client()
        url = f"{self._settings.base_url}/chat/completions"

        payload: dict[str, Any] = {
            **params.to_payload(),
            "messages": [
                {"role": msg.role.value, "content": msg.content} for msg in messages
            ],
            "stream": False,
        }

        start_time = time.perf_counter()
        try:
            response = await client.post(url, json=payload, headers=self._headers())
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.error(f"LLM request timed out: {e}")
            self._track_failure(params.model, start_time)
            raise LLMError(
                "LLM request timed out",
                code=ErrorCode.LLM_TIMEOUT,
                details={"timeout": self._settings.timeout},
            ) from e

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"LLM request failed: {status}")
            self._track_failure(params.model, start_time)

            if status == 429:
                raise LLMError(
                    "Rate limit exceeded",
                    code=ErrorCode.LLM_RATE_LIMIT,
                    details={"status_code": status},
                ) from e

            raise LLMError(
                f"LLM service returned {status}",
                code=ErrorCode.LLM_SERVICE_ERROR,
                details={"status_code": status},
            ) from e

        except httpx.RequestError as e:
            logger.error(f"LLM connection error: {e}")
            self._track_failure(params.model, start_time)
            raise LLMError(
                f"Failed to connect to LLM service: {e}",
                code=ErrorCode.LLM_SERVICE_ERROR,
                details={"url": url},
            ) from e

        try:
            result = self._parse_response(response.json(), params.model)
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
            self._track_failure(params.model, start_time)
            raise LLMError(
                f"Invalid response from LLM: {e}",
                code=ErrorCode.LLM_SERVICE_ERROR,
                details={"error": str(e)},
            ) from e

        usage = result.usage or CompletionUsage()
        track_llm_request(
            model=result.model or params.model,
            duration=time.perf_counter() - start_time,
            prompt_tokens=usage.prompt_tokens or 0,
            completion_tokens=usage.completion_tokens or 0,
        )
        return result

    def _parse_response(self, data: dict[str, Any], model: str) -> CompletionResult:
        choices = [
            CompletionChoice(content=choice["message"].get("content"))
            for choice in data["choices"]
        ]
        usage_data = data.get("usage")
        return CompletionResult(
            choices=choices,
            model=data.get("model", model),
            usage=CompletionUsage(**usage_data) if usage_data else None,
        )

    def _track_failure(self, model: str, start_time: float) -> None:
        track_llm_request(
            model=model,
            duration=time.perf_counter() - start_time,
            prompt_tokens=0,
            completion_tokens=0,
            success=False,
        )
