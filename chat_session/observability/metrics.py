"""Prometheus metrics for completion sessions.

Provides metrics instrumentation for:
- LLM request latency, counts and token usage
- Prompt outcomes per session guard
- Conversation length after each successful prompt
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)

# LLM Metrics
LLM_REQUEST_DURATION = Histogram(
    "llm_request_duration_seconds",
    "LLM request duration in seconds",
    ["model", "status"],
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, 120.0],
)

LLM_TOKENS_TOTAL = Counter(
    "llm_tokens_total",
    "Total LLM tokens used",
    ["model", "type"],  # "type" label values: prompt, completion
)

LLM_REQUEST_TOTAL = Counter(
    "llm_requests_total",
    "Total LLM requests",
    ["model", "status"],
)

# Session Metrics
SESSION_PROMPTS_TOTAL = Counter(
    "session_prompts_total",
    "Prompts handled by completion sessions",
    ["model", "outcome"],
)

SESSION_CONVERSATION_LENGTH = Histogram(
    "session_conversation_length",
    "Conversation length in messages after a successful prompt",
    buckets=[3, 5, 7, 9, 11, 15, 21, 31],
)

PROMPT_OUTCOMES = (
    "success",
    "prompt_limit",
    "token_limit",
    "empty_response",
    "error",
)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST


def track_llm_request(
    model: str,
    duration: float,
    prompt_tokens: int,
    completion_tokens: int,
    success: bool = True,
) -> None:
    """Track LLM request metrics.

    Args:
        model: LLM model name.
        duration: Request duration in seconds.
        prompt_tokens: Number of prompt tokens.
        completion_tokens: Number of completion tokens.
        success: Whether the request succeeded.
    """
    status = "success" if success else "error"

    LLM_REQUEST_DURATION.labels(model=model, status=status).observe(duration)
    LLM_REQUEST_TOTAL.labels(model=model, status=status).inc()

    if success:
        LLM_TOKENS_TOTAL.labels(model=model, type="prompt").inc(prompt_tokens)
        LLM_TOKENS_TOTAL.labels(model=model, type="completion").inc(completion_tokens)


def track_prompt_outcome(
    model: str,
    outcome: str,
    conversation_length: int | None = None,
) -> None:
    """Track how a ``send_prompt`` call ended.

    Args:
        model: Model configured for the session.
        outcome: One of ``PROMPT_OUTCOMES``.
        conversation_length: Messages in the conversation, for successful calls.

    Raises:
        ValueError: If the outcome is unknown.
    """
    if outcome not in PROMPT_OUTCOMES:
        raise ValueError(f"Unknown prompt outcome: {outcome}")

    SESSION_PROMPTS_TOTAL.labels(model=model, outcome=outcome).inc()

    if conversation_length is not None:
        SESSION_CONVERSATION_LENGTH.observe(conversation_length)
