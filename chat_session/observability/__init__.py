"""Observability module for metrics and monitoring."""

from chat_session.observability.metrics import (
    get_metrics,
    get_metrics_content_type,
    track_llm_request,
    track_prompt_outcome,
)

__all__ = [
    "get_metrics",
    "get_metrics_content_type",
    "track_llm_request",
    "track_prompt_outcome",
]
