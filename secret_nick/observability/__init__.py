"""Observability package for the Secret Nick API."""

from secret_nick.observability.metrics import (
    observe_request_latency,
    increment_user_removal,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
    RemovalOutcome,
)

__all__ = [
    "observe_request_latency",
    "increment_user_removal",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
    "RemovalOutcome",
]
