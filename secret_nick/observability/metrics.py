"""
Prometheus Metrics for the Secret Nick API.

DATA FLOW:
    This file                  presentation/api/metrics.py         Scraper
    ─────────                  ────────────────────────────         ───────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus

METRIC TYPES:
    - Counter: Value only goes up (e.g. removals by outcome)
    - Histogram: Distribution (for percentiles like P95, e.g. latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)

USER_REMOVALS_TOTAL = Counter(
    "secret_nick_user_removals_total",
    "Total number of user removal requests by outcome",
    ["outcome"],
)

ERRORS_TOTAL = Counter(
    "secret_nick_errors_total",
    "Total number of server-side defects by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class MetricsErrorType:
    """Error type labels for secret_nick_errors_total metric."""

    DATA_INCONSISTENCY = "data_inconsistency"
    UNHANDLED = "unhandled"


class RemovalOutcome:
    """Outcome labels for secret_nick_user_removals_total metric."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    BAD_REQUEST = "bad_request"
    DATA_INCONSISTENCY = "data_inconsistency"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_user_removal(outcome: str):
    """Call once per removal request. Integration point: presentation/api/users.py"""
    USER_REMOVALS_TOTAL.labels(outcome=outcome).inc()


def increment_error(error_type: str):
    """
    Call to record a server-side defect.

    Integration points:
        - presentation/api/users.py: data_inconsistency
        - fastapi_app.py global handler: unhandled
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
