"""Prometheus metrics for the STK Relay service.

Business Metrics:
- stk_relay_push_total: STK Push requests by outcome
- stk_relay_callback_total: Gateway callbacks by result outcome

Technical Metrics:
- stk_relay_gateway_latency_seconds: Daraja call latency by operation
- stk_relay_gateway_requests_total: Daraja calls by operation/status
- stk_relay_gateway_failures_total: Daraja failures by operation/reason
- stk_relay_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

push_total = Counter(
    "stk_relay_push_total",
    "Total number of STK Push requests handled",
    ["outcome"],  # success, rejected, failed
)

callback_total = Counter(
    "stk_relay_callback_total",
    "Total number of gateway callbacks received",
    ["outcome"],  # success, failed, unknown
)


# =============================================================================
# Technical Metrics
# =============================================================================

gateway_latency = Histogram(
    "stk_relay_gateway_latency_seconds",
    "Daraja API call latency in seconds",
    ["operation"],  # token, stk_push
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

gateway_requests_total = Counter(
    "stk_relay_gateway_requests_total",
    "Total number of Daraja API calls",
    ["operation", "status"],  # success, failure
)

gateway_failures = Counter(
    "stk_relay_gateway_failures_total",
    "Total number of Daraja API failures",
    ["operation", "reason"],  # http_error, timeout, transport, invalid_response
)

http_requests_total = Counter(
    "stk_relay_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "stk_relay_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_push(outcome: str) -> None:
    """Record an STK Push outcome."""
    push_total.labels(outcome=outcome).inc()


def record_callback(outcome: str) -> None:
    """Record a received callback."""
    callback_total.labels(outcome=outcome).inc()


@contextmanager
def track_gateway_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track Daraja call latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        gateway_latency.labels(operation=operation).observe(duration)


def record_gateway_success(operation: str) -> None:
    gateway_requests_total.labels(operation=operation, status="success").inc()


def record_gateway_failure(operation: str, reason: str) -> None:
    gateway_requests_total.labels(operation=operation, status="failure").inc()
    gateway_failures.labels(operation=operation, reason=reason).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
