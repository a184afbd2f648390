"""Prometheus metrics for the credit application service.

Business Metrics:
- credit_created_total: Credits created, by status
- credit_value_amount: Distribution of requested credit values
- credit_rejected_total: Credit requests refused, by reason
- customer_registered_total: Customers registered

Technical Metrics:
- credit_http_requests_total: HTTP requests by endpoint/status
- credit_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from decimal import Decimal
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

credit_created_total = Counter(
    "credit_created_total",
    "Total number of credits created",
    ["status"],
)

credit_value_amount = Histogram(
    "credit_value_amount",
    "Requested credit value of created credits",
    buckets=[500, 1000, 2500, 5000, 10000, 25000, 50000, 100000],
)

credit_rejected_total = Counter(
    "credit_rejected_total",
    "Total number of credit requests refused",
    ["reason"],  # validation, customer_not_found
)

customer_registered_total = Counter(
    "customer_registered_total",
    "Total number of customers registered",
)


# =============================================================================
# Technical Metrics
# =============================================================================

http_requests_total = Counter(
    "credit_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "credit_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

credit_operation_latency = Histogram(
    "credit_operation_latency_seconds",
    "Latency of credit service operations",
    ["operation"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_credit_created(status: str, credit_value: Decimal) -> None:
    """Record a created credit."""
    credit_created_total.labels(status=status).inc()
    credit_value_amount.observe(float(credit_value))


def record_credit_rejected(reason: str) -> None:
    """Record a refused credit request."""
    credit_rejected_total.labels(reason=reason).inc()


def record_customer_registered() -> None:
    customer_registered_total.inc()


@contextmanager
def track_operation_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track credit service operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        credit_operation_latency.labels(operation=operation).observe(duration)


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
