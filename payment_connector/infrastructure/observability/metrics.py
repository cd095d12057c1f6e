"""Prometheus metrics for payment service latency and failures"""

from prometheus_client import Counter, Histogram

request_duration_histogram = Histogram(
    "payment_request_duration_seconds",
    "Payment service request latency",
    ["method", "resource", "status"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

request_failures_counter = Counter(
    "payment_request_failures_total",
    "Payment service requests that did not succeed",
    ["method", "status"],  # status is "transport" when no response arrived
)


def resource_label(path: str) -> str:
    """Top-level resource of a path, e.g. /v1/merchants/123/charges → merchants"""
    segments = [segment for segment in path.split("/") if segment]
    return segments[1] if len(segments) > 1 else (segments[0] if segments else "root")


def record_request(method: str, path: str, status_code: int, duration_seconds: float) -> None:
    """Record latency for every response and count non-2xx outcomes except 404"""
    request_duration_histogram.labels(
        method=method,
        resource=resource_label(path),
        status=status_code,
    ).observe(duration_seconds)

    if not 200 <= status_code <= 299 and status_code != 404:
        request_failures_counter.labels(method=method, status=status_code).inc()


def record_transport_failure(method: str) -> None:
    request_failures_counter.labels(method=method, status="transport").inc()
