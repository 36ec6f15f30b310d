"""Prometheus metric definitions for the checkout server."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)
client_token_requests_total = Counter(
    "client_token_requests_total",
    "Client token requests by result",
    ["service", "result"],
)
checkout_requests_total = Counter(
    "checkout_requests_total",
    "Checkout requests by outcome (success, declined, invalid, error)",
    ["service", "outcome"],
)
gateway_latency_seconds = Histogram(
    "gateway_latency_seconds",
    "Payment gateway call latency seconds",
    ["operation"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
