from prometheus_client import (
    Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
)

# counters
SUBSCRIBE_REQUESTS = Counter("subscribe_requests_total",       "Subscribe requests handled", ["outcome"])
REQUESTS_TOTAL     = Counter("upstream_requests_total",        "Upstream HTTP requests made", ["target", "status"])
REQUEST_ERRORS     = Counter("upstream_request_errors_total",  "Upstream HTTP request errors", ["target"])

# timings
REQ_LATENCY        = Histogram("upstream_request_latency_seconds", "Upstream HTTP request latency", ["target"])

def get_metrics_text() -> bytes:
    return generate_latest()

__all__ = [
    "SUBSCRIBE_REQUESTS", "REQUESTS_TOTAL", "REQUEST_ERRORS", "REQ_LATENCY",
    "get_metrics_text", "CONTENT_TYPE_LATEST",
]
