"""Prometheus metrics for monitoring route selections and batch sizes"""

from prometheus_client import Counter, Histogram
from transfer_router.domain.models import RoutingResult

# Selection metrics
route_selection_counter = Counter(
    "transfer_router_selection_total",
    "Routes selected per category",
    ["category"],  # cheapest | fastest | recommended
)

batch_size_histogram = Histogram(
    "transfer_router_batch_size",
    "Candidate routes per selection request",
    buckets=[1, 2, 3, 5, 10, 25, 50, 100],
)

risky_batch_counter = Counter(
    "transfer_router_all_routes_risky_total",
    "Selections where every selected route was high risk",
)

reasoning_counter = Counter(
    "transfer_router_reasoning_total",
    "Explanations generated per category",
    ["category"],  # cheapest | fastest | recommended | unknown
)

selection_errors_counter = Counter(
    "transfer_router_selection_errors_total",
    "Rejected selection requests",
    ["error"],  # empty_batch | inconsistent_route | reasoning_failed
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_selection(result: RoutingResult, batch_size: int) -> None:
    """Record selection metrics for monitoring batch sizes and risk warnings"""
    for route in result.routes:
        route_selection_counter.labels(category=route.category.value).inc()

    batch_size_histogram.observe(batch_size)

    if result.all_routes_risky:
        risky_batch_counter.inc()
