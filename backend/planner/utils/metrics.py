"""Prometheus metrics for route generation and transit feeds."""

from prometheus_client import Counter

route_generations_total = Counter(
    "route_generations_total",
    "Total route generation calls",
    ["regime"],
)

arrival_feed_requests_total = Counter(
    "arrival_feed_requests_total",
    "Total real-time arrival lookups",
    ["kind", "source"],
)

arrival_feed_errors_total = Counter(
    "arrival_feed_errors_total",
    "Total failed real-time arrival lookups",
    ["kind"],
)
