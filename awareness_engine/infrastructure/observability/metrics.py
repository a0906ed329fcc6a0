"""Prometheus metrics for monitoring clarity labels, insight mix and upstream fetches"""

from typing import Iterable
from prometheus_client import Counter, Histogram

# Report metrics
report_counter = Counter(
    "awareness_report_total",
    "Total awareness reports produced",
    ["label"],  # Strong | Moderate | Needs attention
)

insight_counter = Counter(
    "awareness_insight_total",
    "Behavioral insights emitted",
    ["type"],
)

# Upstream data source metrics
snapshot_fetch_failures_counter = Counter(
    "snapshot_fetch_failures_total",
    "Failed snapshot fetches from the upstream data source",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(label: str, insight_types: Iterable[str]) -> None:
    """Record report metrics for monitoring label distribution and insight frequency"""
    report_counter.labels(label=label).inc()

    for insight_type in insight_types:
        insight_counter.labels(type=insight_type).inc()
