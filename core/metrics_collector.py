from typing import Optional

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, generate_latest


class MetricsCollector:
    """Request counters and response-time histograms backed by a private registry.

    Counters and histograms from ``prometheus_client`` are thread-safe, so a
    single instance can be shared by every in-flight request.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()
        self.requests_total = Counter(
            "api_requests_total",
            "Total number of API requests",
            labelnames=("method", "path"),
            registry=self.registry,
        )
        self.response_time = Histogram(
            "api_response_time_seconds",
            "Response time in seconds",
            labelnames=("method", "path"),
            registry=self.registry,
        )

    def observe_request(self, method: str, path: str, duration_seconds: float) -> None:
        self.requests_total.labels(method=method, path=path).inc()
        self.response_time.labels(method=method, path=path).observe(duration_seconds)

    def snapshot(self) -> bytes:
        """Render every collected metric in the Prometheus text exposition format."""
        return generate_latest(self.registry)


__all__ = ["MetricsCollector"]
