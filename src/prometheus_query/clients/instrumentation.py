"""
Client-side request metrics, exported with prometheus_client.
"""
import threading
import weakref

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram


class RequestMetrics:

    def __init__(self, registry: CollectorRegistry):
        self.requests = Counter(
            "prometheus_query_requests",
            "Prometheus API calls made by this client, by operation and outcome.",
            ["operation", "outcome"],
            registry=registry,
        )
        self.request_duration = Histogram(
            "prometheus_query_request_duration_seconds",
            "Time spent waiting on the Prometheus HTTP API, by operation.",
            ["operation"],
            registry=registry,
        )

_METRICS: weakref.WeakKeyDictionary[CollectorRegistry, RequestMetrics] = weakref.WeakKeyDictionary()
_METRICS_LOCK = threading.Lock()

def get_request_metrics(registry: CollectorRegistry=REGISTRY) -> RequestMetrics:
    """
    Metrics are registered once per registry and shared by every client using it.
    The entry goes away with the registry.
    """
    with _METRICS_LOCK:
        metrics = _METRICS.get(registry)
        if metrics is None:
            metrics = RequestMetrics(registry)
            _METRICS[registry] = metrics
        return metrics

__all__ = [
    "RequestMetrics",
    "get_request_metrics",
]
