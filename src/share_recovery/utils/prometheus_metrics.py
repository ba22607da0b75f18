"""Prometheus-backed metrics sink for reconstruction runs."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional, Tuple

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, start_http_server

logger = logging.getLogger(__name__)

NAMESPACE = "share_recovery"
SECONDS_BUCKETS = (0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0)


class PrometheusMetrics:
    """
    Metrics sink exposing counters, gauges and timers through prometheus_client.

    Collectors are created on first use; the label names seen on that first
    emission are fixed for the metric. Each instance owns its registry, so
    several sinks (e.g. in tests) never collide.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        self.registry = registry or CollectorRegistry()
        self._counters: Dict[str, Tuple[Counter, Tuple[str, ...]]] = {}
        self._gauges: Dict[str, Tuple[Gauge, Tuple[str, ...]]] = {}
        self._histograms: Dict[str, Tuple[Histogram, Tuple[str, ...]]] = {}
        self._lock = threading.Lock()
        self._server_started = False

    def _collector(self, store: Dict, factory, name: str, labels: Dict[str, str], **kwargs):  # noqa: ANN001
        names = tuple(sorted(labels))
        with self._lock:
            if name not in store:
                metric = factory(
                    name,
                    name.replace("_", " "),
                    list(names),
                    namespace=NAMESPACE,
                    registry=self.registry,
                    **kwargs,
                )
                store[name] = (metric, names)
            metric, known = store[name]
        if names != known:
            raise ValueError(f"Metric '{name}' expects labels {known}, got {names}")
        return metric.labels(**labels) if names else metric

    def emit_counter(self, name: str, value: float = 1.0, **labels: str) -> None:
        # Counter names get the _total suffix from prometheus_client itself.
        base = name[: -len("_total")] if name.endswith("_total") else name
        self._collector(self._counters, Counter, base, labels).inc(value)

    def emit_gauge(self, name: str, value: float, **labels: str) -> None:
        self._collector(self._gauges, Gauge, name, labels).set(value)

    def emit_timer(self, name: str, value: float, **labels: str) -> None:
        self._collector(self._histograms, Histogram, name, labels, buckets=SECONDS_BUCKETS).observe(value)

    def sample(self, name: str, **labels: str) -> Optional[float]:
        """Current value of an exported sample, e.g. ``share_recovery_reconstructions_total``."""
        return self.registry.get_sample_value(name, labels)

    def start_server(self, port: int = 8000) -> None:
        """Start the Prometheus HTTP exporter once."""
        if self._server_started:
            return
        start_http_server(port, registry=self.registry)
        self._server_started = True
        logger.info(f"Prometheus exporter listening on port {port}")
