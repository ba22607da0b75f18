from .files import read_mapping
from .logging import configure_logging, get_logger
from .metrics import CompositeMetrics, InMemoryMetrics, MetricPoint, MetricsSink, Timer
from .prometheus_metrics import PrometheusMetrics

__all__ = [
    "read_mapping",
    "configure_logging",
    "get_logger",
    "CompositeMetrics",
    "InMemoryMetrics",
    "MetricPoint",
    "MetricsSink",
    "Timer",
    "PrometheusMetrics",
]
