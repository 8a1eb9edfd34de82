from .logging import configure_logging, get_logger
from .metrics import InMemoryMetrics, MetricPoint, Timer

__all__ = [
    "configure_logging",
    "get_logger",
    "InMemoryMetrics",
    "MetricPoint",
    "Timer",
]
