"""In-memory metrics sink and timer used for training instrumentation."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, List, Tuple


Labels = Tuple[Tuple[str, str], ...]


@dataclass
class MetricPoint:
    """Represents a single metric sample."""

    value: float
    labels: Labels


class InMemoryMetrics:
    """In-memory sink for counters, gauges, and timers."""

    def __init__(self) -> None:
        self.counters: Dict[str, List[MetricPoint]] = {}
        self.gauges: Dict[str, List[MetricPoint]] = {}
        self.timers: Dict[str, List[MetricPoint]] = {}

    def _emit(self, store: Dict[str, List[MetricPoint]], name: str, value: float, labels: Labels) -> None:
        store.setdefault(name, []).append(MetricPoint(value=value, labels=labels))

    def emit_counter(self, name: str, value: float = 1.0, **labels: str) -> None:
        self._emit(self.counters, name, value, tuple(labels.items()))

    def emit_gauge(self, name: str, value: float, **labels: str) -> None:
        self._emit(self.gauges, name, value, tuple(labels.items()))

    def emit_timer(self, name: str, value: float, **labels: str) -> None:
        self._emit(self.timers, name, value, tuple(labels.items()))

    def values(self, kind: str, name: str) -> List[float]:
        """Return the recorded values of one series, in emission order."""
        store: Dict[str, List[MetricPoint]] = getattr(self, kind)
        return [point.value for point in store.get(name, [])]

    def snapshot(self) -> Dict[str, Dict[str, List[MetricPoint]]]:
        return {
            "counters": {k: list(v) for k, v in self.counters.items()},
            "gauges": {k: list(v) for k, v in self.gauges.items()},
            "timers": {k: list(v) for k, v in self.timers.items()},
        }


class Timer:
    """Context manager that records elapsed milliseconds to a metrics sink."""

    def __init__(self, sink: InMemoryMetrics, name: str, **labels: str) -> None:
        self.sink = sink
        self.name = name
        self.labels = labels
        self.elapsed_ms: float | None = None
        self._start: float | None = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        if self._start is None:
            return
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        self.sink.emit_timer(self.name, self.elapsed_ms, **self.labels)
