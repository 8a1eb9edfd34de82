"""Online training loop with per-epoch evaluation and early stopping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

from cmac.core import check_bounds
from cmac.errors import InvalidParametersError
from cmac.training.convergence import ConvergenceTracker
from cmac.utils import InMemoryMetrics, get_logger

if TYPE_CHECKING:
    from cmac.models.cmac import CMAC

logger = get_logger("training")

Pair = Tuple[float, float]


@dataclass(frozen=True)
class EpochReport:
    epoch: int
    accuracy: float
    loss: float


EpochObserver = Callable[[EpochReport], None]


@dataclass
class TrainingResult:
    epochs_run: int = 0
    converged: bool = False
    stop_reason: str = ""
    history: List[EpochReport] = field(default_factory=list)

    @property
    def final_accuracy(self) -> Optional[float]:
        return self.history[-1].accuracy if self.history else None

    @property
    def final_loss(self) -> Optional[float]:
        return self.history[-1].loss if self.history else None


class LoggingObserver:
    """Logs one progress line per epoch."""

    def __init__(self, label: str) -> None:
        self.label = label

    def __call__(self, report: EpochReport) -> None:
        logger.info(
            f"{self.label} training: epoch={report.epoch} "
            f"accuracy={report.accuracy * 100:.4f}% loss={report.loss:.6g}"
        )


class MetricsObserver:
    """Pushes per-epoch accuracy and loss gauges into a metrics sink."""

    def __init__(self, sink: InMemoryMetrics, **labels: str) -> None:
        self.sink = sink
        self.labels = labels

    def __call__(self, report: EpochReport) -> None:
        self.sink.emit_gauge("accuracy", report.accuracy, **self.labels)
        self.sink.emit_gauge("loss", report.loss, **self.labels)
        self.sink.emit_counter("epochs", 1.0, **self.labels)


class TrainingController:
    """
    Drives epochs for one model.

    Updates are strictly sequential within an epoch: each sample's correction
    is visible to the next sample's prediction.
    """

    def __init__(self, model: "CMAC", observers: Optional[Sequence[EpochObserver]] = None) -> None:
        self.model = model
        if observers is None:
            observers = [LoggingObserver(model.variant.value)]
        self.observers: List[EpochObserver] = list(observers)

    def add_observer(self, observer: EpochObserver) -> None:
        self.observers.append(observer)

    def run(
        self,
        data: Sequence[Pair],
        lower: float,
        upper: float,
        epochs: int,
        learning_rate: float,
        convergence_threshold: float,
    ) -> TrainingResult:
        check_bounds(lower, upper)
        if len(data) == 0:
            raise InvalidParametersError("Cannot train on an empty dataset")
        tracker = ConvergenceTracker(convergence_threshold, epochs)
        table = self.model.build_association(data, lower, upper)
        self.model.approximator.prepare()
        result = TrainingResult()

        while not tracker.state.should_stop:
            epoch = tracker.state.epoch
            for sample, index in zip(data, table):
                self.model.update_sample(sample, index, learning_rate)

            _, accuracy = self.model.predict(data, lower, upper, training=True)
            loss = 1 - accuracy
            tracker.update(loss)

            report = EpochReport(epoch=epoch, accuracy=accuracy, loss=loss)
            result.history.append(report)
            self._notify(report)

        result.epochs_run = tracker.state.epoch
        result.converged = tracker.state.converged
        result.stop_reason = tracker.state.stop_reason
        logger.info(
            f"{self.model.variant.value} training finished after {result.epochs_run} epochs "
            f"({result.stop_reason})"
        )
        return result

    def _notify(self, report: EpochReport) -> None:
        for observer in self.observers:
            observer(report)
