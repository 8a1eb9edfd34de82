from .controller import (
    EpochObserver,
    EpochReport,
    LoggingObserver,
    MetricsObserver,
    TrainingController,
    TrainingResult,
)
from .convergence import STOP_CONVERGED, STOP_EPOCHS_EXHAUSTED, ConvergenceState, ConvergenceTracker

__all__ = [
    "ConvergenceState",
    "ConvergenceTracker",
    "EpochObserver",
    "EpochReport",
    "LoggingObserver",
    "MetricsObserver",
    "STOP_CONVERGED",
    "STOP_EPOCHS_EXHAUSTED",
    "TrainingController",
    "TrainingResult",
]
