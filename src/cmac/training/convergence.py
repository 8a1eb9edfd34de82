"""Epoch-to-epoch loss convergence tracking."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cmac.errors import InvalidParametersError
from cmac.utils import get_logger

logger = get_logger("training.convergence")

STOP_CONVERGED = "converged"
STOP_EPOCHS_EXHAUSTED = "epochs_exhausted"


@dataclass
class ConvergenceState:
    """Current state of convergence tracking."""

    epoch: int = 0
    prev_loss: float = 0.0
    curr_loss: float = 0.0
    delta: float = float("inf")
    converged: bool = False
    should_stop: bool = False
    stop_reason: str = ""
    nan_epochs: int = 0


class ConvergenceTracker:
    """
    Stops training once the loss changes by less than `threshold` between
    consecutive epochs, or once epochs 0..max_epochs have all run.

    The previous loss starts at 0.0, so the first epoch is compared against
    zero rather than skipped.
    """

    def __init__(self, threshold: float, max_epochs: int) -> None:
        if max_epochs < 0:
            raise InvalidParametersError("epochs must be non-negative")
        self.threshold = threshold
        self.max_epochs = max_epochs
        self.state = ConvergenceState()

    def update(self, loss: float) -> ConvergenceState:
        """
        Record the loss of the epoch that just finished.

        Args:
            loss: 1 - accuracy for the completed epoch.

        Returns:
            Updated state with the stop decision.
        """
        state = self.state
        state.prev_loss = state.curr_loss
        state.curr_loss = loss
        state.delta = abs(state.prev_loss - state.curr_loss)

        if math.isnan(loss):
            state.nan_epochs += 1
            if state.nan_epochs == 1:
                logger.warning(f"Epoch {state.epoch}: loss is NaN; accuracy has degraded numerically")

        if state.delta < self.threshold:
            state.converged = True
            state.should_stop = True
            state.stop_reason = STOP_CONVERGED
            logger.debug(f"Converged at epoch {state.epoch}: delta={state.delta:.2e}")

        state.epoch += 1
        if not state.should_stop and state.epoch > self.max_epochs:
            state.should_stop = True
            state.stop_reason = STOP_EPOCHS_EXHAUSTED
            logger.debug(f"Epoch budget ({self.max_epochs}) exhausted")
        return state

    def reset(self) -> None:
        self.state = ConvergenceState()
