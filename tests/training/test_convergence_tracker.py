"""Tests for epoch-to-epoch convergence tracking."""

import math

import pytest

from cmac.errors import InvalidParametersError
from cmac.training import STOP_CONVERGED, STOP_EPOCHS_EXHAUSTED, ConvergenceTracker


class TestConvergenceTracker:
    def test_initial_state(self) -> None:
        tracker = ConvergenceTracker(threshold=1e-3, max_epochs=5)
        assert tracker.state.epoch == 0
        assert tracker.state.prev_loss == 0.0
        assert tracker.state.curr_loss == 0.0
        assert tracker.state.should_stop is False

    def test_first_epoch_compares_against_zero(self) -> None:
        tracker = ConvergenceTracker(threshold=1e-3, max_epochs=5)
        state = tracker.update(0.0005)
        assert state.delta == pytest.approx(0.0005)
        assert state.converged is True
        assert state.stop_reason == STOP_CONVERGED
        assert state.epoch == 1

    def test_stops_when_loss_change_drops_below_threshold(self) -> None:
        tracker = ConvergenceTracker(threshold=0.01, max_epochs=100)
        for loss in (0.9, 0.5, 0.3):
            assert tracker.update(loss).should_stop is False
        state = tracker.update(0.295)
        assert state.should_stop is True
        assert state.converged is True
        assert state.epoch == 4

    def test_epoch_budget_is_inclusive(self) -> None:
        tracker = ConvergenceTracker(threshold=1e-12, max_epochs=2)
        losses = [0.9, 0.7, 0.5]
        states = [tracker.update(loss) for loss in losses]
        assert [s.should_stop for s in states] == [False, False, True]
        assert states[-1].stop_reason == STOP_EPOCHS_EXHAUSTED
        assert states[-1].converged is False

    def test_nan_loss_never_converges_and_warns_once(self, caplog: pytest.LogCaptureFixture) -> None:
        tracker = ConvergenceTracker(threshold=1.0, max_epochs=3)
        with caplog.at_level("WARNING"):
            for _ in range(4):
                state = tracker.update(float("nan"))
        assert state.converged is False
        assert state.stop_reason == STOP_EPOCHS_EXHAUSTED
        assert state.nan_epochs == 4
        assert math.isnan(state.curr_loss)
        warnings = [r for r in caplog.records if "NaN" in r.getMessage()]
        assert len(warnings) == 1

    def test_negative_budget_rejected_and_reset(self) -> None:
        with pytest.raises(InvalidParametersError):
            ConvergenceTracker(threshold=1e-3, max_epochs=-1)
        tracker = ConvergenceTracker(threshold=1e-3, max_epochs=0)
        tracker.update(0.5)
        tracker.reset()
        assert tracker.state.epoch == 0
        assert tracker.state.should_stop is False
