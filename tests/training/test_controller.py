import math

import pytest

from cmac import CMAC
from cmac.data import generate_samples
from cmac.errors import InvalidParametersError
from cmac.training import EpochReport, MetricsObserver, TrainingController
from cmac.utils import InMemoryMetrics


def _learnable_data():
    return generate_samples(points=10, lower=0.0, upper=2 * math.pi)


def test_observers_receive_one_report_per_epoch() -> None:
    reports = []
    model = CMAC(2, 12)
    controller = TrainingController(model, observers=[reports.append])
    result = controller.run(_learnable_data(), 0.0, 2 * math.pi, epochs=4, learning_rate=0.1, convergence_threshold=1e-15)
    assert result.epochs_run == 5
    assert [r.epoch for r in reports] == [0, 1, 2, 3, 4]
    assert reports == result.history
    assert all(isinstance(r, EpochReport) for r in reports)
    for r in reports:
        assert r.loss == pytest.approx(1 - r.accuracy)


def test_training_converges_before_epoch_budget() -> None:
    threshold = 1e-6
    model = CMAC(2, 12)
    result = model.train(
        _learnable_data(), 0.0, 2 * math.pi, epochs=5000, learning_rate=0.5,
        convergence_threshold=threshold, observers=[],
    )
    assert result.converged is True
    assert result.stop_reason == "converged"
    assert result.epochs_run <= 5001
    last, previous = result.history[-1], result.history[-2]
    assert abs(previous.loss - last.loss) < threshold
    first = result.history[0]
    assert last.accuracy > first.accuracy


def test_continuous_training_improves_accuracy() -> None:
    # grid spacing 2*pi/11 keeps samples off the clamped grid points
    model = CMAC(2, 13, variant="continuous")
    result = model.train(
        _learnable_data(), 0.0, 2 * math.pi, epochs=200, learning_rate=0.1,
        convergence_threshold=1e-12, observers=[],
    )
    assert result.epochs_run >= 1
    assert result.history[-1].accuracy > result.history[0].accuracy


def test_metrics_observer_records_gauges() -> None:
    sink = InMemoryMetrics()
    model = CMAC(2, 12)
    controller = TrainingController(model, observers=[])
    controller.add_observer(MetricsObserver(sink, variant="discrete"))
    result = controller.run(_learnable_data(), 0.0, 2 * math.pi, epochs=2, learning_rate=0.1, convergence_threshold=1e-15)
    assert sink.values("gauges", "accuracy") == [r.accuracy for r in result.history]
    assert sink.values("gauges", "loss") == [r.loss for r in result.history]
    assert sink.counters["epochs"][0].labels == (("variant", "discrete"),)


def test_default_observer_logs_progress(caplog: pytest.LogCaptureFixture) -> None:
    model = CMAC(2, 5)
    with caplog.at_level("INFO", logger="cmac"):
        model.train([(0.0, 0.0)], 0.0, 4.0, epochs=1, learning_rate=0.1, convergence_threshold=1e-11)
    messages = [r.getMessage() for r in caplog.records]
    assert any("discrete training: epoch=0" in m for m in messages)
    assert any("epoch=1" in m for m in messages)


def test_nan_targets_degrade_without_failing() -> None:
    model = CMAC(2, 5)
    result = model.train([(1.0, float("nan"))], 0.0, 4.0, epochs=3, learning_rate=0.1, convergence_threshold=1.0, observers=[])
    assert result.converged is False
    assert result.epochs_run == 4
    assert math.isnan(result.final_accuracy)


def test_empty_dataset_rejected() -> None:
    with pytest.raises(InvalidParametersError):
        TrainingController(CMAC(2, 5), observers=[]).run([], 0.0, 4.0, 1, 0.1, 1e-11)
