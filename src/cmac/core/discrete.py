"""Discrete CMAC: hard quantization onto a single block of weights."""

from __future__ import annotations

from cmac.core.weights import WeightStore


class DiscreteApproximator:
    """Prediction is the unweighted sum of the g weights in the active window."""

    variant = "discrete"

    def __init__(self, store: WeightStore, generalization_factor: int) -> None:
        self.store = store
        self.generalization_factor = generalization_factor

    def prepare(self) -> None:
        return None

    def predict_sample(self, x: float, index: int) -> float:
        return self.store.window_sum(index, self.generalization_factor)

    def update_sample(self, x: float, y: float, index: int, learning_rate: float) -> float:
        g = self.generalization_factor
        error = y - self.predict_sample(x, index)
        correction = learning_rate * error / g
        self.store.apply_correction(index, g, correction)
        return error
