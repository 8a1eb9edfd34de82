"""Continuous CMAC: two-point linear interpolation across neighbouring windows."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from cmac.core.grid import ContinuousGrid
from cmac.core.weights import WeightStore
from cmac.errors import DegenerateInterpolationError


@dataclass(frozen=True)
class Interpolation:
    start_index: int
    next_index: int
    left_weight: float
    right_weight: float


class ContinuousApproximator:
    """
    Blends the window at the association index with the next one.

    Near the right edge the second window is clamped onto the first, so the
    prediction there reduces to the discrete sum.
    """

    variant = "continuous"

    def __init__(
        self,
        store: WeightStore,
        generalization_factor: int,
        associated_vec_size: int,
        period: float = 2 * math.pi,
    ) -> None:
        self.store = store
        self.generalization_factor = generalization_factor
        self.associated_vec_size = associated_vec_size
        self.period = period
        self.grid: Optional[ContinuousGrid] = None

    def prepare(self) -> None:
        self.grid = ContinuousGrid(self.associated_vec_size, self.period)

    def next_index(self, start_index: int) -> int:
        if start_index >= self.associated_vec_size - (self.generalization_factor + 1):
            return start_index
        return start_index + 1

    def interpolate(self, x: float, index: int) -> Interpolation:
        if self.grid is None:
            self.prepare()
        next_index = self.next_index(index)
        left_dist = abs(self.grid[index] - x)
        right_dist = abs(self.grid[next_index] - x)
        total = left_dist + right_dist
        if total == 0:
            raise DegenerateInterpolationError(
                f"Input {x} coincides with grid point {index}; interpolation weights are undefined"
            )
        left_weight = right_dist / total
        return Interpolation(
            start_index=index,
            next_index=next_index,
            left_weight=left_weight,
            right_weight=1 - left_weight,
        )

    def predict_sample(self, x: float, index: int) -> float:
        return self._predict(self.interpolate(x, index))

    def update_sample(self, x: float, y: float, index: int, learning_rate: float) -> float:
        g = self.generalization_factor
        interp = self.interpolate(x, index)
        error = y - self._predict(interp)
        # Both windows get the same correction; only the prediction is weighted.
        correction = learning_rate * error / g
        self.store.apply_correction(interp.start_index, g, correction)
        self.store.apply_correction(interp.next_index, g, correction)
        return error

    def _predict(self, interp: Interpolation) -> float:
        g = self.generalization_factor
        return interp.left_weight * self.store.window_sum(interp.start_index, g) + (
            interp.right_weight * self.store.window_sum(interp.next_index, g)
        )
