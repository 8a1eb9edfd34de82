"""Fixed-size weight array with bounds-checked windowed access."""

from __future__ import annotations

import numpy as np

from cmac.errors import IndexOutOfRangeError, InvalidParametersError

INITIAL_WEIGHT = 1.0


class WeightStore:
    """Owns the CMAC weight vector; length is fixed at construction."""

    def __init__(self, num_weights: int, initial: float = INITIAL_WEIGHT) -> None:
        if num_weights <= 0:
            raise InvalidParametersError("num_weights must be positive")
        self._weights = np.full(num_weights, initial, dtype=np.float64)

    def __len__(self) -> int:
        return len(self._weights)

    @property
    def num_weights(self) -> int:
        return len(self._weights)

    def window_sum(self, start: int, width: int) -> float:
        self._check_window(start, width)
        return float(self._weights[start : start + width].sum())

    def apply_correction(self, start: int, width: int, delta: float) -> None:
        self._check_window(start, width)
        self._weights[start : start + width] += delta

    def snapshot(self) -> np.ndarray:
        return self._weights.copy()

    def _check_window(self, start: int, width: int) -> None:
        if width <= 0:
            raise InvalidParametersError("Window width must be positive")
        if start < 0 or start + width > len(self._weights):
            raise IndexOutOfRangeError(
                f"Window [{start}, {start + width}) outside weight array of size {len(self._weights)}"
            )
