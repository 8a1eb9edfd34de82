"""Fixed quantization centers used by the continuous variant for interpolation."""

from __future__ import annotations

import math

import numpy as np

from cmac.errors import IndexOutOfRangeError, InvalidParametersError


class ContinuousGrid:
    """
    Evenly spaced points i * period / (size - 1), i = 0..size-1.

    The grid covers one period starting at 0 and does not follow the bounds
    passed to train/predict.
    """

    def __init__(self, size: int, period: float = 2 * math.pi) -> None:
        if size < 2:
            raise InvalidParametersError("Continuous grid needs at least two points")
        if period <= 0:
            raise InvalidParametersError("Grid period must be positive")
        self.size = size
        self.period = period
        self.increment = period / (size - 1)
        self.points = np.arange(size, dtype=np.float64) * self.increment

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < self.size:
            raise IndexOutOfRangeError(f"Grid index {index} outside [0, {self.size})")
        return float(self.points[index])
