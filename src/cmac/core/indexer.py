"""Receptive-field indexing: maps scalar inputs to weight-window start positions."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

import numpy as np

from cmac.errors import IndexOutOfRangeError, InvalidParametersError

Sample = Tuple[float, float]


def check_bounds(lower: float, upper: float) -> None:
    if not lower < upper:
        raise InvalidParametersError(f"Bounds must satisfy lower < upper, got [{lower}, {upper})")


def association_index(x: float, lower: float, upper: float, associated_vec_size: int) -> int:
    """
    Linearly rescale x from [lower, upper) into [1, associated_vec_size - 2].

    No range checking or clamping; rounding can push inputs just below upper
    one past the top. ReceptiveFieldIndexer.index is the checked form.
    """
    scaled = (associated_vec_size - 2) * ((x - lower) / (upper - lower))
    return math.floor(scaled) + 1


class ReceptiveFieldIndexer:
    """Builds per-sample association indices for one dataset and bound pair."""

    def __init__(self, associated_vec_size: int) -> None:
        if associated_vec_size < 1:
            raise InvalidParametersError("associated_vec_size must be at least 1")
        self.associated_vec_size = associated_vec_size

    @property
    def max_index(self) -> int:
        return max(self.associated_vec_size - 2, 1)

    def index(self, x: float, lower: float, upper: float) -> int:
        check_bounds(lower, upper)
        self._check_capacity()
        if not lower <= x < upper:
            raise IndexOutOfRangeError(f"Input {x} lies outside [{lower}, {upper})")
        # (x - lower) / (upper - lower) can round up to 1.0 just below upper
        return min(association_index(x, lower, upper, self.associated_vec_size), self.max_index)

    def build_table(self, data: Sequence[Sample], lower: float, upper: float) -> np.ndarray:
        """
        One index per sample position. Keyed by position, so duplicate inputs
        each keep their own entry.
        """
        self._check_capacity()
        return np.array(
            [self.index(x, lower, upper) for x in _inputs(data)],
            dtype=np.int64,
        )

    def _check_capacity(self) -> None:
        if self.associated_vec_size < 2:
            raise InvalidParametersError(
                "generalization_factor == num_weights leaves no room for a weight window; "
                "associated_vec_size must be at least 2"
            )


def _inputs(data: Sequence[Sample]) -> Iterable[float]:
    for x, _ in data:
        yield float(x)
