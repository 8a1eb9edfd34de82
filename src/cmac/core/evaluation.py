"""Aggregate error metric shared by both variants."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from cmac.errors import InvalidParametersError

Pair = Tuple[float, float]


def calculate_error(actual: Sequence[Pair], predicted: Sequence[Pair]) -> float:
    """
    sqrt(sum of squared target differences) / n.

    The root is taken before dividing by n; this is the metric the training
    loop's convergence check is defined against.
    """
    n = len(actual)
    if n == 0:
        raise InvalidParametersError("Cannot evaluate an empty dataset")
    if len(predicted) != n:
        raise InvalidParametersError(f"Prediction count {len(predicted)} does not match dataset size {n}")
    total = 0.0
    for (_, y_true), (_, y_pred) in zip(actual, predicted):
        diff = y_true - y_pred
        total += diff * diff
    return math.sqrt(total) / n


def accuracy_from_error(error: float) -> float:
    return 1 - abs(error)
