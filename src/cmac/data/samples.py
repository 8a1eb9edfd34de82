"""Sample generation and train/test partitioning."""

from __future__ import annotations

import math
import random
from typing import Callable, List, Sequence, Tuple

Sample = Tuple[float, float]


def x_sin_x(x: float) -> float:
    return x * math.sin(x)


def generate_samples(
    points: int = 100,
    lower: float = 0.0,
    upper: float = 2 * math.pi,
    func: Callable[[float], float] = x_sin_x,
) -> List[Sample]:
    """Sample func at evenly spaced inputs lower + i * step, i in range(points); inputs stay in [lower, upper)."""
    if points <= 0:
        raise ValueError("points must be positive")
    if lower >= upper:
        raise ValueError("Sample range must satisfy lower < upper")
    increment = (upper - lower) / points
    xs = [lower + i * increment for i in range(points)]
    return [(x, func(x)) for x in xs]


def shuffle_split(data: Sequence[Sample], train_size: int, seed: int = 0) -> Tuple[List[Sample], List[Sample]]:
    if not 0 < train_size < len(data):
        raise ValueError("train_size must satisfy 0 < train_size < len(data)")
    shuffled = list(data)
    random.Random(seed).shuffle(shuffled)
    return shuffled[:train_size], shuffled[train_size:]
