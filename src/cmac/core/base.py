"""Capability shared by the discrete and continuous variants."""

from __future__ import annotations

from typing import Protocol

from cmac.core.weights import WeightStore


class Approximator(Protocol):
    """Per-sample prediction and online update against a shared weight store."""

    variant: str
    store: WeightStore
    generalization_factor: int

    def prepare(self) -> None:
        """Build any per-call geometry before a train or predict pass."""
        ...

    def predict_sample(self, x: float, index: int) -> float:
        ...

    def update_sample(self, x: float, y: float, index: int, learning_rate: float) -> float:
        """Apply one online correction and return the pre-update error."""
        ...
