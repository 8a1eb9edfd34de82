"""CMAC model: one weight store plus a discrete or continuous approximator."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from cmac.config.models import ModelConfig, Variant
from cmac.core import (
    Approximator,
    ContinuousApproximator,
    DiscreteApproximator,
    ReceptiveFieldIndexer,
    WeightStore,
    accuracy_from_error,
    calculate_error,
    check_bounds,
)
from cmac.errors import InvalidParametersError
from cmac.training.controller import EpochObserver, TrainingController, TrainingResult
from cmac.utils import get_logger

logger = get_logger("models.cmac")

Pair = Tuple[float, float]


class CMAC:
    """
    Sparse associative-memory approximator for scalar functions.

    The weight vector persists across train calls. Association indices are
    transient: they are rebuilt per train/predict call and reused across the
    epochs of one train call.
    """

    def __init__(
        self,
        generalization_factor: int,
        num_weights: int,
        variant: Variant | str = Variant.DISCRETE,
        period: float = 2 * math.pi,
    ) -> None:
        if generalization_factor <= 0:
            raise InvalidParametersError("generalization_factor must be positive")
        if generalization_factor > num_weights:
            raise InvalidParametersError("generalization_factor must not exceed num_weights")
        try:
            self.variant = Variant(variant)
        except ValueError as exc:
            raise InvalidParametersError(f"Unknown CMAC variant '{variant}'") from exc
        self.generalization_factor = generalization_factor
        self.num_weights = num_weights
        self.associated_vec_size = num_weights + 1 - generalization_factor
        self.store = WeightStore(num_weights)
        self.indexer = ReceptiveFieldIndexer(self.associated_vec_size)
        self.approximator: Approximator
        if self.variant is Variant.CONTINUOUS:
            self.approximator = ContinuousApproximator(
                self.store, generalization_factor, self.associated_vec_size, period
            )
        else:
            self.approximator = DiscreteApproximator(self.store, generalization_factor)
        self._association: Optional[np.ndarray] = None
        self._association_bounds: Optional[Tuple[float, float]] = None
        self._association_source: Optional[Sequence[Pair]] = None

    @classmethod
    def from_config(cls, config: ModelConfig) -> "CMAC":
        return cls(
            generalization_factor=config.generalization_factor,
            num_weights=config.num_weights,
            variant=config.variant,
            period=config.period,
        )

    def __repr__(self) -> str:
        return (
            f"CMAC(variant={self.variant.value}, generalization_factor={self.generalization_factor}, "
            f"num_weights={self.num_weights})"
        )

    @property
    def weights(self) -> np.ndarray:
        return self.store.snapshot()

    @property
    def association_table(self) -> Optional[np.ndarray]:
        return None if self._association is None else self._association.copy()

    def build_association(self, data: Sequence[Pair], lower: float, upper: float) -> np.ndarray:
        self._association = self.indexer.build_table(data, lower, upper)
        self._association_bounds = (lower, upper)
        self._association_source = data
        logger.debug(f"Built association table for {len(data)} samples over [{lower}, {upper})")
        return self._association

    def train(
        self,
        data: Sequence[Pair],
        lower: float,
        upper: float,
        epochs: int,
        learning_rate: float,
        convergence_threshold: float,
        observers: Optional[Sequence[EpochObserver]] = None,
    ) -> TrainingResult:
        controller = TrainingController(self, observers=observers)
        return controller.run(data, lower, upper, epochs, learning_rate, convergence_threshold)

    def update_sample(self, sample: Pair, index: int, learning_rate: float) -> float:
        x, y = sample
        return self.approximator.update_sample(float(x), float(y), int(index), learning_rate)

    def predict(
        self,
        data: Sequence[Pair],
        lower: float,
        upper: float,
        training: bool = False,
    ) -> Tuple[List[Pair], float]:
        """
        Predict every sample in order and score against the sample targets.

        With training=True the association table and continuous grid from the
        current train call are reused when the same dataset object and bounds
        are passed; any other dataset gets a fresh table.
        """
        check_bounds(lower, upper)
        if len(data) == 0:
            raise InvalidParametersError("Cannot predict an empty dataset")
        if not (training and self._table_matches(data, lower, upper)):
            self.build_association(data, lower, upper)
        if not training:
            self.approximator.prepare()
        predicted: List[Pair] = []
        for (x, _), index in zip(data, self._association):
            predicted.append((x, self.approximator.predict_sample(float(x), int(index))))
        accuracy = accuracy_from_error(calculate_error(data, predicted))
        return predicted, accuracy

    def _table_matches(self, data: Sequence[Pair], lower: float, upper: float) -> bool:
        return (
            self._association is not None
            and data is self._association_source
            and len(self._association) == len(data)
            and self._association_bounds == (lower, upper)
        )
