from .base import Approximator
from .continuous import ContinuousApproximator, Interpolation
from .discrete import DiscreteApproximator
from .evaluation import accuracy_from_error, calculate_error
from .grid import ContinuousGrid
from .indexer import ReceptiveFieldIndexer, association_index, check_bounds
from .weights import INITIAL_WEIGHT, WeightStore

__all__ = [
    "Approximator",
    "ContinuousApproximator",
    "ContinuousGrid",
    "DiscreteApproximator",
    "INITIAL_WEIGHT",
    "Interpolation",
    "ReceptiveFieldIndexer",
    "WeightStore",
    "accuracy_from_error",
    "association_index",
    "calculate_error",
    "check_bounds",
]
