"""
Cerebellar Model Articulation Controller (CMAC) toolkit.

Components:
- Receptive-field indexing and a bounds-checked weight store
- Discrete and continuous (interpolating) approximators
- Online training with epoch-to-epoch convergence detection
- Sample generation, pair persistence and an experiment runner
"""

from cmac.errors import (
    CMACError,
    DegenerateInterpolationError,
    IndexOutOfRangeError,
    InvalidParametersError,
)
from cmac.models import CMAC, ModelRegistry

__all__ = [
    "CMAC",
    "ModelRegistry",
    "CMACError",
    "DegenerateInterpolationError",
    "IndexOutOfRangeError",
    "InvalidParametersError",
    "config",
    "core",
    "data",
    "models",
    "training",
    "utils",
]
