from cmac.models.cmac import CMAC
from cmac.models.registry import ModelRegistry

__all__ = [
    "CMAC",
    "ModelRegistry",
]
