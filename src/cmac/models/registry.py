"""Registry of CMAC variant factories."""

from __future__ import annotations

from typing import Callable, Dict, List

from cmac.config.models import ModelConfig, Variant
from cmac.models.cmac import CMAC


class ModelRegistry:
    """Pluggable registry mapping variant names to model factories."""

    def __init__(self) -> None:
        self._registry: Dict[str, Callable[..., CMAC]] = {}
        for variant in Variant:
            self.register(variant.value, _factory_for(variant))

    def register(self, name: str, factory: Callable[..., CMAC]) -> None:
        if name in self._registry:
            raise ValueError(f"Model '{name}' already registered")
        self._registry[name] = factory

    def names(self) -> List[str]:
        return sorted(self._registry)

    def create(self, name: str, **kwargs) -> CMAC:
        if name not in self._registry:
            raise ValueError(f"Unknown model '{name}'")
        return self._registry[name](**kwargs)

    def from_config(self, config: ModelConfig) -> CMAC:
        return self.create(
            config.variant.value,
            generalization_factor=config.generalization_factor,
            num_weights=config.num_weights,
            period=config.period,
        )


def _factory_for(variant: Variant) -> Callable[..., CMAC]:
    def factory(**kwargs) -> CMAC:
        return CMAC(variant=variant, **kwargs)

    return factory
