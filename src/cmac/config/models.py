import json
import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple

DEFAULT_PERIOD = 2 * math.pi


class Variant(str, Enum):
    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass
class ModelConfig:
    generalization_factor: int = 2
    num_weights: int = 35
    variant: Variant = Variant.DISCRETE
    period: float = DEFAULT_PERIOD

    @property
    def associated_vec_size(self) -> int:
        return self.num_weights + 1 - self.generalization_factor

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "ModelConfig":
        if not data:
            return cls()
        base = cls()
        generalization_factor = int(data.get("generalization_factor", base.generalization_factor))
        num_weights = int(data.get("num_weights", base.num_weights))
        if generalization_factor <= 0:
            raise ValueError("generalization_factor must be positive")
        if generalization_factor > num_weights:
            raise ValueError("generalization_factor must satisfy 0 < g <= num_weights")
        try:
            variant = Variant(str(data.get("variant", base.variant.value)))
        except ValueError as exc:
            raise ValueError(f"Unknown CMAC variant '{data.get('variant')}'") from exc
        period = float(data.get("period", base.period))
        if period <= 0:
            raise ValueError("period must be positive")
        return cls(
            generalization_factor=generalization_factor,
            num_weights=num_weights,
            variant=variant,
            period=period,
        )


@dataclass
class TrainingConfig:
    lower: float = 0.0
    upper: float = DEFAULT_PERIOD
    epochs: int = 2000
    learning_rate: float = 0.01
    convergence_threshold: float = 1e-11

    @property
    def bounds(self) -> Tuple[float, float]:
        return self.lower, self.upper

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "TrainingConfig":
        if not data:
            return cls()
        base = cls()
        for key in data:
            if not hasattr(base, key):
                raise ValueError(f"Unknown training key '{key}'")
        cfg = cls(
            lower=float(data.get("lower", base.lower)),
            upper=float(data.get("upper", base.upper)),
            epochs=int(data.get("epochs", base.epochs)),
            learning_rate=float(data.get("learning_rate", base.learning_rate)),
            convergence_threshold=float(data.get("convergence_threshold", base.convergence_threshold)),
        )
        if cfg.lower >= cfg.upper:
            raise ValueError("Training bounds must satisfy lower < upper")
        if cfg.epochs < 0:
            raise ValueError("epochs must be non-negative")
        return cfg


@dataclass
class ExperimentConfig:
    """
    End-to-end run description: sample generation, split, and the shared
    model/training settings used for both variants.
    """

    points: int = 100
    train_size: int = 70
    seed: int = 0
    output_dir: str = "outputs"
    write_outputs: bool = True
    model: ModelConfig = field(default_factory=ModelConfig)
    training: TrainingConfig = field(default_factory=TrainingConfig)

    @classmethod
    def from_file(cls, path: Path) -> "ExperimentConfig":
        return cls.from_dict(json.loads(Path(path).read_text()))

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "ExperimentConfig":
        if not data:
            return cls()
        points = int(data.get("points", 100))
        if points <= 1:
            raise ValueError("points must be greater than 1")
        train_size = int(data.get("train_size", 70))
        if train_size <= 0 or train_size >= points:
            raise ValueError("train_size must satisfy 0 < train_size < points")
        output_dir = str(data.get("output_dir", "outputs")).strip()
        if not output_dir:
            raise ValueError("output_dir cannot be empty")
        return cls(
            points=points,
            train_size=train_size,
            seed=int(data.get("seed", 0)),
            output_dir=output_dir,
            write_outputs=bool(data.get("write_outputs", True)),
            model=ModelConfig.from_dict(data.get("model")),
            training=TrainingConfig.from_dict(data.get("training")),
        )
