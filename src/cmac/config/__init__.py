from .loader import CONFIG_ENV_VAR, load_config, load_experiment_config, resolve_config_path
from .models import DEFAULT_PERIOD, ExperimentConfig, ModelConfig, TrainingConfig, Variant

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_PERIOD",
    "ExperimentConfig",
    "ModelConfig",
    "TrainingConfig",
    "Variant",
    "load_config",
    "load_experiment_config",
    "resolve_config_path",
]
