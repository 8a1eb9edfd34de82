"""Utilities for locating and loading experiment configuration files."""

import json
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from cmac.config.models import ExperimentConfig

CONFIG_ENV_VAR = "CMAC_CONFIG_PATH"
DEFAULT_CONFIG_FILENAME = "cmac-config.json"


def resolve_config_path(path: Optional[Path] = None) -> Path:
    """
    Resolve the experiment config path.

    An explicit path wins, then the CMAC_CONFIG_PATH environment variable,
    then cmac-config.json in the working directory.
    """
    if path is not None:
        return Path(path).resolve()
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    return (Path.cwd() / DEFAULT_CONFIG_FILENAME).resolve()


def load_config(path: Optional[Path] = None) -> Tuple[Dict, Path]:
    """
    Load the raw configuration mapping.

    Returns:
        (config_dict, resolved_path); the dict is empty when the file is absent.

    Raises:
        ValueError: if the JSON is invalid.
    """
    resolved = resolve_config_path(path)
    if not resolved.exists():
        return {}, resolved
    try:
        return json.loads(resolved.read_text()), resolved
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid CMAC config JSON at {resolved}: {exc}") from exc


def load_experiment_config(path: Optional[Path] = None) -> ExperimentConfig:
    data, _ = load_config(path)
    return ExperimentConfig.from_dict(data)
