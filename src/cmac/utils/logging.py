import json
import logging
import os
import sys
from logging import Logger
from typing import Optional

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
ROOT_LOGGER_NAME = "cmac"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for machine-readable training logs."""

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - trivial
        log = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%SZ"),
        }
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log, default=str)


def configure_logging(level: Optional[str] = None, json_output: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure global logging for CMAC runs. Logs to stdout; can additionally tee
    per-epoch progress to a file.
    """
    effective_level = level or os.getenv(LOG_LEVEL_ENV_VAR) or "INFO"
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    formatter: logging.Formatter
    if json_output:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(
        level=getattr(logging, effective_level.upper(), logging.INFO),
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> Logger:
    """Return a logger namespaced under the package root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
