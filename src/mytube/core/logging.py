"""Logging setup.

Loggers are created here and handed to the components that need them; nothing
in the package logs through the root logger directly.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict

from .constants import DEFAULT_LOG_LEVEL

ROOT_LOGGER_NAME = "mytube"


def get_logging_config(level: str = DEFAULT_LOG_LEVEL) -> Dict[str, Any]:
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "access": {
                "format": "%(message)s"
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            ROOT_LOGGER_NAME: {
                "handlers": ["default"],
                "level": level,
                "propagate": False,
            },
            "werkzeug": {
                "handlers": ["access"],
                "level": "INFO",
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"],
        },
    }


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.config.dictConfig(get_logging_config(level))


def new_logger(name: str) -> logging.Logger:
    """Return a logger under the ``mytube`` namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
