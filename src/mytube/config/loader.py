from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml

from ..core.exceptions import ConfigError, ConfigNotFoundError, MissingEnvError

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def parse_flag(value: Any, name: str) -> bool:
    """Interpret a config value as a boolean.

    Accepts real booleans, 0/1 and the usual words (true/false, yes/no,
    on/off). Anything else raises ``ConfigError``.
    """

    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUTHY:
            return True
        if word in _FALSY:
            return False
    raise ConfigError(f"{name} must be a boolean flag, got {value!r}")


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return parse_flag(raw, name)


def env_required(name: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        raise MissingEnvError(name)
    return raw


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Read a YAML mapping from ``path``.

    An empty file yields an empty dict. A missing file raises
    ``ConfigNotFoundError``; unreadable or non-mapping content raises
    ``ConfigError``.
    """

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigNotFoundError(f"config file {path} not found") from exc
    except OSError as exc:
        raise ConfigError(f"failed to read config file {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"failed to parse config file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return data
