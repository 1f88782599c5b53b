from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional

from ..config.loader import load_yaml, parse_flag
from ..core.constants import DEFAULT_SERVER_PORT
from ..core.exceptions import ConfigError


def _flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    return parse_flag(value, key)


@dataclass
class ServerConfig:
    port: int = DEFAULT_SERVER_PORT
    use_tls: bool = False
    tls_crt: str = ""
    tls_key: str = ""
    cors: bool = False
    allow_origins: List[str] = field(default_factory=list)

    def addr(self) -> str:
        return f":{self.port}"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ServerConfig":
        defaults = cls()
        try:
            origins = data.get("allow_origins") or []
            if isinstance(origins, str):
                origins = [origins]
            return cls(
                port=int(data.get("port", defaults.port)),
                use_tls=_flag(data, "use_tls", defaults.use_tls),
                tls_crt=str(data.get("tls_crt") or ""),
                tls_key=str(data.get("tls_key") or ""),
                cors=_flag(data, "cors", defaults.cors),
                allow_origins=[str(o) for o in origins],
            )
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid server config: {exc}") from exc


def default_server_config() -> ServerConfig:
    return ServerConfig()


def load_server_config(path: Optional[str | Path]) -> ServerConfig:
    """Build a ``ServerConfig`` from the ``server:`` section of a YAML file.

    ``None`` means "no file": defaults are returned.
    """

    if path is None:
        return default_server_config()

    data = load_yaml(path)
    section = data.get("server", {})
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"'server' section in {path} must be a mapping")
    return ServerConfig.from_mapping(section)
