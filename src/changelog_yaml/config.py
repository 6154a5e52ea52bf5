"""Configuration helpers for changelog-yaml."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, MutableMapping, Optional

import yaml

from .expanders import DEFAULT_HOST
from .formatters import FORMAT_ALIASES

DEFAULT_FORMAT = "md"
CONFIG_FILENAME = ".changelog-yaml.yaml"


def default_config_path(project_root: Path) -> Path:
    """Return the default config path for a project root."""
    return project_root / CONFIG_FILENAME


@dataclass(frozen=True)
class Config:
    """Structured representation of the renderer settings."""

    output_format: str = DEFAULT_FORMAT
    host: str = DEFAULT_HOST

    def with_overrides(
        self,
        *,
        output_format: Optional[str] = None,
        host: Optional[str] = None,
    ) -> Config:
        """Return a copy with command line values taking precedence."""
        return replace(
            self,
            output_format=output_format if output_format is not None else self.output_format,
            host=normalize_host(host) if host is not None else self.host,
        )


def normalize_host(value: str) -> str:
    """Strip whitespace and trailing slashes from a link host."""
    host = value.strip().rstrip("/")
    if not host:
        raise ValueError("Config option 'host' must not be empty.")
    if not host.startswith(("http://", "https://")):
        raise ValueError("Config option 'host' must start with http:// or https://.")
    return host


def load_config(path: Path) -> Config:
    """Load the configuration from disk."""
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, MutableMapping):
        raise ValueError("Config root must be a mapping")

    output_format = DEFAULT_FORMAT
    format_raw = raw.get("format")
    if format_raw is not None:
        if not isinstance(format_raw, str):
            raise ValueError("Config option 'format' must be a string.")
        normalized_format = format_raw.strip().lower()
        if normalized_format not in FORMAT_ALIASES:
            allowed = ", ".join(FORMAT_ALIASES)
            raise ValueError(f"Config option 'format' must be one of: {allowed}")
        output_format = normalized_format

    host = DEFAULT_HOST
    host_raw = raw.get("host")
    if host_raw is not None:
        if not isinstance(host_raw, str):
            raise ValueError("Config option 'host' must be a string.")
        host = normalize_host(host_raw)

    return Config(output_format=output_format, host=host)


def dump_config(config: Config) -> dict[str, Any]:
    """Convert a Config into a plain dictionary suitable for YAML output."""
    data: dict[str, Any] = {}
    if config.output_format != DEFAULT_FORMAT:
        data["format"] = config.output_format
    if config.host != DEFAULT_HOST:
        data["host"] = config.host
    return data


def save_config(config: Config, path: Path) -> None:
    """Write the configuration to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(dump_config(config), handle, sort_keys=False)
