"""Project configuration stored in ``reflex.yaml``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE_NAME = "reflex.yaml"

_FIELD_KEYS = (
    ("frontend_dir", "frontend"),
    ("backend_dir", "backend"),
    ("public_dir", "public"),
    ("output_dir", "output"),
)


class ConfigError(Exception):
    """Raised when the project configuration cannot be read."""


@dataclass
class Config:
    """Directories of a project, relative to the project root."""

    frontend_dir: str = ""
    backend_dir: str = ""
    public_dir: str = ""
    output_dir: str = ""

    def to_mapping(self) -> dict[str, str]:
        """Return the configuration keyed as in ``reflex.yaml``."""
        return {key: getattr(self, attr) for attr, key in _FIELD_KEYS}


def _scalar_to_str(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, dict)):
        raise ConfigError(
            f"failed to decode config file: value of {key!r} must be a string"
        )
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _from_mapping(data: Any) -> Config:
    if not isinstance(data, dict):
        raise ConfigError("failed to decode config file: expected a mapping")
    values = {
        attr: _scalar_to_str(key, data.get(key)) for attr, key in _FIELD_KEYS
    }
    return Config(**values)


def load_config(directory: str | Path | None = None) -> Config:
    """Read ``reflex.yaml`` from *directory* (the working directory by default)."""
    base = Path.cwd() if directory is None else Path(directory)
    path = base / CONFIG_FILE_NAME
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to open config file: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"failed to decode config file: {exc}") from exc
    if data is None:
        raise ConfigError("failed to decode config file: file is empty")
    return _from_mapping(data)