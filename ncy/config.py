"""
Configuration loading for ncy.

The configuration lives in `config.yaml` inside the directory named by
`--config-dir` or the NOTEMANCY_CONF_DIR environment variable:

    default_vault: personal
    vaults:
      - name: personal
        vault_directory: ~/notes/personal

It is read once per invocation and handed to every component as an immutable
Config value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from .errors import ConfigDirNotSet, ConfigNotFound, ConfigParseError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "NOTEMANCY_CONF_DIR"
CONFIG_FILENAME = "config.yaml"


@dataclass(frozen=True)
class Config:
    """Loaded configuration tree (read-only)."""

    data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    path: Path | None = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    @property
    def default_vault(self) -> str | None:
        value = self.data.get("default_vault")
        if value is None:
            return None
        return str(value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: Path | None = None) -> "Config":
        return cls(data=MappingProxyType(dict(data)), path=path)


def config_file_path(config_dir: Path | None) -> Path:
    """Path to config.yaml, or ConfigDirNotSet when no directory is configured."""
    if config_dir is None:
        raise ConfigDirNotSet()
    return Path(config_dir).expanduser() / CONFIG_FILENAME


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigParseError(path, f"Failed to read configuration file: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(path, str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(path, f"expected a mapping at top level, got {type(data).__name__}")
    return data


def load_config(config_dir: Path | None) -> Config:
    """Load config.yaml from `config_dir`."""
    path = config_file_path(config_dir)
    if not path.exists():
        raise ConfigNotFound(path)

    data = _read_yaml(path)
    logger.debug(f"Loaded configuration from {path}")
    return Config.from_dict(data, path=path)


def ensure_config_file(config_dir: Path | None) -> tuple[Path, list[str]]:
    """Create the config directory and an empty config.yaml if missing.

    Returns the config file path and a list of human-readable actions taken.
    """
    path = config_file_path(config_dir)
    actions: list[str] = []

    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        actions.append(f"Created configuration directory: {path.parent}")

    if not path.exists():
        path.write_text("", encoding="utf-8")
        actions.append("Created empty configuration file")

    return path, actions


def write_default_vault(config: Config, vault_name: str) -> Path:
    """Persist `default_vault` into the config file, keeping the other keys."""
    if config.path is None:
        raise ConfigDirNotSet()

    data = _read_yaml(config.path)
    data["default_vault"] = vault_name
    config.path.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8")
    logger.debug(f"Wrote default_vault={vault_name} to {config.path}")
    return config.path
