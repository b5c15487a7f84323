"""Vault registry lookup: vault names to root directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..config import Config
from ..errors import NoDefaultVault, NoVaultsSection, VaultNotFound
from ..models import VaultEntry

logger = logging.getLogger(__name__)

# Accepted keys for a vault root, preferred first.
DIRECTORY_KEYS = ("vault_directory", "directory")


def _vault_section(config: Config) -> list[Any]:
    vaults = config.get("vaults")
    if not isinstance(vaults, list):
        raise NoVaultsSection()
    return vaults


def _entry_directory(entry: dict[str, Any]) -> str | None:
    for key in DIRECTORY_KEYS:
        value = entry.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def list_vaults(config: Config) -> list[VaultEntry]:
    """Well-formed vault entries in configuration order."""
    entries: list[VaultEntry] = []
    seen: set[str] = set()

    for raw in _vault_section(config):
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            logger.debug(f"Skipping malformed vault entry: {raw!r}")
            continue
        directory = _entry_directory(raw)
        if directory is None:
            logger.debug(f"Skipping vault '{raw['name']}' without a directory")
            continue
        name = raw["name"]
        if name in seen:
            logger.warning(f"Vault '{name}' is defined more than once; using the first entry")
            continue
        seen.add(name)
        entries.append(VaultEntry(name=name, directory=Path(directory).expanduser()))

    return entries


def find_vault_directory(config: Config, vault_name: str) -> Path:
    """Root directory of the vault named exactly `vault_name`."""
    vaults = _vault_section(config)
    if not vault_name:
        raise VaultNotFound(vault_name)

    for raw in vaults:
        if not isinstance(raw, dict) or raw.get("name") != vault_name:
            continue
        directory = _entry_directory(raw)
        if directory is not None:
            return Path(directory).expanduser()

    raise VaultNotFound(vault_name)


def validate_vault_exists(config: Config, vault_name: str) -> None:
    find_vault_directory(config, vault_name)


def resolve_vault_name(config: Config, explicit: str | None = None) -> str:
    """Pick the vault: explicit argument, then default_vault, else NoDefaultVault."""
    if explicit:
        return explicit
    default = config.default_vault
    if not default:
        raise NoDefaultVault()
    return default


def resolve_vault(config: Config, explicit: str | None = None) -> tuple[str, Path]:
    """Resolve a vault name and its root directory in one step."""
    name = resolve_vault_name(config, explicit)
    root = find_vault_directory(config, name)
    logger.debug(f"Using vault '{name}' at {root}")
    return name, root
