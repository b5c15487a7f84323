"""Set command - choose the default vault."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from ..config import load_config, write_default_vault
from ..vault.registry import validate_vault_exists


def run_set(config_dir: Path | None, vault_name: str) -> int:
    config = load_config(config_dir)
    validate_vault_exists(config, vault_name)
    write_default_vault(config, vault_name)

    Console(stderr=True).print(f"Default vault set to '{vault_name}'", style="green", highlight=False)
    return 0
