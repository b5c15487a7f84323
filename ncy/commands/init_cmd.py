"""Init command - bootstrap the configuration and vault folders."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from ..config import ensure_config_file, load_config
from ..errors import NoVaultsSection, NoteStorageError
from ..journal import JOURNAL_PROJECT
from ..launch import editor_command, open_in_editor
from ..vault.registry import list_vaults

WORKSPACES_DIR = "workspaces"


def run_init(config_dir: Path | None, *, edit: bool = True) -> int:
    """
    Create config.yaml if needed, open it for editing, then lay out every vault.

    Each configured vault gets its root directory plus `journal` and
    `workspaces` subdirectories. Existing directories are left alone.
    """
    console = Console(stderr=True)

    config_path, actions = ensure_config_file(config_dir)
    for action in actions:
        console.print(action, highlight=False)

    if edit:
        console.print(f"Opening configuration file with {editor_command()[0]}", highlight=False)
        open_in_editor(config_path)

    config = load_config(config_dir)
    try:
        vaults = list_vaults(config)
    except NoVaultsSection:
        console.print("No vaults defined yet; add a 'vaults' section to config.yaml.", style="yellow")
        vaults = []

    for vault in vaults:
        for directory, label in (
            (vault.directory, "vault"),
            (vault.directory / JOURNAL_PROJECT, "journal"),
            (vault.directory / WORKSPACES_DIR, "workspaces"),
        ):
            if directory.exists():
                continue
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise NoteStorageError(f"Failed to create {label} directory {directory}: {e}") from e
            console.print(f"Created {label} directory for '{vault.name}': {directory}", highlight=False)

    console.print("Configuration completed successfully!", style="green")
    return 0
