"""Open command - pick a note and edit it."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from ..config import load_config
from ..launch import editor_command, open_in_editor
from ..pickers import Picker, get_picker
from .common import choose_note


def run_open(
    config_dir: Path | None,
    *,
    vault: str | None = None,
    external: bool = False,
    picker: Picker | None = None,
) -> int:
    """Pick a note and open it in $EDITOR; in external mode print its path instead."""
    config = load_config(config_dir)
    picker = picker or get_picker(external, "inline")

    note = choose_note(config, picker, vault)
    path = note.path.resolve()

    if external:
        print(path)
        return 0

    console = Console(stderr=True)
    console.print(f"Opening note: {note.title} with {editor_command()[0]}", highlight=False)
    open_in_editor(path)
    return 0
