"""Dir command - pick a note and show its directory."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from ..config import load_config
from ..launch import open_directory
from ..pickers import Picker, get_picker
from .common import choose_note


def run_dir(
    config_dir: Path | None,
    *,
    vault: str | None = None,
    external: bool = False,
    picker: Picker | None = None,
) -> int:
    """Open the folder holding the picked note; in external mode print it instead."""
    config = load_config(config_dir)
    picker = picker or get_picker(external, "fullscreen")

    note = choose_note(config, picker, vault)
    directory = note.path.resolve().parent

    if external:
        print(directory)
        return 0

    open_directory(directory)
    Console(stderr=True).print(f"Opening directory for note: {note.title}", highlight=False)
    return 0
