"""New command - create a note from a `title @ project +vault` reference."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from ..config import load_config
from ..launch import editor_command, open_in_editor
from ..notes.storage import create_note
from ..reference import parse_reference
from ..vault.registry import resolve_vault


def run_new(
    config_dir: Path | None,
    raw: str,
    *,
    vault: str | None = None,
    external: bool = False,
) -> int:
    """Create a note and open it; in external mode print its path instead.

    A `+vault` in the reference wins over `vault`, which wins over the
    configured default vault.
    """
    ref = parse_reference(raw)
    config = load_config(config_dir)

    _, root = resolve_vault(config, ref.vault or vault)
    path = create_note(ref.title, root, ref.project).resolve()

    if external:
        print(path)
        return 0

    console = Console(stderr=True)
    console.print(f"Created note: {ref.title} in {path}", highlight=False)
    console.print(f"Opening note with {editor_command()[0]}", highlight=False)
    open_in_editor(path)
    return 0
