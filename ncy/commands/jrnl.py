"""Jrnl command - open or add to today's journal note."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from ..config import load_config
from ..journal import write_journal
from ..launch import editor_command, open_in_editor
from ..vault.registry import resolve_vault


def run_jrnl(
    config_dir: Path | None,
    text: str = "",
    *,
    vault: str | None = None,
    external: bool = False,
) -> int:
    """
    Create today's journal note if needed, then append `text` or open it.

    Without text the note is opened in $EDITOR. With text the entry is appended
    and the editor is not started. In external mode the editor never starts and
    the note's absolute path is printed on stdout.
    """
    config = load_config(config_dir)
    _, root = resolve_vault(config, vault)

    entry = write_journal(root, text or None)
    path = entry.path.resolve()

    if external:
        print(path)
        return 0

    console = Console(stderr=True)
    if entry.created:
        console.print(f"Created new journal entry for today ({entry.key}).", highlight=False)

    if entry.appended:
        if not entry.created:
            console.print(f"Added entry to today's journal ({entry.key}).", highlight=False)
        return 0

    if not entry.created:
        console.print(f"Opening today's journal entry ({entry.key}).", highlight=False)
    console.print(f"Opening journal with {editor_command()[0]}", highlight=False)
    open_in_editor(path)
    return 0
