"""
Daily journal notes.

Today's journal note is titled with the local date (MM-DD-YYYY) and lives in the
`journal` project of the vault. It is either Missing or Present; a run moves it
Missing -> Present by creating it (frontmatter only) and appends entries to it
once Present, each entry prefixed with a `--` separator line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from .errors import NoteNotFound
from .notes.storage import append_to_note, create_note, resolve_path

logger = logging.getLogger(__name__)

JOURNAL_PROJECT = "journal"
JOURNAL_KEY_FORMAT = "%m-%d-%Y"
ENTRY_SEPARATOR = "\n\n--\n"


class JournalState(str, Enum):
    MISSING = "missing"
    PRESENT = "present"


@dataclass(frozen=True)
class JournalEntry:
    """Outcome of one journal run."""

    key: str
    path: Path
    state_before: JournalState
    appended: bool = False

    @property
    def created(self) -> bool:
        return self.state_before is JournalState.MISSING


def journal_key(now: datetime | None = None) -> str:
    """Title of the journal note for the local calendar day."""
    return (now or datetime.now()).strftime(JOURNAL_KEY_FORMAT)


def probe(vault_root: Path, key: str) -> tuple[JournalState, Path | None]:
    """Check once whether the journal note for `key` exists."""
    try:
        return JournalState.PRESENT, resolve_path(key, vault_root)
    except NoteNotFound:
        return JournalState.MISSING, None


def ensure_journal(vault_root: Path, key: str) -> tuple[Path, JournalState]:
    """Path of the journal note for `key`, creating it when missing.

    Returns the path and the state observed before any creation.
    """
    state, path = probe(vault_root, key)
    if state is JournalState.PRESENT and path is not None:
        logger.debug(f"Journal note {key} exists at {path}")
        return path, state

    path = create_note(key, vault_root, JOURNAL_PROJECT)
    logger.debug(f"Created journal note {key} at {path}")
    return path, JournalState.MISSING


def write_journal(vault_root: Path, text: str | None = None, now: datetime | None = None) -> JournalEntry:
    """Make sure today's note exists, then append `text` if any was given."""
    key = journal_key(now)
    path, state_before = ensure_journal(vault_root, key)

    if not text:
        return JournalEntry(key=key, path=path, state_before=state_before)

    append_to_note(key, vault_root, f"{ENTRY_SEPARATOR}{text}")
    return JournalEntry(key=key, path=path, state_before=state_before, appended=True)
