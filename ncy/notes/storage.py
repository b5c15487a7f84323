"""
Note storage primitives.

Notes are markdown files with YAML frontmatter. A note's title comes from its
content (frontmatter `title`, else the first H1), never from the filename, so
lookups by title go through the files themselves.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path

import frontmatter
import yaml

from ..errors import NoteExistsError, NoteNotFound, NoteReadError, NoteStorageError

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"

_SLUG_UNSAFE = re.compile(r"[^a-z0-9._-]+")


def slugify(title: str) -> str:
    """Filename stem for a title."""
    slug = _SLUG_UNSAFE.sub("-", title.lower()).strip("-.")
    return slug or "untitled"


def list_notes(vault_root: Path) -> list[Path]:
    """All markdown notes under `vault_root`, in sorted order.

    Hidden directories (.git, .obsidian, ...) are not descended into.
    """
    notes = []
    for path in sorted(vault_root.rglob(f"*{NOTE_SUFFIX}")):
        rel = path.relative_to(vault_root)
        if any(part.startswith(".") for part in rel.parts[:-1]):
            continue
        if path.is_file():
            notes.append(path)
    return notes


def _title_from_content(content: str) -> str | None:
    for line in content.split("\n"):
        if line.startswith("# "):
            return line[2:].strip() or None
    return None


def get_title(path: Path) -> str:
    """Extract the title of a note: frontmatter title, first H1, or file stem."""
    try:
        post = frontmatter.load(path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise NoteReadError(path, str(e)) from e

    title = post.metadata.get("title")
    if title is not None and str(title).strip():
        return str(title).strip()

    return _title_from_content(post.content) or path.stem


def _project_dir(vault_root: Path, project: str) -> Path:
    root = vault_root.resolve()
    target = (root / project.strip("/")).resolve() if project else root
    if target != root and root not in target.parents:
        raise NoteStorageError(f"Project path '{project}' is outside the vault {vault_root}")
    return target


def create_note(title: str, vault_root: Path, project: str = "", *, today: date | None = None) -> Path:
    """Create a note containing only frontmatter and return its path."""
    directory = _project_dir(vault_root, project)
    path = directory / f"{slugify(title)}{NOTE_SUFFIX}"
    if path.exists():
        raise NoteExistsError(path)

    post = frontmatter.Post("", title=title, date=(today or date.today()).isoformat())
    try:
        directory.mkdir(parents=True, exist_ok=True)
        path.write_text(frontmatter.dumps(post) + "\n", encoding="utf-8")
    except OSError as e:
        raise NoteStorageError(f"Failed to create note '{title}' at {path}: {e}") from e

    logger.debug(f"Created note '{title}' at {path}")
    return path


def resolve_path(title: str, vault_root: Path) -> Path:
    """Path of the first note whose title is `title`.

    Notes that cannot be read are skipped here; this is an existence probe,
    not a listing.
    """
    for path in list_notes(vault_root):
        try:
            if get_title(path) == title:
                return path
        except NoteReadError as e:
            logger.debug(f"Skipping unreadable note during lookup: {e}")
    raise NoteNotFound(title, vault_root)


def append_to_note(title: str, vault_root: Path, text: str) -> Path:
    """Append `text` verbatim to the note titled `title`."""
    path = resolve_path(title, vault_root)
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise NoteStorageError(f"Failed to append to note '{title}' at {path}: {e}") from e

    logger.debug(f"Appended {len(text)} characters to {path}")
    return path
