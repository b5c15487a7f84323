"""Data models shared across ncy components."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class VaultEntry:
    """A named vault root from the configuration."""

    name: str
    directory: Path


@dataclass(frozen=True)
class NoteRecord:
    """A note found while indexing a vault."""

    title: str  # extracted from content, not the filename
    path: Path


@dataclass(frozen=True)
class ParsedReference:
    """A `title @ project +vault` argument split into its parts."""

    title: str
    project: str = ""  # empty means the vault root
    vault: str | None = None  # None means "use the default vault"
