"""Note indexing: title -> path lookup for one vault."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from ..errors import NoNotesFound, NoteReadError, SelectionResolutionError, VaultDirectoryMissing
from ..models import NoteRecord
from ..notes.storage import get_title, list_notes

logger = logging.getLogger(__name__)


class IndexPolicy(str, Enum):
    """What to do when a single note cannot be read."""

    ABORT = "abort"
    SKIP = "skip"


@dataclass(frozen=True)
class IndexFailure:
    path: Path
    error: NoteReadError


@dataclass
class TitleIndex:
    """Mapping of note titles to paths.

    Titles are unique keys: when two notes share a title the one indexed last
    wins, and the path it replaced is kept in `shadowed`.
    """

    _paths: dict[str, Path] = field(default_factory=dict)
    shadowed: dict[str, list[Path]] = field(default_factory=dict)

    def add(self, record: NoteRecord) -> None:
        previous = self._paths.get(record.title)
        if previous is not None and previous != record.path:
            self.shadowed.setdefault(record.title, []).append(previous)
            logger.warning(f"Duplicate note title '{record.title}': {record.path} replaces {previous}")
        self._paths[record.title] = record.path

    @property
    def titles(self) -> list[str]:
        """Unique titles in first-indexed order."""
        return list(self._paths)

    def resolve(self, title: str) -> Path:
        try:
            return self._paths[title]
        except KeyError:
            raise SelectionResolutionError(title) from None

    def __contains__(self, title: object) -> bool:
        return title in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)


def scan_notes(vault_root: Path) -> list[NoteRecord | IndexFailure]:
    """Per-file indexing results in listing order; never raises for one bad note."""
    if not vault_root.is_dir():
        raise VaultDirectoryMissing(vault_root.name, vault_root)

    results: list[NoteRecord | IndexFailure] = []
    for path in list_notes(vault_root):
        try:
            results.append(NoteRecord(title=get_title(path), path=path))
        except NoteReadError as e:
            results.append(IndexFailure(path=path, error=e))
    return results


def index_notes(vault_root: Path, policy: IndexPolicy = IndexPolicy.ABORT) -> list[NoteRecord]:
    """All readable notes in the vault.

    With IndexPolicy.ABORT (the default) the first unreadable note aborts the
    whole operation; with IndexPolicy.SKIP it is logged and left out.
    """
    records: list[NoteRecord] = []
    for result in scan_notes(vault_root):
        if isinstance(result, IndexFailure):
            if policy is IndexPolicy.ABORT:
                raise result.error
            logger.warning(f"Skipping unreadable note: {result.error}")
            continue
        records.append(result)

    logger.debug(f"Indexed {len(records)} notes under {vault_root}")
    return records


def build_index(records: Iterable[NoteRecord]) -> TitleIndex:
    index = TitleIndex()
    for record in records:
        index.add(record)
    return index


def load_title_index(
    vault_name: str,
    vault_root: Path,
    policy: IndexPolicy = IndexPolicy.ABORT,
) -> TitleIndex:
    """Index a vault, treating an empty vault as NoNotesFound."""
    if not vault_root.is_dir():
        raise VaultDirectoryMissing(vault_name, vault_root)

    index = build_index(index_notes(vault_root, policy))
    if not len(index):
        raise NoNotesFound(vault_name)
    return index
