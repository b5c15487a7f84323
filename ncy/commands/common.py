"""Shared steps for the note-picking commands."""

from __future__ import annotations

import logging

from ..config import Config
from ..errors import ConfigurationError, SelectionCancelled
from ..models import NoteRecord
from ..pickers import Picker
from ..vault.index import IndexPolicy, load_title_index
from ..vault.registry import resolve_vault

logger = logging.getLogger(__name__)


def index_policy(config: Config) -> IndexPolicy:
    """`index_policy` from the configuration (abort or skip), default abort."""
    value = config.get("index_policy")
    if value is None:
        return IndexPolicy.ABORT
    try:
        return IndexPolicy(str(value).lower())
    except ValueError:
        raise ConfigurationError(
            f"Invalid index_policy '{value}' (expected one of: {', '.join(p.value for p in IndexPolicy)})"
        ) from None


def choose_note(config: Config, picker: Picker, vault: str | None = None) -> NoteRecord:
    """Index the vault, let the user pick a title, and map it back to a note."""
    name, root = resolve_vault(config, vault)
    index = load_title_index(name, root, index_policy(config))

    title = picker.pick(index.titles)
    if title is None:
        raise SelectionCancelled()

    logger.debug(f"Picked '{title}' from {len(index)} notes in vault '{name}'")
    return NoteRecord(title=title, path=index.resolve(title))
