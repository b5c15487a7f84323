"""Markdown note storage."""

from .storage import append_to_note, create_note, get_title, list_notes, resolve_path, slugify

__all__ = [
    "append_to_note",
    "create_note",
    "get_title",
    "list_notes",
    "resolve_path",
    "slugify",
]
