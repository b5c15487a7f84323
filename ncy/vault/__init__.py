"""Vault lookup and indexing."""

from .index import IndexPolicy, TitleIndex, build_index, index_notes, load_title_index, scan_notes
from .registry import find_vault_directory, list_vaults, resolve_vault, resolve_vault_name, validate_vault_exists

__all__ = [
    "IndexPolicy",
    "TitleIndex",
    "build_index",
    "index_notes",
    "load_title_index",
    "scan_notes",
    "find_vault_directory",
    "list_vaults",
    "resolve_vault",
    "resolve_vault_name",
    "validate_vault_exists",
]
