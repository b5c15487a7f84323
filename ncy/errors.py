"""
Error taxonomy for ncy.

Every failure that reaches the command line derives from NcyError. The CLI
prints the message and exits with status 1; nothing is retried and nothing
already written to disk is rolled back.
"""

from __future__ import annotations

from pathlib import Path


class NcyError(Exception):
    """Base class for all errors surfaced to the user."""


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------


class ConfigurationError(NcyError):
    """Configuration is missing, malformed, or does not name a usable vault."""


class ConfigDirNotSet(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("NOTEMANCY_CONF_DIR environment variable is not set")


class ConfigNotFound(ConfigurationError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Configuration file not found at {path}. Run 'ncy init' first.")


class ConfigParseError(ConfigurationError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to parse YAML configuration {path}: {reason}")


class NoVaultsSection(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            "No 'vaults' section found in configuration. "
            "Please update your config.yaml to include a vaults section."
        )


class VaultNotFound(ConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Vault '{name}' not found in configuration. Please add it to your config.yaml file first."
        )


class NoDefaultVault(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            "No default vault set. Run 'ncy set <vault-name>' first or specify a vault with '+vault'."
        )


class VaultDirectoryMissing(ConfigurationError):
    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Directory for vault '{name}' does not exist: {path}")


# -----------------------------------------------------------------------------
# Indexing and selection
# -----------------------------------------------------------------------------


class NoNotesFound(NcyError):
    def __init__(self, vault_name: str) -> None:
        self.vault_name = vault_name
        super().__init__(f"No markdown notes found in vault: {vault_name}")


class SelectionCancelled(NcyError):
    def __init__(self) -> None:
        super().__init__("No note selected")


class SelectionResolutionError(NcyError):
    """A picked title has no entry in the index it was picked from."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"Could not find file path for note: {title}")


# -----------------------------------------------------------------------------
# Reference parsing
# -----------------------------------------------------------------------------


class ParseError(NcyError):
    """A note reference argument could not be parsed."""


class EmptyTitle(ParseError):
    def __init__(self, message: str = "Note title cannot be empty") -> None:
        super().__init__(message)


# -----------------------------------------------------------------------------
# Child processes
# -----------------------------------------------------------------------------


class ExternalCommandError(NcyError):
    """Spawning or running an editor, selector, or file manager failed."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        self.returncode = returncode
        super().__init__(message)


# -----------------------------------------------------------------------------
# Note storage
# -----------------------------------------------------------------------------


class NoteStorageError(NcyError):
    """A note could not be read, written, or located."""


class NoteNotFound(NoteStorageError):
    def __init__(self, title: str, vault_root: Path) -> None:
        self.title = title
        self.vault_root = vault_root
        super().__init__(f"No note titled '{title}' in {vault_root}")


class NoteExistsError(NoteStorageError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Note already exists: {path}")


class NoteReadError(NoteStorageError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read note {path}: {reason}")
