"""
Launching the user's editor and file manager.

Both calls block until the child exits. There is no timeout: a child that never
exits keeps ncy waiting.
"""

from __future__ import annotations

import logging
import os
import platform
import shlex
import subprocess
from pathlib import Path

from .errors import ExternalCommandError

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "nano"

# Tried in order on Linux and other Unix-like systems.
UNIX_FILE_MANAGERS = ("xdg-open", "nautilus", "dolphin", "thunar")


def editor_command() -> list[str]:
    """$EDITOR split into argv, or the default editor."""
    editor = os.environ.get("EDITOR", "").strip()
    return shlex.split(editor) if editor else [DEFAULT_EDITOR]


def open_in_editor(path: Path) -> None:
    """Open `path` in the user's editor and wait for it to exit."""
    argv = editor_command()
    logger.debug(f"Running editor: {argv} {path}")
    try:
        result = subprocess.run([*argv, str(path)], check=False)
    except OSError as e:
        raise ExternalCommandError(f"Failed to open editor '{argv[0]}' for {path}: {e}") from e

    if result.returncode != 0:
        raise ExternalCommandError(
            f"Editor exited with non-zero status {result.returncode}",
            returncode=result.returncode,
        )


def file_manager_commands(system: str | None = None) -> tuple[str, ...]:
    system = (system or platform.system()).lower()
    if system == "darwin":
        return ("open",)
    if system == "windows":
        return ("explorer",)
    return UNIX_FILE_MANAGERS


def open_directory(directory: Path, system: str | None = None) -> None:
    """Show `directory` in the host's file manager."""
    candidates = file_manager_commands(system)
    for command in candidates:
        try:
            result = subprocess.run([command, str(directory)], check=False)
        except OSError:
            logger.debug(f"File manager '{command}' could not be started")
            continue

        if result.returncode != 0:
            raise ExternalCommandError(
                f"File manager '{command}' exited with non-zero status {result.returncode}",
                returncode=result.returncode,
            )
        return

    raise ExternalCommandError(
        f"Failed to open {directory} with any known file manager ({', '.join(candidates)})"
    )
