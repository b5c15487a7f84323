"""fzf-backed picker for use from editors and other tools."""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

from ..errors import ExternalCommandError
from .base import Layout

logger = logging.getLogger(__name__)

FZF_INLINE_OPTIONS = ("--no-mouse", "--height=40%", "--layout=reverse", "--border")
FZF_FULLSCREEN_OPTIONS = ("--no-mouse", "--border")


@contextmanager
def staged_titles(titles: Sequence[str]) -> Iterator[Path]:
    """Write titles newline-joined to a temp file; the file is removed on exit."""
    fd, name = tempfile.mkstemp(prefix="ncy_titles_", suffix=".txt")
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("".join(f"{title}\n" for title in titles))
        yield path
    finally:
        path.unlink(missing_ok=True)


class FzfPicker:
    """Run fzf as a child process with the titles on its stdin."""

    def __init__(self, executable: str = "fzf", options: Sequence[str] = FZF_INLINE_OPTIONS):
        self.executable = executable
        self.options = tuple(options)

    @classmethod
    def with_layout(cls, layout: Layout) -> "FzfPicker":
        if layout == "fullscreen":
            return cls(options=FZF_FULLSCREEN_OPTIONS)
        return cls(options=FZF_INLINE_OPTIONS)

    def pick(self, titles: Sequence[str]) -> str | None:
        if not titles:
            return None

        with staged_titles(titles) as staging, staging.open("rb") as stdin:
            try:
                result = subprocess.run(
                    [self.executable, *self.options],
                    stdin=stdin,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.DEVNULL,
                    check=False,
                )
            except OSError as e:
                raise ExternalCommandError(
                    f"Failed to spawn {self.executable} process. Is {self.executable} installed?"
                ) from e

        if result.returncode != 0:
            # 1 = no match, 130 = escape / Ctrl-C
            logger.debug(f"{self.executable} exited with status {result.returncode}")
            return None

        selected = result.stdout.decode("utf-8", errors="replace").strip()
        return selected or None
