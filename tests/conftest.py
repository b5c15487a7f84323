"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Callable, Sequence

import pytest
import yaml

from ncy.config import Config, load_config


@pytest.fixture
def vault_root(tmp_path: Path) -> Path:
    """Root directory of the default test vault."""
    root = tmp_path / "vaults" / "personal"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def work_root(tmp_path: Path) -> Path:
    """Root directory of a second vault."""
    root = tmp_path / "vaults" / "work"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def config_dir(tmp_path: Path, vault_root: Path, work_root: Path) -> Path:
    """Config directory with two vaults, `personal` as the default."""
    conf = tmp_path / "conf"
    conf.mkdir()
    (conf / "config.yaml").write_text(
        yaml.safe_dump(
            {
                "default_vault": "personal",
                "vaults": [
                    {"name": "personal", "vault_directory": str(vault_root)},
                    {"name": "work", "vault_directory": str(work_root)},
                ],
            },
            sort_keys=False,
        ),
        encoding="utf-8",
    )
    return conf


@pytest.fixture
def config(config_dir: Path) -> Config:
    return load_config(config_dir)


@pytest.fixture
def make_note() -> Callable[..., Path]:
    """Write a markdown note with an optional frontmatter title."""

    def _make(path: Path, title: str | None = None, body: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = []
        if title is not None:
            lines += ["---", f"title: {title}", "---", ""]
        lines.append(body)
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _make


class StubPicker:
    """Picker returning a canned answer and recording what it was shown."""

    def __init__(self, answer: str | None):
        self.answer = answer
        self.calls: list[list[str]] = []

    def pick(self, titles: Sequence[str]) -> str | None:
        self.calls.append(list(titles))
        return self.answer


@pytest.fixture
def stub_picker() -> Callable[[str | None], StubPicker]:
    return StubPicker
