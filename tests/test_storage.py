"""Tests for note storage primitives."""

from datetime import date
from pathlib import Path

import frontmatter
import pytest

from ncy.errors import NoteExistsError, NoteNotFound, NoteReadError, NoteStorageError
from ncy.notes.storage import (
    append_to_note,
    create_note,
    get_title,
    list_notes,
    resolve_path,
    slugify,
)


def test_slugify():
    assert slugify("My New Note") == "my-new-note"
    assert slugify("10-18-2026") == "10-18-2026"
    assert slugify("  C++ / Rust?  ") == "c-rust"
    assert slugify("???") == "untitled"


def test_list_notes_recurses_and_skips_hidden(vault_root: Path, make_note):
    make_note(vault_root / "b.md", "B")
    make_note(vault_root / "a.md", "A")
    make_note(vault_root / "projects" / "research" / "c.md", "C")
    make_note(vault_root / ".obsidian" / "hidden.md", "Hidden")
    (vault_root / "notes.txt").write_text("not markdown", encoding="utf-8")

    rel = [p.relative_to(vault_root).as_posix() for p in list_notes(vault_root)]
    assert rel == ["a.md", "b.md", "projects/research/c.md"]


def test_title_from_frontmatter(vault_root: Path, make_note):
    path = make_note(vault_root / "file-name.md", "Frontmatter Title", "# Heading Title")
    assert get_title(path) == "Frontmatter Title"


def test_title_from_first_heading(vault_root: Path, make_note):
    path = make_note(vault_root / "file-name.md", None, "intro\n\n# Heading Title\n\n# Second")
    assert get_title(path) == "Heading Title"


def test_title_falls_back_to_stem(vault_root: Path, make_note):
    path = make_note(vault_root / "file-name.md", None, "no headings here")
    assert get_title(path) == "file-name"


def test_title_of_unreadable_note(vault_root: Path):
    path = vault_root / "broken.md"
    path.write_text("---\ntitle: [unclosed\n---\nbody\n", encoding="utf-8")
    with pytest.raises(NoteReadError) as exc:
        get_title(path)
    assert exc.value.path == path


def test_create_note_writes_frontmatter_only(vault_root: Path):
    path = create_note("My New Note", vault_root, "projects/research", today=date(2026, 10, 18))

    assert path == vault_root.resolve() / "projects" / "research" / "my-new-note.md"
    post = frontmatter.load(path)
    assert post.metadata == {"title": "My New Note", "date": "2026-10-18"}
    assert post.content == ""
    assert get_title(path) == "My New Note"


def test_create_note_in_vault_root(vault_root: Path):
    path = create_note("Top Level", vault_root)
    assert path.parent == vault_root.resolve()


def test_create_note_refuses_to_overwrite(vault_root: Path):
    create_note("Twice", vault_root)
    with pytest.raises(NoteExistsError):
        create_note("Twice", vault_root)


def test_create_note_outside_vault(vault_root: Path):
    with pytest.raises(NoteStorageError):
        create_note("Escape", vault_root, "../elsewhere")


def test_resolve_path_by_title(vault_root: Path, make_note):
    make_note(vault_root / "one.md", "First")
    second = make_note(vault_root / "sub" / "two.md", "Second")
    assert resolve_path("Second", vault_root) == second


def test_resolve_path_skips_unreadable_notes(vault_root: Path, make_note):
    (vault_root / "a-broken.md").write_text("---\ntitle: [unclosed\n---\n", encoding="utf-8")
    good = make_note(vault_root / "b.md", "Good")
    assert resolve_path("Good", vault_root) == good


def test_resolve_path_not_found(vault_root: Path):
    with pytest.raises(NoteNotFound):
        resolve_path("Nothing", vault_root)


def test_append_to_note(vault_root: Path, make_note):
    path = make_note(vault_root / "log.md", "Log", "X")
    append_to_note("Log", vault_root, "\n\n--\nY")
    assert path.read_text(encoding="utf-8").endswith("X\n\n--\nY")


def test_append_to_missing_note(vault_root: Path):
    with pytest.raises(NoteNotFound):
        append_to_note("Missing", vault_root, "text")
