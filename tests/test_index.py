"""Tests for vault indexing and the title index."""

from pathlib import Path

import pytest

from ncy.errors import NoNotesFound, NoteReadError, SelectionResolutionError, VaultDirectoryMissing
from ncy.models import NoteRecord
from ncy.vault.index import (
    IndexFailure,
    IndexPolicy,
    build_index,
    index_notes,
    load_title_index,
    scan_notes,
)


def _write_broken(path: Path) -> Path:
    path.write_text("---\ntitle: [unclosed\n---\n", encoding="utf-8")
    return path


def test_index_notes_in_listing_order(vault_root: Path, make_note):
    make_note(vault_root / "b.md", "Bravo")
    make_note(vault_root / "a.md", "Alpha")
    make_note(vault_root / "sub" / "c.md", None, "# Charlie")

    records = index_notes(vault_root)
    assert [r.title for r in records] == ["Alpha", "Bravo", "Charlie"]
    assert records[2].path == vault_root / "sub" / "c.md"


def test_duplicate_titles_last_indexed_wins(vault_root: Path, make_note):
    first = make_note(vault_root / "a.md", "Same")
    second = make_note(vault_root / "b.md", "Same")
    make_note(vault_root / "c.md", "Other")

    index = build_index(index_notes(vault_root))
    assert index.titles == ["Same", "Other"]
    assert index.resolve("Same") == second
    assert index.shadowed == {"Same": [first]}


def test_duplicate_titles_are_logged(vault_root: Path, make_note, caplog):
    make_note(vault_root / "a.md", "Same")
    make_note(vault_root / "b.md", "Same")
    with caplog.at_level("WARNING", logger="ncy"):
        build_index(index_notes(vault_root))
    assert "Duplicate note title 'Same'" in caplog.text


def test_abort_policy_fails_on_one_bad_note(vault_root: Path, make_note):
    make_note(vault_root / "a.md", "Fine")
    broken = _write_broken(vault_root / "b.md")
    make_note(vault_root / "c.md", "Also fine")

    with pytest.raises(NoteReadError) as exc:
        index_notes(vault_root)
    assert exc.value.path == broken


def test_skip_policy_leaves_bad_notes_out(vault_root: Path, make_note):
    make_note(vault_root / "a.md", "Fine")
    _write_broken(vault_root / "b.md")
    make_note(vault_root / "c.md", "Also fine")

    records = index_notes(vault_root, IndexPolicy.SKIP)
    assert [r.title for r in records] == ["Fine", "Also fine"]


def test_scan_notes_reports_each_file(vault_root: Path, make_note):
    make_note(vault_root / "a.md", "Fine")
    broken = _write_broken(vault_root / "b.md")

    results = scan_notes(vault_root)
    assert isinstance(results[0], NoteRecord)
    assert isinstance(results[1], IndexFailure)
    assert results[1].path == broken


def test_empty_vault_is_no_notes_found(vault_root: Path):
    with pytest.raises(NoNotesFound) as exc:
        load_title_index("personal", vault_root)
    assert exc.value.vault_name == "personal"


def test_all_skipped_is_no_notes_found(vault_root: Path):
    _write_broken(vault_root / "only.md")
    with pytest.raises(NoNotesFound):
        load_title_index("personal", vault_root, IndexPolicy.SKIP)


def test_missing_vault_directory(tmp_path: Path):
    with pytest.raises(VaultDirectoryMissing):
        load_title_index("ghost", tmp_path / "ghost")


def test_resolve_unknown_title():
    index = build_index([NoteRecord("Known", Path("/vault/known.md"))])
    assert "Known" in index
    assert len(index) == 1
    with pytest.raises(SelectionResolutionError):
        index.resolve("Unknown")
