from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from freewrite.buffer import Selection
from freewrite.session import (
    DocumentIOError,
    DocumentSession,
    SaveTargetRequired,
    with_text_suffix,
)


def record_events(session: DocumentSession, *names: str) -> List[tuple[str, object]]:
    seen: List[tuple[str, object]] = []
    for name in names:
        session.bus.subscribe(
            name, lambda payload, name=name: seen.append((name, payload))
        )
    return seen


def test_open_document_loads_clean_buffer(tmp_path: Path) -> None:
    target = tmp_path / "draft.txt"
    target.write_text("first line\nsecond line", encoding="utf-8")
    session = DocumentSession()
    events = record_events(session, "document.open")

    session.open_document(target)

    assert session.buffer.text == "first line\nsecond line"
    assert session.path == target
    assert session.has_unsaved_changes is False
    assert session.display_name == "draft.txt"
    assert events == [("document.open", target)]


def test_open_failure_keeps_current_document(tmp_path: Path) -> None:
    session = DocumentSession()
    session.apply_user_edit("unsaved work")
    events = record_events(session, "document.error")

    with pytest.raises(DocumentIOError) as excinfo:
        session.open_document(tmp_path / "missing.txt")

    assert excinfo.value.path == tmp_path / "missing.txt"
    assert session.buffer.text == "unsaved work"
    assert session.path is None
    assert session.has_unsaved_changes is True
    assert events and events[0][0] == "document.error"


def test_open_rejects_non_utf8(tmp_path: Path) -> None:
    target = tmp_path / "latin1.txt"
    target.write_bytes(b"caf\xe9")
    session = DocumentSession()

    with pytest.raises(DocumentIOError):
        session.open_document(target)


def test_save_without_path_requires_save_as() -> None:
    session = DocumentSession()
    session.apply_user_edit("text")

    with pytest.raises(SaveTargetRequired):
        session.save_document()


def test_save_as_appends_txt_suffix(tmp_path: Path) -> None:
    session = DocumentSession()
    session.apply_user_edit("notes")

    written = session.save_document_as(tmp_path / "notes")

    assert written == tmp_path / "notes.txt"
    assert written.read_text(encoding="utf-8") == "notes"
    assert session.path == written
    assert session.has_unsaved_changes is False


def test_with_text_suffix_is_case_insensitive() -> None:
    assert with_text_suffix(Path("a/NOTES.TXT")) == Path("a/NOTES.TXT")
    assert with_text_suffix(Path("a/notes.md")) == Path("a/notes.md.txt")


def test_save_skips_when_nothing_changed(tmp_path: Path) -> None:
    target = tmp_path / "same.txt"
    target.write_text("same", encoding="utf-8")
    session = DocumentSession()
    session.open_document(target)

    assert session.save_document() is False


def test_save_writes_edits_and_clears_dirty_flag(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("old", encoding="utf-8")
    session = DocumentSession()
    session.open_document(target)
    events = record_events(session, "document.save")

    session.apply_user_edit("new text ✓")
    assert session.has_unsaved_changes is True

    assert session.save_document() is True
    assert target.read_text(encoding="utf-8") == "new text ✓"
    assert session.has_unsaved_changes is False
    assert events == [("document.save", target)]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.txt"]


def test_save_failure_preserves_state(tmp_path: Path) -> None:
    session = DocumentSession()
    session.apply_user_edit("precious")

    with pytest.raises(DocumentIOError):
        session.save_document_as(tmp_path / "no-such-dir" / "out.txt")

    assert session.buffer.text == "precious"
    assert session.path is None
    assert session.has_unsaved_changes is True


def test_unencodable_text_fails_without_leftovers(tmp_path: Path) -> None:
    session = DocumentSession()
    session.apply_user_edit("bad \ud800")
    events = record_events(session, "document.error", "document.save")

    with pytest.raises(DocumentIOError):
        session.save_document_as(tmp_path / "out.txt")

    assert list(tmp_path.iterdir()) == []
    assert session.path is None
    assert session.has_unsaved_changes is True
    assert [name for name, _ in events] == ["document.error"]


def test_new_document_resets_everything(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("content", encoding="utf-8")
    session = DocumentSession()
    session.open_document(target)
    session.select(Selection(2, 3))

    session.new_document()

    assert session.buffer.text == ""
    assert session.path is None
    assert session.selection == Selection(0, 0)
    assert session.has_unsaved_changes is False
    assert session.display_name == "Untitled.txt"


def test_statistics_reads_current_content() -> None:
    session = DocumentSession()
    session.apply_user_edit("two words")

    stats = session.statistics()

    assert (stats.characters, stats.words) == (9, 2)
