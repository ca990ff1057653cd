"""Document session: the open buffer, its file, and the find panel state."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import NoReturn, Optional

from freewrite.buffer import BufferDelta, Selection, TextBuffer
from freewrite.runtime import telemetry
from freewrite.search import DocumentStatistics, FindState, compute_statistics

from .events import EventBus

LOGGER_NAME = "freewrite.session"
TEXT_SUFFIX = ".txt"
UNTITLED_NAME = "Untitled.txt"


class DocumentIOError(RuntimeError):
    """Loading or saving failed; the in-memory document is untouched."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class SaveTargetRequired(DocumentIOError):
    """``save_document`` was called before the document had a file."""


def with_text_suffix(path: Path) -> Path:
    if path.suffix.lower() == TEXT_SUFFIX:
        return path
    return path.with_name(path.name + TEXT_SUFFIX)


class DocumentSession:
    """Owns a single TextBuffer and ties it to a file on disk."""

    def __init__(
        self,
        *,
        buffer: Optional[TextBuffer] = None,
        path: Optional[Path] = None,
        find_state: Optional[FindState] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.buffer = buffer or TextBuffer()
        self.path = path
        self.find_state = find_state or FindState()
        self.bus = bus or EventBus()
        self.logger = telemetry.get_logger(LOGGER_NAME)

    @property
    def has_unsaved_changes(self) -> bool:
        return self.buffer.dirty

    @property
    def display_name(self) -> str:
        return self.path.name if self.path else UNTITLED_NAME

    @property
    def selection(self) -> Selection:
        return self.buffer.selection

    def new_document(self) -> None:
        self.buffer.load_content("")
        self.path = None
        self.bus.emit("document.new", None)

    def open_document(self, path: Path | str) -> None:
        target = Path(path)
        with telemetry.span(
            "session::open_document",
            logger_name=LOGGER_NAME,
            component="session",
            metadata={"path": str(target)},
        ):
            try:
                text = target.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                self._io_failure("open", target, exc)
            self.buffer.load_content(text)
            self.path = target
        self.bus.emit("document.open", target)

    def save_document(self) -> bool:
        """Write to the current file; returns ``False`` when there was nothing to do."""

        if self.path is None:
            raise SaveTargetRequired("Document has no file yet", path=None)
        if not self.has_unsaved_changes:
            self.logger.debug("save skipped: no changes")
            return False
        self._write(self.path)
        return True

    def save_document_as(self, path: Path | str) -> Path:
        target = with_text_suffix(Path(path))
        self._write(target)
        return target

    def apply_user_edit(self, text: str) -> Optional[BufferDelta]:
        """Accept a full-text edit typed or pasted in the host widget."""

        return self.buffer.set_text(text)

    def select(self, selection: Selection) -> Selection:
        return self.buffer.select(selection)

    def statistics(self) -> DocumentStatistics:
        stats = compute_statistics(self.buffer.text)
        telemetry.record_event(
            "session.statistics",
            level="debug",
            data={"characters": stats.characters, "words": stats.words},
            logger_name=LOGGER_NAME,
        )
        return stats

    def _write(self, target: Path) -> None:
        with telemetry.span(
            "session::save_document",
            logger_name=LOGGER_NAME,
            component="session",
            metadata={"path": str(target)},
        ):
            temp_name: Optional[str] = None
            try:
                # Same directory as the target so os.replace stays atomic.
                with tempfile.NamedTemporaryFile(
                    mode="w",
                    encoding="utf-8",
                    dir=target.parent,
                    suffix=target.suffix,
                    delete=False,
                ) as handle:
                    temp_name = handle.name
                    handle.write(self.buffer.text)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(temp_name, target)
            except (OSError, UnicodeError) as exc:
                if temp_name is not None and os.path.exists(temp_name):
                    os.remove(temp_name)
                self._io_failure("save", target, exc)
            self.path = target
            self.buffer.mark_clean()
        self.bus.emit("document.save", target)

    def _io_failure(
        self, operation: str, target: Path, exc: Exception
    ) -> NoReturn:
        telemetry.record_event(
            f"session.{operation}.failed",
            level="error",
            data={"path": str(target), "error": str(exc)},
            logger_name=LOGGER_NAME,
        )
        self.bus.emit("document.error", {"operation": operation, "path": target})
        raise DocumentIOError(
            f"Could not {operation} {target}: {exc}", path=target
        ) from exc


__all__ = [
    "DocumentSession",
    "DocumentIOError",
    "SaveTargetRequired",
    "with_text_suffix",
]
