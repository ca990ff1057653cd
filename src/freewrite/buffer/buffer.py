"""High-level buffer façade combining document, selection state, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from freewrite.runtime import telemetry

from .document import TextDocument
from .state import BufferState, Selection
from .sync import BufferMirror
from .undo import UndoEntry, UndoTimeline
from .validation import clamp_selection, ensure_range


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    selection: Selection
    label: str


class TextBuffer:
    """The mutable document content plus the host's current selection."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[TextDocument] = None,
        state: Optional[BufferState] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or TextDocument()
        self.state = state or BufferState()
        self.undo_timeline = undo or UndoTimeline()
        self._transaction: Optional[Transaction] = None

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "TextBuffer":
        return cls(name=name, document=TextDocument.from_text(text))

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def version(self) -> int:
        return self.document.version

    @property
    def dirty(self) -> bool:
        return self.document.dirty

    @property
    def selection(self) -> Selection:
        return self.state.selection

    def length(self) -> int:
        return self.document.length

    def substring(self, location: int, length: int) -> str:
        return self.document.substring(location, length)

    def select(self, selection: Selection) -> Selection:
        """Store ``selection`` after clamping it to the current bounds."""

        clamped = clamp_selection(selection, self.length())
        self.state.set_selection(clamped)
        return clamped

    def replace(
        self, location: int, length: int, text: str, *, label: str = "replace"
    ) -> BufferDelta:
        """Replace ``[location, location + length)`` with ``text``.

        The range is validated before anything changes. The selection
        collapses to the end of the inserted text.
        """

        ensure_range(self.length(), location, length)
        if self._transaction is not None:
            self._apply(location, length, text)
            return self._delta(self._transaction.label)

        with Transaction(self, label):
            self._apply(location, length, text)
        return self._delta(label)

    def transaction(self, label: str) -> "Transaction":
        """Group several ``replace`` calls into a single undo entry."""

        return Transaction(self, label)

    def set_text(self, text: str, *, label: str = "user_edit") -> Optional[BufferDelta]:
        """Swap in a full-text edit coming from the host; no-op if unchanged."""

        if text == self.text:
            return None
        with Transaction(self, label):
            self.document = TextDocument(
                text=text, version=self.document.version + 1, dirty=True
            )
            self.select(self.state.selection)
        return self._delta(label)

    def load_content(self, text: str) -> BufferDelta:
        """Programmatic load: resets history and does not mark the buffer dirty."""

        with telemetry.span(
            "buffer::load_content",
            component="buffer",
            metadata={"buffer": self.name, "length": len(text)},
        ):
            self.document = self.document.reload(text)
            self.state.set_caret(0)
            self.undo_timeline.clear()
        return self._delta("load_content")

    def mark_clean(self) -> None:
        self.document.dirty = False

    def undo(self) -> Optional[BufferDelta]:
        entry = self.undo_timeline.undo()
        if entry is None:
            return None
        self._restore(entry.before_text, entry.selection_before)
        return self._delta(f"undo::{entry.label}")

    def redo(self) -> Optional[BufferDelta]:
        entry = self.undo_timeline.redo()
        if entry is None:
            return None
        self._restore(entry.after_text, entry.selection_after)
        return self._delta(f"redo::{entry.label}")

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.document.text,
            selection=self.state.selection,
            version=self.document.version,
            attributes=dict(attributes or {}),
        )

    def _apply(self, location: int, length: int, text: str) -> None:
        self.document = self.document.replace(location, length, text)
        self.state.set_caret(location + len(text))

    def _restore(self, text: str, selection: Selection) -> None:
        with telemetry.span(
            "buffer::restore", component="buffer", metadata={"buffer": self.name}
        ):
            self.document = TextDocument(
                text=text, version=self.document.version + 1, dirty=True
            )
            self.select(selection)

    def _delta(self, label: str) -> BufferDelta:
        return BufferDelta(
            version=self.document.version,
            text=self.document.text,
            selection=self.state.selection,
            label=label,
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Records one undo entry for everything changed inside the block.

    If the block raises, the document and selection are rolled back.
    Nested transactions fold into the outermost one.
    """

    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._before_document: Optional[TextDocument] = None
        self._before_selection = Selection()
        self._outer = False

    def __enter__(self) -> "Transaction":
        if self.buffer._transaction is not None:
            return self
        self._outer = True
        self.buffer._transaction = self
        self._before_document = self.buffer.document
        self._before_selection = self.buffer.state.selection
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self) -> None:
        before = self._before_document
        assert before is not None
        after_text = self.buffer.document.text
        if after_text == before.text:
            return
        self.buffer.undo_timeline.push(
            UndoEntry(
                label=self.label,
                before_text=before.text,
                after_text=after_text,
                selection_before=self._before_selection,
                selection_after=self.buffer.state.selection,
            )
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self._outer:
            return False
        try:
            if exc_type is None:
                self.commit()
            elif self._before_document is not None:
                self.buffer.document = self._before_document
                self.buffer.state.set_selection(self._before_selection)
        finally:
            self.buffer._transaction = None
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["TextBuffer", "BufferDelta", "Transaction"]
