"""Selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Selection:
    """A caret (``length == 0``) or a range of ``length`` code points."""

    location: int = 0
    length: int = 0

    @classmethod
    def caret(cls, offset: int) -> "Selection":
        return cls(offset, 0)

    @classmethod
    def between(cls, start: int, end: int) -> "Selection":
        if start > end:
            start, end = end, start
        return cls(start, end - start)

    @property
    def end(self) -> int:
        return self.location + self.length

    @property
    def is_caret(self) -> bool:
        return self.length == 0


@dataclass(slots=True)
class BufferState:
    """The mutable selection of a buffer."""

    selection: Selection = Selection()

    def set_selection(self, selection: Selection) -> None:
        self.selection = selection

    def set_caret(self, offset: int) -> None:
        self.selection = Selection.caret(offset)
