"""Line/column resolution from flat buffer offsets."""

from __future__ import annotations

from dataclasses import dataclass

from freewrite.buffer import TextBuffer


@dataclass(frozen=True, slots=True)
class CursorPosition:
    line: int = 1
    column: int = 1

    @property
    def label(self) -> str:
        return f"Line: {self.line}, Col: {self.column}"


def resolve_position(buffer: TextBuffer, offset: int) -> CursorPosition:
    """Return the 1-based line and column of ``offset``.

    Only newlines strictly before ``offset`` count, so an offset sitting on a
    ``\\n`` still belongs to the line that newline ends. Offsets past the end
    are clamped to the buffer length.
    """

    text = buffer.text
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return CursorPosition(line=line, column=offset - line_start + 1)


__all__ = ["CursorPosition", "resolve_position"]
