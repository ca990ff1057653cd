"""Flat text storage for freewrite buffers."""

from __future__ import annotations

from dataclasses import dataclass

from .validation import ensure_range


@dataclass(slots=True)
class TextDocument:
    """Immutable-ish storage: edits return a new document with a bumped version.

    Offsets are indices into a Python ``str``, so a range can never split a
    code point.
    """

    text: str = ""
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(text=text, version=0, dirty=False)

    @property
    def length(self) -> int:
        return len(self.text)

    def substring(self, location: int, length: int) -> str:
        ensure_range(self.length, location, length)
        return self.text[location : location + length]

    def replace(self, location: int, length: int, text: str) -> "TextDocument":
        """Return a document with ``[location, location + length)`` replaced."""

        ensure_range(self.length, location, length)
        updated = self.text[:location] + text + self.text[location + length :]
        return TextDocument(text=updated, version=self.version + 1, dirty=True)

    def reload(self, text: str, *, dirty: bool = False) -> "TextDocument":
        """Return a document holding ``text`` wholesale."""

        return TextDocument(text=text, version=self.version + 1, dirty=dirty)
