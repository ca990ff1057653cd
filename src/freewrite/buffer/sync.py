"""Boundary types shared between buffers and host adapters."""

from __future__ import annotations

from dataclasses import dataclass, field

from .state import Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    text: str
    selection: Selection
    version: int = 0
    attributes: dict[str, str] = field(default_factory=dict)


class BufferRangeError(RuntimeError):
    """Raised when a range falls outside the buffer bounds."""

    def __init__(
        self, message: str, *, location: int | None = None, length: int | None = None
    ) -> None:
        super().__init__(message)
        self.location = location
        self.length = length
