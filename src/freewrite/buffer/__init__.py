"""Text buffer, selection state, and undo history."""

from .buffer import BufferDelta, TextBuffer, Transaction
from .document import TextDocument
from .state import BufferState, Selection
from .sync import BufferMirror, BufferRangeError
from .undo import UndoEntry, UndoTimeline
from .validation import clamp_selection, ensure_range

__all__ = [
    "TextBuffer",
    "TextDocument",
    "BufferState",
    "Selection",
    "UndoTimeline",
    "UndoEntry",
    "BufferDelta",
    "Transaction",
    "BufferMirror",
    "BufferRangeError",
    "clamp_selection",
    "ensure_range",
]
