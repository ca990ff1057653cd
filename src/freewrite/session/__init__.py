"""Document session and its event bus."""

from .document import (
    DocumentIOError,
    DocumentSession,
    SaveTargetRequired,
    with_text_suffix,
)
from .events import EventBus

__all__ = [
    "DocumentSession",
    "DocumentIOError",
    "SaveTargetRequired",
    "EventBus",
    "with_text_suffix",
]
