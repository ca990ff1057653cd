"""Textual host for the editing core."""

from .controller import (
    TextualEditorAdapter,
    TextualUIHooks,
    location_to_offset,
    offset_to_location,
)

__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "location_to_offset",
    "offset_to_location",
]
