"""Range checks shared across buffer services."""

from __future__ import annotations

from .state import Selection
from .sync import BufferRangeError


def ensure_range(total: int, location: int, length: int) -> tuple[int, int]:
    if length < 0:
        raise BufferRangeError(
            "Negative range length", location=location, length=length
        )
    if location < 0 or location + length > total:
        raise BufferRangeError(
            f"Range [{location}, {location + length}) outside buffer of length {total}",
            location=location,
            length=length,
        )
    return location, length


def clamp_selection(selection: Selection, total: int) -> Selection:
    """Pull ``selection`` back inside ``[0, total]``."""

    location = max(0, min(selection.location, total))
    length = max(0, min(selection.length, total - location))
    if location == selection.location and length == selection.length:
        return selection
    return Selection(location, length)
