"""Find/replace engine, cursor position resolver, and document statistics."""

from .engine import (
    count_occurrences,
    find_next,
    find_previous,
    replace_all,
    replace_one,
)
from .models import (
    FindState,
    ReplaceAllResult,
    ReplaceResult,
    SearchResult,
    SearchStatus,
)
from .position import CursorPosition, resolve_position
from .statistics import DocumentStatistics, compute_statistics

__all__ = [
    "find_next",
    "find_previous",
    "replace_one",
    "replace_all",
    "count_occurrences",
    "FindState",
    "SearchStatus",
    "SearchResult",
    "ReplaceResult",
    "ReplaceAllResult",
    "CursorPosition",
    "resolve_position",
    "DocumentStatistics",
    "compute_statistics",
]
