"""Dataclasses describing find state and search/replace outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from freewrite.buffer import Selection


class SearchStatus(str, Enum):
    FOUND = "found"
    FOUND_WRAPPED = "found_wrapped"
    NOT_FOUND = "not_found"
    INVALID_QUERY = "invalid_query"

    @property
    def found(self) -> bool:
        return self in (SearchStatus.FOUND, SearchStatus.FOUND_WRAPPED)


@dataclass(slots=True)
class FindState:
    """Query and replacement text owned by the find panel."""

    find_text: str = ""
    replace_text: str = ""

    @property
    def ready(self) -> bool:
        return bool(self.find_text)


@dataclass(frozen=True, slots=True)
class SearchResult:
    status: SearchStatus
    selection: Selection

    @property
    def found(self) -> bool:
        return self.status.found

    @property
    def wrapped(self) -> bool:
        return self.status is SearchStatus.FOUND_WRAPPED


@dataclass(frozen=True, slots=True)
class ReplaceResult:
    """Outcome of a single replace: whether text changed, then the follow-up find."""

    replaced: bool
    search: SearchResult

    @property
    def status(self) -> SearchStatus:
        return self.search.status

    @property
    def selection(self) -> Selection:
        return self.search.selection


@dataclass(frozen=True, slots=True)
class ReplaceAllResult:
    status: SearchStatus
    count: int
    selection: Selection


__all__ = [
    "FindState",
    "SearchStatus",
    "SearchResult",
    "ReplaceResult",
    "ReplaceAllResult",
]
