"""Literal, case-sensitive find and replace over a TextBuffer.

Every entry point takes the buffer, the host's current selection and the
query, and returns a new selection for the host to apply. "Not found" and
"empty query" are result statuses, never exceptions. A selection that has
drifted outside the buffer is clamped before use.

Wraparound is attempted once: a directional scan that fails without having
covered the whole buffer is retried over the whole buffer.
"""

from __future__ import annotations

from freewrite.buffer import Selection, TextBuffer, clamp_selection
from freewrite.runtime import telemetry

from .models import ReplaceAllResult, ReplaceResult, SearchResult, SearchStatus

LOGGER_NAME = "freewrite.search"


def find_next(buffer: TextBuffer, selection: Selection, query: str) -> SearchResult:
    """Select the nearest occurrence of ``query`` after ``selection``."""

    if not query:
        return SearchResult(SearchStatus.INVALID_QUERY, selection)

    text = buffer.text
    selection = clamp_selection(selection, len(text))
    start = selection.end

    index = text.find(query, start)
    if index >= 0:
        return _match(SearchStatus.FOUND, index, query)

    if start > 0:
        index = text.find(query)
        if index >= 0:
            return _match(SearchStatus.FOUND_WRAPPED, index, query)

    return _miss("find_next", buffer, selection, query)


def find_previous(
    buffer: TextBuffer, selection: Selection, query: str
) -> SearchResult:
    """Select the closest occurrence of ``query`` ending before ``selection``."""

    if not query:
        return SearchResult(SearchStatus.INVALID_QUERY, selection)

    text = buffer.text
    selection = clamp_selection(selection, len(text))
    end = selection.location

    index = text.rfind(query, 0, end)
    if index >= 0:
        return _match(SearchStatus.FOUND, index, query)

    if end < len(text):
        index = text.rfind(query)
        if index >= 0:
            return _match(SearchStatus.FOUND_WRAPPED, index, query)

    return _miss("find_previous", buffer, selection, query)


def replace_one(
    buffer: TextBuffer, selection: Selection, query: str, replacement: str
) -> ReplaceResult:
    """Replace the selection if it is exactly ``query``, then find the next match.

    A caret, or a selection holding anything other than ``query``, is left
    alone; the call then behaves like ``find_next``.
    """

    if not query:
        return ReplaceResult(
            replaced=False,
            search=SearchResult(SearchStatus.INVALID_QUERY, selection),
        )

    selection = clamp_selection(selection, buffer.length())
    replaced = False
    if (
        not selection.is_caret
        and buffer.substring(selection.location, selection.length) == query
    ):
        buffer.replace(
            selection.location, selection.length, replacement, label="replace_one"
        )
        selection = Selection.caret(selection.location + len(replacement))
        replaced = True

    return ReplaceResult(replaced=replaced, search=find_next(buffer, selection, query))


def replace_all(buffer: TextBuffer, query: str, replacement: str) -> ReplaceAllResult:
    """Replace every occurrence of ``query``, scanning from the end backwards.

    Each match is looked up in ``[0, bound)`` where ``bound`` is the start of
    the previous match, so offsets still to be visited never move. All edits
    share one undo entry. The returned selection is a caret at 0.
    """

    if not query:
        return ReplaceAllResult(SearchStatus.INVALID_QUERY, 0, buffer.selection)

    count = 0
    with telemetry.span(
        "search::replace_all",
        logger_name=LOGGER_NAME,
        component="search",
        metadata={"buffer": buffer.name, "query_length": len(query)},
    ) as handle:
        with buffer.transaction("replace_all"):
            bound = buffer.length()
            while bound > 0:
                index = buffer.text.rfind(query, 0, bound)
                if index < 0:
                    break
                buffer.replace(index, len(query), replacement)
                count += 1
                bound = index
        handle.add_metadata("count", count)

    if count == 0:
        telemetry.record_event(
            "search.replace_all.none",
            level="debug",
            data={"buffer": buffer.name, "query": query},
            logger_name=LOGGER_NAME,
        )
        return ReplaceAllResult(SearchStatus.NOT_FOUND, 0, Selection())
    return ReplaceAllResult(SearchStatus.FOUND, count, Selection())


def count_occurrences(buffer: TextBuffer, query: str) -> int:
    """Number of non-overlapping occurrences of ``query``, left to right."""

    if not query:
        return 0
    return buffer.text.count(query)


def _match(status: SearchStatus, index: int, query: str) -> SearchResult:
    return SearchResult(status, Selection(index, len(query)))


def _miss(
    operation: str, buffer: TextBuffer, selection: Selection, query: str
) -> SearchResult:
    telemetry.record_event(
        f"search.{operation}.not_found",
        level="debug",
        data={"buffer": buffer.name, "query": query, "length": buffer.length()},
        logger_name=LOGGER_NAME,
    )
    return SearchResult(SearchStatus.NOT_FOUND, selection)


__all__ = [
    "find_next",
    "find_previous",
    "replace_one",
    "replace_all",
    "count_occurrences",
]
