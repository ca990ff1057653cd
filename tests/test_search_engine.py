from __future__ import annotations

import pytest

from freewrite.buffer import Selection, TextBuffer
from freewrite.search import (
    SearchStatus,
    count_occurrences,
    find_next,
    find_previous,
    replace_all,
    replace_one,
)


def test_find_next_from_caret_selects_first_match() -> None:
    buffer = TextBuffer.from_text("hello world hello")

    result = find_next(buffer, Selection(0, 0), "hello")

    assert result.status is SearchStatus.FOUND
    assert result.selection == Selection(0, 5)


def test_find_next_advances_past_selection_then_wraps() -> None:
    buffer = TextBuffer.from_text("hello world hello")

    second = find_next(buffer, Selection(0, 5), "hello")
    assert second.status is SearchStatus.FOUND
    assert second.selection == Selection(12, 5)

    wrapped = find_next(buffer, second.selection, "hello")
    assert wrapped.status is SearchStatus.FOUND_WRAPPED
    assert wrapped.wrapped
    assert wrapped.selection == Selection(0, 5)


def test_find_next_wraps_onto_the_only_match() -> None:
    buffer = TextBuffer.from_text("xx needle yy")

    result = find_next(buffer, Selection(3, 6), "needle")

    assert result.status is SearchStatus.FOUND_WRAPPED
    assert result.selection == Selection(3, 6)


def test_find_next_is_case_sensitive_and_literal() -> None:
    buffer = TextBuffer.from_text("Alpha alpha a.pha")

    assert find_next(buffer, Selection(), "alpha").selection == Selection(6, 5)
    assert find_next(buffer, Selection(), "a.pha").selection == Selection(12, 5)
    assert find_next(buffer, Selection(), "ALPHA").status is SearchStatus.NOT_FOUND


def test_find_next_not_found_keeps_selection() -> None:
    buffer = TextBuffer.from_text("abcdef")

    result = find_next(buffer, Selection(2, 1), "zz")

    assert result.status is SearchStatus.NOT_FOUND
    assert not result.found
    assert result.selection == Selection(2, 1)


def test_find_next_clamps_corrupted_selection() -> None:
    buffer = TextBuffer.from_text("abcabc")

    result = find_next(buffer, Selection(50, 10), "abc")

    assert result.status is SearchStatus.FOUND_WRAPPED
    assert result.selection == Selection(0, 3)


def test_find_previous_clamps_corrupted_selection() -> None:
    buffer = TextBuffer.from_text("abcabc")

    result = find_previous(buffer, Selection(50, 10), "abc")

    assert result.status is SearchStatus.FOUND
    assert result.selection == Selection(3, 3)


def test_replace_one_clamps_corrupted_selection() -> None:
    buffer = TextBuffer.from_text("abcabc")

    result = replace_one(buffer, Selection(-3, 99), "abc", "X")

    assert not result.replaced
    assert buffer.text == "abcabc"
    assert result.status is SearchStatus.FOUND_WRAPPED
    assert result.selection == Selection(0, 3)


def test_find_previous_prefers_closest_match_before_caret() -> None:
    buffer = TextBuffer.from_text("abc abc abc")

    assert find_previous(buffer, Selection(11, 0), "abc").selection == Selection(8, 3)
    assert find_previous(buffer, Selection(4, 3), "abc").selection == Selection(0, 3)


def test_find_previous_wraps_to_last_match() -> None:
    buffer = TextBuffer.from_text("abc abc abc")

    result = find_previous(buffer, Selection(0, 3), "abc")

    assert result.status is SearchStatus.FOUND_WRAPPED
    assert result.selection == Selection(8, 3)


def test_find_previous_match_must_end_before_selection() -> None:
    buffer = TextBuffer.from_text("xx abc")

    result = find_previous(buffer, Selection(4, 0), "abc")

    assert result.status is SearchStatus.FOUND_WRAPPED
    assert result.selection == Selection(3, 3)


def test_find_previous_from_end_without_match_is_not_found() -> None:
    buffer = TextBuffer.from_text("nothing here")

    result = find_previous(buffer, Selection(12, 0), "zz")

    assert result.status is SearchStatus.NOT_FOUND


def test_find_next_then_previous_returns_at_or_before_start() -> None:
    buffer = TextBuffer.from_text("one two one two one")
    start = Selection(5, 0)

    forward = find_next(buffer, start, "one")
    back = find_previous(buffer, forward.selection, "one")

    assert forward.selection == Selection(8, 3)
    assert back.selection.location <= start.location


@pytest.mark.parametrize(
    "operation",
    [
        lambda b: find_next(b, Selection(), "q"),
        lambda b: find_previous(b, Selection(), "q"),
        lambda b: replace_one(b, Selection(), "q", "r"),
        lambda b: replace_all(b, "q", "r"),
    ],
)
def test_empty_buffer_reports_not_found(operation) -> None:
    buffer = TextBuffer.from_text("")

    result = operation(buffer)

    assert result.status is SearchStatus.NOT_FOUND
    assert buffer.text == ""
    assert buffer.version == 0


def test_empty_query_is_invalid_and_does_nothing() -> None:
    buffer = TextBuffer.from_text("text")
    selection = Selection(1, 2)

    assert find_next(buffer, selection, "").status is SearchStatus.INVALID_QUERY
    assert find_previous(buffer, selection, "").selection == selection
    replaced = replace_one(buffer, selection, "", "x")
    assert replaced.status is SearchStatus.INVALID_QUERY
    assert replaced.replaced is False
    assert replace_all(buffer, "", "x").status is SearchStatus.INVALID_QUERY
    assert buffer.text == "text"


def test_replace_one_replaces_matching_selection_and_finds_next() -> None:
    buffer = TextBuffer.from_text("cat hat cat")

    result = replace_one(buffer, Selection(0, 3), "cat", "dog")

    assert result.replaced is True
    assert buffer.text == "dog hat cat"
    assert result.status is SearchStatus.FOUND
    assert result.selection == Selection(8, 3)


def test_replace_one_skips_non_matching_selection() -> None:
    buffer = TextBuffer.from_text("cat hat cat")

    result = replace_one(buffer, Selection(4, 3), "cat", "dog")

    assert result.replaced is False
    assert buffer.text == "cat hat cat"
    assert result.selection == Selection(8, 3)


def test_replace_one_never_replaces_a_caret() -> None:
    buffer = TextBuffer.from_text("cat")

    result = replace_one(buffer, Selection(0, 0), "cat", "dog")

    assert result.replaced is False
    assert buffer.text == "cat"
    assert result.selection == Selection(0, 3)


def test_replace_one_last_match_leaves_caret_after_replacement() -> None:
    buffer = TextBuffer.from_text("a cat")

    result = replace_one(buffer, Selection(2, 3), "cat", "dog")

    assert result.replaced is True
    assert buffer.text == "a dog"
    assert result.status is SearchStatus.NOT_FOUND
    assert result.selection == Selection(5, 0)


def test_replace_one_with_empty_replacement_deletes() -> None:
    buffer = TextBuffer.from_text("a-b-c")

    result = replace_one(buffer, Selection(1, 1), "-", "")

    assert buffer.text == "ab-c"
    assert result.selection == Selection(2, 1)


def test_replace_all_counts_and_resets_selection() -> None:
    buffer = TextBuffer.from_text("a-b-a-b-a")

    result = replace_all(buffer, "a", "x")

    assert buffer.text == "x-b-x-b-x"
    assert result.count == 3
    assert result.status is SearchStatus.FOUND
    assert result.selection == Selection(0, 0)


@pytest.mark.parametrize(
    "text,query",
    [
        ("aaaa", "aa"),
        ("aaa", "aa"),
        ("abababa", "aba"),
        ("no match here", "zzz"),
        ("edge", "edge"),
    ],
)
def test_replace_all_count_matches_left_to_right_occurrences(
    text: str, query: str
) -> None:
    buffer = TextBuffer.from_text(text)

    result = replace_all(buffer, query, "#")

    assert result.count == text.count(query)


def test_replace_all_is_reversible() -> None:
    original = "the cat sat on the cat mat"
    buffer = TextBuffer.from_text(original)

    replace_all(buffer, "cat", "dog")
    assert buffer.text == "the dog sat on the dog mat"
    replace_all(buffer, "dog", "cat")

    assert buffer.text == original


def test_replace_all_does_not_rescan_inserted_text() -> None:
    buffer = TextBuffer.from_text("a a")

    result = replace_all(buffer, "a", "aa")

    assert buffer.text == "aa aa"
    assert result.count == 2


def test_replace_all_is_one_undo_step() -> None:
    buffer = TextBuffer.from_text("x1 x2 x3")

    replace_all(buffer, "x", "")
    assert buffer.text == "1 2 3"

    buffer.undo()
    assert buffer.text == "x1 x2 x3"
    assert not buffer.undo_timeline.can_undo()


def test_replace_all_without_matches_leaves_history_alone() -> None:
    buffer = TextBuffer.from_text("unchanged")

    result = replace_all(buffer, "zz", "y")

    assert result.status is SearchStatus.NOT_FOUND
    assert result.count == 0
    assert buffer.version == 0
    assert len(buffer.undo_timeline) == 0
    assert buffer.dirty is False


def test_count_occurrences() -> None:
    buffer = TextBuffer.from_text("aaaa")

    assert count_occurrences(buffer, "aa") == 2
    assert count_occurrences(buffer, "") == 0
