"""Find panel actions: next, previous, replace, replace all."""

from __future__ import annotations

from freewrite.search import (
    SearchResult,
    SearchStatus,
    count_occurrences,
    find_next,
    find_previous,
    replace_all,
    replace_one,
)

from .base import ActionContext, ActionResult


def _invalid_query(context: ActionContext) -> ActionResult:
    return ActionResult(
        status=SearchStatus.INVALID_QUERY.value,
        selection=context.session.selection,
    )


def _apply_search(context: ActionContext, result: SearchResult) -> ActionResult:
    session = context.session
    selection = session.select(result.selection)
    if not result.found:
        context.bus.emit("find.not_found", session.find_state.find_text)
        return ActionResult(
            status=result.status.value, message="Not found", selection=selection
        )
    context.bus.emit("find.found", {"selection": selection, "wrapped": result.wrapped})
    message = "Wrapped" if result.wrapped else None
    return ActionResult(
        status=result.status.value, message=message, selection=selection
    )


def find_next_action(context: ActionContext) -> ActionResult:
    session = context.session
    if not session.find_state.ready:
        return _invalid_query(context)
    result = find_next(session.buffer, session.selection, session.find_state.find_text)
    return _apply_search(context, result)


def find_previous_action(context: ActionContext) -> ActionResult:
    session = context.session
    if not session.find_state.ready:
        return _invalid_query(context)
    result = find_previous(
        session.buffer, session.selection, session.find_state.find_text
    )
    return _apply_search(context, result)


def replace_action(context: ActionContext) -> ActionResult:
    session = context.session
    state = session.find_state
    if not state.ready:
        return _invalid_query(context)
    outcome = replace_one(
        session.buffer, session.selection, state.find_text, state.replace_text
    )
    if outcome.replaced:
        context.bus.emit("find.replaced", outcome.selection)
    result = _apply_search(context, outcome.search)
    if outcome.replaced:
        result.message = (
            "Replaced"
            if result.message is None
            else f"Replaced, {result.message.lower()}"
        )
    result.payload = {"replaced": outcome.replaced}
    return result


def replace_all_action(context: ActionContext) -> ActionResult:
    session = context.session
    state = session.find_state
    if not state.ready:
        return _invalid_query(context)
    outcome = replace_all(session.buffer, state.find_text, state.replace_text)
    selection = session.select(outcome.selection)
    if outcome.count == 0:
        context.bus.emit("find.not_found", state.find_text)
        return ActionResult(
            status=outcome.status.value,
            message="No occurrences found",
            selection=selection,
            payload={"count": 0},
        )
    context.bus.emit("find.replace_all", outcome.count)
    noun = "occurrence" if outcome.count == 1 else "occurrences"
    return ActionResult(
        status=outcome.status.value,
        message=f"Replaced {outcome.count} {noun}",
        selection=selection,
        payload={"count": outcome.count},
    )


def count_matches_action(context: ActionContext) -> ActionResult:
    session = context.session
    if not session.find_state.ready:
        return _invalid_query(context)
    total = count_occurrences(session.buffer, session.find_state.find_text)
    return ActionResult(
        status="ok",
        message=f"{total} match" if total == 1 else f"{total} matches",
        selection=session.selection,
        payload={"count": total},
    )


__all__ = [
    "find_next_action",
    "find_previous_action",
    "replace_action",
    "replace_all_action",
    "count_matches_action",
]
