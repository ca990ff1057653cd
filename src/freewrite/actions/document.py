"""File, statistics, and history actions."""

from __future__ import annotations

from pathlib import Path

from freewrite.session import DocumentIOError, SaveTargetRequired

from .base import ActionContext, ActionResult


def _io_error(context: ActionContext, exc: DocumentIOError) -> ActionResult:
    return ActionResult(
        status="io_error",
        message=str(exc),
        selection=context.session.selection,
        payload={"path": exc.path},
    )


def new_document(context: ActionContext) -> ActionResult:
    context.session.new_document()
    return ActionResult(status="document_new", selection=context.session.selection)


def open_document(context: ActionContext, *, path: Path | str) -> ActionResult:
    try:
        context.session.open_document(path)
    except DocumentIOError as exc:
        return _io_error(context, exc)
    session = context.session
    return ActionResult(
        status="document_open",
        message=f"Opened {session.display_name}",
        selection=session.selection,
        payload={"path": session.path},
    )


def save_document(context: ActionContext) -> ActionResult:
    session = context.session
    try:
        written = session.save_document()
    except SaveTargetRequired:
        return ActionResult(status="save_as_required", selection=session.selection)
    except DocumentIOError as exc:
        return _io_error(context, exc)
    if not written:
        return ActionResult(
            status="document_unchanged",
            message="No changes to save",
            selection=session.selection,
        )
    return ActionResult(
        status="document_save",
        message=f"Saved {session.display_name}",
        selection=session.selection,
        payload={"path": session.path},
    )


def save_document_as(context: ActionContext, *, path: Path | str) -> ActionResult:
    session = context.session
    try:
        target = session.save_document_as(path)
    except DocumentIOError as exc:
        return _io_error(context, exc)
    return ActionResult(
        status="document_save",
        message=f"Saved {target.name}",
        selection=session.selection,
        payload={"path": target},
    )


def show_statistics(context: ActionContext) -> ActionResult:
    stats = context.session.statistics()
    context.bus.emit("document.statistics", stats)
    return ActionResult(
        status="statistics",
        message=stats.message,
        selection=context.session.selection,
        payload=stats,
    )


def undo(context: ActionContext) -> ActionResult:
    delta = context.session.buffer.undo()
    if delta is None:
        return ActionResult(status="noop", selection=context.session.selection)
    return ActionResult(status="undo", message=delta.label, selection=delta.selection)


def redo(context: ActionContext) -> ActionResult:
    delta = context.session.buffer.redo()
    if delta is None:
        return ActionResult(status="noop", selection=context.session.selection)
    return ActionResult(status="redo", message=delta.label, selection=delta.selection)


__all__ = [
    "new_document",
    "open_document",
    "save_document",
    "save_document_as",
    "show_statistics",
    "undo",
    "redo",
]
