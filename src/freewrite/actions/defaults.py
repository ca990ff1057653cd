"""Built-in action table backing the menu commands and find panel."""

from __future__ import annotations

from typing import Sequence

from . import document as document_actions
from . import find as find_actions
from .registry import ActionRef, ActionRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="find.next",
        handler=find_actions.find_next_action,
        description="Find next occurrence",
    ),
    ActionRef(
        id="find.previous",
        handler=find_actions.find_previous_action,
        description="Find previous occurrence",
    ),
    ActionRef(
        id="find.replace",
        handler=find_actions.replace_action,
        description="Replace the selected match and find the next one",
    ),
    ActionRef(
        id="find.replace_all",
        handler=find_actions.replace_all_action,
        description="Replace every occurrence",
    ),
    ActionRef(
        id="find.count",
        handler=find_actions.count_matches_action,
        description="Count occurrences of the find text",
    ),
    ActionRef(
        id="document.new",
        handler=document_actions.new_document,
        description="New document",
    ),
    ActionRef(
        id="document.open",
        handler=document_actions.open_document,
        description="Open a text file",
    ),
    ActionRef(
        id="document.save",
        handler=document_actions.save_document,
        description="Save",
    ),
    ActionRef(
        id="document.save_as",
        handler=document_actions.save_document_as,
        description="Save as",
    ),
    ActionRef(
        id="document.statistics",
        handler=document_actions.show_statistics,
        description="Character and word counts",
    ),
    ActionRef(id="edit.undo", handler=document_actions.undo, description="Undo"),
    ActionRef(id="edit.redo", handler=document_actions.redo, description="Redo"),
)


def load_default_actions(
    registry: ActionRegistry,
    *,
    exclude: Sequence[str] | None = None,
    replace: bool = False,
) -> ActionRegistry:
    skipped = set(exclude or ())
    for action in DEFAULT_ACTIONS:
        if action.id in skipped:
            continue
        registry.register_action(action, replace=replace)
    return registry


__all__ = ["DEFAULT_ACTIONS", "load_default_actions"]
