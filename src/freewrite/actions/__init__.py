"""Editor actions dispatched by id from menus, keys, and the find panel."""

from .base import ActionContext, ActionResult
from .defaults import DEFAULT_ACTIONS, load_default_actions
from .registry import ActionHandler, ActionRef, ActionRegistry

__all__ = [
    "ActionContext",
    "ActionResult",
    "ActionRef",
    "ActionRegistry",
    "ActionHandler",
    "DEFAULT_ACTIONS",
    "load_default_actions",
]
