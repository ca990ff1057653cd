"""Registry mapping action ids to handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, Mapping

from freewrite.runtime.telemetry import span

from .base import ActionContext, ActionResult

ActionHandler = Callable[..., ActionResult]


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used when dispatching an action."""

    id: str
    handler: ActionHandler
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> ActionResult:
        return self.handler(*args, **kwargs)


class ActionRegistry:
    """Owns the action table the host dispatches menu and key commands through."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._logger_name = logger_name

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def dispatch(
        self, action_id: str, context: ActionContext, **kwargs: object
    ) -> ActionResult:
        action = self.get_action(action_id)
        with span(
            f"actions::{action.telemetry_name}",
            logger_name=self._logger_name,
            component="actions",
            metadata={"action_id": action.id},
        ) as handle:
            result = action(context, **kwargs)
            handle.add_metadata("status", result.status)
            return result


__all__ = ["ActionRef", "ActionRegistry", "ActionHandler"]
