"""Context and result types shared by every editor action."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from freewrite.buffer import Selection
from freewrite.session import DocumentSession, EventBus


@dataclass(slots=True)
class ActionResult:
    """Returned from every action handler."""

    status: str = "ok"
    message: Optional[str] = None
    selection: Optional[Selection] = None
    payload: object | None = None

    @property
    def ok(self) -> bool:
        return self.status not in {"invalid_query", "not_found", "io_error"}


@dataclass(slots=True)
class ActionContext:
    """Services an action may touch."""

    session: DocumentSession
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def bus(self) -> EventBus:
        return self.session.bus


__all__ = ["ActionContext", "ActionResult"]
