"""Event bus the session and actions use to notify the host."""

from __future__ import annotations

from typing import Callable, Dict


class EventBus:
    """Minimal synchronous pub/sub keyed by event name."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


__all__ = ["EventBus"]
