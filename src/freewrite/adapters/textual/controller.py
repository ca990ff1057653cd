"""Adapter that wires the document session into Textual UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from freewrite.actions import (
    ActionContext,
    ActionRegistry,
    ActionResult,
    load_default_actions,
)
from freewrite.buffer import BufferMirror, Selection
from freewrite.runtime import telemetry
from freewrite.search import CursorPosition, count_occurrences, resolve_position
from freewrite.session import DocumentSession

Location = Tuple[int, int]  # (row, column) as TextArea reports it

LOGGER_NAME = "freewrite.adapters.textual"


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_selection: Callable[[Selection], None] = _noop
    update_position: Callable[[CursorPosition], None] = _noop
    update_status: Callable[[str], None] = _noop
    update_find_controls: Callable[[bool, int], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    alert: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges a DocumentSession and its actions to a Textual-friendly surface.

    The session is authoritative. Host edits flow in through
    ``push_host_edit``; action results flow out through the hooks, as a full
    buffer refresh when the text changed and as a selection update otherwise.
    """

    def __init__(
        self,
        session: DocumentSession,
        hooks: TextualUIHooks,
        *,
        registry: Optional[ActionRegistry] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.registry = registry or load_default_actions(
            ActionRegistry(logger_name="freewrite.actions")
        )
        self.context = ActionContext(session=session)
        self.logger = telemetry.get_logger(LOGGER_NAME)
        self._subscribe_events()
        self._refresh_buffer()
        self._refresh_find_controls()

    def run_action(self, action_id: str, **kwargs: object) -> ActionResult:
        version = self.session.buffer.version
        result = self.registry.dispatch(action_id, self.context, **kwargs)
        self.logger.debug(f"action {action_id} -> {result.status}")
        if self.session.buffer.version != version:
            self._refresh_buffer()
        elif result.selection is not None:
            self.hooks.update_selection(result.selection)
            self._refresh_position()
        if result.status == "not_found":
            self.hooks.alert(result.message or "Not found")
        if result.status == "io_error":
            self.hooks.alert(result.message or "File error")
        if result.message:
            self.hooks.update_status(result.message)
        self._refresh_find_controls()
        return result

    def push_host_edit(self, text: str, start: Location, end: Location) -> None:
        """Record text typed or pasted into the widget, then its selection."""

        if self.session.apply_user_edit(text) is not None:
            self._refresh_find_controls()
        self.on_host_selection(start, end)

    def on_host_selection(self, start: Location, end: Location) -> CursorPosition:
        text = self.session.buffer.text
        selection = Selection.between(
            location_to_offset(text, start), location_to_offset(text, end)
        )
        self.session.select(selection)
        return self._refresh_position()

    def set_find_text(self, text: str) -> None:
        self.session.find_state.find_text = text
        self._refresh_find_controls()

    def set_replace_text(self, text: str) -> None:
        self.session.find_state.replace_text = text

    def location_for(self, offset: int) -> Location:
        return offset_to_location(self.session.buffer.text, offset)

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in (
            "find.found",
            "find.not_found",
            "find.replaced",
            "find.replace_all",
            "document.new",
            "document.open",
            "document.save",
            "document.error",
            "document.statistics",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.logger.debug(f"event {name}")
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(
            self.session.buffer.mirror(
                attributes={"name": self.session.display_name}
            )
        )
        self._refresh_position()

    def _refresh_position(self) -> CursorPosition:
        buffer = self.session.buffer
        position = resolve_position(buffer, buffer.selection.location)
        self.hooks.update_position(position)
        return position

    def _refresh_find_controls(self) -> None:
        state = self.session.find_state
        count = count_occurrences(self.session.buffer, state.find_text)
        self.hooks.update_find_controls(state.ready, count)


def location_to_offset(text: str, location: Location) -> int:
    """Flat offset of a ``(row, column)`` location, clamped to ``text``."""

    row, column = location
    lines = text.split("\n")
    row = max(0, min(row, len(lines) - 1))
    offset = sum(len(line) + 1 for line in lines[:row])
    return offset + max(0, min(column, len(lines[row])))


def offset_to_location(text: str, offset: int) -> Location:
    offset = max(0, min(offset, len(text)))
    row = text.count("\n", 0, offset)
    return (row, offset - (text.rfind("\n", 0, offset) + 1))


__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "location_to_offset",
    "offset_to_location",
]
