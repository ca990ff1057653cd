"""Executable Textual app: a single-window plain-text writing editor."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal, Vertical
    from textual.screen import ModalScreen
    from textual.widgets import Button, Footer, Header, Input, Label, Static, TextArea
    from textual.widgets.text_area import Selection as TextSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use freewrite.adapters.textual.app"
    ) from exc

from freewrite.buffer import BufferMirror, Selection
from freewrite.runtime import EditorSettings, telemetry
from freewrite.search import CursorPosition
from freewrite.session import DocumentSession

from .controller import TextualEditorAdapter, TextualUIHooks

FIND_BUTTONS = ("find-previous", "find-next", "replace", "replace-all")


class PathPrompt(ModalScreen[Optional[str]]):
    """Asks for a file path; dismisses with ``None`` on cancel."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, title: str, *, initial: str = "") -> None:
        super().__init__()
        self._title = title
        self._initial = initial

    def compose(self) -> ComposeResult:
        with Vertical(id="path-dialog"):
            yield Label(self._title)
            yield Input(
                value=self._initial, placeholder="path/to/file.txt", id="path-input"
            )

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        value = event.value.strip()
        self.dismiss(value or None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class FreewriteApp(App[None]):
    """Editor window with a find/replace panel and a status line."""

    TITLE = "freewrite"

    CSS = """
    Screen {
        layout: vertical;
    }

    #find-panel {
        height: auto;
        display: none;
        padding: 0 1;
        background: $surface-darken-1;
    }

    #find-panel.visible {
        display: block;
    }

    #find-panel Input {
        width: 1fr;
    }

    #find-panel Button {
        min-width: 5;
    }

    #match-count {
        width: auto;
        padding: 1 1;
        color: $text-muted;
    }

    #editor {
        height: 1fr;
    }

    #status-line {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }

    #settings-label {
        width: 1fr;
    }

    #cursor-position {
        width: auto;
    }

    PathPrompt {
        align: center middle;
    }

    #path-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "new_document", "New", priority=True),
        Binding("ctrl+o", "open_document", "Open", priority=True),
        Binding("ctrl+s", "save_document", "Save", priority=True),
        Binding("f12", "save_document_as", "Save As", priority=True),
        Binding("ctrl+f", "show_find", "Find", priority=True),
        Binding("ctrl+r", "show_find_replace", "Replace", priority=True),
        Binding("ctrl+t", "statistics", "Statistics", priority=True),
        Binding("ctrl+z", "undo", "Undo", show=False, priority=True),
        Binding("ctrl+y", "redo", "Redo", show=False, priority=True),
        Binding("ctrl+p", "cycle_font_size", "Size", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        *,
        path: Optional[Path] = None,
        settings: Optional[EditorSettings] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or EditorSettings.from_env()
        self.session = DocumentSession()
        self.adapter: TextualEditorAdapter | None = None
        self._initial_path = path
        self.logger = telemetry.get_logger("freewrite.app")

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="find-panel"):
            with Horizontal():
                yield Input(placeholder="Find", id="find-input")
                yield Button("<", id="find-previous", disabled=True)
                yield Button(">", id="find-next", disabled=True)
                yield Static("", id="match-count")
            with Horizontal():
                yield Input(placeholder="Replace with", id="replace-input")
                yield Button("Replace", id="replace", disabled=True)
                yield Button("Replace All", id="replace-all", disabled=True)
                yield Button("Done", id="find-done")
        yield TextArea(id="editor", soft_wrap=True)
        with Horizontal(id="status-line"):
            yield Static(self.settings.label, id="settings-label")
            yield Static(CursorPosition().label, id="cursor-position")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_selection=self._update_selection,
            update_position=self._update_position,
            update_status=self._update_status,
            update_find_controls=self._update_find_controls,
            handle_event=self._handle_event,
            alert=self._alert,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        if self._initial_path is not None:
            self.adapter.run_action("document.open", path=self._initial_path)
        self.query_one("#editor", TextArea).focus()

    # Widget -> session

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if not self.adapter:
            return
        area = event.text_area
        self.adapter.push_host_edit(
            area.text, area.selection.start, area.selection.end
        )

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if not self.adapter:
            return
        self.adapter.on_host_selection(event.selection.start, event.selection.end)

    def on_input_changed(self, event: Input.Changed) -> None:
        if not self.adapter:
            return
        if event.input.id == "find-input":
            self.adapter.set_find_text(event.value)
        elif event.input.id == "replace-input":
            self.adapter.set_replace_text(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter or not self.session.find_state.ready:
            return
        if event.input.id == "find-input":
            self.adapter.run_action("find.next")
        elif event.input.id == "replace-input":
            self.adapter.run_action("find.replace")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not self.adapter:
            return
        action_ids = {
            "find-previous": "find.previous",
            "find-next": "find.next",
            "replace": "find.replace",
            "replace-all": "find.replace_all",
        }
        button_id = event.button.id or ""
        if button_id == "find-done":
            self.query_one("#find-panel").remove_class("visible")
            self.query_one("#editor", TextArea).focus()
        elif button_id in action_ids:
            self.adapter.run_action(action_ids[button_id])

    # Session -> widget

    def _update_buffer(self, mirror: BufferMirror) -> None:
        area = self.query_one("#editor", TextArea)
        if area.text != mirror.text:
            area.load_text(mirror.text)
        self._update_selection(mirror.selection)
        name = mirror.attributes.get("name")
        if name:
            self.sub_title = f"{name}*" if self.session.has_unsaved_changes else name

    def _update_selection(self, selection: Selection) -> None:
        if not self.adapter:
            return
        area = self.query_one("#editor", TextArea)
        start = self.adapter.location_for(selection.location)
        end = self.adapter.location_for(selection.end)
        area.selection = TextSelection(start, end)
        area.scroll_cursor_visible()

    def _update_position(self, position: CursorPosition) -> None:
        self.query_one("#cursor-position", Static).update(position.label)

    def _update_status(self, status: str) -> None:
        self.notify(status, timeout=2)

    def _update_find_controls(self, ready: bool, count: int) -> None:
        for button_id in FIND_BUTTONS:
            self.query_one(f"#{button_id}", Button).disabled = not ready
        if not ready:
            label = ""
        else:
            label = f"{count} match" if count == 1 else f"{count} matches"
        self.query_one("#match-count", Static).update(label)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name in {"document.open", "document.save", "document.new"}:
            self.sub_title = self.session.display_name

    def _alert(self, message: str) -> None:
        self.bell()
        self.logger.info(f"alert: {message}")

    # Commands

    def action_new_document(self) -> None:
        if self.adapter:
            self.adapter.run_action("document.new")

    def action_open_document(self) -> None:
        def _open(path: Optional[str]) -> None:
            if path and self.adapter:
                self.adapter.run_action("document.open", path=path)

        self.push_screen(PathPrompt("Open file"), _open)

    def action_save_document(self) -> None:
        if not self.adapter:
            return
        result = self.adapter.run_action("document.save")
        if result.status == "save_as_required":
            self.action_save_document_as()

    def action_save_document_as(self) -> None:
        def _save(path: Optional[str]) -> None:
            if path and self.adapter:
                self.adapter.run_action("document.save_as", path=path)

        initial = str(self.session.path) if self.session.path else "Untitled.txt"
        self.push_screen(PathPrompt("Save as", initial=initial), _save)

    def action_show_find(self) -> None:
        self.query_one("#find-panel").add_class("visible")
        self.query_one("#find-input", Input).focus()

    def action_show_find_replace(self) -> None:
        self.query_one("#find-panel").add_class("visible")
        self.query_one("#replace-input", Input).focus()

    def action_statistics(self) -> None:
        if self.adapter:
            self.adapter.run_action("document.statistics")

    def action_undo(self) -> None:
        if self.adapter:
            self.adapter.run_action("edit.undo")

    def action_redo(self) -> None:
        if self.adapter:
            self.adapter.run_action("edit.redo")

    def action_cycle_font_size(self) -> None:
        self.settings = self.settings.next_font_size()
        self.query_one("#settings-label", Static).update(self.settings.label)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Minimal plain-text writing editor.")
    parser.add_argument("path", nargs="?", type=Path, help="Text file to open")
    parser.add_argument(
        "--font-size",
        type=int,
        default=None,
        help="Initial font size (16-26, default: 18)",
    )
    parser.add_argument(
        "--telemetry-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Logging preset (default: environment-driven configuration)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = EditorSettings.from_env()
    if args.font_size is not None:
        settings = settings.with_font_size(args.font_size)
    # The TUI owns the terminal, so console logging is off unless asked for.
    telemetry.configure(
        preset=args.telemetry_preset or settings.telemetry_preset or "production"
    )
    app = FreewriteApp(path=args.path, settings=settings)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
