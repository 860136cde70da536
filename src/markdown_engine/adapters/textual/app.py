"""Executable Textual app hosting the formatting engine."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding as TextualBinding
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection as TextSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use markdown_engine.adapters.textual.app"
    ) from exc

from markdown_engine.buffer import (
    BufferMirror,
    DocumentStats,
    location_to_offset,
    offset_to_location,
)
from markdown_engine.detect import StyleSet
from markdown_engine.keymaps import DEFAULT_BINDINGS, KeymapRegistry, load_default_keymaps
from markdown_engine.runtime import telemetry
from markdown_engine.session import EditorSession

from .controller import TextualFormatAdapter, TextualUIHooks

TOOLBAR_ORDER = (
    "bold",
    "italic",
    "strikethrough",
    "code",
    "highlight",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "paragraph",
    "quote",
    "list",
    "orderedList",
    "task",
)


def render_toolbar(styles: StyleSet) -> str:
    """One-line toolbar with active styles in brackets."""

    return " ".join(
        f"[{name}]" if name in styles else name for name in TOOLBAR_ORDER
    )


class MarkdownEngineApp(App[None]):
    """Text area + toolbar state driven by the formatting engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#toolbar {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        TextualBinding("ctrl+q", "quit", "Quit", priority=True),
        *(
            TextualBinding(
                binding.key_signature,
                f"shortcut('{binding.key_signature}')",
                binding.description,
                show=False,
                priority=True,
            )
            for binding in DEFAULT_BINDINGS
        ),
    ]

    def __init__(self, *, text: str = "", name: str = "default") -> None:
        super().__init__()
        self.session = EditorSession(text, name=name)
        self.registry = KeymapRegistry()
        load_default_keymaps(self.registry)
        self.adapter: TextualFormatAdapter | None = None
        self._syncing = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Static("", id="toolbar", markup=False)
        yield TextArea(self.session.text, id="editor")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_toolbar=self._update_toolbar,
            update_status=self._update_status,
            update_stats=self._update_stats,
            log=lambda line: telemetry.record_event(
                "textual.adapter", level="debug", data={"line": line}
            ),
        )
        self.adapter = TextualFormatAdapter(self.session, self.registry, hooks)
        self._update_stats(self.session.stats())
        self.query_one("#editor", TextArea).focus()

    def action_shortcut(self, chord: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(chord)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._sync_from_widget(event.text_area)

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        self._sync_from_widget(event.text_area)

    def _sync_from_widget(self, area: TextArea) -> None:
        if self._syncing or not self.adapter:
            return
        text = area.text
        start = location_to_offset(text, area.selection.start)
        end = location_to_offset(text, area.selection.end)
        self.adapter.sync_from_widget(text, start, end)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        area = self.query_one("#editor", TextArea)
        self._syncing = True
        try:
            if area.text != mirror.text:
                area.replace(mirror.text, area.document.start, area.document.end)
            area.selection = TextSelection(
                offset_to_location(mirror.text, mirror.selection.start),
                offset_to_location(mirror.text, mirror.selection.end),
            )
        finally:
            self._syncing = False

    def _update_toolbar(self, styles: StyleSet) -> None:
        self.query_one("#toolbar", Static).update(render_toolbar(styles))

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)

    def _update_stats(self, stats: DocumentStats) -> None:
        self.sub_title = (
            f"{stats.words} words, {stats.characters} chars, "
            f"{stats.lines} lines, {stats.reading_minutes} min read"
        )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the markdown formatting demo.")
    parser.add_argument("path", nargs="?", help="Markdown file to open (read-only)")
    parser.add_argument(
        "--preset",
        default=os.environ.get("MARKDOWN_ENGINE_PRESET"),
        choices=telemetry.PRESETS,
        help="Telemetry preset (default: environment-driven config)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.preset:
        telemetry.configure(preset=args.preset)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    name = Path(args.path).name if args.path else "untitled"
    MarkdownEngineApp(text=text, name=name).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
