"""Executable Textual app hosting a single editor."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use plaintext_editor.adapters.textual.app"
    ) from exc

from plaintext_editor.editor import Editor, EditorView

from .controller import UNDO_KEY, TextualEditorAdapter, TextualUIHooks


class EditorApp(App[None]):
    """Content view, an input line for new text, and a status line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#document-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#results {
		height: auto;
		max-height: 8;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding(UNDO_KEY, "undo", "Undo", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        editor: Optional[Editor] = None,
        *,
        search_root: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.editor = editor or Editor.from_text("")
        self.adapter: TextualEditorAdapter | None = None
        self._search_root = search_root
        self._document_widget: Static | None = None
        self._results_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="document-area"):
            self._document_widget = Static("", id="document-view")
            yield self._document_widget
            self._results_widget = Static("", id="results")
            yield self._results_widget
        yield Input(placeholder="New content, or /keyword ... to search", id="entry")
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_document=self._update_document,
            update_status=self._update_status,
            show_results=self._show_results,
        )
        self.adapter = TextualEditorAdapter(
            self.editor, hooks, search_root=self._search_root
        )

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.adapter:
            self.adapter.submit(event.value)
        event.input.value = ""

    def action_undo(self) -> None:
        # Priority binding: fires before the focused Input sees the key.
        if self.adapter:
            self.adapter.handle_textual_key(UNDO_KEY)

    def _update_document(self, view: EditorView) -> None:
        self.title = view.name
        if self._document_widget:
            self._document_widget.update(view.content)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _show_results(self, paths: List[str]) -> None:
        if self._results_widget:
            self._results_widget.update("\n".join(paths))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the plaintext editor TUI.")
    parser.add_argument("--name", default="untitled.txt", help="Document name")
    parser.add_argument("--text", default="", help="Initial content")
    parser.add_argument("--directory", help="Directory searched by /keyword input")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    run(name=args.name, text=args.text, directory=args.directory)


def run(*, name: str, text: str, directory: Optional[str] = None) -> None:
    editor = Editor.from_text(text, name=name)
    EditorApp(editor, search_root=directory).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
