"""Textual-facing controller that drives an ``Editor`` through UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from plaintext_editor.editor import CHANGE, UNDO, Editor, EditorView
from plaintext_editor.search import search_directory


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the controller uses to update Textual widgets."""

    update_document: Callable[[EditorView], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    show_results: Callable[[List[str]], None] = _noop
    log: Callable[[str], None] = _noop


UNDO_KEY = "ctrl+z"
SEARCH_PREFIX = "/"


class TextualEditorAdapter:
    """Maps key presses and submitted input onto editor operations."""

    def __init__(
        self,
        editor: Editor,
        hooks: TextualUIHooks,
        *,
        search_root: Optional[str | Path] = None,
    ) -> None:
        self.editor = editor
        self.hooks = hooks
        self.search_root = search_root
        self._subscribe_events()
        self._refresh_document()

    def handle_textual_key(self, key: str) -> bool:
        """Return ``True`` when the key was consumed."""

        self._log_state("key ->", key=key)
        if key == UNDO_KEY:
            self.undo()
            return True
        return False

    def submit(self, value: str) -> None:
        """Apply submitted input: ``/kw1 kw2`` searches, anything else edits."""

        if value.startswith(SEARCH_PREFIX):
            self.search(value[len(SEARCH_PREFIX) :].split())
        else:
            self.editor.change(value)

    def undo(self) -> bool:
        restored = self.editor.undo()
        if not restored:
            self.hooks.update_status("nothing to undo")
        return restored

    def search(self, keywords: List[str]) -> List[str]:
        if self.search_root is None:
            self.hooks.update_status("no search directory configured")
            return []
        found = search_directory(self.search_root, *keywords)
        self.hooks.show_results(found)
        self.hooks.update_status(f"search: {len(found)} file(s)")
        self._log_state("search <-", keywords=keywords, matched=len(found))
        return found

    def _subscribe_events(self) -> None:
        for event in (CHANGE, UNDO):
            self.editor.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)
        if isinstance(payload, EditorView):
            self.hooks.update_document(payload)
            self.hooks.update_status(f"{name.split('.')[-1]} v{payload.version}")

    def _refresh_document(self) -> None:
        self.hooks.update_document(self.editor.snapshot())

    def _log_state(self, prefix: str, **fields: object) -> None:
        state: Dict[str, object] = self._state_metadata()
        state.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in state.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        view = self.editor.snapshot()
        return {
            "document": view.name,
            "version": view.version,
            "history": view.history_size,
        }


__all__ = ["UNDO_KEY", "TextualEditorAdapter", "TextualUIHooks"]
