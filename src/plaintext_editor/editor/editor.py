"""Editor façade tying a document to its undo history."""

from __future__ import annotations

import threading
from contextlib import nullcontext
from dataclasses import dataclass
from typing import ContextManager, Optional

from plaintext_editor.runtime import telemetry
from plaintext_editor.runtime.settings import get_settings

from .document import Document
from .events import CHANGE, UNDO, EditorBus
from .history import History


@dataclass(frozen=True, slots=True)
class EditorView:
    name: str
    content: str
    version: int
    history_size: int


class Editor:
    def __init__(
        self,
        document: Document,
        *,
        history: Optional[History] = None,
        bus: Optional[EditorBus] = None,
        thread_safe: bool = False,
    ) -> None:
        if history is not None and len(history):
            raise ValueError("Editor requires an empty history")
        self.document = document
        self.history = (
            history
            if history is not None
            else History(limit=get_settings().history_limit)
        )
        self.bus = bus or EditorBus()
        self.version = 0
        self._lock: ContextManager[object] = (
            threading.RLock() if thread_safe else nullcontext()
        )
        self.history.record(document.content)

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "untitled.txt", thread_safe: bool = False
    ) -> "Editor":
        return cls(Document.from_text(text, name=name), thread_safe=thread_safe)

    def change(self, new_text: str) -> EditorView:
        if not isinstance(new_text, str):
            raise TypeError(f"content must be str, not {type(new_text).__name__}")
        with self._lock, telemetry.span(
            "editor::change",
            component=True,
            metadata={"document": self.document.name},
        ) as handle:
            # Record first; a failed record leaves the document untouched.
            self.history.record(new_text)
            self.document.content = new_text
            self.version += 1
            handle.add_metadata("version", self.version)
            view = self._view()
        self.bus.emit(CHANGE, view)
        return view

    def undo(self) -> bool:
        with self._lock, telemetry.span(
            "editor::undo",
            component=True,
            metadata={"document": self.document.name},
        ) as handle:
            restored = self.history.restore_last()
            if restored is None:
                handle.add_metadata("restored", False)
                view = self._view()
                applied = False
            else:
                self.document.content = restored
                self.version -= 1
                handle.add_metadata("restored", True)
                view = self._view()
                applied = True
        self.bus.emit(UNDO, view)
        return applied

    def can_undo(self) -> bool:
        with self._lock:
            return self.history.can_restore()

    def render(self) -> str:
        with self._lock:
            return self.document.content

    def snapshot(self) -> EditorView:
        with self._lock:
            return self._view()

    def _view(self) -> EditorView:
        return EditorView(
            name=self.document.name,
            content=self.document.content,
            version=self.version,
            history_size=len(self.history),
        )

    def __str__(self) -> str:
        return self.render()
