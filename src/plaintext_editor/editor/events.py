"""Tiny publish/subscribe bus for editor notifications."""

from __future__ import annotations

from typing import Callable, Dict

CHANGE = "editor.change"
UNDO = "editor.undo"


class EditorBus:
    """Lets hosts react to ``editor.change`` / ``editor.undo``."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = ["CHANGE", "UNDO", "EditorBus"]
