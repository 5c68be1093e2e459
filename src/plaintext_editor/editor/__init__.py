"""Document, snapshot history and the editor that ties them together."""

from .document import Document
from .editor import Editor, EditorView
from .events import CHANGE, UNDO, EditorBus
from .history import History, Snapshot

__all__ = [
    "CHANGE",
    "UNDO",
    "Document",
    "Editor",
    "EditorBus",
    "EditorView",
    "History",
    "Snapshot",
]
