"""Textual adapter; ``app`` is imported lazily because it needs textual."""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
