"""In-memory text editor with linear undo plus plain-text search utilities."""

__all__ = [
    "adapters",
    "editor",
    "runtime",
    "search",
    "serialization",
]

__version__ = "0.1.0"
