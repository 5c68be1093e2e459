"""The named text value an editor works on."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class Document:
    """Mutable ``name`` + ``content`` pair.

    Identity is the instance, not the text: two documents with equal fields are
    still distinct. Only ``Editor`` is expected to write ``content``.
    """

    name: str
    content: str = ""

    @classmethod
    def from_text(cls, text: str, *, name: str = "untitled.txt") -> "Document":
        return cls(name=name, content=text)

    def same_as(self, other: "Document") -> bool:
        """Compare by value, for callers that need field equality."""

        return self.name == other.name and self.content == other.content
