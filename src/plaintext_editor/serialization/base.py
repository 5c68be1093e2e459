"""Codec protocol and the error every codec raises."""

from __future__ import annotations

from typing import IO, Any, Protocol, TypeVar

from plaintext_editor.editor import Document
from plaintext_editor.runtime import telemetry

Payload = TypeVar("Payload", bytes, str)


class SerializationError(ValueError):
    """Raised when a document cannot be encoded or a payload cannot be decoded."""

    def __init__(self, message: str, *, codec: str | None = None) -> None:
        super().__init__(message)
        self.codec = codec


class DocumentCodec(Protocol[Payload]):
    """Field-by-field encoder/decoder for ``Document``.

    ``decode(encode(doc))`` must reproduce ``doc.name`` and ``doc.content``.
    """

    name: str

    def encode(self, document: Document) -> Payload:
        ...

    def decode(self, data: Payload) -> Document:
        ...

    def dump(self, document: Document, stream: IO[Any]) -> None:
        ...

    def load(self, stream: IO[Any]) -> Document:
        ...


def require_document(value: object, *, codec: str) -> Document:
    if not isinstance(value, Document):
        raise fail(
            f"expected Document, got {type(value).__name__}",
            codec=codec,
        )
    return value


def fail(message: str, *, codec: str) -> SerializationError:
    """Log the failure and build the error for the caller to raise."""

    telemetry.record_event(
        "serialization.failed",
        level="warning",
        data={"codec": codec, "reason": message},
    )
    return SerializationError(f"{codec}: {message}", codec=codec)


__all__ = ["DocumentCodec", "SerializationError", "fail", "require_document"]
