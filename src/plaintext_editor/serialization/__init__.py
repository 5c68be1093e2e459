"""Document persistence in a compact binary and a readable JSON format."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from plaintext_editor.editor import Document
from plaintext_editor.runtime.settings import get_settings

from .base import DocumentCodec, SerializationError
from .binary import BinaryCodec
from .text import TextCodec

AnyCodec = Union[BinaryCodec, TextCodec]

_CODECS: Dict[str, AnyCodec] = {
    BinaryCodec.name: BinaryCodec(),
    TextCodec.name: TextCodec(),
}


def get_codec(name: str) -> AnyCodec:
    try:
        return _CODECS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(_CODECS))
        raise ValueError(
            f"Unknown format '{name}' (expected one of: {known})"
        ) from None


def save(document: Document, path: str | Path, *, fmt: Optional[str] = None) -> Path:
    """Write ``document`` to ``path``; ``fmt`` defaults to the configured format."""

    codec = get_codec(fmt or get_settings().default_format)
    payload = codec.encode(document)
    target = Path(path)
    if isinstance(payload, bytes):
        target.write_bytes(payload)
    else:
        target.write_text(payload, encoding="utf-8")
    return target


def load(path: str | Path, *, fmt: Optional[str] = None) -> Document:
    """Read a document from ``path``.

    Raw bytes go to the codec so that undecodable text surfaces as
    ``SerializationError`` rather than ``UnicodeDecodeError``.
    """

    codec = get_codec(fmt or get_settings().default_format)
    return codec.decode(Path(path).read_bytes())  # type: ignore[arg-type]


__all__ = [
    "BinaryCodec",
    "DocumentCodec",
    "SerializationError",
    "TextCodec",
    "get_codec",
    "load",
    "save",
]
