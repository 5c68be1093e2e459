"""Human-readable JSON encoding."""

from __future__ import annotations

import json
from typing import Any, Dict, TextIO

from plaintext_editor.editor import Document

from .base import fail, require_document

FORMAT_TAG = "plaintext-editor/document"
VERSION = 1


class TextCodec:
    name = "text"

    def __init__(self, *, indent: int | None = 2) -> None:
        self.indent = indent

    def encode(self, document: Document) -> str:
        document = require_document(document, codec=self.name)
        payload: Dict[str, Any] = {
            "format": FORMAT_TAG,
            "version": VERSION,
            "name": document.name,
            "content": document.content,
        }
        return json.dumps(payload, indent=self.indent, ensure_ascii=False) + "\n"

    def decode(self, data: str) -> Document:
        if isinstance(data, (bytes, bytearray)):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise fail("payload is not utf-8", codec=self.name) from exc
        if not isinstance(data, str):
            raise fail(f"expected str, got {type(data).__name__}", codec=self.name)
        try:
            payload = json.loads(data)
        except json.JSONDecodeError as exc:
            raise fail(f"malformed JSON: {exc.msg}", codec=self.name) from exc

        if not isinstance(payload, dict):
            raise fail("top-level value must be an object", codec=self.name)
        if payload.get("format") != FORMAT_TAG:
            raise fail(f"unexpected format {payload.get('format')!r}", codec=self.name)
        if payload.get("version") != VERSION:
            raise fail(
                f"unsupported version {payload.get('version')!r}", codec=self.name
            )
        for key in ("name", "content"):
            if key not in payload:
                raise fail(f"missing field {key!r}", codec=self.name)
            if not isinstance(payload[key], str):
                raise fail(f"field {key!r} must be a string", codec=self.name)
        return Document(name=payload["name"], content=payload["content"])

    def dump(self, document: Document, stream: TextIO) -> None:
        stream.write(self.encode(document))

    def load(self, stream: TextIO) -> Document:
        return self.decode(stream.read())


__all__ = ["FORMAT_TAG", "TextCodec", "VERSION"]
