"""Compact length-prefixed binary encoding.

Layout::

    b"PTXD" | version:u8
    len(name):u32be | name as utf-8
    len(content):u32be | content as utf-8
"""

from __future__ import annotations

import struct
from typing import BinaryIO, Tuple

from plaintext_editor.editor import Document

from .base import fail, require_document

MAGIC = b"PTXD"
VERSION = 1

_HEADER = struct.Struct(">4sB")
_LENGTH = struct.Struct(">I")


class BinaryCodec:
    name = "binary"

    def encode(self, document: Document) -> bytes:
        document = require_document(document, codec=self.name)
        parts = [_HEADER.pack(MAGIC, VERSION)]
        fields = (("name", document.name), ("content", document.content))
        for field_name, value in fields:
            if not isinstance(value, str):
                raise fail(f"field {field_name!r} must be str", codec=self.name)
            raw = value.encode("utf-8")
            parts.append(_LENGTH.pack(len(raw)))
            parts.append(raw)
        return b"".join(parts)

    def decode(self, data: bytes) -> Document:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise fail(f"expected bytes, got {type(data).__name__}", codec=self.name)
        view = memoryview(data)
        if len(view) < _HEADER.size:
            raise fail("truncated header", codec=self.name)
        magic, version = _HEADER.unpack_from(view, 0)
        if magic != MAGIC:
            raise fail(f"bad magic {magic!r}", codec=self.name)
        if version != VERSION:
            raise fail(f"unsupported version {version}", codec=self.name)

        offset = _HEADER.size
        name, offset = self._read_field(view, offset, "name")
        content, offset = self._read_field(view, offset, "content")
        if offset != len(view):
            raise fail(f"{len(view) - offset} trailing bytes", codec=self.name)
        return Document(name=name, content=content)

    def dump(self, document: Document, stream: BinaryIO) -> None:
        stream.write(self.encode(document))

    def load(self, stream: BinaryIO) -> Document:
        return self.decode(stream.read())

    def _read_field(
        self, view: memoryview, offset: int, field_name: str
    ) -> Tuple[str, int]:
        if offset + _LENGTH.size > len(view):
            raise fail(f"truncated length of {field_name!r}", codec=self.name)
        (length,) = _LENGTH.unpack_from(view, offset)
        start = offset + _LENGTH.size
        end = start + length
        if end > len(view):
            raise fail(f"truncated value of {field_name!r}", codec=self.name)
        try:
            value = bytes(view[start:end]).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise fail(f"{field_name!r} is not utf-8", codec=self.name) from exc
        return value, end


__all__ = ["BinaryCodec", "MAGIC", "VERSION"]
