"""Environment-driven settings shared by the editor, search and codecs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "PLAINTEXT_EDITOR_"

FORMATS = ("binary", "text")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Defaults for directory scans, persistence and history size."""

    file_pattern: str = "*.txt"
    recursive: bool = True
    encoding: str = "utf-8"
    decode_errors: str = "replace"
    default_format: str = "binary"
    history_limit: Optional[int] = None
    scan_workers: int = 1


def _flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            f"{ENV_PREFIX}{name} must be an integer, got {raw!r}"
        ) from None
    if value < 1:
        raise ValueError(f"{ENV_PREFIX}{name} must be at least 1, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EditorSettings:
    """Build settings from ``PLAINTEXT_EDITOR_*`` variables.

    Unset variables fall back to the dataclass defaults. Malformed values raise
    ``ValueError`` naming the offending variable.
    """

    env = os.environ if environ is None else environ
    defaults = EditorSettings()

    def get(name: str) -> Optional[str]:
        raw = env.get(f"{ENV_PREFIX}{name}")
        if raw is None or not raw.strip():
            return None
        return raw

    pattern = get("FILE_PATTERN") or defaults.file_pattern
    encoding = get("ENCODING") or defaults.encoding
    decode_errors = get("DECODE_ERRORS") or defaults.decode_errors

    raw_recursive = get("RECURSIVE")
    recursive = (
        defaults.recursive
        if raw_recursive is None
        else _flag("RECURSIVE", raw_recursive)
    )

    fmt = (get("DEFAULT_FORMAT") or defaults.default_format).strip().lower()
    if fmt not in FORMATS:
        raise ValueError(
            f"{ENV_PREFIX}DEFAULT_FORMAT must be one of "
            f"{', '.join(FORMATS)}, got {fmt!r}"
        )

    raw_limit = get("HISTORY_LIMIT")
    limit = None if raw_limit is None else _positive_int("HISTORY_LIMIT", raw_limit)

    raw_workers = get("SCAN_WORKERS")
    workers = (
        defaults.scan_workers
        if raw_workers is None
        else _positive_int("SCAN_WORKERS", raw_workers)
    )

    return EditorSettings(
        file_pattern=pattern,
        recursive=recursive,
        encoding=encoding,
        decode_errors=decode_errors,
        default_format=fmt,
        history_limit=limit,
        scan_workers=workers,
    )


_CACHED: Optional[EditorSettings] = None


def get_settings() -> EditorSettings:
    global _CACHED
    if _CACHED is None:
        _CACHED = load_settings()
    return _CACHED


def reset_settings() -> None:
    global _CACHED
    _CACHED = None


__all__ = [
    "EditorSettings",
    "FORMATS",
    "get_settings",
    "load_settings",
    "reset_settings",
]
