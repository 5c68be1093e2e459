"""File-system side of search: enumerate plain-text files and read them."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from plaintext_editor.runtime import telemetry
from plaintext_editor.runtime.settings import get_settings

from .matcher import Entry, index, search


def enumerate_text_files(
    directory: str | Path,
    *,
    pattern: Optional[str] = None,
    recursive: Optional[bool] = None,
) -> List[str]:
    """Return matching file paths under ``directory``, sorted.

    A missing path, or one that is not a directory, yields an empty list.
    """

    settings = get_settings()
    pattern = pattern or settings.file_pattern
    recursive = settings.recursive if recursive is None else recursive

    root = Path(directory)
    if not root.is_dir():
        return []
    candidates = root.rglob(pattern) if recursive else root.glob(pattern)
    return sorted(str(path) for path in candidates if path.is_file())


def read_text(
    path: str | Path,
    *,
    encoding: Optional[str] = None,
    errors: Optional[str] = None,
) -> str:
    """Read ``path`` as text; undecodable bytes follow ``errors`` (``"replace"``)."""

    settings = get_settings()
    return Path(path).read_text(
        encoding=encoding or settings.encoding,
        errors=errors or settings.decode_errors,
    )


def iter_entries(
    paths: Iterable[str], *, encoding: Optional[str] = None
) -> Iterator[Entry]:
    for path in paths:
        yield path, read_text(path, encoding=encoding)


def _load_entries(
    paths: Sequence[str], *, encoding: Optional[str], workers: int
) -> List[Entry]:
    if workers <= 1 or len(paths) < 2:
        return list(iter_entries(paths, encoding=encoding))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        # map() yields in submission order, so enumeration order survives.
        contents = list(pool.map(lambda p: read_text(p, encoding=encoding), paths))
    return list(zip(paths, contents))


def _scan(
    directory: str | Path,
    *,
    pattern: Optional[str],
    recursive: Optional[bool],
    encoding: Optional[str],
    workers: Optional[int],
) -> List[Entry]:
    paths = enumerate_text_files(directory, pattern=pattern, recursive=recursive)
    worker_count = get_settings().scan_workers if workers is None else workers
    return _load_entries(paths, encoding=encoding, workers=worker_count)


def search_directory(
    directory: str | Path,
    *keywords: str,
    pattern: Optional[str] = None,
    recursive: Optional[bool] = None,
    encoding: Optional[str] = None,
    workers: Optional[int] = None,
) -> List[str]:
    """Files under ``directory`` containing every keyword."""

    with telemetry.span("search::directory", metadata={"directory": directory}):
        entries = _scan(
            directory,
            pattern=pattern,
            recursive=recursive,
            encoding=encoding,
            workers=workers,
        )
        found = search(entries, *keywords)
    telemetry.record_event(
        "search.completed",
        data={
            "directory": directory,
            "scanned": len(entries),
            "matched": len(found),
        },
    )
    return found


def index_directory(
    directory: str | Path,
    *keywords: str,
    pattern: Optional[str] = None,
    recursive: Optional[bool] = None,
    encoding: Optional[str] = None,
    workers: Optional[int] = None,
) -> Dict[str, List[str]]:
    """Keyword to file mapping for files under ``directory``."""

    with telemetry.span("index::directory", metadata={"directory": directory}):
        entries = _scan(
            directory,
            pattern=pattern,
            recursive=recursive,
            encoding=encoding,
            workers=workers,
        )
        result = index(entries, *keywords)
    telemetry.record_event(
        "index.completed",
        data={
            "directory": directory,
            "scanned": len(entries),
            "keywords": len(result),
        },
    )
    return result


__all__ = [
    "enumerate_text_files",
    "index_directory",
    "iter_entries",
    "read_text",
    "search_directory",
]
