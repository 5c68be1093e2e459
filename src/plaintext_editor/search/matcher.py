"""Keyword matching over ``(path, content)`` pairs.

These functions never touch the file system; ``files`` feeds them.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

Entry = Tuple[str, str]


def matches(content: str, keyword: str) -> bool:
    """Case-sensitive literal substring test shared by ``search`` and ``index``."""

    return keyword in content


def matches_all(content: str, keywords: Sequence[str]) -> bool:
    return all(matches(content, keyword) for keyword in keywords)


def search(entries: Iterable[Entry], *keywords: str) -> List[str]:
    """Paths whose content contains every keyword, in input order.

    With no keywords every path matches.
    """

    return [path for path, content in entries if matches_all(content, keywords)]


def index(entries: Iterable[Entry], *keywords: str) -> Dict[str, List[str]]:
    """Map each keyword to the paths containing it.

    Keywords are matched independently, so one path can be listed under several
    of them. A keyword that matches nothing does not appear in the result.
    """

    unique = tuple(dict.fromkeys(keywords))
    result: Dict[str, List[str]] = {}
    for path, content in entries:
        for keyword in unique:
            if matches(content, keyword):
                result.setdefault(keyword, []).append(path)
    return result


__all__ = ["Entry", "index", "matches", "matches_all", "search"]
