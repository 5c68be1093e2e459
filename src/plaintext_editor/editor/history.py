"""Linear snapshot history backing ``Editor.undo``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Content of a document at one version."""

    content: str


class History:
    """Stack of snapshots, newest last.

    ``restore_last`` pops the newest snapshot and hands back the content that is
    now on top, so one undo after ``n`` changes surfaces the state after change
    ``n - 1``. Popping the final snapshot returns ``None``: there is nothing
    older to go back to.
    """

    def __init__(self, *, limit: Optional[int] = None) -> None:
        if limit is not None and limit < 1:
            raise ValueError("limit must be at least 1")
        self._snapshots: List[Snapshot] = []
        self._limit = limit

    @property
    def limit(self) -> Optional[int]:
        return self._limit

    def record(self, content: str) -> Snapshot:
        snapshot = Snapshot(content)
        self._snapshots.append(snapshot)
        if self._limit is not None and len(self._snapshots) > self._limit:
            del self._snapshots[0]
        return snapshot

    def restore_last(self) -> Optional[str]:
        if not self._snapshots:
            return None
        self._snapshots.pop()
        if not self._snapshots:
            return None
        return self._snapshots[-1].content

    def peek(self) -> Optional[Snapshot]:
        return self._snapshots[-1] if self._snapshots else None

    def can_restore(self) -> bool:
        return len(self._snapshots) > 1

    def contents(self) -> tuple[str, ...]:
        return tuple(snapshot.content for snapshot in self._snapshots)

    def clear(self) -> None:
        self._snapshots.clear()

    @property
    def size(self) -> int:
        return len(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)
