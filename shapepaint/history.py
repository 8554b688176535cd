"""Undo history of committed shape lists."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .types import Shape

Snapshot = Tuple[Shape, ...]


class History:
    """Stack of committed-list snapshots, one per commit.

    Snapshots are tuples of frozen shapes, so consecutive entries share their
    shape records. The stack is unbounded and there is no redo.
    """

    def __init__(self) -> None:
        self._snapshots: List[Snapshot] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)

    def commit(self, shapes: Sequence[Shape]) -> None:
        self._snapshots.append(tuple(shapes))

    def top(self) -> Snapshot:
        if not self._snapshots:
            return ()
        return self._snapshots[-1]

    def undo(self) -> Snapshot:
        """Drop the newest snapshot and return the one now on top."""
        if self._snapshots:
            self._snapshots.pop()
        return self.top()

    def clear(self) -> None:
        self._snapshots.clear()
