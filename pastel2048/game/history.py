"""
Bounded undo history of a 2048 game.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator

from numpy import ndarray


@dataclass(frozen=True, eq=False)
class HistorySnapshot:
    """
    Grid and score as they were before an accepted move.

    Attributes
    ----------
    grid : ndarray
        Read-only copy of the grid, never shared with the live game.
    score : int
        Score at the time of the snapshot.
    """

    grid: ndarray
    score: int

    def __post_init__(self):
        """Take ownership of an independent, read-only copy of the grid."""
        grid = self.grid.copy()
        grid.setflags(write=False)
        object.__setattr__(self, 'grid', grid)


@dataclass
class History:
    """
    Stack of snapshots, most recent first, holding at most ``limit`` entries.

    Attributes
    ----------
    limit : int
        Maximum number of snapshots. Pushing beyond it evicts the oldest one.
    """

    limit: int = 20
    _snapshots: deque = field(init=False, repr=False)

    def __post_init__(self):
        """Initialize the storage."""
        self._snapshots = deque(maxlen=self.limit)

    def __len__(self) -> int:
        """Return number of snapshots held."""
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)

    def __iter__(self) -> Iterator[HistorySnapshot]:
        """Iterate from the most recent snapshot to the oldest."""
        return iter(self._snapshots)

    def push(self, snapshot: HistorySnapshot) -> None:
        """Record a snapshot as the most recent one."""
        self._snapshots.appendleft(snapshot)

    def pop(self) -> HistorySnapshot | None:
        """
        Remove and return the most recent snapshot.

        Returns
        -------
        HistorySnapshot | None
            The snapshot, or None when the history is empty.
        """
        if not self._snapshots:
            return None
        return self._snapshots.popleft()

    def peek(self) -> HistorySnapshot | None:
        """Return the most recent snapshot without removing it."""
        return self._snapshots[0] if self._snapshots else None

    def clear(self) -> None:
        self._snapshots.clear()
