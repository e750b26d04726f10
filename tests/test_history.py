"""
Tests for the bounded undo history.
"""

from unittest import TestCase, main

import numpy as np

from pastel2048.game.history import History, HistorySnapshot


def snapshot(score: int) -> HistorySnapshot:
    grid = np.zeros((4, 4), dtype=np.int64)
    grid[0, 0] = 2
    return HistorySnapshot(grid=grid, score=score)


class TestHistorySnapshot(TestCase):
    """Test snapshot ownership."""

    def test_snapshot_is_independent_copy(self):
        """Mutating the live grid never alters a stored snapshot."""
        live = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        saved = HistorySnapshot(grid=live, score=12)

        live[0, 0] = 1024

        self.assertEqual(saved.grid[0, 0], 2)
        self.assertFalse(np.shares_memory(saved.grid, live))

    def test_snapshot_is_read_only(self):
        """Stored grids cannot be written to."""
        saved = snapshot(0)
        with self.assertRaises(ValueError):
            saved.grid[0, 0] = 4


class TestHistory(TestCase):
    """Test push, pop and the capacity bound."""

    def setUp(self):
        self.history = History(limit=20)

    def test_pop_empty_is_none(self):
        """Popping an empty history signals emptiness without raising."""
        self.assertIsNone(self.history.pop())
        self.assertIsNone(self.history.peek())
        self.assertFalse(self.history)

    def test_last_in_first_out(self):
        """Most recent snapshot comes back first."""
        for score in (1, 2, 3):
            self.history.push(snapshot(score))

        self.assertEqual(self.history.peek().score, 3)
        self.assertEqual([item.score for item in self.history], [3, 2, 1])
        self.assertEqual(self.history.pop().score, 3)
        self.assertEqual(self.history.pop().score, 2)
        self.assertEqual(len(self.history), 1)

    def test_capacity_keeps_most_recent(self):
        """Pushing 25 snapshots keeps the 20 most recent; the 21st pop is a no-op."""
        for score in range(25):
            self.history.push(snapshot(score))

        self.assertEqual(len(self.history), 20)

        popped = [self.history.pop().score for _ in range(20)]
        self.assertEqual(popped, list(range(24, 4, -1)))
        self.assertEqual(len(self.history), 0)
        self.assertIsNone(self.history.pop())

    def test_clear(self):
        """Clearing empties the history."""
        self.history.push(snapshot(1))
        self.history.clear()
        self.assertEqual(len(self.history), 0)


if __name__ == "__main__":
    main()
