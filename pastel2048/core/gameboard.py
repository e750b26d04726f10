"""
Core functionality for the 2048 rules: row reduction, directional moves and terminal state detection.
"""

from dataclasses import dataclass
from typing import Callable

from numpy import all as np_all
from numpy import any as np_any
from numpy import array_equal, fliplr, ndarray, zeros_like

from pastel2048.core.grid import BOARD_SIZE, WINNING_TILE, Direction

# ##>: Axis transforms bringing each direction back to a left slide, paired with their inverse.
Transform = Callable[[ndarray], ndarray]

_ORIENTATIONS: dict[Direction, tuple[Transform, Transform]] = {
    Direction.LEFT: (lambda grid: grid, lambda grid: grid),
    Direction.RIGHT: (fliplr, fliplr),
    Direction.UP: (lambda grid: grid.T, lambda grid: grid.T),
    Direction.DOWN: (lambda grid: fliplr(grid.T), lambda grid: fliplr(grid).T),
}


@dataclass(frozen=True, eq=False)
class MoveResult:
    """
    Outcome of a move, before any tile is spawned.

    Attributes
    ----------
    grid : ndarray
        The grid after sliding and merging.
    score : int
        Sum of the values created by merges during the move.
    changed : bool
        True if at least one cell differs from the grid the move was applied to.
    """

    grid: ndarray
    score: int
    changed: bool


def reduce_row(row: ndarray) -> tuple[ndarray, int]:
    """
    Slide a row of four cells towards index 0 and merge equal neighbours.

    Parameters
    ----------
    row : ndarray
        A 1D array of four cells, each 0 or a power of two.

    Returns
    -------
    new_row : ndarray
        The reduced row, right-padded with zeros to length 4.
    score : int
        The total value of the merged tiles.

    Notes
    -----
    - Zeros are removed before merging, so tiles separated by gaps can merge.
    - Merging scans left to right and skips past a merged pair: a freshly doubled tile never merges again
      in the same reduction, hence ``[2, 2, 2, 0]`` gives ``[4, 2, 0, 0]``.
    - The input row is left untouched.
    """
    compacted = [int(value) for value in row if value != 0]

    merged = []
    score = 0
    i = 0
    while i < len(compacted):
        if i + 1 < len(compacted) and compacted[i] == compacted[i + 1]:
            value = compacted[i] * 2
            merged.append(value)
            score += value
            i += 2
        else:
            merged.append(compacted[i])
            i += 1

    result = zeros_like(row, shape=(BOARD_SIZE,))
    result[: len(merged)] = merged
    return result, score


def slide_left(grid: ndarray) -> tuple[ndarray, int]:
    """
    Reduce every row of the grid towards the left.

    Parameters
    ----------
    grid : ndarray
        The grid to reduce.

    Returns
    -------
    tuple[ndarray, int]
        The new grid and the score summed over the four rows.
    """
    result = zeros_like(grid)
    score = 0
    for i, row in enumerate(grid):
        result[i], row_score = reduce_row(row)
        score += row_score
    return result, score


def move_grid(grid: ndarray, direction: Direction) -> MoveResult:
    """
    Apply a move in one direction.

    Parameters
    ----------
    grid : ndarray
        The current grid. It is not modified.
    direction : Direction
        The direction the tiles slide to.

    Returns
    -------
    MoveResult
        The new grid, the score gained and whether any cell changed.

    Notes
    -----
    Every direction is the left reduction seen through an axis transform: RIGHT reverses the rows, UP
    transposes the grid and DOWN transposes then reverses.
    """
    forward, inverse = _ORIENTATIONS[direction]
    reduced, score = slide_left(forward(grid))
    new_grid = inverse(reduced).copy()
    return MoveResult(grid=new_grid, score=score, changed=not array_equal(grid, new_grid))


def is_game_over(grid: ndarray) -> bool:
    """
    Check if no move can change the grid anymore.

    Parameters
    ----------
    grid : ndarray
        The grid to check.

    Returns
    -------
    bool
        True if the grid is full and no horizontal or vertical neighbours are equal.
    """
    if not np_all(grid != 0):
        return False
    return not (np_any(grid[:, :-1] == grid[:, 1:]) or np_any(grid[:-1] == grid[1:]))


def has_won(grid: ndarray, target: int = WINNING_TILE) -> bool:
    """Check if any tile reached the target value."""
    return bool(np_any(grid >= target))
