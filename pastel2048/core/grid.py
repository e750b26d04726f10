"""
Grid model for the 2048 board: fixed 4x4 integer matrix and the four move directions.
"""

from enum import Enum
from typing import Sequence

from numpy import argwhere, array, int64, ndarray, zeros

# ##>: Board dimensions never change during a game.
BOARD_SIZE = 4

# ##>: Tile value that wins the game.
WINNING_TILE = 2048


class Direction(str, Enum):
    """
    The four directions a move can slide the tiles.
    """

    UP = 'UP'
    DOWN = 'DOWN'
    LEFT = 'LEFT'
    RIGHT = 'RIGHT'

    @classmethod
    def from_name(cls, name: str) -> 'Direction':
        """
        Resolve a direction from its name, ignoring case.

        Parameters
        ----------
        name : str
            Direction name such as ``'up'`` or ``'LEFT'``.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the name is not one of the four directions.
        """
        try:
            return cls(name.strip().upper())
        except (AttributeError, ValueError) as error:
            raise ValueError(f'Unknown direction: {name!r}') from error


def empty_grid() -> ndarray:
    """Return a new grid with every cell empty."""
    return zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)


def validate_grid(grid: ndarray) -> None:
    """
    Check that a grid respects the board invariants.

    Parameters
    ----------
    grid : ndarray
        Grid to check.

    Raises
    ------
    ValueError
        If the grid is not 4x4, holds negative values, or holds non-zero values that are not powers of two
        greater or equal to 2.
    """
    if grid.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'Expected a {BOARD_SIZE}x{BOARD_SIZE} grid, received shape {grid.shape}')
    if (grid < 0).any():
        raise ValueError('Grid values must be non-negative')

    tiles = grid[grid != 0]
    # ##>: A power of two has a single bit set; 1 is excluded since tiles start at 2.
    if ((tiles & (tiles - 1)) != 0).any() or (tiles == 1).any():
        raise ValueError(f'Grid tiles must be powers of two >= 2, received {sorted(set(tiles.tolist()))}')


def as_grid(values: Sequence[Sequence[int]]) -> ndarray:
    """
    Build a validated grid from nested sequences.

    Parameters
    ----------
    values : Sequence[Sequence[int]]
        Row-major cell values.

    Returns
    -------
    ndarray
        A new 4x4 ``int64`` grid, independent from ``values``.

    Raises
    ------
    ValueError
        If the values do not form a valid grid.
    """
    try:
        grid = array(values, dtype=int64)
    except (TypeError, ValueError) as error:
        raise ValueError(f'Cannot build a grid from {values!r}') from error
    validate_grid(grid)
    return grid


def empty_cells(grid: ndarray) -> list[tuple[int, int]]:
    """Return the ``(row, col)`` coordinates of every empty cell, row by row."""
    return [(int(row), int(col)) for row, col in argwhere(grid == 0)]


def max_tile(grid: ndarray) -> int:
    """Return the largest tile on the grid, 0 for an empty grid."""
    return int(grid.max())
