"""
Move utilities for the 2048 rules, providing functions for determining which directions are legal.
"""

from numpy import ndarray

from pastel2048.core.gameboard import move_grid
from pastel2048.core.grid import Direction


def can_move(grid: ndarray, direction: Direction) -> bool:
    """
    Check if a move in one direction would change the grid.

    Parameters
    ----------
    grid : ndarray
        The grid to check.
    direction : Direction
        The direction to try.

    Returns
    -------
    bool
        True if the move changes at least one cell.
    """
    return move_grid(grid, direction).changed


def legal_moves(grid: ndarray) -> list[Direction]:
    """
    Determine the directions that change the grid.

    Parameters
    ----------
    grid : ndarray
        The grid to check.

    Returns
    -------
    list[Direction]
        Legal directions, in declaration order of ``Direction``.

    Notes
    -----
    - An empty list on a full grid means the game is over.
    - An empty grid has no legal move either.
    """
    return [direction for direction in Direction if can_move(grid, direction)]
