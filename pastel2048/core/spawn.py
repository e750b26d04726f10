"""
Random tile placement on the 2048 grid.

Randomness is never hidden in a module-level generator: every function takes the random source it draws
from, so callers can seed it or replace it with a scripted source in tests.
"""

from typing import Protocol

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator

from pastel2048.core.grid import empty_cells, empty_grid

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


class RandomSource(Protocol):
    """
    The random capability the spawner needs. ``numpy.random.Generator`` satisfies it.
    """

    def integers(self, high: int) -> int:
        """Return an integer drawn uniformly from ``[0, high)``."""

    def random(self) -> float:
        """Return a float drawn uniformly from ``[0, 1)``."""


def make_random_source(seed: int | None = None) -> Generator:
    """
    Build a seedable random source.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible games. Fresh entropy is used when omitted.

    Returns
    -------
    Generator
        A NumPy generator backed by PCG64DXSM.
    """
    return Generator(PCG64DXSM(seed))


def spawn_tile(grid: ndarray, rng: RandomSource) -> ndarray:
    """
    Place one new tile on a random empty cell.

    Parameters
    ----------
    grid : ndarray
        The current grid. It is not modified.
    rng : RandomSource
        Source used to pick the cell and the tile value.

    Returns
    -------
    ndarray
        A new grid holding one more tile, or an unchanged copy when the grid is full.

    Notes
    -----
    - Each empty cell is equally likely to be chosen.
    - The new tile is a 2 with probability 0.9 and a 4 otherwise.
    - Non-empty cells are never overwritten.
    """
    new_grid = grid.copy()
    cells = empty_cells(grid)
    if not cells:
        return new_grid

    cell = cells[int(rng.integers(len(cells)))]
    new_grid[cell] = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4
    return new_grid


def seed_grid(rng: RandomSource, count: int = 2) -> ndarray:
    """
    Build the starting grid of a game.

    Parameters
    ----------
    rng : RandomSource
        Source used to place the tiles.
    count : int, optional
        Number of tiles to place (default is 2).

    Returns
    -------
    ndarray
        An otherwise empty grid holding ``count`` tiles.
    """
    grid = empty_grid()
    for _ in range(count):
        grid = spawn_tile(grid, rng)
    return grid
