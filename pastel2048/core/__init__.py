# -*- coding: utf-8 -*-
"""
This module provides the rules of the 2048 game.

It includes the grid model and directions, the row reduction and directional move engine, the random tile
spawner, the game over and win detectors, and helpers listing the legal moves of a grid.
"""

from .gameboard import MoveResult, has_won, is_game_over, move_grid, reduce_row, slide_left
from .gamemove import can_move, legal_moves
from .grid import BOARD_SIZE, WINNING_TILE, Direction, as_grid, empty_cells, empty_grid, max_tile, validate_grid
from .spawn import TILE_SPAWN_PROBS, RandomSource, make_random_source, seed_grid, spawn_tile

__all__ = [
    "BOARD_SIZE",
    "WINNING_TILE",
    "Direction",
    "as_grid",
    "empty_cells",
    "empty_grid",
    "max_tile",
    "validate_grid",
    "MoveResult",
    "reduce_row",
    "slide_left",
    "move_grid",
    "is_game_over",
    "has_won",
    "can_move",
    "legal_moves",
    "TILE_SPAWN_PROBS",
    "RandomSource",
    "make_random_source",
    "spawn_tile",
    "seed_grid",
]
