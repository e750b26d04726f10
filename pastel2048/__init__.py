# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 sliding-tile puzzle.

The `core` package holds the pure rules, `game` the session a player interacts with, `storage` the best score
persistence and `utils` the Matplotlib window.
"""

from .core import Direction, MoveResult, has_won, is_game_over, move_grid, reduce_row, spawn_tile
from .game import GameConfig, GameSession, GameState

__all__ = [
    "Direction",
    "MoveResult",
    "reduce_row",
    "move_grid",
    "spawn_tile",
    "is_game_over",
    "has_won",
    "GameConfig",
    "GameSession",
    "GameState",
]
