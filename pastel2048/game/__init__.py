# -*- coding: utf-8 -*-
"""
Python implementation of a 2048 game session.

This module provides the `GameSession` class, which owns the grid, the scores, the undo history and the
terminal flags, together with its configuration and the mapping of keys and swipes onto moves.
"""

from .config import GameConfig
from .controls import KEY_ACTIONS, SWIPE_THRESHOLD, is_undo_key, key_to_direction, swipe_direction
from .history import History, HistorySnapshot
from .session import GameSession, GameState

__all__ = [
    "GameConfig",
    "GameSession",
    "GameState",
    "History",
    "HistorySnapshot",
    "KEY_ACTIONS",
    "SWIPE_THRESHOLD",
    "is_undo_key",
    "key_to_direction",
    "swipe_direction",
]
