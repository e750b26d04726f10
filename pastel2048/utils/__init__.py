# -*- coding: utf-8 -*-
"""
This module provides the Matplotlib window displaying a game session, and its colour themes.
"""

from .windows import GAME_KEYS, PALETTES, Theme, WindowBoard, release_game_keys, status_line, tile_colors

__all__ = ["GAME_KEYS", "PALETTES", "Theme", "WindowBoard", "release_game_keys", "status_line", "tile_colors"]
