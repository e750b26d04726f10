# -*- coding: utf-8 -*-
"""
This module provides the backends persisting the best score between sessions.
"""

from .scores import DEFAULT_KEY, JsonScoreStore, MemoryScoreStore, ScoreStore

__all__ = ["DEFAULT_KEY", "ScoreStore", "MemoryScoreStore", "JsonScoreStore"]
