"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass

from pastel2048.core.grid import BOARD_SIZE, WINNING_TILE


@dataclass(frozen=True)
class GameConfig:
    """
    Settings of a game session and of the interactive shell driving it.

    Attributes
    ----------
    target_tile : int
        Tile value that wins the game.
    history_limit : int
        Maximum number of undo snapshots kept.
    initial_tiles : int
        Number of tiles placed when a game starts.
    swipe_threshold : float
        Minimum dominant-axis distance, in pixels, for a drag to count as a swipe.
    best_score_key : str
        Key under which the best score is persisted.
    """

    target_tile: int = WINNING_TILE
    history_limit: int = 20
    initial_tiles: int = 2
    swipe_threshold: float = 40.0
    best_score_key: str = '2048-best-score'

    def __post_init__(self):
        """Validate the settings."""
        if self.target_tile < 4 or self.target_tile & (self.target_tile - 1):
            raise ValueError(f'target_tile must be a power of two >= 4, got {self.target_tile}')
        if self.history_limit < 0:
            raise ValueError(f'history_limit must be >= 0, got {self.history_limit}')
        if not 0 <= self.initial_tiles <= BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f'initial_tiles must be within [0, {BOARD_SIZE * BOARD_SIZE}], got {self.initial_tiles}')
        if self.swipe_threshold < 0:
            raise ValueError(f'swipe_threshold must be >= 0, got {self.swipe_threshold}')
        if not self.best_score_key:
            raise ValueError('best_score_key must not be empty')
