"""
2048 game session: the state a player interacts with between two new games.
"""

import logging
from dataclasses import dataclass

from numpy import ndarray

from pastel2048.core.gameboard import MoveResult, has_won, is_game_over, move_grid
from pastel2048.core.grid import Direction, empty_grid
from pastel2048.core.spawn import RandomSource, make_random_source, seed_grid, spawn_tile
from pastel2048.game.config import GameConfig
from pastel2048.game.history import History, HistorySnapshot
from pastel2048.storage.scores import MemoryScoreStore, ScoreStore

# ##>: Module logger.
_logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Everything the shell needs to render the game after a move.

    Attributes
    ----------
    grid : ndarray
        Copy of the current grid.
    score : int
        Score of the current game.
    best_score : int
        Best score ever reached.
    game_over : bool
        True when no move is left.
    won : bool
        True while the winning tile is reached and not yet dismissed.
    """

    grid: ndarray
    score: int
    best_score: int
    game_over: bool
    won: bool


class GameSession:
    """
    A player's game: current grid, score, best score, undo history and terminal flags.

    The session is the only owner of the mutable game state. Every operation runs synchronously to completion,
    so moves are applied strictly one after another in the order they are requested.
    """

    def __init__(
        self, config: GameConfig | None = None, rng: RandomSource | None = None, store: ScoreStore | None = None
    ):
        """
        Create a session and start its first game.

        Parameters
        ----------
        config : GameConfig, optional
            Session settings (default is ``GameConfig()``).
        rng : RandomSource, optional
            Source for tile placement (default is a freshly seeded generator).
        store : ScoreStore, optional
            Best score backend, read once here (default is an in-memory store).
        """
        self.config = config or GameConfig()
        self._rng = rng if rng is not None else make_random_source()
        self._store = store if store is not None else MemoryScoreStore()
        self.history = History(limit=self.config.history_limit)

        self.best_score = self._store.load()
        self.grid: ndarray = empty_grid()
        self.score = 0
        self.game_over = False
        self.won = False
        self._win_acknowledged = False

        self.new_game()

    @property
    def state(self) -> GameState:
        """Snapshot of the session for rendering."""
        return GameState(
            grid=self.grid.copy(),
            score=self.score,
            best_score=self.best_score,
            game_over=self.game_over,
            won=self.won,
        )

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    def new_game(self) -> GameState:
        """
        Reset everything but the best score and place the starting tiles.

        Returns
        -------
        GameState
            The state of the new game.
        """
        self.grid = seed_grid(self._rng, count=self.config.initial_tiles)
        self.score = 0
        self.history.clear()
        self.game_over = False
        self.won = False
        self._win_acknowledged = False

        _logger.info('New game started (best score: %d)', self.best_score)
        return self.state

    def move(self, direction: Direction) -> MoveResult:
        """
        Play one move.

        Parameters
        ----------
        direction : Direction
            Direction to slide the tiles to.

        Returns
        -------
        MoveResult
            The engine result, before the new tile was spawned. A move on a finished game or a blocked move
            reports ``changed=False`` and leaves the session untouched.

        Notes
        -----
        - An accepted move records the previous grid and score in the history, then spawns one tile.
        - The won flag is raised once per game; after ``keep_playing`` it stays down until ``new_game``.
        """
        if self.game_over:
            _logger.debug('Ignoring move %s: game is over', direction.value)
            return MoveResult(grid=self.grid.copy(), score=0, changed=False)

        result = move_grid(self.grid, direction)
        if not result.changed:
            _logger.debug('Move %s changes nothing', direction.value)
            return result

        self.history.push(HistorySnapshot(grid=self.grid, score=self.score))
        self.grid = spawn_tile(result.grid, self._rng)
        self.score += result.score
        self._update_best_score()

        if not self._win_acknowledged and not self.won and has_won(self.grid, self.config.target_tile):
            self.won = True
            _logger.info('Reached %d with a score of %d', self.config.target_tile, self.score)
        self.game_over = is_game_over(self.grid)

        _logger.debug('Move %s scored %d (total %d)', direction.value, result.score, self.score)
        if self.game_over:
            _logger.info('Game over with a score of %d', self.score)
        return result

    def undo(self) -> bool:
        """
        Restore the grid and score from before the last accepted move.

        Returns
        -------
        bool
            True if a move was undone, False when the history is empty.

        Notes
        -----
        Undo clears the game over flag but leaves the won flag as it is.
        """
        snapshot = self.history.pop()
        if snapshot is None:
            _logger.debug('Nothing to undo')
            return False

        self.grid = snapshot.grid.copy()
        self.score = snapshot.score
        self.game_over = False

        _logger.debug('Undo restored score %d (%d snapshots left)', self.score, len(self.history))
        return True

    def keep_playing(self) -> None:
        """Dismiss the win and keep going without raising it again in this game."""
        self.won = False
        self._win_acknowledged = True

    def _update_best_score(self) -> None:
        if self.score > self.best_score:
            self.best_score = self.score
            self._store.save(self.best_score)
            _logger.info('New best score: %d', self.best_score)
