# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from argparse import ArgumentParser
from typing import Any, Optional, Sequence

from pastel2048.core.grid import BOARD_SIZE, Direction
from pastel2048.core.spawn import make_random_source
from pastel2048.game import GameConfig, GameSession, is_undo_key, key_to_direction, swipe_direction
from pastel2048.storage import JsonScoreStore, MemoryScoreStore
from pastel2048.utils import Theme, WindowBoard

_logger = logging.getLogger(__name__)


def redraw(window: WindowBoard, session: GameSession):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    session: GameSession
        Game session to draw
    """
    window.show_state(session.state)


def reset(session: GameSession, window: WindowBoard):
    """
    Start a new game and redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    session.new_game()
    redraw(window, session)


def step(session: GameSession, window: WindowBoard, direction: Direction):
    """
    Applied a move into the game.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board

    direction: Direction
        Direction to move to
    """
    result = session.move(direction)
    if result.changed:
        redraw(window, session)


def undo(session: GameSession, window: WindowBoard):
    """Rewind the last move and redraw the game board."""
    if session.undo():
        redraw(window, session)


def key_handler(session: GameSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    _logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if is_undo_key(event.key):
        undo(session, window)
        return None

    if event.key in ("backspace", "n"):
        reset(session, window)
        return None

    if event.key == "t":
        window.theme = window.theme.toggled()
        redraw(window, session)
        return None

    if event.key == "c" and session.won:
        session.keep_playing()
        redraw(window, session)
        return None

    direction = key_to_direction(event.key)
    if direction is not None:
        step(session, window, direction)
    return None


def swipe_handler(session: GameSession, window: WindowBoard, dx: float, dy: float):
    """Move in the direction of a drag long enough to count as a swipe."""
    direction = swipe_direction(dx, dy, threshold=session.config.swipe_threshold)
    if direction is not None:
        step(session, window, direction)


def open_session(config: GameConfig, seed: Optional[int] = None, best_score_file: Optional[str] = None) -> GameSession:
    """
    Create the session played in the window.

    Parameters
    ----------
    config: GameConfig
        Session settings, including the key the best score is stored under

    seed: Optional[int]
        Seed of the tile placement

    best_score_file: Optional[str]
        JSON file keeping the best score, kept in memory when omitted
    """
    if best_score_file:
        store = JsonScoreStore(best_score_file, key=config.best_score_key)
    else:
        store = MemoryScoreStore()
    return GameSession(config=config, rng=make_random_source(seed), store=store)


def main(argv: Optional[Sequence[str]] = None):
    parser = ArgumentParser(description="Play 2048 with the arrow keys or by dragging the mouse.")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile placement")
    parser.add_argument("--theme", choices=[theme.value.lower() for theme in Theme], default="dark")
    parser.add_argument("--best-score-file", default=None, help="JSON file keeping the best score")
    parser.add_argument("--best-score-key", default=GameConfig.best_score_key, help="Entry of the best score file")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = GameConfig(best_score_key=args.best_score_key)
    session = open_session(config, seed=args.seed, best_score_file=args.best_score_file)

    window_board = WindowBoard(title="2048 Game", size=BOARD_SIZE, theme=Theme(args.theme.upper()))
    window_board.register_key_handler(lambda event: key_handler(session, window_board, event))
    window_board.register_swipe_handler(lambda dx, dy: swipe_handler(session, window_board, dx, dy))

    redraw(window_board, session)

    # Blocking event loop
    window_board.show(block=True)


if __name__ == "__main__":
    main()
