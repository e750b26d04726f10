"""
Tests for the Matplotlib window and the keyboard and swipe handlers of the interactive shell.
"""

from types import SimpleNamespace

import matplotlib

matplotlib.use('Agg')

import numpy as np  # noqa: E402
import pytest  # noqa: E402
from matplotlib import pyplot as plt  # noqa: E402
from matplotlib.backend_bases import MouseEvent  # noqa: E402

from pastel2048.core.grid import Direction  # noqa: E402
from pastel2048.core.spawn import make_random_source  # noqa: E402
from pastel2048.game.config import GameConfig  # noqa: E402
from pastel2048.game.session import GameSession, GameState  # noqa: E402
from pastel2048.play import key_handler, open_session, swipe_handler  # noqa: E402
from pastel2048.utils.windows import GAME_KEYS, PALETTES, Theme, WindowBoard, status_line, tile_colors  # noqa: E402


@pytest.fixture
def window():
    board = WindowBoard(title='test', size=4)
    yield board
    plt.close('all')


@pytest.fixture
def session():
    game = GameSession(rng=make_random_source(11))
    game.grid = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
    return game


class TestThemes:
    """Tests for colour themes."""

    def test_toggle(self):
        assert Theme.DARK.toggled() is Theme.LIGHT
        assert Theme.LIGHT.toggled() is Theme.DARK

    def test_palettes_cover_regular_tiles(self):
        """Every tile up to 2048 has its own colour in both themes."""
        for theme in Theme:
            assert all(2**power in PALETTES[theme] for power in range(1, 12))

    def test_fallback_colour(self):
        """Tiles beyond 2048 fall back to a default colour."""
        assert tile_colors(4096, Theme.DARK) == tile_colors(8192, Theme.DARK)


class TestStatusLine:
    """Tests for the line above the board."""

    def test_scores(self):
        state = GameState(grid=np.zeros((4, 4)), score=12, best_score=40, game_over=False, won=False)
        assert status_line(state) == 'Score: 12    Best: 40'

    def test_terminal_messages(self):
        over = GameState(grid=np.zeros((4, 4)), score=0, best_score=0, game_over=True, won=False)
        won = GameState(grid=np.zeros((4, 4)), score=0, best_score=0, game_over=False, won=True)
        assert 'Game over' in status_line(over)
        assert 'You won' in status_line(won)


class TestWindowBoard:
    """Tests for the board window."""

    def test_show_state(self, window, session):
        """Cells display tile values and leave empty cells blank."""
        window.show_state(session.state)
        assert [text.get_text() for text in window.texts[:4]] == ['2', '2', '', '']

    def test_game_keys_unbound_from_toolbar(self, window):
        """Game keys no longer trigger Matplotlib navigation or quit shortcuts."""
        for name, keys in plt.rcParams.items():
            if name.startswith('keymap.'):
                assert not set(keys) & set(GAME_KEYS), name

        assert 'left' not in plt.rcParams['keymap.back']
        assert 'q' not in plt.rcParams['keymap.quit']

    def test_swipe_handler(self, window):
        """Mouse drags are reported with a downward-positive vertical distance."""
        received = []
        window.register_swipe_handler(lambda dx, dy: received.append((dx, dy)))

        canvas = window.fig.canvas
        canvas.callbacks.process('button_press_event', MouseEvent('button_press_event', canvas, 100, 200, 1))
        canvas.callbacks.process('button_release_event', MouseEvent('button_release_event', canvas, 110, 120, 1))

        assert received == [(10, 80)]


class TestHandlers:
    """Tests for the shell callbacks driving the session."""

    def test_arrow_key_moves(self, window, session):
        key_handler(session, window, SimpleNamespace(key='left'))
        assert session.score == 4
        assert session.grid[0, 0] == 4

    def test_undo_key(self, window, session):
        key_handler(session, window, SimpleNamespace(key='left'))
        key_handler(session, window, SimpleNamespace(key='ctrl+z'))
        assert session.score == 0
        assert not session.can_undo

    def test_theme_key(self, window, session):
        key_handler(session, window, SimpleNamespace(key='t'))
        assert window.theme is Theme.LIGHT

    def test_new_game_key(self, window, session):
        key_handler(session, window, SimpleNamespace(key='left'))
        key_handler(session, window, SimpleNamespace(key='n'))
        assert session.score == 0
        assert np.count_nonzero(session.grid) == 2

    def test_swipe_moves(self, window, session):
        swipe_handler(session, window, 80, 5)
        assert session.grid[0, 3] == 4

    def test_short_swipe_ignored(self, window, session):
        before = session.grid.copy()
        swipe_handler(session, window, 10, 5)
        np.testing.assert_array_equal(session.grid, before)

    def test_unknown_key_ignored(self, window, session):
        before = session.grid.copy()
        key_handler(session, window, SimpleNamespace(key='x'))
        np.testing.assert_array_equal(session.grid, before)


class TestOpenSession:
    """Tests for the session built by the command line."""

    def test_best_score_under_configured_key(self, tmp_path):
        """The best score file entry follows the configured key."""
        path = str(tmp_path / 'scores.json')
        config = GameConfig(best_score_key='pastel-best')

        game = open_session(config, seed=4, best_score_file=path)
        game.grid = np.array([[16, 16, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        game.move(Direction.LEFT)

        assert game.config is config
        assert open_session(GameConfig(best_score_key='pastel-best'), best_score_file=path).best_score == 32
        assert open_session(GameConfig(), best_score_file=path).best_score == 0

    def test_memory_store_without_file(self):
        """Without a file the best score starts at zero."""
        assert open_session(GameConfig(), seed=1).best_score == 0
