# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 Game

This module provides functionality to create and manage a graphical window for displaying a 2048 game
session. It utilizes Matplotlib for rendering and handling user interactions: key presses, and mouse drags
reported as swipe gestures.
"""
from enum import Enum
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event, MouseEvent

from pastel2048.game.session import GameState


class Theme(str, Enum):
    """
    Colour themes of the board.
    """

    DARK = 'DARK'
    LIGHT = 'LIGHT'

    def toggled(self) -> 'Theme':
        """Return the other theme."""
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


# ##: Colors mapping for different tile values, as (background, text).
PALETTES: dict[Theme, dict[int, tuple[str, str]]] = {
    Theme.DARK: {
        0: ("#1A1C23", "#1A1C23"),
        2: ("#2D3748", "#E2E8F0"),
        4: ("#C05621", "#FFFFFF"),
        8: ("#B83280", "#FFFFFF"),
        16: ("#805AD5", "#FFFFFF"),
        32: ("#3182CE", "#FFFFFF"),
        64: ("#38A169", "#FFFFFF"),
        128: ("#D69E2E", "#FFFFFF"),
        256: ("#E53E3E", "#FFFFFF"),
        512: ("#00B5D8", "#FFFFFF"),
        1024: ("#ED64A6", "#FFFFFF"),
        2048: ("#7928CA", "#FFFFFF"),
    },
    Theme.LIGHT: {
        0: ("#F5F0E8", "#F5F0E8"),
        2: ("#FFCCD5", "#FF4D6D"),
        4: ("#FFE5B4", "#FB8500"),
        8: ("#FDFFB6", "#FFD60A"),
        16: ("#CAFFBF", "#38B000"),
        32: ("#9BF6FF", "#0077B6"),
        64: ("#A0C4FF", "#3A86FF"),
        128: ("#BDB2FF", "#5A189A"),
        256: ("#FFC6FF", "#FF006E"),
        512: ("#FFADAD", "#D00000"),
        1024: ("#FFD6A5", "#FB5607"),
        2048: ("#8338EC", "#FFFFFF"),
    },
}

# ##: Colors of tiles beyond 2048, and of the board behind the tiles.
FALLBACK_COLORS = {Theme.DARK: ("#111827", "#FFFFFF"), Theme.LIGHT: ("#FFFFFF", "#1F2937")}
BOARD_COLORS = {Theme.DARK: "#0A0C12", Theme.LIGHT: "#FFF0F3"}

# ##: Keys the game handles itself, removed from the Matplotlib navigation shortcuts.
GAME_KEYS = ("up", "down", "left", "right", "backspace", "escape", "n", "t", "c", "q", "ctrl+z", "cmd+z")


def release_game_keys():
    """
    Unbind the game keys from the default Matplotlib shortcuts.

    Notes
    -----
    Left, right, backspace and c otherwise also move the toolbar history, and q closes the window.
    """
    for name in list(plt.rcParams):
        if name.startswith("keymap."):
            plt.rcParams[name] = [key for key in plt.rcParams[name] if key not in GAME_KEYS]


def tile_colors(value: int, theme: Theme) -> tuple[str, str]:
    """Return the (background, text) colors of a tile."""
    return PALETTES[theme].get(value, FALLBACK_COLORS[theme])


def status_line(state: GameState) -> str:
    """Build the line shown above the board."""
    line = f"Score: {state.score}    Best: {state.best_score}"
    if state.game_over:
        return f"{line}    Game over! (ctrl+z to rewind, n for a new game)"
    if state.won:
        return f"{line}    You won! (c to keep playing)"
    return line


class WindowBoard:
    """
    A class for rendering and managing the 2048 game board using Matplotlib.

    Methods
    -------
    show_state(state: GameState)
        Update the display with the current game state.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    register_swipe_handler(swipe_handler: Callable)
        Register a function receiving the drag distance of mouse gestures.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    def __init__(self, title: str, size: int, theme: Theme = Theme.DARK):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (4 for a 4x4 board).
        theme : Theme, optional
            Initial colour theme (default is dark).
        """
        self.theme = theme
        release_game_keys()
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self._press: Optional[tuple[float, float]] = None
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Set up one axe per cell of the board.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.92, wspace=0.05, hspace=0.05)
        self.axe.set_axis_off()

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """
        Handle the window close event.

        Parameters
        ----------
        event : Optional[Event]
            The close event (not used but required for event handling).
        """
        self.closed = True

    def show_state(self, state: GameState):
        """
        Show or update the game board, the scores and the terminal status.

        Parameters
        ----------
        state : GameState
            The game state to display.
        """
        self.fig.set_facecolor(BOARD_COLORS[self.theme])
        for ax, text, value in zip(self.axes, self.texts, state.grid.flat):
            value = int(value)
            background, foreground = tile_colors(value, self.theme)
            text.set_text(str(value) if value != 0 else "")
            text.set_color(foreground)
            ax.set_facecolor(background)

        self.fig.suptitle(status_line(state), color=tile_colors(2, self.theme)[1])
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function to handle keyboard events.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_swipe_handler(self, swipe_handler: Callable[[float, float], None]):
        """
        Register a handler for mouse drags.

        Parameters
        ----------
        swipe_handler : Callable[[float, float], None]
            Called on button release with the horizontal and vertical distance of the drag, in pixels.

        Notes
        -----
        Matplotlib display coordinates grow upwards, the vertical distance is flipped so that a positive value
        means a drag towards the bottom of the screen.
        """

        def on_press(event: MouseEvent):
            self._press = (event.x, event.y)

        def on_release(event: MouseEvent):
            if self._press is None:
                return
            start_x, start_y = self._press
            self._press = None
            swipe_handler(event.x - start_x, start_y - event.y)

        self.fig.canvas.mpl_connect("button_press_event", on_press)
        self.fig.canvas.mpl_connect("button_release_event", on_release)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
