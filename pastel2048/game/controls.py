"""
Mapping of raw keyboard and swipe input onto game actions.
"""

from pastel2048.core.grid import Direction

# ##>: Key names as reported by Matplotlib and by browsers.
KEY_ACTIONS: dict[str, Direction] = {
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
    'arrowup': Direction.UP,
    'arrowdown': Direction.DOWN,
    'arrowleft': Direction.LEFT,
    'arrowright': Direction.RIGHT,
}

UNDO_MODIFIERS = ('ctrl', 'control', 'cmd', 'super', 'meta')

# ##>: Minimum swipe distance in pixels.
SWIPE_THRESHOLD = 40.0


def key_to_direction(key: str | None) -> Direction | None:
    """
    Translate a key name into a direction.

    Parameters
    ----------
    key : str | None
        Key name such as ``'left'`` or ``'ArrowLeft'``.

    Returns
    -------
    Direction | None
        The direction, or None for any other key.
    """
    if not key:
        return None
    return KEY_ACTIONS.get(key.lower())


def is_undo_key(key: str | None) -> bool:
    """Check if a key combination is control/command + z."""
    if not key:
        return False
    modifier, _, letter = key.lower().rpartition('+')
    return letter == 'z' and modifier in UNDO_MODIFIERS


def swipe_direction(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD) -> Direction | None:
    """
    Translate a drag gesture into a direction.

    Parameters
    ----------
    dx : float
        Horizontal distance from press to release, positive towards the right.
    dy : float
        Vertical distance from press to release, positive towards the bottom of the screen.
    threshold : float, optional
        Distance the dominant axis must strictly exceed (default is 40 pixels).

    Returns
    -------
    Direction | None
        The swipe direction, or None when the gesture is too short.

    Notes
    -----
    The dominant axis is the one with the largest absolute distance; ties go to the vertical axis.
    """
    if abs(dx) > abs(dy):
        if abs(dx) > threshold:
            return Direction.RIGHT if dx > 0 else Direction.LEFT
        return None
    if abs(dy) > threshold:
        return Direction.DOWN if dy > 0 else Direction.UP
    return None
