"""
Non-blocking keyboard input on top of a curses window.
"""

import curses
from typing import Dict, Optional, Tuple

from domain.constants import UP, DOWN, LEFT, RIGHT

KEY_BINDINGS: Dict[int, Tuple[int, int]] = {
    ord('w'): UP,
    ord('W'): UP,
    curses.KEY_UP: UP,
    ord('s'): DOWN,
    ord('S'): DOWN,
    curses.KEY_DOWN: DOWN,
    ord('a'): LEFT,
    ord('A'): LEFT,
    curses.KEY_LEFT: LEFT,
    ord('d'): RIGHT,
    ord('D'): RIGHT,
    curses.KEY_RIGHT: RIGHT,
}


def offset_for_key(key: int) -> Optional[Tuple[int, int]]:
    """Map a key code to a movement offset, or None for unbound keys."""
    return KEY_BINDINGS.get(key)


class KeyboardInput:
    """
    Polls a curses window without waiting.

    read_key() returns the pending key code, or None when nothing was pressed.
    """

    def __init__(self, window):
        self.window = window
        self.window.nodelay(True)
        self.window.keypad(True)

    def read_key(self) -> Optional[int]:
        key = self.window.getch()
        if key == curses.ERR:
            return None
        return key
