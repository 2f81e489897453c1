"""
Terminal rendering of the plane and the player.

The frame and message boxes are built as plain strings by
build_frame_lines() / build_message_lines(); TerminalDisplay only copies
those lines onto a curses window. The layout is:

    ╔═══════╗
    ║  ═══  ║   obstacles
    ║ ──╂   ║   snake body and head
    ╠═ ◯    ║   player; ╠/╣ where a wall touches the border
    ╚═══════╝
"""

import logging
import time
from typing import Callable, List

from domain.plane import Plane
from domain.player import Player

logger = logging.getLogger(__name__)

EMPTY = ' '
OBSTACLE = '═'
SNAKE_BODY = '─'
SNAKE_HEAD = '╂'
PLAYER = '◯'


class DisplayError(RuntimeError):
    """Raised when the terminal cannot show the game."""


def _border(left: str, right: str, width: int) -> str:
    return left + '═' * width + right


def build_frame_lines(plane: Plane, player: Player) -> List[str]:
    """Draw obstacles, then snakes, then the player inside a border."""
    buffer = [[EMPTY] * plane.width for _ in range(plane.height)]

    for obstacle in plane.obstacles:
        for x in range(obstacle.x, obstacle.x + obstacle.width):
            buffer[obstacle.y][x] = OBSTACLE

    for snake in plane.snakes:
        for part in snake.parts:
            buffer[snake.y][part.x] = SNAKE_BODY
        buffer[snake.y][snake.head.x] = SNAKE_HEAD

    buffer[player.y][player.x] = PLAYER

    lines = [_border('╔', '╗', plane.width)]
    for row in buffer:
        left = '╠' if row[0] == OBSTACLE else '║'
        right = '╣' if row[-1] == OBSTACLE else '║'
        lines.append(left + ''.join(row) + right)
    lines.append(_border('╚', '╝', plane.width))
    return lines


def build_message_lines(text: str, width: int) -> List[str]:
    """Center `text` in a bordered box as wide as the frame."""
    length = len(text)
    padding = max((width - length) // 2, 0)
    body = ' ' * padding + text + ' ' * (padding + (length + 1) % 2)
    return [
        _border('╔', '╗', width),
        '║' + body + '║',
        _border('╚', '╝', width),
    ]


def format_remaining(seconds: float) -> str:
    return f"{seconds:.1f}"


class TerminalDisplay:
    """
    Draws frames and message boxes on a curses window.

    The message box is placed right under the most recent frame.
    """

    def __init__(self, window, sleep: Callable[[float], None] = time.sleep):
        self.window = window
        self.sleep = sleep
        self._message_row = 0

    def ensure_fits(self, width: int, height: int) -> None:
        """Raise DisplayError when a width x height plane plus a message box won't fit."""
        rows, cols = self.window.getmaxyx()
        needed_rows = height + 2 + 3
        needed_cols = width + 2 + 1
        if rows < needed_rows or cols < needed_cols:
            raise DisplayError(
                f"Terminal is {cols}x{rows}, the game needs at least {needed_cols}x{needed_rows}."
            )

    def render(self, plane: Plane, player: Player) -> None:
        lines = build_frame_lines(plane, player)
        self._draw(0, lines)
        self._message_row = len(lines)

    def show_message(self, text: str, width: int, hold_ms: int = 0) -> None:
        self._draw(self._message_row, build_message_lines(text, width))
        if hold_ms:
            logger.debug("Holding message %r for %d ms", text, hold_ms)
            self.sleep(hold_ms / 1000.0)

    def _draw(self, top: int, lines: List[str]) -> None:
        for offset, line in enumerate(lines):
            self.window.addstr(top + offset, 0, line)
        self.window.refresh()
