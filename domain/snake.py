"""
Snake entity for the game engine.
"""

from typing import List


class Part:
    """A single oscillating cell of a snake."""

    __slots__ = ("x", "dir")

    def __init__(self, x: int, dir: int):
        self.x = x
        self.dir = dir

    def __eq__(self, other):
        if not isinstance(other, Part):
            return NotImplemented
        return self.x == other.x and self.dir == other.dir

    def __repr__(self):
        return f"Part(x={self.x}, dir={self.dir})"


class Snake:
    """
    Represents a snake on the board.

    A snake lives on a single row for its whole lifetime. Each part moves
    independently and bounces off the plane edges; parts never interact.

    Attributes:
        y: the row the snake lives on
        parts: list of Part in generation order; the last one is the head
    """

    def __init__(self, x: int, y: int, length: int, dir: int):
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}.")
        if dir not in (1, -1):
            raise ValueError(f"Snake direction must be 1 or -1, got {dir}.")

        self.y = y
        self.parts: List[Part] = [
            Part(x + i if dir > 0 else x + length - i, dir)
            for i in range(length)
        ]

    @classmethod
    def from_parts(cls, y: int, parts: List[Part]) -> "Snake":
        """Build a snake from explicit parts (mostly useful for fixed layouts)."""
        if not parts:
            raise ValueError("Snake needs at least one part.")
        snake = cls.__new__(cls)
        snake.y = y
        snake.parts = list(parts)
        return snake

    @property
    def head(self) -> Part:
        """Return the head part (last element)."""
        return self.parts[-1]

    @property
    def span(self):
        """Inclusive (min_x, max_x) between the first part and the head."""
        begin, end = self.parts[0].x, self.parts[-1].x
        return min(begin, end), max(begin, end)

    def update(self, width: int) -> None:
        """Advance every part one step, reflecting off [0, width)."""
        for part in self.parts:
            part.x += part.dir
            if part.x >= width or part.x < 0:
                part.dir *= -1
                part.x += part.dir

    def __repr__(self):
        return f"<Snake y={self.y}, parts={[p.x for p in self.parts]}>"
