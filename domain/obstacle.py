"""
Obstacle entity - a static horizontal wall segment.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Obstacle:
    """
    A solid wall on row `y` covering columns [x, x + width).
    """

    x: int
    y: int
    width: int

    def __post_init__(self):
        if self.width < 1:
            raise ValueError(f"Obstacle width must be at least 1, got {self.width}.")

    def covers(self, x: int, y: int) -> bool:
        return self.y == y and self.x <= x < self.x + self.width
