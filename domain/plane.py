"""
Plane entity - the rectangular level holding obstacles and snakes.
"""

import logging
import random
from typing import List, Optional

from .constants import (
    SNAKE_LENGTH_RANGE,
    OBSTACLE_FIRST_OFFSET_RANGE,
    OBSTACLE_LENGTH_RANGE,
    OBSTACLE_GAP_RANGE,
)
from .obstacle import Obstacle
from .snake import Snake

logger = logging.getLogger(__name__)


class Plane:
    """
    The game level.

    Attributes:
        width, height: grid dimensions (width should be odd)
        obstacles: list of Obstacle in generation order
        snakes: list of Snake in generation order
        rng: random source used by generate(); defaults to the `random` module
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        if width < 1 or height < 1:
            raise ValueError(f"Plane dimensions must be positive, got {width}x{height}.")

        self.width = width
        self.height = height
        self.obstacles: List[Obstacle] = []
        self.snakes: List[Snake] = []
        self.rng = rng if rng is not None else random

    def generate(self, begin_offset: int, end_offset: int) -> None:
        """
        Populate the level row by row.

        Every visited row y gets a scatter of obstacles and the row below it
        (y + 1) gets one snake, so rows alternate wall / snake. Overlap between
        an obstacle and a snake is not checked.
        """
        for y in range(begin_offset, self.height - end_offset - 1, 2):
            self._add_snake(y + 1)
            self._add_obstacles(y)

        logger.debug(
            "Generated %dx%d plane: %d snakes, %d obstacles",
            self.width, self.height, len(self.snakes), len(self.obstacles)
        )

    def _add_snake(self, y: int) -> None:
        length = self.rng.randrange(*SNAKE_LENGTH_RANGE)
        dir = 1 if self.rng.randrange(0, 2) else -1
        x = self.rng.randrange(length + 1, self.width - length)
        self.snakes.append(Snake(x, y, length, dir))

    def _add_obstacles(self, y: int) -> None:
        x = self.rng.randrange(*OBSTACLE_FIRST_OFFSET_RANGE)
        while x < self.width:
            length = self.rng.randrange(*OBSTACLE_LENGTH_RANGE)
            if x + length >= self.width:
                length = self.width - x
            self.obstacles.append(Obstacle(x, y, length))
            x += length + self.rng.randrange(*OBSTACLE_GAP_RANGE)

    def update_snakes(self) -> None:
        for snake in self.snakes:
            snake.update(self.width)

    def __repr__(self):
        return (
            f"<Plane {self.width}x{self.height}, "
            f"snakes={len(self.snakes)}, obstacles={len(self.obstacles)}>"
        )
