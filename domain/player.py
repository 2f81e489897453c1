"""
Player entity - the token the user steers through the plane.
"""

from enum import Enum

from .plane import Plane


class MovementStatus(Enum):
    HIT_OBSTACLE = "hit_obstacle"
    HIT_SNAKE = "hit_snake"
    HIT_SNAKE_HEAD = "hit_snake_head"
    SUCCEED = "succeed"


class Player:
    """
    Position of the player plus the collision rules against its plane.

    The plane is borrowed, not owned: it must outlive the player, and every
    move reads the plane's current obstacle and snake lists.
    """

    def __init__(self, x: int, y: int, plane: Plane):
        self.x = x
        self.y = y
        self.plane = plane

    @property
    def position(self):
        return (self.x, self.y)

    def move(self, dx: int, dy: int) -> MovementStatus:
        """
        Try to move by (dx, dy) and report what happened.

        A (0, 0) move re-checks the current cell, which is how the game loop
        notices snakes that slid onto the player.
        """
        target_x, target_y = self.x + dx, self.y + dy
        plane = self.plane

        # Walls and obstacles block the move
        if not (0 <= target_x < plane.width and 0 <= target_y < plane.height):
            return MovementStatus.HIT_OBSTACLE
        if any(obstacle.covers(target_x, target_y) for obstacle in plane.obstacles):
            return MovementStatus.HIT_OBSTACLE

        # First snake on the target row that matches decides the outcome
        caught_index = None
        for index, snake in enumerate(plane.snakes):
            if snake.y != target_y:
                continue
            if snake.head.x == target_x:
                return MovementStatus.HIT_SNAKE_HEAD
            begin, end = snake.span
            if begin <= target_x <= end:
                caught_index = index
                break

        self.x, self.y = target_x, target_y
        if caught_index is not None:
            del plane.snakes[caught_index]
            return MovementStatus.HIT_SNAKE
        return MovementStatus.SUCCEED

    def __repr__(self):
        return f"<Player at ({self.x}, {self.y})>"
