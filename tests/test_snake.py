"""
Tests for the Snake and Obstacle entities.
"""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.obstacle import Obstacle
from domain.snake import Part, Snake


class TestSnakeConstruction:
    """Tests for how parts are laid out."""

    def test_positive_direction_lays_parts_left_to_right(self):
        """With dir=+1 the head is the rightmost part."""
        snake = Snake(5, 2, 3, 1)
        assert [p.x for p in snake.parts] == [5, 6, 7]
        assert all(p.dir == 1 for p in snake.parts)
        assert snake.head.x == 7

    def test_negative_direction_lays_parts_right_to_left(self):
        """With dir=-1 the head is the leftmost part."""
        snake = Snake(5, 2, 3, -1)
        assert [p.x for p in snake.parts] == [8, 7, 6]
        assert snake.head.x == 6

    def test_span_is_inclusive_and_ordered(self):
        snake = Snake(5, 2, 3, -1)
        assert snake.span == (6, 8)

    def test_row_is_kept(self):
        assert Snake(5, 9, 4, 1).y == 9

    def test_from_parts(self):
        snake = Snake.from_parts(0, [Part(8, 1), Part(9, 1), Part(10, 1)])
        assert snake.head == Part(10, 1)
        assert snake.span == (8, 10)

    @pytest.mark.parametrize("length, dir", [(0, 1), (3, 0), (3, 2)])
    def test_invalid_arguments_raise(self, length, dir):
        with pytest.raises(ValueError):
            Snake(5, 0, length, dir)

    def test_from_parts_requires_parts(self):
        with pytest.raises(ValueError):
            Snake.from_parts(0, [])


class TestSnakeUpdate:
    """Tests for the oscillation rule."""

    def test_parts_advance_by_their_direction(self):
        snake = Snake(5, 0, 3, 1)
        snake.update(20)
        assert [p.x for p in snake.parts] == [6, 7, 8]

    def test_part_bounces_off_right_edge(self):
        """Reaching x == width flips the direction and steps back."""
        snake = Snake.from_parts(0, [Part(9, 1)])
        snake.update(10)
        assert snake.head == Part(9, -1)
        snake.update(10)
        assert snake.head == Part(8, -1)

    def test_part_bounces_off_left_edge(self):
        snake = Snake.from_parts(0, [Part(0, -1)])
        snake.update(10)
        assert snake.head == Part(0, 1)
        snake.update(10)
        assert snake.head == Part(1, 1)

    def test_single_part_stays_in_bounds_forever(self):
        """A part starting at x with dir=+1 never leaves [0, W)."""
        width = 7
        snake = Snake.from_parts(0, [Part(3, 1)])
        previous = snake.head.x
        previous_dir = snake.head.dir
        for _ in range(100):
            snake.update(width)
            part = snake.head
            assert 0 <= part.x < width
            if part.dir != previous_dir:
                # Direction only flips when the step would have left the plane
                assert not 0 <= previous + previous_dir < width
            previous, previous_dir = part.x, part.dir

    def test_parts_move_independently(self):
        """Parts bounce one by one; the snake may fold onto itself."""
        snake = Snake(7, 0, 3, 1)  # parts at 7, 8, 9
        snake.update(10)
        assert [(p.x, p.dir) for p in snake.parts] == [(8, 1), (9, 1), (9, -1)]


class TestObstacle:
    """Tests for the Obstacle entity."""

    def test_covers_its_span_only(self):
        obstacle = Obstacle(x=5, y=0, width=3)
        assert [x for x in range(10) if obstacle.covers(x, 0)] == [5, 6, 7]
        assert not obstacle.covers(5, 1)

    def test_is_immutable(self):
        obstacle = Obstacle(1, 1, 2)
        with pytest.raises(AttributeError):
            obstacle.x = 3

    def test_width_must_be_positive(self):
        with pytest.raises(ValueError):
            Obstacle(1, 1, 0)
