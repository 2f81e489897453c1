"""
Domain entities for the SnakeDodge game engine.

This module contains the core game entities that are independent of
the terminal (rendering, keyboard, clock).
"""

from .constants import UP, DOWN, LEFT, RIGHT, STAY, VALID_MOVES
from .obstacle import Obstacle
from .snake import Part, Snake
from .plane import Plane
from .player import MovementStatus, Player
from .game_state import Cadence, GamePhase, GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'STAY', 'VALID_MOVES',
    'Obstacle',
    'Part', 'Snake',
    'Plane',
    'MovementStatus', 'Player',
    'Cadence', 'GamePhase', 'GameState',
]
