"""
Game constants for SnakeDodge.
"""

# Board settings
DEFAULT_GAME_WIDTH = 31  # must be odd
DEFAULT_GAME_HEIGHT = 20
GENERATE_BEGIN_OFFSET = 3
GENERATE_END_OFFSET = 0

# Timing (milliseconds)
DEFAULT_GAME_TIME_MS = 15000
SNAKE_UPDATE_INTERVAL_MS = 150
RENDER_INTERVAL_MS = 16
END_MESSAGE_HOLD_MS = 10000

# Level generation ranges, half-open like range()
SNAKE_LENGTH_RANGE = (3, 7)
OBSTACLE_FIRST_OFFSET_RANGE = (1, 3)
OBSTACLE_LENGTH_RANGE = (2, 7)
OBSTACLE_GAP_RANGE = (2, 4)

# Movement offsets
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
STAY = (0, 0)
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}
