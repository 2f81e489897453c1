"""
GameState - the loop-local state machine of a single session.
"""

from dataclasses import dataclass, field
from enum import Enum

from .constants import (
    DEFAULT_GAME_TIME_MS,
    SNAKE_UPDATE_INTERVAL_MS,
    RENDER_INTERVAL_MS,
)
from .player import MovementStatus


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    LOST = "lost"
    TIMED_OUT = "timed_out"


@dataclass
class Cadence:
    """
    A periodic action driven by polling a millisecond clock.

    Fires when at least `interval_ms` have passed since it last fired.
    """

    interval_ms: int
    last_fired_ms: int = 0

    def due(self, now_ms: int) -> bool:
        if now_ms - self.last_fired_ms >= self.interval_ms:
            self.last_fired_ms = now_ms
            return True
        return False


@dataclass
class GameState:
    """
    Everything the game loop mutates besides the plane and the player.

    Attributes:
        phase: current GamePhase
        snakes_caught: number of snakes the player passed through
        start_ms: clock reading of the first movement attempt
        duration_ms: total play time once running
        simulation: cadence of snake updates
        render: cadence of redraws
    """

    phase: GamePhase = GamePhase.NOT_STARTED
    snakes_caught: int = 0
    start_ms: int = 0
    duration_ms: int = DEFAULT_GAME_TIME_MS
    simulation: Cadence = field(default_factory=lambda: Cadence(SNAKE_UPDATE_INTERVAL_MS))
    render: Cadence = field(default_factory=lambda: Cadence(RENDER_INTERVAL_MS))

    @property
    def running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    @property
    def finished(self) -> bool:
        return self.phase in (GamePhase.LOST, GamePhase.TIMED_OUT)

    def start(self, now_ms: int) -> bool:
        """Start the timer on the first movement attempt. Returns True if it started now."""
        if self.phase is not GamePhase.NOT_STARTED:
            return False
        self.phase = GamePhase.RUNNING
        self.start_ms = now_ms
        return True

    def elapsed_ms(self, now_ms: int) -> int:
        return now_ms - self.start_ms if self.running else 0

    def remaining_seconds(self, now_ms: int) -> float:
        return (self.duration_ms - self.elapsed_ms(now_ms)) / 1000.0

    def check_time(self, now_ms: int) -> bool:
        """Move to TIMED_OUT once the play time is exceeded. Returns True on timeout."""
        if self.running and now_ms - self.start_ms > self.duration_ms:
            self.phase = GamePhase.TIMED_OUT
            return True
        return False

    def apply_movement(self, status: MovementStatus) -> None:
        if status is MovementStatus.HIT_SNAKE:
            self.snakes_caught += 1
        elif status is MovementStatus.HIT_SNAKE_HEAD:
            self.phase = GamePhase.LOST

    def final_message(self) -> str:
        if self.phase is GamePhase.LOST:
            return "You got hit by snake!"
        return f"You caught {self.snakes_caught} snakes!"
