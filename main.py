import curses
import locale
import logging
import os
import random
import sys
import time
from typing import Callable, Optional

from dotenv import load_dotenv

from domain.constants import (
    DEFAULT_GAME_WIDTH,
    DEFAULT_GAME_HEIGHT,
    GENERATE_BEGIN_OFFSET,
    GENERATE_END_OFFSET,
    END_MESSAGE_HOLD_MS,
    STAY,
)
from domain.game_state import GamePhase, GameState
from domain.plane import Plane
from domain.player import MovementStatus, Player
from services.clock import MonotonicClock
from services.display import DisplayError, TerminalDisplay, format_remaining
from services.keyboard import KeyboardInput, offset_for_key

logger = logging.getLogger(__name__)

IDLE_SLEEP_SECONDS = 0.001


def new_level(
    width: int = DEFAULT_GAME_WIDTH,
    height: int = DEFAULT_GAME_HEIGHT,
    rng: Optional[random.Random] = None
):
    """
    Build a freshly generated plane and a player standing near its top edge.

    Returns:
        (plane, player)
    """
    plane = Plane(width, height, rng=rng)
    plane.generate(GENERATE_BEGIN_OFFSET, GENERATE_END_OFFSET)
    player = Player(plane.width // 2, 1, plane)
    return plane, player


class SnakeDodgeGame:
    """
    Manages:
      - Plane and player
      - Keyboard polling
      - Snake updates and redraws on their own cadences
      - The play timer and the end of the game

    Nothing here blocks except the final message hold; every collaborator is
    injected so the loop can be driven by a fake clock.
    """
    def __init__(
        self,
        plane: Plane,
        player: Player,
        display,
        keyboard,
        clock,
        state: Optional[GameState] = None,
        idle_sleep: Callable[[float], None] = time.sleep
    ):
        self.plane = plane
        self.player = player
        self.display = display
        self.keyboard = keyboard
        self.clock = clock
        self.state = state if state is not None else GameState()
        self.idle_sleep = idle_sleep

    def draw(self, now_ms: int) -> None:
        self.display.render(self.plane, self.player)
        self.display.show_message(
            format_remaining(self.state.remaining_seconds(now_ms)), self.plane.width
        )

    def step(self) -> None:
        """
        Run one loop iteration:
          1) Poll the keyboard and try the move (starting the timer on the first one)
          2) End the game if the play time ran out
          3) Move the snakes and re-check the player's cell on the simulation cadence
          4) Redraw on the render cadence
          5) Apply the movement outcome to the state
        """
        state = self.state
        now = self.clock.now_ms()
        status: Optional[MovementStatus] = None

        key = self.keyboard.read_key()
        if key is not None:
            offset = offset_for_key(key)
            if offset is None:
                return
            status = self.player.move(*offset)
            if state.start(now):
                logger.info("Game started, %d ms on the clock", state.duration_ms)

        if state.check_time(now):
            logger.info("Time is up")
            return

        if state.simulation.due(now):
            self.plane.update_snakes()
            if status is None:
                status = self.player.move(*STAY)

        if state.render.due(now):
            self.draw(now)

        if status is not None:
            state.apply_movement(status)
            if status is MovementStatus.HIT_SNAKE:
                logger.info("Caught a snake at %s (%d so far)", self.player.position, state.snakes_caught)
            elif status is MovementStatus.HIT_SNAKE_HEAD:
                logger.info("Hit by a snake head next to %s", self.player.position)

    def finish(self) -> None:
        """Draw the last frame and hold the end-of-game message."""
        self.display.render(self.plane, self.player)
        self.display.show_message(self.state.final_message(), self.plane.width, END_MESSAGE_HOLD_MS)

    def run(self) -> GamePhase:
        self.draw(self.clock.now_ms())
        while not self.state.finished:
            self.step()
            self.idle_sleep(IDLE_SLEEP_SECONDS)

        logger.info("Game over: %s, %d snakes caught", self.state.phase.value, self.state.snakes_caught)
        self.finish()
        return self.state.phase


def configure_logging() -> None:
    """
    Send log records to SNAKEDODGE_LOG_FILE when it is set.

    curses owns the terminal, so without a log file records are dropped.
    """
    log_file = os.getenv("SNAKEDODGE_LOG_FILE")
    log_level = os.getenv("SNAKEDODGE_LOG_LEVEL", "INFO").upper()
    handlers = [logging.FileHandler(log_file)] if log_file else [logging.NullHandler()]
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )


def play(window) -> GamePhase:
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor")
    plane, player = new_level()
    display = TerminalDisplay(window)
    display.ensure_fits(plane.width, plane.height)
    logger.info("New level: %r", plane)

    game = SnakeDodgeGame(
        plane=plane,
        player=player,
        display=display,
        keyboard=KeyboardInput(window),
        clock=MonotonicClock(),
    )
    return game.run()


def main() -> int:
    load_dotenv()
    configure_logging()
    random.seed(time.time())
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as e:
        logger.warning("Could not set locale, box drawing may look off: %s", e)

    try:
        curses.wrapper(play)
    except DisplayError as e:
        logger.error("Cannot start game: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
