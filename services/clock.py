"""
Monotonic millisecond clock used to drive the game loop cadences.
"""

import time


class MonotonicClock:
    """Milliseconds from time.monotonic(); never goes backwards."""

    def now_ms(self) -> int:
        return int(time.monotonic() * 1000)
