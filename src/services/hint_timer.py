"""
Inactivity timer for the move hint.

Not a real timer: the owner polls is_due() (e.g. once a second from the UI loop), which keeps the engine free of any timing concerns.
"""

import time
from typing import Callable

from src.core.config import Config

Clock = Callable[[], float]


class HintTimer:
    def __init__(
        self, delay: float = Config.HINT_DELAY_SEC, clock: Clock = time.monotonic
    ) -> None:
        if delay < 0:
            raise ValueError(f"Hint delay can't be negative, got {delay}.")
        self.delay = delay
        self._clock = clock
        self._last_activity = clock()
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True
        self.touch()

    def stop(self) -> None:
        self._running = False

    def touch(self) -> None:
        """Something happened (a move, a reset): count from now."""
        self._last_activity = self._clock()

    def elapsed(self) -> float:
        return self._clock() - self._last_activity

    def is_due(self) -> bool:
        return self._running and self.elapsed() >= self.delay
