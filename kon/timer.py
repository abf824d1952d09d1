"""A manually started and stopped monotonic timer."""

from __future__ import annotations

import time
from collections.abc import Callable


class Timer:
    """Measures the time between :meth:`start_timer` and :meth:`end_timer`.

    Times are monotonic nanoseconds taken from ``clock``.
    """

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self.start: int | None = None
        self.end: int | None = None

    def start_timer(self) -> None:
        self.start = self._clock()
        self.end = None

    def end_timer(self) -> None:
        if self.start is None:
            raise RuntimeError("timer was never started")
        self.end = self._clock()

    def elapsed_ns(self) -> int:
        if self.start is None or self.end is None:
            raise RuntimeError("timer has not been started and ended")
        return self.end - self.start

    def elapsed_us(self) -> int:
        """Elapsed time in whole microseconds."""
        return self.elapsed_ns() // 1000

    def __enter__(self) -> Timer:
        self.start_timer()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end_timer()