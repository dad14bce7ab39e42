"""Timing context manager for one-off measurements."""

from contextlib import contextmanager
from dataclasses import dataclass

from .clock import now, ticks_to_duration


@dataclass
class TimingResult:
    """Stores elapsed time from a timing context."""

    elapsed: int = 0

    @property
    def seconds(self) -> float:
        return self.elapsed / 1e6


@contextmanager
def timer():
    """Context manager that measures monotonic time in microseconds.

    Usage:
        with timer() as t:
            do_something()
        print(f"Took {t.elapsed}us")

    The result is filled in on exit, including when the block raises.
    """
    result = TimingResult()
    start = now()
    try:
        yield result
    finally:
        result.elapsed = ticks_to_duration(start, now())
