"""Monotonic clock source used by every timing primitive."""

import time

from ..core.errors import ClockUnavailableError

NS_PER_US = 1_000


def _check_clock() -> None:
    info = time.get_clock_info("perf_counter")
    if not info.monotonic:
        raise ClockUnavailableError(
            f"perf_counter is not monotonic on this platform ({info.implementation})"
        )


_check_clock()


def now() -> int:
    """Return monotonic ticks in nanoseconds. Only deltas are meaningful."""
    return time.perf_counter_ns()


def ticks_to_duration(start: int, end: int) -> int:
    """Convert a tick delta to whole microseconds.

    Args:
        start: Ticks from now() at scope entry.
        end: Ticks from now() at scope exit.

    Returns:
        Non-negative integer microseconds.
    """
    return max(0, end - start) // NS_PER_US
