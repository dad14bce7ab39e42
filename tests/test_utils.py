"""Tests for utility modules: clock, timer."""

import time
from types import SimpleNamespace

import pytest

from scopeprof.core.errors import ClockUnavailableError
from scopeprof.utils import clock
from scopeprof.utils.clock import now, ticks_to_duration
from scopeprof.utils.timer import timer


class TestClock:
    def test_monotonic(self):
        stamps = [now() for _ in range(1000)]
        assert all(b >= a for a, b in zip(stamps, stamps[1:]))

    def test_returns_int(self):
        assert isinstance(now(), int)

    def test_ticks_to_microseconds(self):
        assert ticks_to_duration(0, 1_000) == 1
        assert ticks_to_duration(0, 2_999) == 2
        assert ticks_to_duration(5_000, 5_000) == 0

    def test_negative_delta_clamped(self):
        assert ticks_to_duration(2_000, 1_000) == 0

    def test_sleep_measured(self):
        start = now()
        time.sleep(0.01)
        assert ticks_to_duration(start, now()) >= 9_000

    def test_non_monotonic_clock_rejected(self, monkeypatch):
        monkeypatch.setattr(
            clock.time, "get_clock_info",
            lambda name: SimpleNamespace(monotonic=False, implementation="x"),
        )
        with pytest.raises(ClockUnavailableError, match="not monotonic"):
            clock._check_clock()

    def test_monotonic_clock_accepted(self):
        clock._check_clock()


class TestTimer:
    def test_measures_time(self):
        with timer() as t:
            time.sleep(0.005)
        assert t.elapsed >= 4_000
        assert t.seconds < 5.0  # sanity

    def test_records_on_exception(self):
        with pytest.raises(KeyError):
            with timer() as t:
                time.sleep(0.002)
                raise KeyError("boom")
        assert t.elapsed > 0
