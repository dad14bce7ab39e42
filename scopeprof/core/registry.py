"""Run-lifetime timing registry.

Maps each label to the durations recorded for it. One registry may be
live per process; it is started once before any scope is timed and
stopped once at the end of the run, which prints the report.
"""

import logging
import threading
from contextlib import nullcontext
from typing import TextIO

import numpy as np

from ..evaluation.metrics import memory_usage_bytes
from ..evaluation.report import ReportRow, build_rows, print_report
from ..utils.clock import now, ticks_to_duration
from .errors import LifecycleError, LifecycleViolation
from .scope import ScopeTimer, check_label

logger = logging.getLogger(__name__)


class TimingRegistry:
    """Label -> sample series store with an explicit start/stop lifecycle.

    Args:
        include_memory: Show process RSS in the report title.

    Usage:
        registry = TimingRegistry().start()
        with registry.scope("load"):
            load()
        registry.stop()  # prints the report
    """

    enabled = True

    _live: "TimingRegistry | None" = None
    _live_lock = threading.Lock()

    def __init__(self, include_memory: bool = True):
        self.include_memory = include_memory
        self._times: dict[str, list[int]] = {}
        self._lock = threading.Lock()
        self._run_start: int | None = None
        self._stopped = False
        # Filled by stop(); the raw samples are dropped at that point.
        self.report_rows: list[ReportRow] = []

    @classmethod
    def live(cls) -> "TimingRegistry | None":
        """Return the registry that is currently started, if any."""
        return cls._live

    @property
    def is_running(self) -> bool:
        return self._run_start is not None and not self._stopped

    def start(self) -> "TimingRegistry":
        """Claim the live slot and capture the run start time.

        Raises:
            LifecycleError: ALREADY_STARTED if this registry was started
                before, ALREADY_LIVE if another registry is running.
        """
        with self._lock:
            if self._run_start is not None:
                raise LifecycleError(LifecycleViolation.ALREADY_STARTED)
            with TimingRegistry._live_lock:
                if TimingRegistry._live is not None:
                    raise LifecycleError(LifecycleViolation.ALREADY_LIVE)
                TimingRegistry._live = self
            self._run_start = now()
        logger.debug("Timing registry started")
        return self

    def _require_running(self) -> None:
        if self._run_start is None:
            raise LifecycleError(LifecycleViolation.NOT_STARTED)
        if self._stopped:
            raise LifecycleError(LifecycleViolation.ALREADY_STOPPED)

    def record(self, label: str, duration: int) -> None:
        """Append one duration (microseconds) to the label's series."""
        check_label(label)
        if isinstance(duration, bool) or not isinstance(duration, (int, np.integer)):
            raise TypeError(f"duration must be an integer, got {type(duration).__name__}")
        duration = int(duration)
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")
        with self._lock:
            self._require_running()
            self._times.setdefault(label, []).append(duration)

    def scope(self, label: str) -> ScopeTimer:
        """Return a scope timer that records into this registry."""
        return ScopeTimer(label, self)

    def labels(self) -> list[str]:
        """Labels seen so far, in first-seen order."""
        with self._lock:
            return list(self._times)

    def series(self, label: str) -> list[int]:
        """Copy of the samples recorded for label."""
        with self._lock:
            return list(self._times[label])

    def stop(self, stream: TextIO | None = None) -> list[ReportRow]:
        """End the run, print the report and drop all samples.

        Args:
            stream: Where to write the report. Defaults to stdout.

        Returns:
            The report rows, one per label in first-seen order.

        Raises:
            LifecycleError: NOT_STARTED if start() was never called,
                ALREADY_STOPPED on a second call.
        """
        with self._lock:
            self._require_running()
            elapsed = ticks_to_duration(self._run_start, now())
            times, self._times = self._times, {}
            self._stopped = True
        with TimingRegistry._live_lock:
            if TimingRegistry._live is self:
                TimingRegistry._live = None

        rows = build_rows(times, elapsed)
        self.report_rows = rows
        rss = memory_usage_bytes() if self.include_memory else None
        print_report(rows, elapsed, rss_bytes=rss, stream=stream)
        logger.debug("Timing registry stopped: %d labels over %d us", len(rows), elapsed)
        return rows


class NullRegistry:
    """Registry used when instrumentation is disabled.

    Accepts and drops everything; scopes are a shared nullcontext and
    stop() prints nothing.
    """

    enabled = False
    is_running = True

    _null_scope = nullcontext()

    def __init__(self):
        self.report_rows: list[ReportRow] = []

    def start(self) -> "NullRegistry":
        return self

    def record(self, label: str, duration: int) -> None:
        pass

    def scope(self, label: str):
        return self._null_scope

    def labels(self) -> list[str]:
        return []

    def series(self, label: str) -> list[int]:
        raise KeyError(label)

    def stop(self, stream: TextIO | None = None) -> list[ReportRow]:
        return []
