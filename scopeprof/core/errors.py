"""Exceptions raised by the profiler."""

from enum import Enum


class ProfilerError(RuntimeError):
    """Base class for all profiler errors."""


class LifecycleViolation(Enum):
    """Which ordering contract a caller broke."""

    ALREADY_LIVE = "another registry is already live"
    ALREADY_STARTED = "registry was already started"
    NOT_STARTED = "registry is not running"
    ALREADY_STOPPED = "registry was already stopped"


class LifecycleError(ProfilerError):
    """Registry or scope timer used out of order.

    These are programming errors: measurements taken after one would be
    invalid, so they are never caught inside the profiler.
    """

    def __init__(self, kind: LifecycleViolation, detail: str = ""):
        self.kind = kind
        message = kind.value if not detail else f"{kind.value}: {detail}"
        super().__init__(message)


class EmptySeriesError(ProfilerError, ValueError):
    """Statistics requested for a sample series with no samples."""


class ClockUnavailableError(ProfilerError):
    """The platform has no usable monotonic clock."""
