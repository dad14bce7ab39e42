"""Scope timers: measure one execution of a labeled scope."""

import functools

from ..utils.clock import now, ticks_to_duration
from .errors import LifecycleError, LifecycleViolation


def check_label(label: str) -> None:
    if not isinstance(label, str) or not label:
        raise ValueError(f"label must be a non-empty string, got {label!r}")


class ScopeTimer:
    """Context manager that records the time spent inside its block.

    The sample is recorded on every exit path, including exceptions,
    which are never suppressed. Nested or concurrent timers with the
    same label each produce their own sample. Re-entering the same
    timer object nests too: each entry keeps its own start time.

    Exiting after the registry was stopped raises LifecycleError. If the
    block was already raising, the LifecycleError is chained to it
    (``raise ... from``), so the original exception stays visible as
    ``__cause__``.

    Example:
        with ScopeTimer("parse", registry):
            parse(data)
    """

    __slots__ = ("label", "registry", "_starts")

    def __init__(self, label: str, registry):
        check_label(label)
        self.label = label
        self.registry = registry
        self._starts: list[int] = []

    def __enter__(self) -> "ScopeTimer":
        if not self.registry.is_running:
            raise LifecycleError(
                LifecycleViolation.NOT_STARTED,
                f"scope {self.label!r} entered before the registry was started",
            )
        self._starts.append(now())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        elapsed = ticks_to_duration(self._starts.pop(), now())
        try:
            self.registry.record(self.label, elapsed)
        except LifecycleError as err:
            if exc_val is None:
                raise
            raise err from exc_val
        return False


def timed(registry, label: str | None = None):
    """Decorator that times every call of a function.

    Args:
        registry: TimingRegistry (or NullRegistry) to record into.
        label: Custom label. Defaults to the function's qualified name.

    A disabled registry returns the function untouched.
    """
    def decorator(fn):
        if not registry.enabled:
            return fn
        name = label if label is not None else fn.__qualname__
        check_label(name)

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            with ScopeTimer(name, registry):
                return fn(*args, **kwargs)
        return wrapper
    return decorator
