"""Run controller: owns the registry for the duration of one run."""

import logging
from contextlib import contextmanager
from typing import TextIO

from ..config import ProfilerConfig
from .registry import NullRegistry, TimingRegistry

logger = logging.getLogger(__name__)


def make_registry(config: ProfilerConfig) -> TimingRegistry | NullRegistry:
    """Build a real registry when profiling is enabled, a no-op one otherwise."""
    if not config.enabled:
        return NullRegistry()
    return TimingRegistry(include_memory=config.include_memory)


@contextmanager
def profile_run(config: ProfilerConfig | None = None, stream: TextIO | None = None):
    """Start a registry, yield it, and print the report when the block exits.

    Usage:
        with profile_run(ProfilerConfig(enabled=True)) as registry:
            with registry.scope("main"):
                main()

    Args:
        config: Defaults to ProfilerConfig.from_env().
        stream: Report destination. Defaults to stdout.

    The report is printed whether the block returns or raises.
    """
    config = config or ProfilerConfig.from_env()
    registry = make_registry(config)
    registry.start()
    logger.debug("Profiling %s", "enabled" if config.enabled else "disabled")
    try:
        yield registry
    finally:
        registry.stop(stream=stream)
