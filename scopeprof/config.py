"""Profiler configuration: the on/off switch and report options."""

import os
from dataclasses import dataclass

ENV_ACTIVE = "SCOPEPROF_ACTIVE"
ENV_MEMORY = "SCOPEPROF_MEMORY"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ProfilerConfig:
    """Settings for one profiled run.

    Attributes:
        enabled: Record timings. When False every scope is a no-op.
        include_memory: Show process RSS in the report title.
    """

    enabled: bool = False
    include_memory: bool = True

    @classmethod
    def from_env(cls) -> "ProfilerConfig":
        """Read SCOPEPROF_ACTIVE / SCOPEPROF_MEMORY from the environment."""
        return cls(
            enabled=_env_flag(ENV_ACTIVE, False),
            include_memory=_env_flag(ENV_MEMORY, True),
        )
