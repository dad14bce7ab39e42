"""Shared fixtures: a started registry that is always stopped afterwards."""

import io

import pytest

from scopeprof.core.registry import TimingRegistry


@pytest.fixture
def registry():
    reg = TimingRegistry(include_memory=False).start()
    yield reg
    if reg.is_running:
        reg.stop(stream=io.StringIO())


@pytest.fixture(autouse=True)
def release_live_registry():
    """Stop any registry a test left live so later tests can start their own."""
    yield
    reg = TimingRegistry.live()
    if reg is not None and reg.is_running:
        reg.stop(stream=io.StringIO())
