# ============================================================================
# HookMonitor - Test Configuration and Fixtures
#
# Purpose: Shared pytest fixtures for testing
# Inputs: None
# Outputs: Fixtures for use in tests
# Dependencies: pytest
# Usage: pytest tests/ (fixtures are automatically available)
#
# Changelog:
#   2026-10-03: Initial fixtures (fake clock, registry, session)
# ============================================================================

import pytest

from HookMonitor.config import Config
from HookMonitor.monitor import MonitorSession
from HookMonitor.registry.memory import InMemoryHookRegistry


class FakeClock:
    """
    Manually advanced clock with the Timer interface.

    Callbacks advance it to simulate work, so durations are exact.
    """

    def __init__(self, start: float = 100.0, wall_start: float = 1_700_000_000.0):
        self.current = start
        self.wall_offset = wall_start - start

    def now(self) -> float:
        return self.current

    def wall_time(self) -> float:
        return self.current + self.wall_offset

    def advance(self, seconds: float) -> None:
        self.current += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry():
    return InMemoryHookRegistry()


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def session(config, clock):
    """Inactive session using the fake clock."""
    return MonitorSession(config, timer=clock)
