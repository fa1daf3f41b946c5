"""Pytest fixtures for all tests."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from auid import GeneratorConfig
from auid.clock import SystemClock

# 2023-11-14T22:13:20Z, 0x6553F100
KNOWN_TIMESTAMP = 1_700_000_000


class FixedClock(SystemClock):
    """Clock that always reports the same instant."""

    def __init__(self, timestamp: int) -> None:
        self.when = datetime.fromtimestamp(timestamp, tz=timezone.utc)

    def now(self) -> datetime:
        return self.when


def zero_entropy(length: int) -> bytes:
    return bytes(length)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Create a clock frozen at KNOWN_TIMESTAMP."""
    return FixedClock(KNOWN_TIMESTAMP)


@pytest.fixture
def zero_config(fixed_clock: FixedClock) -> GeneratorConfig:
    """Create a generator config with a frozen clock and all-zero random bits."""
    return GeneratorConfig(clock=fixed_clock, entropy=zero_entropy)


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
