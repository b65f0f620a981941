"""Shared fixtures and fakes for unit tests."""

from __future__ import annotations

import pytest

from memo_cache.cache.store import CacheStore
from memo_cache.core.registry import NamespaceRegistry
from memo_cache.monitoring.metrics import CacheMetrics
from memo_cache.utils.config import CacheConfig


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: int = 1_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def metrics():
    return CacheMetrics()


@pytest.fixture
def store(clock, metrics):
    """A store in namespace "test" driven by the fake clock."""
    return CacheStore("test", clock=clock, metrics=metrics)


@pytest.fixture
def registry(clock):
    return NamespaceRegistry(clock=clock)


@pytest.fixture
def single_flight_registry(clock):
    return NamespaceRegistry(CacheConfig(single_flight=True), clock=clock)
