"""
Shared pytest fixtures and configuration for pagesource tests.

This module provides a zero-latency clock, small deterministic item providers
and a source wired to them, so unit tests never wait on real delays.
"""

from collections.abc import Sequence

import pytest

from pagesource import InstantClock, PaginatedItemsSource, SourceOptions, StaticItemProvider

SMALL_ITEMS = ["Albania", "Algeria", "Andorra", "Angola", "Anguilla"]


class CountingProvider:
    """Wraps a list and counts how often the candidates were requested."""

    def __init__(self, items: Sequence[str]) -> None:
        self.items = list(items)
        self.calls = 0

    def get_items(self) -> Sequence[str]:
        self.calls += 1
        return self.items


class FailingProvider:
    """Raises on every request, simulating a broken backing store."""

    def get_items(self) -> Sequence[str]:
        raise RuntimeError("backing store unavailable")


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with injected clock and providers")
    config.addinivalue_line("markers", "slow: Tests that wait on real delays")


@pytest.fixture
def instant_clock() -> InstantClock:
    """A clock that never waits and records requested delays."""
    return InstantClock()


@pytest.fixture
def small_provider() -> StaticItemProvider:
    """The five-item candidate set used by the pagination scenarios."""
    return StaticItemProvider(SMALL_ITEMS)


@pytest.fixture
def counting_provider() -> CountingProvider:
    return CountingProvider(SMALL_ITEMS)


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()


@pytest.fixture
def source(small_provider, instant_clock) -> PaginatedItemsSource:
    """A source over SMALL_ITEMS with default options and no real delay."""
    return PaginatedItemsSource(
        provider=small_provider, options=SourceOptions(), clock=instant_clock
    )


@pytest.fixture
def country_source(instant_clock) -> PaginatedItemsSource:
    """A source over the bundled country list with no real delay."""
    return PaginatedItemsSource(
        provider=StaticItemProvider(), options=SourceOptions(), clock=instant_clock
    )
