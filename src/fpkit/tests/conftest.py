"""Shared fixtures: isolate global logging and settings state per test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from fpkit.foundation.config import clear_settings_cache
from fpkit.runtime.observability.logging import configure_logging


@pytest.fixture(autouse=True)
def _reset_globals() -> Iterator[None]:
    clear_settings_cache()
    yield
    configure_logging(format="none", level="WARNING")
    clear_settings_cache()


class CallCounter:
    """Wraps a function and counts invocations."""

    def __init__(self, fn=lambda x: x) -> None:
        self.fn = fn
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        return self.fn(*args)


@pytest.fixture
def make_counter() -> type[CallCounter]:
    """Factory for call-counting wrappers: make_counter(fn)."""
    return CallCounter
