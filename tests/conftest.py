"""Shared pytest fixtures for scoped_resource tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from scoped_resource.settings import get_settings


class Recorder:
    """Disposer that records every call's positional arguments."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture()
def recorder() -> Recorder:
    """Fresh recording disposer."""
    return Recorder()


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Reload settings so environment patches apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
