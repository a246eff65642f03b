from __future__ import annotations

from enum import Enum


class InvokeStrategy(Enum):
    """Select whether an explicit firing leaves the binding armed.

    Pass these values to ``ScopedResource.fire``. ``reset`` always fires with
    ``AGAIN`` so the rebound resources are cleaned up at scope exit.
    """

    ONCE = "once"
    """Disarm after firing; scope exit does nothing more."""

    AGAIN = "again"
    """Stay armed after firing; scope exit fires the disposer again."""
