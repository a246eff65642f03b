from __future__ import annotations

from collections.abc import Callable
from typing import Any


def apply_disposer(disposer: Callable[..., Any], resources: tuple[Any, ...]) -> Any:
    """Call ``disposer`` with ``resources`` unpacked as positional arguments.

    An empty tuple produces a nullary call, which is how pure scope-exit
    actions are fired.
    """
    return disposer(*resources)


__all__ = ["apply_disposer"]
