"""Sentinel-checked bindings.

``make_scoped_resource_checked`` arms the binding only when the handle differs
from the sentinel, so a failed acquisition never reaches the disposer.
"""

from __future__ import annotations

from scoped_resource import make_scoped_resource_checked


def main() -> None:
    closed: list[int] = []

    with make_scoped_resource_checked(closed.append, -1, -1) as failed:
        print(f"failed_armed={failed.armed}")  # => failed_armed=False

    with make_scoped_resource_checked(closed.append, 3, -1) as opened:
        print(f"opened_armed={opened.armed}")  # => opened_armed=True

    print(f"closed={closed}")  # => closed=[3]


if __name__ == "__main__":
    main()
