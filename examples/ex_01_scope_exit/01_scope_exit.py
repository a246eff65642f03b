"""Scope-exit action.

A binding with no resources is a plain scope-exit action: the disposer is
called with no arguments when the ``with`` block ends.
"""

from __future__ import annotations

from scoped_resource import make_scoped_resource


def main() -> None:
    log: list[str] = []

    with make_scoped_resource(lambda: log.append("done")):
        log.append("before")
        print(f"inside={log}")  # => inside=['before']

    print(f"after={log}")  # => after=['before', 'done']


if __name__ == "__main__":
    main()
