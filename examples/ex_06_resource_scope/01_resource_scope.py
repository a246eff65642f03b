"""Several bindings in one scope.

Bindings fire in reverse order of creation, whether they come from stacked
``with`` items or are adopted by a ``ResourceScope``.
"""

from __future__ import annotations

from scoped_resource import ResourceScope, make_scoped_resource


def main() -> None:
    order: list[str] = []

    with (
        make_scoped_resource(order.append, "first"),
        make_scoped_resource(order.append, "second"),
    ):
        pass

    print(f"with_order={order}")  # => with_order=['second', 'first']

    order.clear()
    with ResourceScope() as scope:
        for name in ("a", "b", "c"):
            scope.make(order.append, name)
        print(f"owned={len(scope)}")  # => owned=3

    print(f"scope_order={order}")  # => scope_order=['c', 'b', 'a']


if __name__ == "__main__":
    main()
