"""Single-resource binding used through its value.

``value()`` returns the bound resource, so a binding can stand in for the
value it guards. ``follow()`` and ``deref()`` reach the object it refers to.
"""

from __future__ import annotations

from dataclasses import dataclass

from scoped_resource import make_scoped_resource


@dataclass
class Connection:
    name: str
    open: bool = True

    def close(self) -> None:
        self.open = False


def main() -> None:
    released: list[int | str] = []

    variant: int | str = "text"
    with make_scoped_resource(released.append, variant) as binding:
        print(f"value={binding.value()}")  # => value=text

    print(f"released={released}")  # => released=['text']

    connection = Connection("primary")
    with make_scoped_resource(Connection.close, connection) as guard:
        print(f"name={guard.follow().name}")  # => name=primary
        print(f"open_inside={guard.deref().open}")  # => open_inside=True

    print(f"open_after={connection.open}")  # => open_after=False


if __name__ == "__main__":
    main()
