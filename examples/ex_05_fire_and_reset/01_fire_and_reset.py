"""Early firing, release and reset.

``fire()`` runs the disposer before scope exit and disarms the binding.
``reset()`` cleans up the current resource and binds a new one, which is then
cleaned up at scope exit. ``release()`` hands the resource back without
cleanup.
"""

from __future__ import annotations

from scoped_resource import make_scoped_resource


def main() -> None:
    calls: list[object] = []

    with make_scoped_resource(calls.append, 5) as early:
        early.fire()
        print(f"after_fire={calls}")  # => after_fire=[5]

    print(f"after_scope={calls}")  # => after_scope=[5]

    calls.clear()
    with make_scoped_resource(calls.append, "A") as handle:
        handle.reset("B")
        print(f"after_reset={calls}")  # => after_reset=['A']

    print(f"after_scope={calls}")  # => after_scope=['A', 'B']

    calls.clear()
    with make_scoped_resource(calls.append, "kept") as owned:
        kept = owned.release()

    print(f"released={kept} calls={calls}")  # => released=kept calls=[]


if __name__ == "__main__":
    main()
