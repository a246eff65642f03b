from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from typing_extensions import TypeVarTuple, Unpack

from scoped_resource.resource import ScopedResource

D = TypeVar("D", bound=Callable[..., Any])
R = TypeVarTuple("R")
T = TypeVar("T")


def make_scoped_resource(disposer: D, *resources: Unpack[R]) -> ScopedResource[D, Unpack[R]]:
    """Return an armed binding of ``disposer`` to ``resources``.

    Args:
        disposer: Callable invoked as ``disposer(*resources)`` at scope exit.
        *resources: Zero or more resource values, passed to the disposer in
            order.

    Returns:
        An armed ``ScopedResource``.

    Examples:
        .. code-block:: python

            with make_scoped_resource(lambda: print("done")):
                print("working")

            with make_scoped_resource(write_and_close, os.dup(1), "bye\\n") as out:
                os.write(out, b"hello\\n")

    """
    return ScopedResource(disposer, *resources)


def make_scoped_resource_checked(
    disposer: Callable[[T], Any],
    resource: T,
    invalid: T,
) -> ScopedResource[Callable[[T], Any], T]:
    """Return a binding that is armed only when ``resource != invalid``.

    Covers handles whose acquisition reports failure through a sentinel, such
    as ``-1`` for file descriptors, without a conditional around the
    construction.

    The comparison is ``bool(resource != invalid)``, so the resource type needs
    a scalar ``!=``. Array types with element-wise comparison raise here.

    Args:
        disposer: Callable invoked as ``disposer(resource)`` at scope exit.
        resource: The acquired handle.
        invalid: Sentinel meaning acquisition failed.

    Returns:
        A ``ScopedResource`` that is disarmed when ``resource == invalid``.

    Examples:
        .. code-block:: python

            fd = os.open(path, os.O_RDONLY)
            with make_scoped_resource_checked(os.close, fd, -1):
                ...

    """
    return ScopedResource(disposer, resource, armed=bool(resource != invalid))


__all__ = [
    "make_scoped_resource",
    "make_scoped_resource_checked",
]
