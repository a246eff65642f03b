from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import TYPE_CHECKING, Any, TypeVar

from typing_extensions import TypeVarTuple, Unpack

from scoped_resource.exceptions import ScopedResourceMisuseError
from scoped_resource.factories import make_scoped_resource, make_scoped_resource_checked
from scoped_resource.resource import ScopedResource
from scoped_resource.strategy import InvokeStrategy

if TYPE_CHECKING:
    from typing_extensions import Self

D = TypeVar("D", bound=Callable[..., Any])
R = TypeVarTuple("R")
T = TypeVar("T")

logger = logging.getLogger(__name__)


class ResourceScope:
    """Own several scoped resources and fire them in reverse order on exit.

    Use it where the number of bindings is only known at runtime, or where a
    single ``with`` block should cover bindings created in a loop. Adopted
    bindings are moved into the scope, so the originals no longer fire.

    Examples:
        .. code-block:: python

            with ResourceScope() as scope:
                for path in paths:
                    scope.make_checked(os.close, os.open(path, os.O_RDONLY), -1)

    """

    def __init__(self) -> None:
        self._resources: list[ScopedResource[Any, Unpack[tuple[Any, ...]]]] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def adopt(self, resource: ScopedResource[D, Unpack[R]]) -> ScopedResource[D, Unpack[R]]:
        """Take ownership of ``resource`` and return the binding now held by the scope.

        Raises:
            ScopedResourceMisuseError: If the scope is already closed.

        """
        if self._closed:
            msg = "Cannot adopt resources into a closed ResourceScope."
            raise ScopedResourceMisuseError(msg)

        moved = resource.move()
        self._resources.append(moved)
        return moved

    def make(self, disposer: D, *resources: Unpack[R]) -> ScopedResource[D, Unpack[R]]:
        return self.adopt(make_scoped_resource(disposer, *resources))

    def make_checked(
        self,
        disposer: Callable[[T], Any],
        resource: T,
        invalid: T,
    ) -> ScopedResource[Callable[[T], Any], T]:
        return self.adopt(make_scoped_resource_checked(disposer, resource, invalid))

    def close(self) -> None:
        """Fire every owned binding once, most recently adopted first.

        A disposer that raises ``KeyboardInterrupt`` or ``SystemExit`` does not
        stop the remaining bindings from firing; the interrupt is re-raised
        once they have run.
        """
        if self._closed:
            return
        self._closed = True

        resources, self._resources = self._resources, []
        logger.debug("Closing resource scope with %d binding(s)", len(resources))
        self._fire_all(resources)

    def _fire_all(self, resources: list[ScopedResource[Any, Unpack[tuple[Any, ...]]]]) -> None:
        while resources:
            resource = resources.pop()
            try:
                resource.fire(InvokeStrategy.ONCE)
            except BaseException:
                self._fire_all(resources)
                raise

    def __len__(self) -> int:
        return len(self._resources)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["ResourceScope"]
