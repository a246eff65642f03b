from __future__ import annotations

import ctypes
import logging
import operator
from collections.abc import Callable
from types import TracebackType
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

from typing_extensions import TypeVarTuple, Unpack

from scoped_resource._internal.apply import apply_disposer
from scoped_resource.exceptions import (
    ScopedResourceArityError,
    ScopedResourceCopyError,
    ScopedResourceMisuseError,
)
from scoped_resource.settings import settings_or_defaults
from scoped_resource.strategy import InvokeStrategy

if TYPE_CHECKING:
    from typing_extensions import Self

D = TypeVar("D", bound=Callable[..., Any])
R = TypeVarTuple("R")

logger = logging.getLogger(__name__)

_NO_RESOURCE_PLACEHOLDER = False


class ResourceSlot:
    """Writable view of one stored resource cell.

    Returned by ``ScopedResource.slot`` for out-parameter style code that
    produces a handle and stores it into an existing binding. Writing through
    the slot replaces the stored value without firing the disposer.
    """

    __slots__ = ("_index", "_owner")

    def __init__(self, owner: ScopedResource[Any, Unpack[tuple[Any, ...]]], index: int) -> None:
        self._owner = owner
        self._index = index

    def get(self) -> Any:
        return self._owner.get(self._index)

    def set(self, value: Any) -> None:
        self._owner._store(self._index, value)

    @property
    def value(self) -> Any:
        return self.get()

    @value.setter
    def value(self, value: Any) -> None:
        self.set(value)

    def __repr__(self) -> str:
        return f"ResourceSlot(index={self._index}, value={self.get()!r})"


class ScopedResource(Generic[D, Unpack[R]]):
    """Bind a disposer to zero or more resources and fire it at scope exit.

    The same type covers three shapes: a scope-exit action (no resources), a
    single-resource guard that reads like the resource itself, and a bundle
    whose disposer receives every resource in order.

    The disposer fires at most once per binding: at the end of the ``with``
    block, on ``close``, on an explicit ``fire``, or (as a fallback) when the
    instance is garbage collected while still armed. ``release`` and
    ``release_all`` disarm without firing. Exceptions raised by the disposer
    are swallowed and logged.

    Bindings left to the finalizer fire in no guaranteed order; use ``with``
    or ``ResourceScope`` when cleanup must run in reverse order of creation.

    Instances are not thread-safe and cannot be copied; use ``move`` to
    transfer ownership.

    Examples:
        .. code-block:: python

            fd = os.open(path, os.O_RDONLY)
            with make_scoped_resource_checked(os.close, fd, -1) as guard:
                data = os.read(guard, 1024)

    """

    __slots__ = ("__weakref__", "_armed", "_disposer", "_fire_on_finalize", "_resources")

    def __init__(
        self,
        disposer: D,
        *resources: Unpack[R],
        armed: bool = True,
        fire_on_finalize: bool | None = None,
    ) -> None:
        """Bind ``disposer`` to ``resources``.

        Args:
            disposer: Callable invoked as ``disposer(*resources)`` when fired.
            *resources: Resource values; their count is fixed for the lifetime
                of the binding.
            armed: Initial armed state. A disarmed binding fires only after
                ``reset``.
            fire_on_finalize: Fire a still-armed binding when it is garbage
                collected. ``None`` uses ``ScopedResourceSettings``.

        Raises:
            ScopedResourceMisuseError: If ``disposer`` is not callable.

        """
        if not callable(disposer):
            msg = f"Disposer must be callable, got {type(disposer).__name__}."
            raise ScopedResourceMisuseError(msg)

        if fire_on_finalize is None:
            fire_on_finalize = settings_or_defaults().fire_on_finalize

        self._disposer = disposer
        self._resources: tuple[Unpack[R]] = resources
        self._armed = armed
        self._fire_on_finalize = fire_on_finalize

    @property
    def armed(self) -> bool:
        """Return whether the disposer will run at scope exit."""
        return self._armed

    @property
    def resources(self) -> tuple[Unpack[R]]:
        """Return the bound resource tuple without disarming."""
        return self._resources

    def fire(self, strategy: InvokeStrategy | Literal["once", "again"] = InvokeStrategy.ONCE) -> Self:
        """Run the disposer now if the binding is armed.

        Args:
            strategy: ``ONCE`` disarms after firing. ``AGAIN`` keeps the
                binding armed so scope exit fires once more.

        Returns:
            This binding, for chaining.

        Notes:
            A disarmed binding is left untouched: nothing runs and ``AGAIN``
            does not re-arm it. Use ``reset`` to re-arm.

        """
        strategy = InvokeStrategy(strategy)
        if not self._armed:
            return self

        # Flag flips before the call so a re-entrant fire cannot run it twice.
        self._armed = strategy is InvokeStrategy.AGAIN
        logger.debug(
            "Firing disposer %r with %d resource(s), strategy=%s",
            self._disposer,
            len(self._resources),
            strategy.value,
        )
        self._invoke()
        return self

    __call__ = fire

    def close(self) -> None:
        """Fire the disposer once if armed, exactly as leaving a ``with`` block does."""
        self.fire(InvokeStrategy.ONCE)

    def release(self) -> Any:
        """Disarm without firing and return the leading resource.

        Returns ``False`` when the binding holds no resources.
        """
        self._armed = False
        logger.debug("Released binding of disposer %r", self._disposer)
        return self._first()

    def release_all(self) -> tuple[Unpack[R]]:
        """Disarm without firing and return every bound resource."""
        self._armed = False
        logger.debug("Released binding of disposer %r", self._disposer)
        return self._resources

    def reset(self, *resources: Unpack[R]) -> Self:
        """Clean up the current resources and bind new ones.

        The disposer fires with ``AGAIN`` on the current resources (if armed),
        then the new resources are stored. The binding is armed afterwards in
        every case, including when it was disarmed before the call.

        Args:
            *resources: Replacement values, as many as the binding holds.

        Returns:
            This binding, for chaining.

        Raises:
            ScopedResourceArityError: If the number of values differs from the
                bound arity. Nothing fires in that case.

        """
        if len(resources) != len(self._resources):
            raise ScopedResourceArityError(len(self._resources), len(resources))

        self.fire(InvokeStrategy.AGAIN)
        self._resources = resources
        self._armed = True
        logger.debug("Reset binding of disposer %r", self._disposer)
        return self

    def get(self, index: int = 0) -> Any:
        """Return the resource at ``index``."""
        return self._resources[index]

    def get_disposer(self) -> D:
        """Return the stored disposer, for inspecting or reconfiguring its state."""
        return self._disposer

    def value(self) -> Any:
        """Return the leading resource, or ``False`` when no resources are bound."""
        return self._first()

    def follow(self) -> Any:
        """Return the object member access on the leading resource should reach.

        For a ``ctypes`` pointer this is the pointee; any other object is
        already a reference and is returned as is.

        Raises:
            ScopedResourceMisuseError: If there is no resource or it is null.

        """
        return self._pointee("follow")

    def deref(self) -> Any:
        """Return the object the leading resource refers to.

        Raises:
            ScopedResourceMisuseError: If there is no resource or it is null.

        """
        return self._pointee("deref")

    def slot(self) -> ResourceSlot:
        """Return a writable view of the leading resource cell.

        Raises:
            ScopedResourceMisuseError: If the binding holds no resources.

        """
        if not self._resources:
            msg = "slot() requires at least one bound resource."
            raise ScopedResourceMisuseError(msg)
        return ResourceSlot(self, 0)

    def fileno(self) -> int:
        """Return the leading resource as a file descriptor.

        Lets a single-handle binding be passed to ``os.write``, ``select`` and
        other APIs that accept objects with ``fileno()``.

        Raises:
            ScopedResourceMisuseError: If the binding holds no resources.
            TypeError: If the leading resource is not an integer.

        """
        return self.__index__()

    def __index__(self) -> int:
        if not self._resources:
            msg = "A binding without resources has no integer value."
            raise ScopedResourceMisuseError(msg)
        return operator.index(self._resources[0])

    def move(self) -> Self:
        """Transfer the disposer and resources to a new binding.

        The new binding keeps the armed state of this one; this one is
        disarmed and will never fire unless reset.
        """
        moved = type(self)(
            self._disposer,
            *self._resources,
            armed=self._armed,
            fire_on_finalize=self._fire_on_finalize,
        )
        self._armed = False
        logger.debug("Moved binding of disposer %r", self._disposer)
        return moved

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.fire(InvokeStrategy.ONCE)

    def __del__(self) -> None:
        # A partially constructed instance has no slots set.
        if getattr(self, "_armed", False) and getattr(self, "_fire_on_finalize", False):
            logger.debug("Firing disposer %r on finalization", self._disposer)
            self.fire(InvokeStrategy.ONCE)

    def __copy__(self) -> Self:
        msg = "Scoped resources cannot be copied; use move() to transfer ownership."
        raise ScopedResourceCopyError(msg)

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.__copy__()

    def __reduce_ex__(self, protocol: Any) -> Any:
        return self.__copy__()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(disposer={self._disposer!r}, "
            f"resources={self._resources!r}, armed={self._armed})"
        )

    def _invoke(self) -> None:
        try:
            apply_disposer(self._disposer, self._resources)
        except Exception:
            settings = settings_or_defaults()
            if settings.log_disposer_faults:
                logger.log(
                    getattr(logging, settings.fault_log_level),
                    "Disposer %r raised while firing; the fault was ignored",
                    self._disposer,
                    exc_info=True,
                )

    def _first(self) -> Any:
        if not self._resources:
            return _NO_RESOURCE_PLACEHOLDER
        return self._resources[0]

    def _pointee(self, accessor: str) -> Any:
        if not self._resources:
            msg = f"{accessor}() requires at least one bound resource."
            raise ScopedResourceMisuseError(msg)

        target = self._resources[0]
        if isinstance(target, ctypes._Pointer):  # noqa: SLF001
            if not target:
                msg = f"{accessor}() on a NULL pointer resource."
                raise ScopedResourceMisuseError(msg)
            return target.contents
        if target is None:
            msg = f"{accessor}() on a None resource."
            raise ScopedResourceMisuseError(msg)
        return target

    def _store(self, index: int, value: Any) -> None:
        resources = list(self._resources)
        resources[index] = value
        self._resources = tuple(resources)  # type: ignore[assignment]


__all__ = [
    "ResourceSlot",
    "ScopedResource",
]
