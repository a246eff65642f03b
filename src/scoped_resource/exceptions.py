class ScopedResourceError(Exception):
    """Represent a base class for all scoped-resource failures.

    Catch this type when you want to handle any misuse of the library without
    matching each concrete exception class individually. Firing a disposer
    never raises one of these: disposer faults are swallowed and logged.
    """


class ScopedResourceMisuseError(ScopedResourceError, TypeError):
    """Signal a program error in how a scoped resource is used.

    Raised by ``ScopedResource`` when constructed with a non-callable
    disposer, by ``follow``/``deref`` on a binding without a usable leading
    resource, by ``slot`` on a binding with no resources, and by
    ``ResourceScope`` when resources are adopted after it was closed.

    Typical fixes include passing a callable disposer, binding at least one
    resource before using the pointer-style accessors, and opening a new
    scope instead of reusing a closed one.
    """


class ScopedResourceCopyError(ScopedResourceMisuseError):
    """Signal an attempt to copy a scoped resource.

    Raised by ``copy.copy``, ``copy.deepcopy`` and pickling. Two owners of the
    same one-shot cleanup have no meaning.

    Typical fix is transferring ownership with ``ScopedResource.move`` instead.
    """


class ScopedResourceArityError(ScopedResourceMisuseError):
    """Signal a ``reset`` call with the wrong number of resources.

    The arity of a binding is fixed at construction. Nothing is fired when
    this error is raised, so the binding keeps its current resources.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"reset() expected {expected} resource value(s), got {actual}.",
        )
