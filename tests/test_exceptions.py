"""Tests for the exception hierarchy."""

import copy

import pytest

from scoped_resource import (
    ScopedResource,
    ScopedResourceArityError,
    ScopedResourceCopyError,
    ScopedResourceError,
    ScopedResourceMisuseError,
    make_scoped_resource,
)


class TestHierarchy:
    def test_misuse_is_scoped_resource_error_and_type_error(self) -> None:
        assert issubclass(ScopedResourceMisuseError, ScopedResourceError)
        assert issubclass(ScopedResourceMisuseError, TypeError)

    def test_copy_and_arity_are_misuse_errors(self) -> None:
        assert issubclass(ScopedResourceCopyError, ScopedResourceMisuseError)
        assert issubclass(ScopedResourceArityError, ScopedResourceMisuseError)


class TestScopedResourceMisuseError:
    def test_raises_for_non_callable_disposer(self) -> None:
        with pytest.raises(ScopedResourceMisuseError) as exc_info:
            ScopedResource(42, 1)

        assert "must be callable" in str(exc_info.value)


class TestScopedResourceCopyError:
    def test_raises_on_copy(self) -> None:
        with make_scoped_resource(lambda _: None, 1) as resource:
            with pytest.raises(ScopedResourceCopyError):
                copy.copy(resource)

    def test_raises_on_deepcopy(self) -> None:
        with make_scoped_resource(lambda _: None, 1) as resource:
            with pytest.raises(ScopedResourceCopyError):
                copy.deepcopy(resource)


class TestScopedResourceArityError:
    def test_carries_expected_and_actual(self) -> None:
        error = ScopedResourceArityError(2, 1)

        assert error.expected == 2
        assert error.actual == 1
        assert "expected 2 resource value(s), got 1" in str(error)
