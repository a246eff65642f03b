"""Tests for InvokeStrategy."""

from enum import Enum

from scoped_resource import InvokeStrategy


class TestInvokeStrategy:
    def test_once_value(self) -> None:
        """ONCE has value 'once'."""
        assert InvokeStrategy.ONCE.value == "once"

    def test_again_value(self) -> None:
        """AGAIN has value 'again'."""
        assert InvokeStrategy.AGAIN.value == "again"

    def test_is_enum_with_two_members(self) -> None:
        """InvokeStrategy is an Enum with exactly two members."""
        assert issubclass(InvokeStrategy, Enum)
        assert list(InvokeStrategy) == [InvokeStrategy.ONCE, InvokeStrategy.AGAIN]

    def test_lookup_by_value(self) -> None:
        """Members can be looked up from their string value."""
        assert InvokeStrategy("again") is InvokeStrategy.AGAIN
