"""Tests for make_scoped_resource and make_scoped_resource_checked."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from scoped_resource import ScopedResource, make_scoped_resource, make_scoped_resource_checked

if TYPE_CHECKING:
    from conftest import Recorder


class TestMakeScopedResource:
    def test_returns_armed_binding(self, recorder: Recorder) -> None:
        with make_scoped_resource(recorder, 1, 2) as resource:
            assert isinstance(resource, ScopedResource)
            assert resource.armed
            assert resource.resources == (1, 2)

        assert recorder.calls == [(1, 2)]

    def test_without_resources(self, recorder: Recorder) -> None:
        with make_scoped_resource(recorder) as resource:
            assert resource.resources == ()

        assert recorder.calls == [()]


class TestMakeScopedResourceChecked:
    def test_invalid_value_is_never_disposed(self, recorder: Recorder) -> None:
        with make_scoped_resource_checked(recorder, -1, -1) as resource:
            assert not resource.armed

        assert recorder.count == 0

    def test_valid_value_is_disposed_once(self, recorder: Recorder) -> None:
        with make_scoped_resource_checked(recorder, 3, -1) as resource:
            assert resource.armed

        assert recorder.calls == [(3,)]

    @pytest.mark.parametrize(
        ("value", "invalid", "fires"),
        [
            (None, None, False),
            ("handle", None, True),
            (0, 0, False),
            (0, -1, True),
        ],
    )
    def test_fires_iff_value_differs_from_sentinel(
        self,
        recorder: Recorder,
        value: object,
        invalid: object,
        fires: bool,
    ) -> None:
        with make_scoped_resource_checked(recorder, value, invalid):
            pass

        assert recorder.calls == ([(value,)] if fires else [])

    def test_invalid_binding_can_be_rearmed_by_reset(self, recorder: Recorder) -> None:
        with make_scoped_resource_checked(recorder, -1, -1) as resource:
            resource.reset(4)

        assert recorder.calls == [(4,)]

    def test_still_exposes_value(self, recorder: Recorder) -> None:
        with make_scoped_resource_checked(recorder, -1, -1) as resource:
            assert resource.value() == -1

    def test_comparison_result_is_coerced_to_bool(self, recorder: Recorder) -> None:
        """A truthy non-bool ``!=`` result still yields a boolean armed flag."""

        class Handle:
            def __init__(self, number: int) -> None:
                self.number = number

            def __ne__(self, other: object) -> object:
                return [self.number] if self.number != getattr(other, "number", None) else []

            __hash__ = object.__hash__

        with make_scoped_resource_checked(recorder, Handle(3), Handle(-1)) as valid:
            assert valid.armed is True

        with make_scoped_resource_checked(recorder, Handle(-1), Handle(-1)) as invalid:
            assert invalid.armed is False

        assert recorder.count == 1
