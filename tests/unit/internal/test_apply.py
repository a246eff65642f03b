from __future__ import annotations

from scoped_resource._internal.apply import apply_disposer


def test_apply_disposer_unpacks_resources_in_order() -> None:
    seen: list[tuple[object, ...]] = []

    apply_disposer(lambda *args: seen.append(args), (1, "two", 3.0))

    assert seen == [(1, "two", 3.0)]


def test_apply_disposer_calls_nullary_for_empty_tuple() -> None:
    called: list[bool] = []

    apply_disposer(lambda: called.append(True), ())

    assert called == [True]


def test_apply_disposer_returns_disposer_result() -> None:
    assert apply_disposer(lambda a, b: a + b, (2, 3)) == 5
