from __future__ import annotations

from pipeline.functional import compose, identity


def test_compose_applies_right_to_left() -> None:
    add_one = lambda x: x + 1  # noqa: E731
    double = lambda x: x * 2  # noqa: E731

    assert compose(add_one, double)(5) == 11
    assert compose(double, add_one)(5) == 12


def test_compose_without_wrappers_is_identity() -> None:
    assert compose()("core") == "core"
    assert identity([1, 2]) == [1, 2]
