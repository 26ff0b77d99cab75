from __future__ import annotations

import pytest

from shapes.base import BaseShape
from shapes.circle import Circle
from shapes.kinds import ShapeKind
from shapes.registry import (
    find_shape,
    get_registry,
    get_shape,
    is_shape_registered,
    list_shapes,
    shape,
    unregister,
)


def test_builtin_shapes_are_registered_for_every_kind() -> None:
    assert list_shapes() == sorted(k.value for k in ShapeKind)
    for kind in ShapeKind:
        cls = get_shape(kind)
        assert issubclass(cls, BaseShape)
        assert cls.kind is kind


def test_lookup_is_case_insensitive_for_plain_keys() -> None:
    assert get_shape("circle") is Circle
    assert get_shape("CIRCLE") is Circle
    assert find_shape("Circle") is Circle
    assert find_shape("triangle") is None
    assert find_shape(None) is None


def test_shape_decorator_rejects_name_outside_closed_set() -> None:
    with pytest.raises(ValueError) as ei:

        @shape("triangle")
        class Triangle(BaseShape):
            pass

    assert "triangle" in str(ei.value)
    assert not is_shape_registered("triangle")


def test_shape_decorator_rejects_inferred_unknown_class_name() -> None:
    class Hexagon(BaseShape):
        pass

    with pytest.raises(ValueError):
        shape(Hexagon)


def test_shape_decorator_rejects_duplicate_kind() -> None:
    class OtherCircle(BaseShape):
        pass

    with pytest.raises(ValueError):
        shape(name="circle")(OtherCircle)
    assert get_shape("circle") is Circle


def test_shape_decorator_rejects_mismatched_kind_attribute() -> None:
    class Confused(BaseShape):
        kind = ShapeKind.SQUARE

    with pytest.raises(ValueError):
        shape("rectangle")(Confused)


def test_shape_decorator_rejects_non_shape_with_message() -> None:
    class NotShape:  # noqa: N801 (テスト用の簡易クラス)
        pass

    deco = shape(name="circle")
    with pytest.raises(TypeError) as ei:
        deco(NotShape)
    assert "got" in str(ei.value)

    with pytest.raises(TypeError):
        shape(lambda: None)


def test_unregister_and_reregister_builtin() -> None:
    unregister("circle")
    try:
        assert not is_shape_registered("circle")
        assert find_shape(ShapeKind.CIRCLE) is None
    finally:
        shape(Circle)
    assert get_shape("circle") is Circle

    # 存在しない名前でも例外を出さない
    unregister("__does_not_exist__")


def test_get_registry_returns_copy() -> None:
    snap = get_registry()
    assert isinstance(snap, dict)
    snap["bogus"] = object()  # type: ignore[assignment]
    assert not is_shape_registered("bogus")


def test_get_shape_unknown_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_shape("__does_not_exist__")
