import pytest

from polymino_solver.types import (
    Color,
    FullRotation,
    Grain,
    HalfRotation,
    Move,
    Orientation,
    Polymino,
)


def test_orientation_order():
    seen = []
    o = Orientation()
    while o is not None:
        seen.append(o)
        o = o.next()

    assert len(seen) == 8
    assert len(set(seen)) == 8
    assert seen == sorted(seen)
    assert seen[:3] == [
        Orientation(FullRotation.ZERO, HalfRotation.ZERO),
        Orientation(FullRotation.ZERO, HalfRotation.ONE_EIGHTY),
        Orientation(FullRotation.NINETY, HalfRotation.ZERO),
    ]


def test_last_orientation_has_no_successor():
    last = Orientation(FullRotation.TWO_SEVENTY, HalfRotation.ONE_EIGHTY)
    assert last.next() is None


def test_orientation_str():
    assert str(Orientation()) == "not rotated"
    assert str(Orientation(long=HalfRotation.ONE_EIGHTY)) == (
        "rotated 180° about the long axis"
    )
    assert str(Orientation(FullRotation.NINETY)) == (
        "rotated 90° about the short axis"
    )
    assert str(Orientation(FullRotation.TWO_SEVENTY, HalfRotation.ONE_EIGHTY)) == (
        "rotated 270° about the short axis then 180° about the long axis"
    )


def test_polymino_needs_five_distinct_cubes():
    four = tuple(((x, 0, 0), Color.BLACK) for x in range(3)) + (
        ((0, 1, 0), Color.WHITE),
    )
    with pytest.raises(ValueError, match="exactly 5"):
        Polymino(four, Grain.LONG)

    repeated = four + (((0, 0, 0), Color.WHITE),)
    with pytest.raises(ValueError, match="distinct"):
        Polymino(repeated, Grain.LONG)


def test_move_str():
    move = Move(3, Orientation(FullRotation.ONE_EIGHTY), (2, 3, 0))
    assert str(move) == "polymino 3 at (2, 3, 0) rotated 180° about the short axis"
