import matplotlib
import pytest

from polymino_solver.types import FullRotation, HalfRotation, Move, Orientation

matplotlib.use("Agg")

S, L = FullRotation, HalfRotation

# First solution in enumeration order.
SOLUTION: list[Move] = [
    Move(0, Orientation(S.ZERO, L.ZERO), (2, 0, 0)),
    Move(1, Orientation(S.ONE_EIGHTY, L.ONE_EIGHTY), (0, 0, 0)),
    Move(2, Orientation(S.ZERO, L.ZERO), (0, 2, 0)),
    Move(3, Orientation(S.ZERO, L.ONE_EIGHTY), (2, 3, 0)),
    Move(4, Orientation(S.NINETY, L.ZERO), (0, 3, 0)),
    Move(5, Orientation(S.ONE_EIGHTY, L.ONE_EIGHTY), (1, 0, 0)),
    Move(6, Orientation(S.NINETY, L.ONE_EIGHTY), (1, 3, 0)),
    Move(7, Orientation(S.ONE_EIGHTY, L.ZERO), (3, 2, 0)),
    Move(8, Orientation(S.ONE_EIGHTY, L.ONE_EIGHTY), (3, 0, 0)),
    Move(9, Orientation(S.NINETY, L.ZERO), (0, 0, 0)),
]


@pytest.fixture
def solution() -> list[Move]:
    return list(SOLUTION)
