import pytest

from polymino_solver import search as search_mod
from polymino_solver.board import Board
from polymino_solver.search import next_candidate, replay, search
from polymino_solver.types import (
    FullRotation,
    HalfRotation,
    NoSolutionError,
    Orientation,
)

LAST = Orientation(FullRotation.TWO_SEVENTY, HalfRotation.ONE_EIGHTY)


def test_next_candidate_advances_orientation_first():
    assert next_candidate(Orientation(), (2, 1, 0)) == (
        Orientation(FullRotation.ZERO, HalfRotation.ONE_EIGHTY),
        (2, 1, 0),
    )


def test_next_candidate_advances_anchor_row_major():
    assert next_candidate(LAST, (1, 2, 0)) == (Orientation(), (2, 2, 0))
    assert next_candidate(LAST, (4, 1, 0)) == (Orientation(), (0, 2, 0))


def test_next_candidate_stops_at_last_anchor():
    assert next_candidate(LAST, (3, 3, 0)) is None
    assert next_candidate(Orientation(), (3, 3, 0)) is not None


def test_candidate_enumeration_length():
    candidate = (Orientation(), (0, 0, 0))
    seen = [candidate]
    while (candidate := next_candidate(*candidate)) is not None:
        seen.append(candidate)
    # 19 anchors from (0, 0) to (3, 3), 8 orientations each
    assert len(seen) == 19 * 8
    assert len(set(seen)) == len(seen)
    assert all(loc[2] == 0 for _, loc in seen)
    assert seen[-1] == (LAST, (3, 3, 0))


@pytest.mark.parametrize("prefix", [3, 5, 7, 9])
def test_search_from_solution_prefix(solution, prefix):
    board = replay(solution[:prefix])
    moves = search(board)
    assert moves == solution
    assert board.is_complete()


def test_search_is_deterministic(solution):
    first = search(replay(solution[:4]))
    second = search(replay(solution[:4]))
    assert first == second == solution


def test_search_on_complete_board_returns_its_moves(solution):
    assert search(replay(solution)) == solution


def test_search_exhaustion_raises(monkeypatch):
    monkeypatch.setattr(search_mod, "LAST_ANCHOR", (0, 0))
    board = Board()
    with pytest.raises(NoSolutionError):
        search(board)
    assert len(board) == 0


@pytest.mark.slow
def test_search_from_empty_board(solution):
    moves = search()
    assert moves == solution
    assert [m.polymino for m in moves] == list(range(10))
    assert replay(moves).is_complete()
