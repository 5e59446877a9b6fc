from pathlib import Path

import plotly.graph_objects as go

from .board import Board
from .plotting import plot_solution_3d
from .search import replay, search
from .types import Move
from .yaml_io import load_solution_yaml


def solve() -> list[Move]:
    """Search an empty board for the first complete solution."""
    return search(Board())


def load_solution(path: str | Path) -> list[Move]:
    return load_solution_yaml(path)


def verify_solution(moves: list[Move]) -> Board:
    """Replay `moves` onto a fresh board and check that it ends up complete.

    Raises PlacementRejectedError or ImpossibleOrientationError from the first
    move that cannot be placed, and ValueError if the final board has gaps.
    """
    board = replay(moves)
    if not board.is_complete():
        raise ValueError(
            f"Solution leaves the board incomplete after {len(board)} moves"
        )
    return board


def solve_and_plot(
    *, path: str | Path | None = None
) -> tuple[go.Figure, list[Move]]:
    """Solve (or load a saved solution) and return (figure, moves)."""
    moves = load_solution(path) if path is not None else solve()
    board = verify_solution(moves)
    return plot_solution_3d(board), moves
