from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .api import load_solution, solve
from .board import Board
from .demo import demo_pieces
from .interactive import interactive_solution_viewer
from .pieces import POLYMINOS
from .plotting import plot_solution_3d, print_board
from .types import (
    ImpossibleOrientationError,
    NoSolutionError,
    PlacementRejectedError,
)
from .yaml_io import write_solution_yaml


def setup_logging(log_level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("matplotlib").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fill the 5x5x2 board with the ten polyminos"
    )
    parser.add_argument(
        "--load",
        type=str,
        default=None,
        help="Replay a saved solution YAML instead of searching",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the solution moves to this YAML file",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Allow --output to replace an existing file",
    )
    parser.add_argument(
        "--plot-html",
        type=str,
        default=None,
        help="Write a 3D Plotly figure of the solution to this HTML file",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Open interactive viewer to step through the moves",
    )
    parser.add_argument(
        "--show-pieces",
        action="store_true",
        help="Plot the ten polyminos and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (DEBUG traces every placement and removal)",
    )
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.show_pieces:
        demo_pieces(POLYMINOS)
        return 0

    if args.load is not None:
        moves = load_solution(args.load)
        print(f"Loaded {len(moves)} moves from {args.load}")
    else:
        try:
            moves = solve()
        except NoSolutionError as e:
            print(f"No solution found: {e}", file=sys.stderr)
            return 1

    board = Board()
    for move in moves:
        try:
            board.push(move.polymino, move.orientation, move.location)
        except (ImpossibleOrientationError, PlacementRejectedError) as e:
            print(f"Cannot replay {move}: {e}", file=sys.stderr)
            return 1
        print_board(board)
        print()

    if not board.is_complete():
        print("Board is not complete", file=sys.stderr)
        return 1

    if args.output is not None:
        write_solution_yaml(args.output, moves, overwrite=args.overwrite)
        print(f"Wrote solution to {args.output}")

    if args.plot_html is not None:
        plot_solution_3d(board).write_html(
            Path(args.plot_html), include_plotlyjs="cdn"
        )
        print(f"Wrote figure to {args.plot_html}")

    if args.interactive:
        interactive_solution_viewer(moves)

    return 0


if __name__ == "__main__":
    sys.exit(main())
