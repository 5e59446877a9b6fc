import logging
from collections.abc import Iterable

from .board import WIDTH, Board
from .pieces import POLYMINOS
from .types import (
    ImpossibleOrientationError,
    Location,
    Move,
    NoSolutionError,
    Orientation,
    PlacementRejectedError,
)

logger = logging.getLogger(__name__)

FIRST_ANCHOR: Location = (0, 0, 0)
# Every polymino spans at least 2x2x2, so no anchor past (3, 3) can fit.
LAST_ANCHOR: tuple[int, int] = (3, 3)

Candidate = tuple[Orientation, Location]


def next_candidate(
    orientation: Orientation, location: Location
) -> Candidate | None:
    """The candidate after (orientation, location), or None when exhausted.

    Orientation advances first; anchors then advance in row-major order with z
    pinned to 0.
    """
    nxt = orientation.next()
    if nxt is not None:
        return nxt, location

    x, y, _z = location
    if (x, y) == LAST_ANCHOR:
        return None
    if x == WIDTH - 1:
        return Orientation(), (0, y + 1, 0)
    return Orientation(), (x + 1, y, 0)


def search(board: Board | None = None) -> list[Move]:
    """Depth-first backtracking over polymino, orientation and anchor.

    Starts from an empty board unless one is given, in which case its moves
    are taken as already committed for the first polyminos. Returns the moves
    of the first complete board in enumeration order.
    """
    if board is None:
        board = Board()

    index = len(board)
    orientation = Orientation()
    location = FIRST_ANCHOR
    attempts = 0
    removals = 0

    logger.info("Starting search at polymino %d", index)
    while not board.is_complete():
        if index >= len(POLYMINOS):
            raise NoSolutionError(
                f"All {len(POLYMINOS)} polyminos placed but board is not complete"
            )
        attempts += 1
        try:
            board.push(index, orientation, location)
        except (ImpossibleOrientationError, PlacementRejectedError):
            candidate = next_candidate(orientation, location)
            while candidate is None:
                # This polymino fits nowhere on the current board, so the
                # previous placement was wrong: take it back and try its next
                # candidate instead.
                last = board.pop()
                if last is None:
                    raise NoSolutionError(
                        f"Search exhausted after {attempts} attempts"
                    ) from None
                removals += 1
                index -= 1
                logger.debug("removing polymino %d", last.polymino)
                candidate = next_candidate(last.orientation, last.location)
            orientation, location = candidate
        else:
            logger.debug(
                "placing polymino %d at %s %s", index, location, orientation
            )
            index += 1
            orientation = Orientation()
            location = FIRST_ANCHOR

    logger.info(
        "Search complete after %d attempts and %d removals", attempts, removals
    )
    return list(board.moves)


def replay(moves: Iterable[Move], board: Board | None = None) -> Board:
    """Push `moves` in order onto a board (fresh unless given) and return it."""
    if board is None:
        board = Board()
    for move in moves:
        board.push(move.polymino, move.orientation, move.location)
    return board
