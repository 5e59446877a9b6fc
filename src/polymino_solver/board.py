from collections.abc import Iterator

from .orient import placement_offsets
from .pieces import polymino
from .types import (
    Color,
    Cube,
    Location,
    Move,
    Orientation,
    PlacementRejectedError,
)

WIDTH, DEPTH, HEIGHT = 5, 5, 2
CELL_COUNT = WIDTH * DEPTH * HEIGHT

State = list[list[list[Color | None]]]


def in_bounds(location: Location) -> bool:
    x, y, z = location
    return 0 <= x < WIDTH and 0 <= y < DEPTH and 0 <= z < HEIGHT


def all_locations() -> Iterator[Location]:
    for x in range(WIDTH):
        for y in range(DEPTH):
            for z in range(HEIGHT):
                yield (x, y, z)


class Board:
    """The five by five by two space in which to place polyminos.

    Holds the stack of moves that lead to the current state as well as the
    state itself, which could be recreated from the stack. The state is indexed
    by x then y then z (visual column, visual row, then layer when looking down
    at the board).
    """

    def __init__(self) -> None:
        self._moves: list[Move] = []
        self._state: State = [
            [[None for _ in range(HEIGHT)] for _ in range(DEPTH)]
            for _ in range(WIDTH)
        ]
        self._filled = 0

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    @staticmethod
    def color_fits(location: Location, color: Color) -> bool:
        parity = 0 if color == Color.BLACK else 1
        return sum(location) % 2 == parity

    def color_at(self, location: Location) -> Color | None:
        x, y, z = location
        return self._state[x][y][z]

    def cells(self) -> Iterator[tuple[Location, Color | None]]:
        for loc in all_locations():
            yield loc, self.color_at(loc)

    def snapshot(self) -> tuple[tuple[Location, Color | None], ...]:
        return tuple(self.cells())

    def is_complete(self) -> bool:
        if self._filled < CELL_COUNT:
            return False
        for loc, color in self.cells():
            if color is None or not Board.color_fits(loc, color):
                return False
        return True

    def footprint(self, move: Move) -> list[Cube]:
        """Absolute cells covered by `move`, recomputed from its orientation."""
        lx, ly, lz = move.location
        return [
            ((lx + x, ly + y, lz + z), color)
            for (x, y, z), color in placement_offsets(
                polymino(move.polymino), move.orientation
            )
        ]

    def push(
        self, index: int, orientation: Orientation, location: Location
    ) -> Move:
        """Place polymino `index` with its origin at `location`.

        Raises ImpossibleOrientationError if the polymino's grain forbids the
        orientation and PlacementRejectedError if any cube would leave the
        board, overlap another cube or sit on a cell of the wrong parity. The
        board is untouched when either is raised.
        """
        move = Move(index, orientation, location)
        cubes = self.footprint(move)

        for loc, color in cubes:
            if not (
                in_bounds(loc)
                and self.color_at(loc) is None
                and Board.color_fits(loc, color)
            ):
                raise PlacementRejectedError("not possible to place")

        for (x, y, z), color in cubes:
            self._state[x][y][z] = color
        self._filled += len(cubes)
        self._moves.append(move)
        return move

    def pop(self) -> Move | None:
        """Remove the most recent move, or return None if there is none."""
        if not self._moves:
            return None
        move = self._moves.pop()
        for (x, y, z), _color in self.footprint(move):
            self._state[x][y][z] = None
            self._filled -= 1
        return move

    def __str__(self) -> str:
        from .plotting import format_board

        return format_board(self)
