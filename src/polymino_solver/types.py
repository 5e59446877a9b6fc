from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

Location = tuple[int, int, int]


class Color(Enum):
    BLACK = "B"
    WHITE = "W"

    def __str__(self) -> str:
        return self.value


Cube = tuple[Location, Color]


class Grain(Enum):
    """Axis a polymino is elongated along."""

    LONG = "long"
    SHORT = "short"

    def __str__(self) -> str:
        return self.value


class FullRotation(IntEnum):
    """Quarter turns about the short axis."""

    ZERO = 0
    NINETY = 1
    ONE_EIGHTY = 2
    TWO_SEVENTY = 3

    @property
    def degrees(self) -> int:
        return 90 * int(self)

    def __str__(self) -> str:
        return f"{self.degrees}°"


class HalfRotation(IntEnum):
    """Half turns about the long axis."""

    ZERO = 0
    ONE_EIGHTY = 1

    @property
    def degrees(self) -> int:
        return 180 * int(self)

    def __str__(self) -> str:
        return f"{self.degrees}°"


@dataclass(frozen=True, order=True)
class Orientation:
    """A specific rotation of a polymino.

    Not all orientations are valid for all polyminos. The short-axis rotation
    is always applied first. Field order doubles as the enumeration order.
    """

    short: FullRotation = FullRotation.ZERO
    long: HalfRotation = HalfRotation.ZERO

    def next(self) -> Orientation | None:
        if self.long == HalfRotation.ZERO:
            return Orientation(self.short, HalfRotation.ONE_EIGHTY)
        if self.short == FullRotation.TWO_SEVENTY:
            return None
        return Orientation(FullRotation(self.short + 1), HalfRotation.ZERO)

    def __str__(self) -> str:
        if self.short == FullRotation.ZERO and self.long == HalfRotation.ZERO:
            return "not rotated"
        if self.short == FullRotation.ZERO:
            return f"rotated {self.long.degrees}° about the long axis"
        if self.long == HalfRotation.ZERO:
            return f"rotated {self.short.degrees}° about the short axis"
        return (
            f"rotated {self.short.degrees}° about the short axis "
            f"then {self.long.degrees}° about the long axis"
        )


@dataclass(frozen=True)
class Polymino:
    """One puzzle piece made up of five colored cubes.

    Offsets index a local 3x2x2 space: x in [0, 3), y and z in [0, 2).
    """

    cubes: tuple[Cube, ...]
    grain: Grain

    def __post_init__(self) -> None:
        if len(self.cubes) != 5:
            raise ValueError(
                f"Polymino must have exactly 5 cubes, got {len(self.cubes)}"
            )
        offsets = [loc for loc, _color in self.cubes]
        if len(set(offsets)) != len(offsets):
            raise ValueError("Polymino cubes must have distinct offsets")


@dataclass(frozen=True)
class Move:
    """One placement of a polymino on the board.

    `location` is the board cell receiving the polymino's local (0, 0, 0).
    """

    polymino: int
    orientation: Orientation
    location: Location

    def __str__(self) -> str:
        return f"polymino {self.polymino} at {self.location} {self.orientation}"


class ImpossibleOrientationError(ValueError):
    """Orientation needs a quarter turn a short-grain polymino cannot make."""


class PlacementRejectedError(ValueError):
    """Polymino falls off the board, overlaps, or breaks the color rule."""


class NoSolutionError(RuntimeError):
    """Backtracking exhausted every candidate without completing the board."""
