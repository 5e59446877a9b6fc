from collections.abc import Iterator

from .types import (
    Cube,
    FullRotation,
    Grain,
    HalfRotation,
    ImpossibleOrientationError,
    Orientation,
    Polymino,
)

# Quarter turn about the long (x) axis, acting on (y, z).
_GRAIN_90: dict[tuple[int, int], tuple[int, int]] = {
    (0, 0): (1, 0),
    (1, 0): (1, 1),
    (1, 1): (0, 1),
    (0, 1): (0, 0),
}


def _replace_offsets(piece: Polymino, cubes: list[Cube]) -> Polymino:
    return Polymino(tuple(cubes), piece.grain)


def rotate_grain_90(cubes: tuple[Cube, ...]) -> list[Cube]:
    out: list[Cube] = []
    for (x, y, z), color in cubes:
        if (y, z) not in _GRAIN_90:
            raise ValueError(f"Offset {(x, y, z)} is outside the grain cross-section")
        ny, nz = _GRAIN_90[(y, z)]
        out.append(((x, ny, nz), color))
    return out


def is_orientation_possible(grain: Grain, orientation: Orientation) -> bool:
    return not (
        grain == Grain.SHORT
        and orientation.short in (FullRotation.NINETY, FullRotation.TWO_SEVENTY)
    )


def orient(piece: Polymino, orientation: Orientation) -> Polymino:
    """Return a copy of `piece` turned into `orientation`.

    The short-axis quarter turns are applied first, then the long-axis half
    turn. Colors travel with their cubes.
    """
    if not is_orientation_possible(piece.grain, orientation):
        raise ImpossibleOrientationError(
            f"{orientation} is impossible for a {piece.grain}-grain polymino"
        )

    cubes = list(piece.cubes)
    for _ in range(int(orientation.short)):
        cubes = rotate_grain_90(tuple(cubes))

    if orientation.long == HalfRotation.ONE_EIGHTY:
        cubes = [((2 - x, 1 - y, z), color) for (x, y, z), color in cubes]

    return _replace_offsets(piece, cubes)


def is_normalized(piece: Polymino) -> bool:
    """True if any offset sits in the third (overflow) y position."""
    return any(y > 1 for (_x, y, _z), _color in piece.cubes)


def normalize_grain(piece: Polymino) -> Polymino:
    """Turn a short-grain polymino sideways into its placement-ready box."""
    if piece.grain != Grain.SHORT or is_normalized(piece):
        return piece
    return _replace_offsets(
        piece, [((1 - y, x, z), color) for (x, y, z), color in piece.cubes]
    )


def undo_normalize(piece: Polymino) -> Polymino:
    """Exact inverse of `normalize_grain`."""
    if piece.grain != Grain.SHORT or not is_normalized(piece):
        return piece
    # The cubes are already sideways, so reverse before rotating anything.
    return _replace_offsets(
        piece, [((y, 1 - x, z), color) for (x, y, z), color in piece.cubes]
    )


def placement_offsets(piece: Polymino, orientation: Orientation) -> tuple[Cube, ...]:
    """Cubes exactly as they are stamped relative to a move's anchor."""
    return normalize_grain(orient(piece, orientation)).cubes


def iter_orientations(grain: Grain | None = None) -> Iterator[Orientation]:
    """Walk every orientation in enumeration order.

    When `grain` is given, orientations impossible for it are skipped.
    """
    orientation: Orientation | None = Orientation()
    while orientation is not None:
        if grain is None or is_orientation_possible(grain, orientation):
            yield orientation
        orientation = orientation.next()

