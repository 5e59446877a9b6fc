from collections.abc import Iterable
from pathlib import Path

import yaml

from .pieces import POLYMINOS
from .types import FullRotation, HalfRotation, Location, Move, Orientation

SOLUTION_VERSION = 1


def _coerce_int(value: object, *, label: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{label} must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"{label} invalid integer string: {value!r}") from None
    raise TypeError(f"{label} must be int/str, got {type(value).__name__}")


def _coerce_location(value: object, *, label: str) -> Location:
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{label} must be a list")
    if len(value) != 3:
        raise ValueError(f"{label} must have length 3")
    x, y, z = (
        _coerce_int(v, label=f"{label}[{i}]") for i, v in enumerate(value)
    )
    return (x, y, z)


def _coerce_orientation(value: object, *, label: str) -> Orientation:
    if value is None:
        return Orientation()
    if not isinstance(value, dict):
        raise TypeError(f"{label} must be a mapping")

    short_deg = _coerce_int(value.get("short", 0), label=f"{label}.short")
    long_deg = _coerce_int(value.get("long", 0), label=f"{label}.long")
    if short_deg not in (0, 90, 180, 270):
        raise ValueError(f"{label}.short must be 0, 90, 180 or 270")
    if long_deg not in (0, 180):
        raise ValueError(f"{label}.long must be 0 or 180")
    return Orientation(FullRotation(short_deg // 90), HalfRotation(long_deg // 180))


def move_to_dict(move: Move) -> dict[str, object]:
    return {
        "polymino": move.polymino,
        "location": list(move.location),
        "orientation": {
            "short": move.orientation.short.degrees,
            "long": move.orientation.long.degrees,
        },
    }


def move_from_dict(item: object, *, label: str = "move") -> Move:
    if not isinstance(item, dict):
        raise ValueError(f"{label} must be a mapping")
    index = _coerce_int(item.get("polymino"), label=f"{label}.polymino")
    if not 0 <= index < len(POLYMINOS):
        raise ValueError(f"{label}.polymino must be in 0..{len(POLYMINOS) - 1}")
    return Move(
        polymino=index,
        orientation=_coerce_orientation(
            item.get("orientation"), label=f"{label}.orientation"
        ),
        location=_coerce_location(item.get("location"), label=f"{label}.location"),
    )


def dump_solution_yaml(moves: Iterable[Move]) -> str:
    """Construct a YAML document (as string) from a list of moves."""
    doc = {
        "version": SOLUTION_VERSION,
        "moves": [move_to_dict(m) for m in moves],
    }
    return yaml.safe_dump(doc, sort_keys=False)


def load_solution_yaml(path: str | Path) -> list[Move]:
    """Load an ordered list of moves from a YAML file."""
    path = Path(path)
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("YAML root must be a mapping")

    version = raw.get("version", SOLUTION_VERSION)
    if version != SOLUTION_VERSION:
        raise ValueError(f"Unsupported solution version: {version!r}")

    moves_node = raw.get("moves")
    if not isinstance(moves_node, list):
        raise ValueError("YAML must contain list key 'moves'")

    return [
        move_from_dict(item, label=f"moves[{idx}]")
        for idx, item in enumerate(moves_node)
    ]


def write_solution_yaml(
    path: str | Path,
    moves: Iterable[Move],
    *,
    overwrite: bool = False,
) -> None:
    p = Path(path)
    if p.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing file: {p}")
    p.write_text(dump_solution_yaml(moves), encoding="utf-8")
