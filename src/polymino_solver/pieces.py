from .types import Color, Grain, Polymino

B, W = Color.BLACK, Color.WHITE

POLYMINOS: tuple[Polymino, ...] = (
    Polymino(
        (((0, 0, 0), B), ((1, 0, 0), W), ((1, 1, 0), B), ((2, 1, 0), W), ((1, 0, 1), B)),
        Grain.LONG,
    ),
    Polymino(
        (((0, 1, 0), W), ((1, 1, 0), B), ((2, 1, 0), W), ((2, 0, 1), W), ((2, 1, 1), B)),
        Grain.SHORT,
    ),
    Polymino(
        (((0, 0, 0), W), ((0, 1, 0), B), ((1, 1, 0), W), ((1, 1, 1), B), ((2, 1, 1), W)),
        Grain.SHORT,
    ),
    Polymino(
        (((0, 0, 0), B), ((1, 0, 0), W), ((2, 0, 0), B), ((0, 1, 0), W), ((1, 0, 1), B)),
        Grain.LONG,
    ),
    Polymino(
        (((0, 0, 0), B), ((1, 0, 0), W), ((1, 1, 0), B), ((1, 0, 1), B), ((2, 0, 1), W)),
        Grain.LONG,
    ),
    Polymino(
        (((0, 0, 0), W), ((1, 0, 0), B), ((2, 0, 0), W), ((0, 1, 0), B), ((0, 0, 1), B)),
        Grain.SHORT,
    ),
    Polymino(
        (((0, 0, 0), B), ((0, 1, 0), W), ((1, 1, 0), B), ((2, 1, 0), W), ((1, 1, 1), W)),
        Grain.LONG,
    ),
    Polymino(
        (((0, 1, 0), W), ((1, 1, 0), B), ((2, 1, 0), W), ((0, 0, 1), W), ((0, 1, 1), B)),
        Grain.SHORT,
    ),
    Polymino(
        (((1, 0, 0), B), ((2, 0, 0), W), ((0, 1, 0), B), ((1, 1, 0), W), ((2, 0, 1), B)),
        Grain.SHORT,
    ),
    Polymino(
        (((0, 0, 0), W), ((1, 0, 0), B), ((2, 0, 0), W), ((1, 1, 0), W), ((1, 1, 1), B)),
        Grain.LONG,
    ),
)
assert len(POLYMINOS) == 10


def polymino(index: int) -> Polymino:
    if not 0 <= index < len(POLYMINOS):
        raise ValueError(f"Invalid polymino index: {index}")
    return POLYMINOS[index]
