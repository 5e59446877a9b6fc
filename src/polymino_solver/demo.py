from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from matplotlib.colors import ListedColormap

from .orient import undo_normalize
from .types import Color, Polymino

# 0 = empty, 1 = black cube, 2 = white cube
_CELL_COLORS = ["#ffffff", "#222222", "#dddddd"]


def color_codes(colors: list[list[Color | None]]) -> np.ndarray:
    """Map a 2D grid of optional colors to the integer codes used for plots."""
    return np.array(
        [
            [0 if c is None else (1 if c == Color.BLACK else 2) for c in row]
            for row in colors
        ],
        dtype=int,
    )


def plot_layer(
    colors: list[list[Color | None]], *, ax: plt.Axes, title: str
) -> None:
    """Plot one z layer with square cells using seaborn.

    `colors` is indexed [y][x]; each cell is annotated with B or W.
    """
    data = color_codes(colors)
    labels = [["" if c is None else str(c) for c in row] for row in colors]
    sns.heatmap(
        data,
        ax=ax,
        cmap=ListedColormap(_CELL_COLORS),
        vmin=0,
        vmax=2,
        cbar=False,
        square=True,
        linewidths=0.8,
        linecolor="#cccccc",
        annot=np.array(labels, dtype=object),
        fmt="",
        annot_kws={"color": "#cc3333"},
        xticklabels=False,
        yticklabels=False,
    )
    ax.set_title(title)
    ax.set_aspect("equal")
    ax.set_xlabel("")
    ax.set_ylabel("")


def piece_layers(piece: Polymino) -> list[list[list[Color | None]]]:
    """The two z layers of a polymino's local box, each indexed [y][x]."""
    piece = undo_normalize(piece)
    layers: list[list[list[Color | None]]] = [
        [[None for _ in range(3)] for _ in range(2)] for _ in range(2)
    ]
    for (x, y, z), color in piece.cubes:
        layers[z][y][x] = color
    return layers


def demo_pieces(
    pieces: list[Polymino] | tuple[Polymino, ...], *, show: bool = True
) -> plt.Figure:
    sns.set_theme(style="white")

    ncols = 4
    nrows = (len(pieces) + 1) // 2
    fig, axes = plt.subplots(
        nrows=nrows, ncols=ncols, figsize=(2.4 * ncols, 1.8 * nrows)
    )
    axes_list = list(np.ravel(axes))

    for i, piece in enumerate(pieces):
        bottom, top = piece_layers(piece)
        plot_layer(
            bottom, ax=axes_list[2 * i], title=f"{i} bottom ({piece.grain})"
        )
        plot_layer(top, ax=axes_list[2 * i + 1], title=f"{i} top")

    for j in range(2 * len(pieces), len(axes_list)):
        axes_list[j].axis("off")

    fig.tight_layout()
    if show:
        plt.show()
    return fig
