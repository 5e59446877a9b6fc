from __future__ import annotations

import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.widgets import Button, Slider

from .board import DEPTH, HEIGHT, WIDTH, Board
from .demo import plot_layer
from .search import replay
from .types import Color, Move


def board_layers(board: Board) -> list[list[list[Color | None]]]:
    """Each z layer of the board indexed [y][x]."""
    return [
        [[board.color_at((x, y, z)) for x in range(WIDTH)] for y in range(DEPTH)]
        for z in range(HEIGHT)
    ]


def draw_board(axes: list[plt.Axes], board: Board) -> None:
    for z, (ax, layer) in enumerate(zip(axes, board_layers(board), strict=True)):
        ax.clear()
        plot_layer(layer, ax=ax, title="bottom" if z == 0 else "top")


def interactive_solution_viewer(
    moves: list[Move], *, show: bool = True
) -> plt.Figure:
    """Step through a placement history one move at a time."""
    sns.set_theme(style="white")

    if not moves:
        raise ValueError("moves is empty")

    fig = plt.figure(figsize=(9, 5.5))
    ax_bottom = fig.add_axes((0.05, 0.25, 0.42, 0.68))
    ax_top = fig.add_axes((0.53, 0.25, 0.42, 0.68))

    ax_slider = fig.add_axes((0.20, 0.12, 0.60, 0.03))
    slider = Slider(
        ax_slider, "moves", 0, len(moves), valinit=len(moves), valstep=1
    )

    ax_prev = fig.add_axes((0.20, 0.04, 0.08, 0.05))
    btn_prev = Button(ax_prev, "Prev")
    ax_next = fig.add_axes((0.30, 0.04, 0.08, 0.05))
    btn_next = Button(ax_next, "Next")

    ax_text = fig.add_axes((0.42, 0.02, 0.55, 0.08))
    ax_text.axis("off")
    status_text = ax_text.text(0.0, 0.5, "", va="center")

    def _render() -> None:
        n = max(0, min(int(slider.val), len(moves)))
        board = replay(moves[:n])
        draw_board([ax_bottom, ax_top], board)
        last = str(moves[n - 1]) if n else "empty board"
        status_text.set_text(f"{n}/{len(moves)}: {last}")
        fig.canvas.draw_idle()

    def _on_slider(_val: float) -> None:
        _render()

    def _on_prev(_event) -> None:
        slider.set_val(max(slider.valmin, slider.val - 1))

    def _on_next(_event) -> None:
        slider.set_val(min(slider.valmax, slider.val + 1))

    slider.on_changed(_on_slider)
    btn_prev.on_clicked(_on_prev)
    btn_next.on_clicked(_on_next)

    _render()
    if show:
        plt.show()
    return fig
