import numpy as np
import plotly.graph_objects as go

from .board import DEPTH, HEIGHT, WIDTH, Board
from .orient import undo_normalize
from .types import Color, Polymino


def format_polymino(piece: Polymino) -> str:
    """Both z layers of a polymino's local 3x2x2 box, side by side."""
    piece = undo_normalize(piece)
    by_offset = {loc: color for loc, color in piece.cubes}
    lines = [f"bottom:   top:   grain: {piece.grain}"]
    for y in range(2):
        row = []
        for z in range(2):
            row.append(
                "".join(
                    str(by_offset[(x, y, z)]) if (x, y, z) in by_offset else "_"
                    for x in range(3)
                )
            )
        lines.append("       ".join(row))
    return "\n".join(lines)


def format_board(board: Board) -> str:
    """Both board layers side by side, followed by the move history."""
    moves = board.moves
    lines = ["board state:    moves:"]
    for y in range(DEPTH):
        layers = []
        for z in range(HEIGHT):
            layers.append(
                "".join(
                    str(board.color_at((x, y, z)) or "_") for x in range(WIDTH)
                )
            )
        line = "   ".join(layers) + "   "
        if y < len(moves):
            line += f"   - {moves[y]}"
        lines.append(line.rstrip())
    for move in moves[DEPTH:]:
        lines.append(f"{' ' * 19}- {move}")
    return "\n".join(lines)


def print_board(board: Board) -> None:
    print(format_board(board))


def _discrete_colorscale(colors: list[str]) -> list[tuple[float, str]]:
    """Build a Plotly colorscale with hard steps for integer categories."""
    if not colors:
        raise ValueError("colors must be non-empty")

    n = len(colors)
    if n == 1:
        return [(0.0, colors[0]), (1.0, colors[0])]

    scale: list[tuple[float, str]] = []
    for i, c in enumerate(colors):
        scale.append((i / n, c))
        scale.append(((i + 1) / n, c))
    scale[0] = (0.0, scale[0][1])
    scale[-1] = (1.0, scale[-1][1])
    return scale


def qualitative_palette(n: int) -> list[str]:
    base = [
        "#636EFA",
        "#EF553B",
        "#00CC96",
        "#AB63FA",
        "#FFA15A",
        "#19D3F3",
        "#FF6692",
        "#B6E880",
        "#FF97FF",
        "#FECB52",
    ]
    if n <= len(base):
        return base[:n]
    return [base[i % len(base)] for i in range(n)]


def _move_index_by_cell(board: Board) -> dict[tuple[int, int, int], int]:
    out: dict[tuple[int, int, int], int] = {}
    for i, move in enumerate(board.moves):
        for loc, _color in board.footprint(move):
            out[loc] = i
    return out


def plot_board_layers(board: Board, *, margin: int = 1) -> go.Figure:
    """Heatmap of both layers next to each other, colored by move."""
    margin = max(0, int(margin))
    w = HEIGHT * WIDTH + (HEIGHT - 1) * margin
    owner = _move_index_by_cell(board)
    n_moves = len(board.moves)

    grid_int = np.zeros((DEPTH, w), dtype=int)
    text = [["" for _ in range(w)] for _ in range(DEPTH)]
    for z in range(HEIGHT):
        x0 = z * (WIDTH + margin)
        for y in range(DEPTH):
            for x in range(WIDTH):
                color = board.color_at((x, y, z))
                if color is None:
                    continue
                grid_int[y, x0 + x] = owner[(x, y, z)] + 1
                text[y][x0 + x] = str(color)

    colors = ["#ffffff", *qualitative_palette(max(1, n_moves))[:n_moves]]
    fig = go.Figure(
        data=[
            go.Heatmap(
                z=grid_int,
                zmin=0,
                zmax=max(1, n_moves),
                colorscale=_discrete_colorscale(colors),
                showscale=False,
                text=text,
                texttemplate="%{text}",
                hoverinfo="skip",
                xgap=1,
                ygap=1,
            )
        ]
    )
    fig.update_layout(
        title="Board layers (bottom, top)",
        margin=dict(l=10, r=10, t=50, b=10),
        height=320,
    )
    fig.update_xaxes(
        showticklabels=False,
        showgrid=False,
        zeroline=False,
        constrain="domain",
    )
    fig.update_yaxes(
        showticklabels=False,
        showgrid=False,
        zeroline=False,
        scaleanchor="x",
        autorange="reversed",
    )
    return fig


def _add_voxel_cube_to_mesh(
    *,
    x0: float,
    y0: float,
    z0: float,
    size: float,
    xs: list[float],
    ys: list[float],
    zs: list[float],
    ii: list[int],
    jj: list[int],
    kk: list[int],
) -> None:
    """Append a unit cube (12 triangles) to a growing Mesh3d buffer."""
    base = len(xs)
    x1, y1, z1 = x0 + size, y0 + size, z0 + size

    verts = [
        (x0, y0, z0),
        (x0, y1, z0),
        (x1, y1, z0),
        (x1, y0, z0),
        (x0, y0, z1),
        (x0, y1, z1),
        (x1, y1, z1),
        (x1, y0, z1),
    ]
    for x, y, z in verts:
        xs.append(x)
        ys.append(y)
        zs.append(z)

    i_loc = [7, 0, 0, 0, 4, 4, 6, 6, 4, 0, 3, 2]
    j_loc = [3, 4, 1, 2, 5, 6, 5, 2, 0, 1, 6, 3]
    k_loc = [0, 7, 2, 3, 6, 7, 1, 1, 5, 5, 7, 6]
    for a, b, c in zip(i_loc, j_loc, k_loc, strict=True):
        ii.append(base + a)
        jj.append(base + b)
        kk.append(base + c)


def plot_solution_3d(board: Board) -> go.Figure:
    """Return a Plotly 3D figure of every placed polymino.

    One mesh per move, plus a marker on each cube showing its color.
    """
    palette = qualitative_palette(max(1, len(board.moves)))
    inset = 0.02  # keeps adjacent cubes from z-fighting

    data: list[object] = []
    marker_xs, marker_ys, marker_zs, marker_colors = [], [], [], []

    for i, move in enumerate(board.moves):
        xs: list[float] = []
        ys: list[float] = []
        zs: list[float] = []
        ii: list[int] = []
        jj: list[int] = []
        kk: list[int] = []

        for (x, y, z), color in sorted(board.footprint(move)):
            _add_voxel_cube_to_mesh(
                x0=float(x) + inset,
                y0=float(y) + inset,
                z0=float(z) + inset,
                size=1.0 - 2 * inset,
                xs=xs,
                ys=ys,
                zs=zs,
                ii=ii,
                jj=jj,
                kk=kk,
            )
            marker_xs.append(x + 0.5)
            marker_ys.append(y + 0.5)
            marker_zs.append(z + 1.01)
            marker_colors.append("black" if color == Color.BLACK else "white")

        name = f"polymino {move.polymino}"
        data.append(
            go.Mesh3d(
                x=xs,
                y=ys,
                z=zs,
                i=ii,
                j=jj,
                k=kk,
                color=palette[i],
                opacity=1.0,
                flatshading=True,
                name=name,
                hovertemplate=f"{name}<extra></extra>",
                showscale=False,
            )
        )

    if marker_xs:
        data.append(
            go.Scatter3d(
                x=marker_xs,
                y=marker_ys,
                z=marker_zs,
                mode="markers",
                marker=dict(
                    size=5,
                    color=marker_colors,
                    line=dict(width=1, color="gray"),
                ),
                name="Colors",
                showlegend=False,
                hoverinfo="skip",
            )
        )

    fig = go.Figure(data=data)
    fig.update_layout(
        title="Solution",
        margin=dict(l=10, r=10, t=50, b=10),
        height=600,
        scene=dict(
            xaxis=dict(range=[-0.25, WIDTH + 0.25], dtick=1, title="x"),
            yaxis=dict(range=[-0.25, DEPTH + 0.25], dtick=1, title="y"),
            zaxis=dict(range=[-0.25, HEIGHT + 0.25], dtick=1, title="z"),
            aspectmode="data",
        ),
        showlegend=True,
    )
    return fig
