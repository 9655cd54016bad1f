# gridpath/app/render.py
#!/usr/bin/env python3
"""Text-art board: each cell is a 5-char block, two lines tall, framed by *-----*."""

from typing import Dict, Iterable, List

from gridpath.core.types import Cell, Grid, Terrain

CELL_W = 5
PATH_FILL = "+"
FILLS: Dict[Terrain, str] = {
    Terrain.EMPTY:    " ",
    Terrain.START:    "O",
    Terrain.GOAL:     "*",
    Terrain.OBSTACLE: "X",
}

LEGEND = [
    ("1) Start point:", FILLS[Terrain.START]),
    ("2) End point:", FILLS[Terrain.GOAL]),
    ("3) Blocks:", FILLS[Terrain.OBSTACLE]),
    ("4) Empty path:", FILLS[Terrain.EMPTY]),
    ("5) Result path:", PATH_FILL),
]


def draw_board(grid: Grid, path: Iterable[Cell] = ()) -> str:
    """Render the board, overlaying `path` cells (start and goal keep their own glyph)."""
    on_path = {c for c in path if grid.terrain(c) == Terrain.EMPTY}
    border = ("*" + "-" * CELL_W) * grid.width + "*"
    lines: List[str] = []
    for r in range(grid.height):
        lines.append(border)
        row = ""
        for c in range(grid.width):
            fill = PATH_FILL if (r, c) in on_path else FILLS[grid.cells[r][c]]
            row += "|" + fill * CELL_W
        row += "|"
        lines.extend([row, row])
    lines.append(border)
    return "\n".join(lines) + "\n"


def legend() -> str:
    block = []
    pad = max(len(label) for label, _ in LEGEND) + 4
    for label, fill in LEGEND:
        block.append(f"{label:<{pad}}*{'-' * CELL_W}*")
        block.append(f"{'':<{pad}}|{fill * CELL_W}|")
        block.append(f"{'':<{pad}}|{fill * CELL_W}|")
        block.append(f"{'':<{pad}}*{'-' * CELL_W}*")
        block.append("")
    return "\n".join(block)
