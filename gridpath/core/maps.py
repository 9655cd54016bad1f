# gridpath/core/maps.py
#!/usr/bin/env python3
"""
Board construction and validation.

Boards come in three shapes, all validated the same way:
- int code matrices (0 empty, 1 start, 2 goal, -1 obstacle),
- text rows ('.', 'S', 'G', '#' or 'X'),
- JSON map files holding either of the above under "cells" / "rows".
"""

import json
from pathlib import Path
from typing import Dict, List, Sequence

from gridpath.core.types import ConfigurationError, Grid, Terrain

MAP_DIR = Path(__file__).resolve().parents[1] / "maps"
MAP_FILES: Dict[str, Path] = {
    "01_classic":   MAP_DIR / "01_classic.json",
    "02_open_field": MAP_DIR / "02_open_field.json",
    "03_walled_off": MAP_DIR / "03_walled_off.json",
}

DEFAULT_BOARD: List[List[int]] = [
    [0,  0,  0,  0,  0,  0,  2],
    [0, -1, -1, -1, -1, -1,  0],
    [0,  0,  0,  0,  0,  0, -1],
    [0, -1,  0,  0,  0, -1, -1],
    [-1, -1, 0, -1,  0,  0,  0],
    [0,  0,  0,  0,  0, -1, -1],
    [1,  0,  0,  0,  0,  0,  0],
]

GLYPHS: Dict[str, Terrain] = {
    ".": Terrain.EMPTY,
    " ": Terrain.EMPTY,
    "S": Terrain.START,
    "G": Terrain.GOAL,
    "#": Terrain.OBSTACLE,
    "X": Terrain.OBSTACLE,
}


def grid_from_codes(codes: Sequence[Sequence[int]]) -> Grid:
    """Validate an int code matrix and build an immutable Grid."""
    try:
        height = len(codes)
        width = len(codes[0]) if height else 0
        ragged = any(len(row) != width for row in codes)
    except TypeError:
        raise ConfigurationError("Board must be a list of rows!") from None
    if height == 0 or width == 0:
        raise ConfigurationError("Invalid board!")
    if ragged:
        raise ConfigurationError("Board rows must all have the same width!")

    start = goal = None
    rows = []
    for r, row in enumerate(codes):
        out = []
        for c, code in enumerate(row):
            # exact ints only: 1.9, True or "2" must not pass as a tag
            try:
                if not isinstance(code, int) or isinstance(code, bool):
                    raise TypeError(code)
                t = Terrain(code)
            except (TypeError, ValueError):
                raise ConfigurationError(f"Unknown cell code {code!r} at ({r}, {c})!") from None
            if t == Terrain.START:
                if start is not None:
                    raise ConfigurationError("Can't have more than 1 start point!")
                start = (r, c)
            elif t == Terrain.GOAL:
                if goal is not None:
                    raise ConfigurationError("Can't have more than 1 end point!")
                goal = (r, c)
            out.append(t)
        rows.append(tuple(out))

    if start is None:
        raise ConfigurationError("Board has no start point!")
    if goal is None:
        raise ConfigurationError("Board has no end point!")
    return Grid(width, height, tuple(rows), start, goal)


def grid_from_rows(lines: Sequence[str]) -> Grid:
    """Build a Grid from text rows such as ["S.#", "..G"]."""
    codes = []
    for r, line in enumerate(lines):
        if not isinstance(line, str):
            raise ConfigurationError(f"Row {r} must be a string!")
        row = []
        for c, ch in enumerate(line):
            if ch not in GLYPHS:
                raise ConfigurationError(f"Unknown cell glyph {ch!r} at ({r}, {c})!")
            row.append(int(GLYPHS[ch]))
        codes.append(row)
    return grid_from_codes(codes)


def default_grid() -> Grid:
    return grid_from_codes(DEFAULT_BOARD)


def load_map(path: Path) -> Grid:
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as ex:
        raise ConfigurationError(f"Can't read map {path}: {ex}") from ex
    if not isinstance(data, dict):
        raise ConfigurationError(f"Map {path} must be a JSON object")
    if "cells" in data:
        return grid_from_codes(data["cells"])
    if "rows" in data:
        return grid_from_rows(data["rows"])
    raise ConfigurationError(f"Map {path} has neither 'cells' nor 'rows'")
