# gridpath/app/cli.py
#!/usr/bin/env python3
"""
gridpath: shortest path on a text board, printed as text art.

Exit status:
    0  search ran (path found or not)
    1  board configuration error
    2  search stopped by --max-steps / --time-budget
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from gridpath.app.render import draw_board, legend
from gridpath.core.astar import find_path
from gridpath.core.maps import default_grid, load_map
from gridpath.core.types import ConfigurationError, Grid, SearchStatus


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gridpath", description=__doc__,
                                formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("map", nargs="?", default=os.getenv("GRIDPATH_MAP"),
                   help="JSON map file (default: $GRIDPATH_MAP or the built-in board)")
    p.add_argument("--algo", choices=("astar", "dijkstra"), default="astar")
    p.add_argument("--max-steps", type=int, default=None, help="stop after N expansions")
    p.add_argument("--time-budget", type=float, default=None, help="stop after S seconds")
    p.add_argument("--no-legend", action="store_true", help="skip the board legend")
    p.add_argument("--view", action="store_true", help="open the pygame viewer instead")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def load_grid(map_path: Optional[str]) -> Grid:
    if not map_path:
        return default_grid()
    return load_map(Path(map_path))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        grid = load_grid(args.map)
    except ConfigurationError as ex:
        print(f"=== ERROR ===: {ex}")
        return 1

    if args.view:
        from gridpath.app.viewer import Viewer
        Viewer(grid, algo=args.algo).run()
        return 0

    print("=== Input path finding board ===\n")
    print(draw_board(grid))
    if not args.no_legend:
        print("=== Board legend ===")
        print(legend())

    print(f"start position: {grid.start}")
    print(f"end position : {grid.goal}\n")

    result = find_path(grid, max_steps=args.max_steps, time_budget=args.time_budget,
                       algorithm=args.algo)

    if result.status == SearchStatus.BUDGET_EXCEEDED:
        print(f"=== STOPPED ===: search budget exhausted after "
              f"{result.metrics['popped']} expansions")
        return 2

    if result.found:
        print(f"=== RESULT ===: Found a path! ({result.cost} steps, "
              f"{result.metrics['popped']} expansions)")
        print(draw_board(grid, result.path))
    else:
        print("=== RESULT ===: No valid path found!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
