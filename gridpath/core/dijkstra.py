# gridpath/core/dijkstra.py
#!/usr/bin/env python3
from dataclasses import dataclass

from gridpath.core.astar import AStarSearch
from gridpath.core.types import Cell


@dataclass
class DijkstraSearch(AStarSearch):
    """Uniform-cost search: A* with h = 0, so the frontier grows in rings of equal g."""
    name: str = "Dijkstra"

    def heuristic(self, c: Cell) -> int:
        return 0
