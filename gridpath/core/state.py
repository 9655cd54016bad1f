# gridpath/core/state.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List

UNVISITED = -1   # reserved: no valid cost is negative
NO_PARENT = -1


@dataclass
class SearchState:
    """Per-cell cost-so-far and predecessor tables keyed by linear index."""
    size: int = 0
    cost_so_far: List[int] = field(default_factory=list)
    came_from: List[int] = field(default_factory=list)

    def __post_init__(self):
        self.reset(self.size)

    def reset(self, size: int) -> None:
        self.size = size
        self.cost_so_far = [UNVISITED] * size
        self.came_from = [NO_PARENT] * size

    def visited(self, idx: int) -> bool:
        return self.cost_so_far[idx] != UNVISITED

    def cost(self, idx: int) -> int:
        return self.cost_so_far[idx]

    def seed(self, idx: int) -> None:
        self.cost_so_far[idx] = 0

    def improves(self, idx: int, cost: int) -> bool:
        return not self.visited(idx) or cost < self.cost_so_far[idx]

    def record(self, idx: int, cost: int, parent: int) -> None:
        assert cost > 0, "relaxed cost must be positive"
        self.cost_so_far[idx] = cost
        self.came_from[idx] = parent

    def walk_back(self, goal: int, start: int) -> List[int]:
        """Indices from goal back to (excluding) start; empty if goal was never reached."""
        out: List[int] = []
        if goal == start or self.came_from[goal] == NO_PARENT:
            return out
        cur = goal
        # a predecessor chain visits each cell at most once
        for _ in range(self.size):
            if cur == start or cur == NO_PARENT:
                break
            out.append(cur)
            cur = self.came_from[cur]
        return out
