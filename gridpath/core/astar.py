# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A* on a 4-connected grid with unit step cost, one expansion per step().

Algorithm API (shared with the viewer):
- init(grid) - reset() - step() -> StepResult - run() -> SearchResult

Heuristic:
- Manhattan distance to the goal (admissible and consistent here).

Frontier:
- MinHeap keyed by (f, h, seq); improved cells are pushed again and the
  stale copy is skipped when popped.

Optional budgets (checked once per pop):
- max_steps: number of pops allowed
- time_budget: wall-clock seconds since reset()
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from gridpath.core.heap import MinHeap
from gridpath.core.state import SearchState
from gridpath.core.types import Cell, Grid, SearchResult, SearchStatus, StepResult

log = logging.getLogger(__name__)


@dataclass
class AStarSearch:
    name: str = "A*"
    max_steps: Optional[int] = None
    time_budget: Optional[float] = None

    # Internal state
    grid: Optional[Grid] = None
    frontier: MinHeap = field(default_factory=MinHeap)
    state: SearchState = field(default_factory=SearchState)
    open_set: set = field(default_factory=set)         # for overlay
    closed_set: set = field(default_factory=set)
    status: SearchStatus = SearchStatus.IDLE
    popped_count: int = 0
    stale_count: int = 0
    push_count: int = 0
    started_at: float = 0.0

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        """Bind to a validated grid and seed the frontier."""
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start cell."""
        if self.grid is None:
            return
        self.frontier.clear()
        self.state.reset(self.grid.size)
        self.open_set.clear()
        self.closed_set.clear()
        self.popped_count = 0
        self.stale_count = 0
        self.push_count = 0
        self.started_at = time.perf_counter()

        s = self.grid.start
        self.state.seed(self.grid.index(s))
        self._push(s, 0)
        self.status = SearchStatus.RUNNING
        log.debug("%s: start %s goal %s on %dx%d grid", self.name, s, self.grid.goal,
                  self.grid.height, self.grid.width)

    # -------------------- helpers --------------------

    def heuristic(self, c: Cell) -> int:
        (r, col) = c
        (gr, gc) = self.grid.goal
        return abs(gr - r) + abs(gc - col)

    def _push(self, c: Cell, cost: int) -> None:
        self.frontier.push(c, cost, self.heuristic(c))
        self.push_count += 1
        if c not in self.closed_set:
            self.open_set.add(c)

    def _over_budget(self) -> bool:
        if self.max_steps is not None and self.popped_count >= self.max_steps:
            return True
        if self.time_budget is not None:
            return time.perf_counter() - self.started_at >= self.time_budget
        return False

    def reconstruct_path(self) -> List[Cell]:
        """Cells from just after the start to the goal, in walking order."""
        back = self.reverse_indices()
        return [self.grid.cell_of(i) for i in reversed(back)]

    def reverse_indices(self) -> List[int]:
        return self.state.walk_back(self.grid.index(self.grid.goal),
                                    self.grid.index(self.grid.start))

    def _finish(self, status: SearchStatus) -> None:
        self.status = status
        log.debug("%s: %s after %d pops (%d stale, %d pushes)", self.name, status.name,
                  self.popped_count, self.stale_count, self.push_count)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE expansion:
          - Pop the lowest-key entry, skipping stale copies.
          - If it is the goal, reconstruct and finish.
          - Else relax the passable neighbors at cost g + 1.
        """
        if self.grid is None:
            return StepResult(status=SearchStatus.IDLE, metrics={"algo": self.name})

        if self.status == SearchStatus.GOAL_REACHED:
            path = self.reconstruct_path()
            return StepResult(status=self.status, path=path,
                              metrics=self._metrics(path_len=len(path)))

        if self.status.terminal:
            return StepResult(status=self.status, metrics=self._metrics())

        if not self.frontier:
            self._finish(SearchStatus.EXHAUSTED)
            return StepResult(status=self.status, metrics=self._metrics())

        if self._over_budget():
            self._finish(SearchStatus.BUDGET_EXCEEDED)
            return StepResult(status=self.status, metrics=self._metrics())

        entry = self.frontier.pop()
        u = entry.cell
        u_idx = self.grid.index(u)

        # Ignore stale pops
        if entry.cost != self.state.cost(u_idx):
            self.stale_count += 1
            return StepResult(status=self.status, current=u, metrics=self._metrics())

        # Finalize u
        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        if u == self.grid.goal:
            self._finish(SearchStatus.GOAL_REACHED)
            path = self.reconstruct_path()
            return StepResult(status=self.status, closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        # Relax neighbors
        opened_now: List[Cell] = []
        alt = entry.cost + 1
        for v in self.grid.neighbors(u):
            v_idx = self.grid.index(v)
            if self.state.improves(v_idx, alt):
                self.state.record(v_idx, alt, u_idx)
                if v not in self.open_set and v not in self.closed_set:
                    opened_now.append(v)
                self._push(v, alt)

        return StepResult(status=self.status, opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> SearchResult:
        """Step until a terminal status and package the outcome."""
        if self.grid is None:
            return SearchResult(status=SearchStatus.IDLE, metrics={"algo": self.name})
        while not self.status.terminal:
            self.step()
        if self.status != SearchStatus.GOAL_REACHED:
            return SearchResult(status=self.status, metrics=self._metrics())
        back = self.reverse_indices()
        path = [self.grid.cell_of(i) for i in reversed(back)]
        return SearchResult(status=self.status, path=path, reverse_indices=back,
                            cost=self.state.cost(self.grid.index(self.grid.goal)),
                            metrics=self._metrics(path_len=len(path)))

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        total = None
        if self.status == SearchStatus.GOAL_REACHED:
            total = self.state.cost(self.grid.index(self.grid.goal))
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "stale": self.stale_count,
            "pushes": self.push_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": total,
            "elapsed": time.perf_counter() - self.started_at,
        }


def find_path(grid: Grid, *, max_steps: Optional[int] = None,
              time_budget: Optional[float] = None, algorithm: str = "astar") -> SearchResult:
    """Run a full search on `grid` and return its SearchResult."""
    if algorithm == "astar":
        algo = AStarSearch(max_steps=max_steps, time_budget=time_budget)
    elif algorithm == "dijkstra":
        from gridpath.core.dijkstra import DijkstraSearch
        algo = DijkstraSearch(max_steps=max_steps, time_budget=time_budget)
    else:
        raise ValueError(f"unknown algorithm {algorithm!r}")
    algo.init(grid)
    return algo.run()
