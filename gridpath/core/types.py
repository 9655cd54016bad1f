# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Tuple, Optional, Dict, Any

Cell = Tuple[int, int]  # (row, col)


class ConfigurationError(ValueError):
    """Board is unusable: wrong Start/Goal count, zero size or malformed cells."""


class Terrain(IntEnum):
    EMPTY = 0
    START = 1
    GOAL = 2
    OBSTACLE = -1


class SearchStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    GOAL_REACHED = "done"
    EXHAUSTED = "no_path"
    BUDGET_EXCEEDED = "budget"

    @property
    def terminal(self) -> bool:
        return self in (SearchStatus.GOAL_REACHED, SearchStatus.EXHAUSTED,
                        SearchStatus.BUDGET_EXCEEDED)


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    cells: Tuple[Tuple[Terrain, ...], ...]   # [row][col]
    start: Cell
    goal: Cell

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError("Invalid board!")
        if len(self.cells) != self.height or any(len(row) != self.width for row in self.cells):
            raise ConfigurationError(
                f"Board cells do not match {self.height}x{self.width} dimensions!")
        for label, cell, tag in (("start", self.start, Terrain.START),
                                 ("end", self.goal, Terrain.GOAL)):
            if not self.in_bounds(cell):
                raise ConfigurationError(f"The {label} point {cell} is off the board!")
            if self.terrain(cell) != tag:
                raise ConfigurationError(f"The {label} point {cell} is not tagged {tag.name}!")

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.height and 0 <= col < self.width

    def terrain(self, c: Cell) -> Terrain:
        r, col = c
        return self.cells[r][col]

    def is_passable(self, c: Cell) -> bool:
        return self.in_bounds(c) and self.terrain(c) != Terrain.OBSTACLE

    def index(self, c: Cell) -> int:
        r, col = c
        return r * self.width + col

    def cell_of(self, idx: int) -> Cell:
        return divmod(idx, self.width)

    def neighbors(self, c: Cell) -> List[Cell]:
        """Passable 4-connected neighbors: up, down, left, right."""
        r, col = c
        candidates = [(r - 1, col), (r + 1, col), (r, col - 1), (r, col + 1)]
        return [n for n in candidates if self.is_passable(n)]


@dataclass
class StepResult:
    status: SearchStatus
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    status: SearchStatus
    path: List[Cell] = field(default_factory=list)            # just-after-start .. goal
    reverse_indices: List[int] = field(default_factory=list)  # goal .. just-after-start
    cost: Optional[int] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status == SearchStatus.GOAL_REACHED
