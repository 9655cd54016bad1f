# gridpath/core/heap.py
#!/usr/bin/env python3
"""
Binary min-heap for the search frontier.

Entries order by (estimate, h, seq):
- lower f = g + h first,
- then lower h (closer to the goal),
- then FIFO by insertion sequence.

The backing list grows with every insert; nothing is ever dropped.
There is no decrease-key: an improved estimate is pushed again and the
older copy is left for the caller to discard when it surfaces.
"""

from typing import List, NamedTuple, Optional, Tuple

Cell = Tuple[int, int]  # (row, col)


class FrontierEntry(NamedTuple):
    estimate: int   # f = cost + h
    h: int
    seq: int
    cell: Cell
    cost: int       # g at push time, used for the stale check

    @property
    def key(self) -> Tuple[int, int, int]:
        return (self.estimate, self.h, self.seq)


class MinHeap:
    def __init__(self):
        self._items: List[FrontierEntry] = []
        self._seq = 0

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def clear(self) -> None:
        self._items.clear()
        self._seq = 0

    def push(self, cell: Cell, cost: int, h: int) -> FrontierEntry:
        """Insert a frontier entry for `cell` and sift it toward the root."""
        self._seq += 1
        entry = FrontierEntry(cost + h, h, self._seq, cell, cost)
        self._items.append(entry)
        self._sift_up(len(self._items) - 1)
        return entry

    def peek(self) -> Optional[FrontierEntry]:
        return self._items[0] if self._items else None

    def pop(self) -> FrontierEntry:
        """Remove and return the entry with the smallest key."""
        if not self._items:
            raise IndexError("pop from empty heap")
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def entries(self) -> List[FrontierEntry]:
        """Snapshot in storage order (not sorted)."""
        return list(self._items)

    # -------------------- sifting --------------------

    def _sift_up(self, pos: int) -> None:
        items = self._items
        while pos > 0:
            parent = (pos - 1) // 2
            if items[pos].key < items[parent].key:
                items[pos], items[parent] = items[parent], items[pos]
                pos = parent
            else:
                break

    def _sift_down(self, pos: int) -> None:
        items = self._items
        n = len(items)
        while True:
            left = 2 * pos + 1
            right = left + 1
            if left >= n:
                break
            if right >= n:
                # single child: compare against it only
                child = left
            elif items[left].key <= items[right].key:
                child = left
            else:
                child = right
            if items[child].key < items[pos].key:
                items[pos], items[child] = items[child], items[pos]
                pos = child
            else:
                break
