# tests/test_heap.py
import random

import pytest

from gridpath.core.heap import MinHeap


def test_pops_in_key_order():
    """Random inserts come back sorted by (estimate, h, seq)."""
    rng = random.Random(7)
    heap = MinHeap()
    for i in range(200):
        heap.push((i, 0), rng.randint(0, 50), rng.randint(0, 20))
    keys = [heap.pop().key for _ in range(len(heap))]
    assert keys == sorted(keys)
    assert not heap


def test_grows_past_255_entries():
    """No fixed capacity: every insert is kept."""
    heap = MinHeap()
    for i in range(1000):
        heap.push((i, i), 1000 - i, 0)
    assert len(heap) == 1000
    assert heap.pop().cell == (999, 999)
    assert len(heap) == 999


def test_ties_break_by_h_then_fifo():
    heap = MinHeap()
    heap.push((0, 0), 3, 2)   # f=5, h=2
    heap.push((0, 1), 4, 1)   # f=5, h=1
    heap.push((0, 2), 4, 1)   # f=5, h=1, pushed later
    assert [heap.pop().cell for _ in range(3)] == [(0, 1), (0, 2), (0, 0)]


def test_sift_down_with_single_child():
    """Three items left after a pop: root has one child that must still be compared."""
    heap = MinHeap()
    for cost in (1, 5, 3, 2):
        heap.push((cost, 0), cost, 0)
    assert heap.pop().cost == 1
    assert heap.pop().cost == 2
    assert heap.pop().cost == 3
    assert heap.pop().cost == 5


def test_interleaved_push_pop_returns_current_minimum():
    rng = random.Random(11)
    heap = MinHeap()
    held = []
    for _ in range(500):
        if held and rng.random() < 0.4:
            entry = heap.pop()
            assert entry.key == min(held)
            held.remove(entry.key)
        else:
            e = heap.push((0, 0), rng.randint(0, 30), rng.randint(0, 5))
            held.append(e.key)
    assert len(heap) == len(held)


def test_peek_and_empty_pop():
    heap = MinHeap()
    assert heap.peek() is None
    with pytest.raises(IndexError):
        heap.pop()
    heap.push((1, 1), 2, 3)
    assert heap.peek().estimate == 5
    assert len(heap) == 1


def test_clear_resets_sequence():
    heap = MinHeap()
    heap.push((0, 0), 0, 0)
    heap.clear()
    assert len(heap) == 0
    assert heap.push((0, 0), 0, 0).seq == 1
