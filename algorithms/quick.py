"""
quick.py — Quick Sort
=====================
Lomuto partition scheme: the last bar of the range is the pivot, every
smaller bar is swapped to the front, then the pivot is swapped into the
slot right after them and marked SORTED.

The final pivot swap is always performed and counted, even when the
pivot is already in place (i + 1 == high).  Swaps inside the scan are
skipped when i == j.
"""

from typing import Generator

from bars import DisplayState
from algorithms.frame import Frame
from algorithms.ops import SortOps


def quick_sort(ops: SortOps) -> Generator[Frame, None, None]:
    yield from _quick_sort(ops, 0, len(ops.sequence) - 1)


def _quick_sort(ops: SortOps, low: int, high: int) -> Generator[Frame, None, None]:
    if low < high:
        pivot_idx = yield from _partition(ops, low, high)
        yield from _quick_sort(ops, low, pivot_idx - 1)
        yield from _quick_sort(ops, pivot_idx + 1, high)


def _partition(ops: SortOps, low: int, high: int) -> Generator[Frame, None, int]:
    seq   = ops.sequence
    pivot = seq[high]
    pivot.state = DisplayState.PIVOT
    yield from ops.pause("pivot", high)

    i = low - 1
    for j in range(low, high):
        ops.mark(DisplayState.COMPARING, j)
        yield from ops.pause("compare", j, high)

        ops.count_comparison()
        if seq[j].value < pivot.value:
            i += 1
            if i != j:
                yield from ops.swap(i, j)
            ops.mark(DisplayState.UNSORTED, i)
        ops.mark(DisplayState.UNSORTED, j)

    yield from ops.swap(i + 1, high)
    ops.mark(DisplayState.SORTED, i + 1)
    return i + 1
