"""
bubble.py — Bubble Sort
=======================
Adjacent-pair sweep.  Pass i compares slots 0..n-i-2 with their right
neighbour and swaps inversions, so the largest remaining bar bubbles up
to slot n-i-1, which is then marked SORTED.
"""

from typing import Generator

from bars import DisplayState
from algorithms.frame import Frame
from algorithms.ops import SortOps


def bubble_sort(ops: SortOps) -> Generator[Frame, None, None]:
    seq = ops.sequence
    n   = len(seq)
    if n <= 1:
        return

    for i in range(n - 1):
        for j in range(n - i - 1):
            if (yield from ops.compare(j, j + 1)):
                yield from ops.swap(j, j + 1)

            ops.mark(DisplayState.UNSORTED, j, j + 1)

        # largest of the unsorted prefix is now in place
        ops.mark(DisplayState.SORTED, n - i - 1)

    ops.mark(DisplayState.SORTED, 0)
