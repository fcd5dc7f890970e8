"""
selection.py — Selection Sort
=============================
For each slot i, scan the unsorted tail for the minimum and swap it into
place.  The scan counts its own comparisons (one per visited bar) rather
than going through ops.compare(), because the running minimum stays
highlighted between steps.
"""

from typing import Generator

from bars import DisplayState
from algorithms.frame import Frame
from algorithms.ops import SortOps


def selection_sort(ops: SortOps) -> Generator[Frame, None, None]:
    seq = ops.sequence
    n   = len(seq)
    if n <= 1:
        return

    for i in range(n - 1):
        min_idx = i
        ops.mark(DisplayState.COMPARING, i)

        for j in range(i + 1, n):
            ops.mark(DisplayState.COMPARING, j)
            yield from ops.pause("scan", min_idx, j)

            ops.count_comparison()
            if seq[j].value < seq[min_idx].value:
                if min_idx != i:
                    ops.mark(DisplayState.UNSORTED, min_idx)
                min_idx = j
            else:
                ops.mark(DisplayState.UNSORTED, j)

        if min_idx != i:
            yield from ops.swap(i, min_idx)

        ops.mark(DisplayState.SORTED, i)
        if min_idx != i:
            ops.mark(DisplayState.UNSORTED, min_idx)

    ops.mark(DisplayState.SORTED, n - 1)
