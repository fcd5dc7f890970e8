"""
insertion.py — Insertion Sort
=============================
Grows a sorted prefix one key at a time.  Each larger predecessor is
shifted one slot right; the key itself travels left through the gap, so
the Sequence holds every value exactly once at every suspension point.
Each shift counts as one swap.
"""

from typing import Generator

from bars import DisplayState
from algorithms.frame import Frame
from algorithms.ops import SortOps


def insertion_sort(ops: SortOps) -> Generator[Frame, None, None]:
    seq = ops.sequence
    n   = len(seq)
    if n <= 1:
        return

    ops.mark(DisplayState.SORTED, 0)

    for i in range(1, n):
        key = seq[i]
        key.state = DisplayState.COMPARING
        yield from ops.pause("select", i)

        j = i - 1
        while j >= 0:
            ops.mark(DisplayState.COMPARING, j)
            yield from ops.pause("compare", j, j + 1)

            ops.count_comparison()
            if seq[j].value <= key.value:
                ops.mark(DisplayState.SORTED, j)
                break

            # shift the predecessor right; the key now sits in the gap at j
            ops.mark(DisplayState.SWAPPING, j)
            seq.swap(j, j + 1)
            ops.count_swap()
            yield from ops.pause("shift", j, j + 1)
            ops.mark(DisplayState.SORTED, j + 1)
            j -= 1

        key.state = DisplayState.SORTED
        yield from ops.pause("insert", j + 1)
