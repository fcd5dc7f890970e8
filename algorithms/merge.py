"""
merge.py — Merge Sort
=====================
Top-down merge sort.  Each merge copies both halves into buffers, then
writes the range back one bar at a time, pausing after every write.

Counting follows the animation: one comparison per interleave step, one
swap per element written back (leftovers included).

Only the final merge (the one spanning the whole Sequence) leaves its
range SORTED; intermediate merges fall back to UNSORTED.  That is a
display choice with no bearing on correctness.
"""

from typing import Generator

from bars import DisplayState, Element
from algorithms.frame import Frame
from algorithms.ops import SortOps, Interrupted


def merge_sort(ops: SortOps) -> Generator[Frame, None, None]:
    yield from _merge_sort(ops, 0, len(ops.sequence) - 1)


def _merge_sort(ops: SortOps, left: int, right: int) -> Generator[Frame, None, None]:
    if left < right:
        mid = (left + right) // 2
        yield from _merge_sort(ops, left, mid)
        yield from _merge_sort(ops, mid + 1, right)
        yield from _merge(ops, left, mid, right)


def _merge(ops: SortOps, left: int, mid: int, right: int) -> Generator[Frame, None, None]:
    seq       = ops.sequence
    left_buf  = [seq[x].copy() for x in range(left, mid + 1)]
    right_buf = [seq[x].copy() for x in range(mid + 1, right + 1)]
    span      = tuple(range(left, right + 1))

    i = j = 0
    k = left
    try:
        while i < len(left_buf) and j < len(right_buf):
            ops.mark(DisplayState.COMPARING, *span)
            yield from ops.pause("compare", *span)

            ops.count_comparison()
            # <= keeps equal keys in their original order
            if left_buf[i].value <= right_buf[j].value:
                yield from _write(ops, k, left_buf[i])
                i += 1
            else:
                yield from _write(ops, k, right_buf[j])
                j += 1
            k += 1

        while i < len(left_buf):
            yield from _write(ops, k, left_buf[i])
            i += 1
            k += 1

        while j < len(right_buf):
            yield from _write(ops, k, right_buf[j])
            j += 1
            k += 1
    except Interrupted:
        # slots k..right still hold stale copies; put the unwritten
        # buffer contents back so no value is lost or duplicated
        for element in left_buf[i:] + right_buf[j:]:
            seq[k] = element
            k += 1
        raise

    whole = left == 0 and right == len(seq) - 1
    ops.mark(DisplayState.SORTED if whole else DisplayState.UNSORTED, *span)


def _write(ops: SortOps, k: int, element: Element) -> Generator[Frame, None, None]:
    ops.sequence[k] = element
    element.state = DisplayState.SWAPPING
    ops.count_swap()
    yield from ops.pause("write", k)
