"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sort the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, description, best, average, worst, space),
        …
    }

Every `fn` has the same shape: it takes a SortOps and returns a generator
of Frames.  The player and the UI both consume AlgoInfo, so adding a sort
is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import bubble_sort
from algorithms.selection import selection_sort
from algorithms.insertion import insertion_sort
from algorithms.merge     import merge_sort
from algorithms.quick     import quick_sort
from algorithms.frame     import Frame
from algorithms.ops       import SortOps, CancelToken, Interrupted


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:          str        # registry key, e.g. "bubble"
    label:        str        # human label, e.g. "Bubble Sort"
    fn:           Callable   # the generator function
    description:  str = ""   # one-liner for the info card
    best:         str = ""   # e.g. "O(n)"
    average:      str = ""
    worst:        str = ""
    space:        str = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=bubble_sort,
        description="Bubble sort repeatedly steps through the list, compares adjacent "
                    "elements and swaps them if they are in the wrong order.",
        best="O(n)", average="O(n²)", worst="O(n²)", space="O(1)",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=selection_sort,
        description="Selection sort finds the minimum element and places it at the "
                    "beginning, then repeats for the remaining unsorted portion.",
        best="O(n²)", average="O(n²)", worst="O(n²)", space="O(1)",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=insertion_sort,
        description="Insertion sort builds the sorted array one element at a time by "
                    "inserting each element into its correct position.",
        best="O(n)", average="O(n²)", worst="O(n²)", space="O(1)",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=merge_sort,
        description="Merge sort divides the array into halves, recursively sorts them, "
                    "and then merges the sorted halves.",
        best="O(n log n)", average="O(n log n)", worst="O(n log n)", space="O(n)",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=quick_sort,
        description="Quick sort selects a pivot element and partitions the array around "
                    "it, then recursively sorts the subarrays.",
        best="O(n log n)", average="O(n log n)", worst="O(n²)", space="O(log n)",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "Frame",
    "SortOps",
    "CancelToken",
    "Interrupted",
]
