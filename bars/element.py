"""
element.py — Array Slot
=======================
One bar of the visualisation: a numeric value plus the display state the
renderer uses to colour it.

Design decisions:
  - `uid` is the slot's original position.  It is copied with the element
    through swaps and merge buffers, so two bars with equal values can
    still be told apart (stability checks, debugging).
  - `state` is purely presentational.  Algorithms set it to show what they
    are doing; nothing in the sort logic ever reads it back.
"""

from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Display State Enum — maps 1-to-1 with the bar colour palette
# ---------------------------------------------------------------------------
class DisplayState(Enum):
    UNSORTED   = "unsorted"    # blue: resting
    COMPARING  = "comparing"   # red: being compared right now
    SWAPPING   = "swapping"    # orange: being moved / written
    SORTED     = "sorted"      # green: in its final position
    PIVOT      = "pivot"       # purple: quicksort pivot
    AUXILIARY  = "auxiliary"   # grey: scratch / helper slot


# ---------------------------------------------------------------------------
# Element
# ---------------------------------------------------------------------------
class Element:
    """
    Attributes:
        value : Numeric height of the bar.
        state : DisplayState for visual encoding.
        uid   : Identity that survives swaps and copies.
    """

    __slots__ = ("value", "state", "uid")

    def __init__(
        self,
        value: float,
        state: DisplayState = DisplayState.UNSORTED,
        uid: Optional[int] = None,
    ):
        self.value: float        = value
        self.state: DisplayState = state
        self.uid:   int          = -1 if uid is None else uid

    def copy(self) -> "Element":
        """Detached clone with the same identity (merge buffers use this)."""
        return Element(self.value, self.state, self.uid)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"value": self.value, "state": self.state.value}

    def __repr__(self) -> str:
        return f"Element({self.value}, state={self.state.value}, uid={self.uid})"
