"""
frame.py — Suspension-Point Snapshot
====================================
Every sort routine is a generator that yields Frame objects.  A Frame is
a frozen picture of everything the renderer needs for one redraw:

    • the bar values and display states, left to right
    • which primitive produced it ("compare", "swap", "write", …)
    • the slot indices it touched
    • the running comparison / swap counters

Design decisions:
  - Frame is a plain frozen dataclass.  It is a SNAPSHOT: the routine is
    the only writer of the Sequence, the player / renderer only read.
  - values / states are tuples so a Frame stays valid after the Sequence
    moves on.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        step_number : 0-based index of this frame within the run.
        action      : Primitive that produced it (compare / swap / write / …).
        indices     : Slots the primitive touched.
        values      : Bar values at the moment of suspension.
        states      : DisplayState values (strings) at the moment of suspension.
        comparisons : Comparison counter at the moment of suspension.
        swaps       : Swap counter at the moment of suspension.
    """

    step_number:  int                 = 0
    action:       str                 = ""
    indices:      Tuple[int, ...]     = ()
    values:       Tuple[float, ...]   = ()
    states:       Tuple[str, ...]     = ()
    comparisons:  int                 = 0
    swaps:        int                 = 0

    def bars(self) -> List[dict]:
        """Same shape as Sequence.snapshot(), so the renderer takes either."""
        return [{"value": v, "state": s} for v, s in zip(self.values, self.states)]
