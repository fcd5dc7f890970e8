"""
ops.py — Sort Primitives & Cancellation
=======================================
The only way a sort routine touches the world.  A SortOps instance is
built by the Player for one run and handed to the routine; it binds the
shared Sequence, the run's Statistics and the run's CancelToken.

Every suspension point goes through `pause()`:

    yield from ops.pause("scan", j)

which checks the token, yields a Frame to whoever drives the generator,
and checks the token again on resumption.  A cancelled run therefore
fails with Interrupted at the very next primitive, before it can mutate
anything else.

Usage inside a routine:
    if (yield from ops.compare(j, j + 1)):
        yield from ops.swap(j, j + 1)
"""

from typing import Generator

from bars import Sequence, DisplayState
from algorithms.frame import Frame


class Interrupted(Exception):
    """The run was stopped; raised by any primitive once its token is cancelled."""


# ---------------------------------------------------------------------------
# CancelToken — one per run
# ---------------------------------------------------------------------------
class CancelToken:
    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise Interrupted("Sorting stopped")


# ---------------------------------------------------------------------------
# SortOps
# ---------------------------------------------------------------------------
class SortOps:
    """
    Attributes:
        sequence : The Sequence being sorted in place.
        stats    : Counter sink with record_comparison() / record_swap()
                   (engine.stats.Statistics).
        token    : CancelToken observed at every suspension point.
    """

    def __init__(self, sequence: Sequence, stats, token: CancelToken):
        self.sequence = sequence
        self.stats    = stats
        self.token    = token
        self._step_no = 0

    # ------------------------------------------------------------------
    # Suspension
    # ------------------------------------------------------------------
    def pause(self, action: str, *indices: int) -> Generator[Frame, None, None]:
        """Render + delay.  Fails with Interrupted before or after the wait."""
        self.token.raise_if_cancelled()
        yield self.frame(action, *indices)
        self.token.raise_if_cancelled()

    def frame(self, action: str, *indices: int) -> Frame:
        seq = self.sequence
        frame = Frame(
            step_number=self._step_no,
            action=action,
            indices=tuple(indices),
            values=tuple(seq.values()),
            states=tuple(seq.states()),
            comparisons=self.stats.comparisons,
            swaps=self.stats.swaps,
        )
        self._step_no += 1
        return frame

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------
    def compare(self, i: int, j: int) -> Generator[Frame, None, bool]:
        """True if value[i] > value[j]."""
        self.token.raise_if_cancelled()
        self.stats.record_comparison()
        self.mark(DisplayState.COMPARING, i, j)
        yield from self.pause("compare", i, j)
        return self.sequence[i].value > self.sequence[j].value

    def swap(self, i: int, j: int) -> Generator[Frame, None, None]:
        self.token.raise_if_cancelled()
        self.stats.record_swap()
        self.mark(DisplayState.SWAPPING, i, j)
        yield from self.pause("swap", i, j)
        self.sequence.swap(i, j)
        yield from self.pause("swap", i, j)

    # ------------------------------------------------------------------
    # Bookkeeping for routines that compare / move outside compare()/swap()
    # ------------------------------------------------------------------
    def count_comparison(self) -> None:
        self.stats.record_comparison()

    def count_swap(self) -> None:
        self.stats.record_swap()

    def mark(self, state: DisplayState, *indices: int) -> None:
        for idx in indices:
            self.sequence[idx].state = state
