"""
sequence.py — Bar Sequence Container & Generator
=================================================
The ordered list of Elements that a run sorts in place.  The Player owns
it; the renderer only ever sees `snapshot()` copies.

Responsibilities:
  1. Indexed access / assignment / swap        (what algorithms need)
  2. Bulk state helpers                         (reset before a run, mark all sorted)
  3. Factory class-methods                      (random, explicit values)
  4. Read-only snapshots for rendering
"""

import random
from typing import Iterable, Iterator, List, Optional, Tuple

from bars.element import Element, DisplayState


# Value range of generated bars: floor(random * (400 - 100)) + 10 on a
# 400px tall canvas.
VALUE_RANGE: Tuple[int, int] = (10, 309)


class Sequence:
    """
    Attributes:
        elements : The Element slots, left to right.
    """

    def __init__(self, elements: Optional[Iterable[Element]] = None):
        self.elements: List[Element] = list(elements or [])

    # ==================================================================
    # SLOT ACCESS
    # ==================================================================
    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, idx: int) -> Element:
        return self.elements[idx]

    def __setitem__(self, idx: int, element: Element) -> None:
        self.elements[idx] = element

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def swap(self, i: int, j: int) -> None:
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]

    # ==================================================================
    # STATE HELPERS
    # ==================================================================
    def reset_states(self) -> None:
        """Every bar back to UNSORTED — called before each run."""
        self.mark_all(DisplayState.UNSORTED)

    def mark_all(self, state: DisplayState) -> None:
        for element in self.elements:
            element.state = state

    # ==================================================================
    # READ-ONLY VIEWS
    # ==================================================================
    def values(self) -> List[float]:
        return [e.value for e in self.elements]

    def states(self) -> List[str]:
        return [e.state.value for e in self.elements]

    def uids(self) -> List[int]:
        return [e.uid for e in self.elements]

    def snapshot(self) -> List[dict]:
        """Detached [{"value", "state"}] list for the renderer."""
        return [e.to_dict() for e in self.elements]

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Sequence":
        return cls(Element(v, uid=i) for i, v in enumerate(values))

    @classmethod
    def generate_random(
        cls,
        size: int,
        value_range: Tuple[int, int] = VALUE_RANGE,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Sequence":
        """
        `size` random integer bars in the inclusive `value_range`.
        Pass `rng` to share a generator across calls, or `seed` for a
        one-off reproducible sequence.
        """
        if size < 0:
            raise ValueError(f"Sequence size must be non-negative, got {size}")
        rng = rng or random.Random(seed)
        lo, hi = value_range
        return cls.from_values(rng.randint(lo, hi) for _ in range(size))

    def __repr__(self) -> str:
        return f"Sequence({self.values()})"
