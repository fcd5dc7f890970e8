"""
bars/
-----
Core data layer.  Public API:

    from bars import Sequence, Element, DisplayState
"""

from bars.element  import Element, DisplayState
from bars.sequence import Sequence, VALUE_RANGE

__all__ = [
    "Element",   "DisplayState",
    "Sequence",  "VALUE_RANGE",
]
