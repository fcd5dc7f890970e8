"""
engine/
-------
Playback layer.

    from engine import Player, RunState, PlayerHost
"""

from engine.stats  import Statistics, StatsSnapshot
from engine.player import Player, RunState, SIZE_RANGE, DEFAULT_SIZE, DEFAULT_RATE, DEFAULT_ALGO
from engine.host   import PlayerHost

__all__ = [
    "Statistics",
    "StatsSnapshot",
    "Player",
    "RunState",
    "SIZE_RANGE",
    "DEFAULT_SIZE",
    "DEFAULT_RATE",
    "DEFAULT_ALGO",
    "PlayerHost",
]
