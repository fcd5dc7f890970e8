"""
player.py — Playback Controller
===============================
The Player is the ONLY object the UI talks to.  It owns the Sequence,
the Statistics and the run state, and drives one sort generator at a
time on the asyncio event loop, sleeping `1000 / rate` ms between frames.

State machine:
    IDLE     →  start()               →  RUNNING
    RUNNING  →  (generator exhausted)  →  IDLE      (all bars SORTED)
    RUNNING  →  stop()                →  STOPPED
    STOPPED  →  (driver unwinds)       →  IDLE      (bars left as they were)

Cancellation:
  Each run gets its own CancelToken and wakeup Event.  stop() cancels the
  token and sets the event, so the pending delay ends at once and the
  generator's next primitive raises Interrupted.  A driver that wakes up
  after a newer run has started sees its own (cancelled) token and never
  touches the newer run's state.

Thread safety:
  Not thread-safe.  Call every method from the loop the run is driven
  on; engine.host.PlayerHost does that for synchronous callers.
"""

import asyncio
import logging
import random
import time
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from algorithms import get_algorithm, SortOps, CancelToken, Interrupted, Frame
from bars import Sequence, DisplayState
from engine.stats import Statistics, StatsSnapshot

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE    = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


# ---------------------------------------------------------------------------
# Defaults & bounds
# ---------------------------------------------------------------------------
SIZE_RANGE:   Tuple[int, int] = (5, 100)
DEFAULT_SIZE: int             = 50
DEFAULT_RATE: int             = 5        # steps per second → 200 ms per step
DEFAULT_ALGO: str             = "bubble"


# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------
class Player:
    """
    Attributes:
        sequence  : The bars being sorted (replaced by regenerate()).
        stats     : Statistics for the current / last run.
        algorithm : Registry key of the selected sort.
        rate      : Tempo in steps per second.
        on_frame  : Optional callback(Frame) fired at every suspension point
                    and once more when a run completes.  The renderer hooks here.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        rate: int = DEFAULT_RATE,
        algorithm: str = DEFAULT_ALGO,
        values: Optional[Iterable[float]] = None,
        seed: Optional[int] = None,
        on_frame: Optional[Callable[[Frame], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if get_algorithm(algorithm) is None:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        _check_rate(rate)

        self._rng       = random.Random(seed)
        self.algorithm: str                         = algorithm
        self.rate:      int                         = rate
        self.on_frame:  Optional[Callable[[Frame], None]] = on_frame
        self.stats:     Statistics                  = Statistics(clock)
        self._state:    RunState                    = RunState.IDLE

        # per-run handles, None between runs
        self._token:    Optional[CancelToken]   = None
        self._wakeup:   Optional[asyncio.Event] = None

        if values is not None:
            self.sequence = Sequence.from_values(values)
        else:
            _check_size(size)
            self.sequence = Sequence.generate_random(size, rng=self._rng)

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------
    async def start(self, algorithm: Optional[str] = None) -> bool:
        """
        Sort the current Sequence with `algorithm` (default: the selected one).

        Returns True when the run completed, False when it got stopped or a
        previous run had not finished unwinding yet.  Anything other than
        Interrupted raised by the routine or the on_frame hook is logged
        and re-raised.
        """
        if self.busy:
            logger.debug("start(%s) ignored: a run is still active", algorithm)
            return False

        key  = algorithm or self.algorithm
        info = get_algorithm(key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {key}")
        self.algorithm = key

        token  = CancelToken()
        wakeup = asyncio.Event()
        self._token, self._wakeup = token, wakeup

        self.sequence.reset_states()
        self.stats.reset(start=True)
        self._state = RunState.RUNNING
        ops = SortOps(self.sequence, self.stats, token)
        logger.info("%s started on %d bars", info.label, len(self.sequence))

        try:
            for frame in info.fn(ops):
                self._notify(frame)
                await self._suspend(wakeup)
        except Interrupted:
            logger.info(
                "%s stopped after %d comparisons, %d swaps",
                info.label, self.stats.comparisons, self.stats.swaps,
            )
            return False
        except Exception:
            logger.exception("%s failed", info.label)
            raise
        finally:
            if self._token is token:
                self.stats.finish()
                self._state  = RunState.IDLE
                self._token  = None
                self._wakeup = None

        self.sequence.mark_all(DisplayState.SORTED)
        self._notify(ops.frame("done"))
        logger.info(
            "%s finished: %d comparisons, %d swaps, %.0f ms",
            info.label, self.stats.comparisons, self.stats.swaps, self.stats.elapsed_ms(),
        )
        return True

    def stop(self) -> None:
        """Cancel the active run; its pending delay ends immediately."""
        if not self.is_running:
            return
        self._state = RunState.STOPPED
        self._token.cancel()
        self._wakeup.set()

    def reset(self) -> None:
        """Stop whatever is running and deal a fresh Sequence of the same size."""
        self.stop()
        self.regenerate()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def regenerate(self, size: Optional[int] = None) -> bool:
        """
        New random Sequence.  Refused (returns False) while a run is active.

        Without `size` the current length is kept, clamped into SIZE_RANGE
        (a Player built from explicit `values` may hold fewer or more bars).
        """
        if self.is_running:
            logger.debug("regenerate(%s) ignored: a run is active", size)
            return False
        if size is None:
            lo, hi = SIZE_RANGE
            size = min(max(len(self.sequence), lo), hi)
        _check_size(size)
        self.sequence = Sequence.generate_random(size, rng=self._rng)
        self.stats.reset()
        return True

    def select_algorithm(self, key: str) -> bool:
        """Switch sorts; deals a fresh Sequence as well.  Refused while running."""
        if get_algorithm(key) is None:
            raise ValueError(f"Unknown algorithm: {key}")
        if self.is_running:
            logger.debug("select_algorithm(%s) ignored: a run is active", key)
            return False
        self.regenerate()
        self.algorithm = key
        return True

    def set_tempo(self, rate: int) -> None:
        """Steps per second.  Picked up at the next suspension point."""
        _check_rate(rate)
        self.rate = rate

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def delay(self) -> float:
        """Seconds per suspension point."""
        return 1.0 / self.rate

    @property
    def run_state(self) -> RunState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == RunState.RUNNING

    @property
    def busy(self) -> bool:
        """True until the last run has fully unwound, stopped or not."""
        return self._token is not None

    @property
    def size(self) -> int:
        return len(self.sequence)

    def snapshot(self) -> List[dict]:
        return self.sequence.snapshot()

    def statistics(self) -> StatsSnapshot:
        return self.stats.snapshot()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    async def _suspend(self, wakeup: asyncio.Event) -> None:
        try:
            await asyncio.wait_for(wakeup.wait(), timeout=self.delay)
        except asyncio.TimeoutError:
            pass

    def _notify(self, frame: Frame) -> None:
        if self.on_frame is not None:
            self.on_frame(frame)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------
def _check_size(size: int) -> None:
    lo, hi = SIZE_RANGE
    if not isinstance(size, int) or isinstance(size, bool) or not lo <= size <= hi:
        raise ValueError(f"Array size must be an integer in {lo}..{hi}, got {size!r}")


def _check_rate(rate: int) -> None:
    if not isinstance(rate, int) or isinstance(rate, bool) or rate <= 0:
        raise ValueError(f"Rate must be a positive integer, got {rate!r}")
