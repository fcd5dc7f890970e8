"""
host.py — Event-Loop Host for Synchronous Callers
=================================================
The Player is a coroutine-driven object; Flask views are plain
functions running on worker threads.  PlayerHost bridges the two: it
owns a private asyncio loop on a daemon thread, builds the Player there,
and funnels every call through `asyncio.run_coroutine_threadsafe`, so
the Player itself only ever runs on one thread.

Usage:
    host = PlayerHost(size=30, rate=20)
    host.start("quick")        # returns at once; the run animates in the background
    host.snapshot()            # bars for the renderer
    host.stop()
    host.shutdown()
"""

import asyncio
import logging
import threading
from typing import Any, Callable, List, Optional

from algorithms import get_algorithm
from engine.player import Player, RunState
from engine.stats import StatsSnapshot

logger = logging.getLogger(__name__)


class PlayerHost:
    """
    Attributes:
        player     : The hosted Player (only touch it through call()).
        last_error : Repr of the last fatal run error, or None.
    """

    def __init__(self, call_timeout: float = 5.0, **player_kwargs: Any):
        self._timeout = call_timeout
        self._loop    = asyncio.new_event_loop()
        self._thread  = threading.Thread(target=self._run_loop, name="sort-player", daemon=True)
        self._thread.start()
        self._run_task: Optional[asyncio.Task] = None
        self.last_error: Optional[str] = None

        self.player: Player = self.call(Player, **player_kwargs)

    # ------------------------------------------------------------------
    # Marshalling
    # ------------------------------------------------------------------
    def call(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run `fn(*args, **kwargs)` on the loop thread and return its result."""

        async def _invoke():
            return fn(*args, **kwargs)

        future = asyncio.run_coroutine_threadsafe(_invoke(), self._loop)
        return future.result(timeout=self._timeout)

    # ------------------------------------------------------------------
    # Player API
    # ------------------------------------------------------------------
    def start(self, algorithm: Optional[str] = None) -> bool:
        """Launch a run in the background.  False if one is already active."""

        def _launch() -> bool:
            if algorithm is not None and get_algorithm(algorithm) is None:
                raise ValueError(f"Unknown algorithm: {algorithm}")
            pending = self._run_task is not None and not self._run_task.done()
            if pending or self.player.busy:
                return False
            task = self._loop.create_task(self.player.start(algorithm))
            task.add_done_callback(self._on_run_done)
            self._run_task = task
            return True

        self.last_error = None
        return self.call(_launch)

    def stop(self) -> None:
        self.call(self.player.stop)

    def reset(self) -> None:
        self.call(self.player.reset)

    def regenerate(self, size: Optional[int] = None) -> bool:
        return self.call(self.player.regenerate, size)

    def select_algorithm(self, key: str) -> bool:
        return self.call(self.player.select_algorithm, key)

    def set_tempo(self, rate: int) -> None:
        self.call(self.player.set_tempo, rate)

    def snapshot(self) -> List[dict]:
        return self.call(self.player.snapshot)

    def statistics(self) -> StatsSnapshot:
        return self.call(self.player.statistics)

    def state(self) -> dict:
        """One consistent read of everything the UI polls for."""

        def _read() -> dict:
            p = self.player
            return {
                "bars":      p.snapshot(),
                "stats":     p.statistics(),
                "run_state": p.run_state,
                "algorithm": p.algorithm,
                "size":      p.size,
                "rate":      p.rate,
            }

        return self.call(_read)

    @property
    def run_state(self) -> RunState:
        return self.call(lambda: self.player.run_state)

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def shutdown(self) -> None:
        """Stop any run, let it unwind, halt the loop and join the thread."""
        if self._loop.is_closed():
            return

        async def _drain():
            self.player.stop()
            if self._run_task is not None:
                await asyncio.gather(self._run_task, return_exceptions=True)

        asyncio.run_coroutine_threadsafe(_drain(), self._loop).result(timeout=self._timeout)
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=self._timeout)
        self._loop.close()
        logger.debug("player loop shut down")

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def _on_run_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            # already logged with traceback by Player.start
            self.last_error = repr(exc)
