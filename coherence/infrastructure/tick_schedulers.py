"""Tick scheduler implementations."""

import asyncio
import itertools
from typing import Callable, Dict, Optional

from ..domain.interfaces.tick_scheduler import TickScheduler


class AsyncioTickScheduler(TickScheduler):
    """Schedules ticks on an asyncio event loop with ``call_later``.

    The loop is resolved lazily, so the scheduler can be created before the
    loop runs (e.g. at import time of the API module).
    """

    def __init__(self, interval_ms: int = 16, loop: Optional[asyncio.AbstractEventLoop] = None):
        """
        Args:
            interval_ms: Delay between ticks; 16ms is roughly one display frame.
            loop: Event loop to use; defaults to the running loop at schedule time.
        """
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self._loop = loop

    def schedule(self, callback: Callable[[], None]) -> asyncio.TimerHandle:
        # Raises RuntimeError when called outside a running loop
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(self.interval_ms / 1000, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class ManualTickScheduler(TickScheduler):
    """Scheduler whose callbacks only fire when ``run_pending`` is called.

    Useful for tests and for hosts that drive the loop themselves.
    """

    def __init__(self):
        self._pending: Dict[int, Callable[[], None]] = {}
        self._ids = itertools.count(1)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def schedule(self, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def run_pending(self) -> int:
        """Fire every callback pending right now.

        Callbacks scheduled while running wait for the next call.

        Returns:
            int: Number of callbacks fired.
        """
        due, self._pending = self._pending, {}
        for callback in due.values():
            callback()
        return len(due)
