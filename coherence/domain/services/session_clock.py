"""Pause-aware session clock."""

import logging
import time
from typing import Callable, Optional

from ..exceptions import ClockUnavailableError

logger = logging.getLogger(__name__)

TimeSource = Callable[[], int]


def monotonic_ms() -> int:
    """Current monotonic time in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


class SessionClock:
    """
    Tracks running time of a session, excluding paused intervals.

    Elapsed time is derived from a start timestamp, an optional pause
    timestamp and the accumulated paused duration, all read from a monotonic
    time source. Wall-clock adjustments therefore never affect a session,
    and no time accrues while paused.
    """

    def __init__(self, time_source: TimeSource = monotonic_ms):
        if not callable(time_source):
            raise ClockUnavailableError("Session clock requires a callable monotonic time source")
        self._now = time_source
        self._start_ms: Optional[int] = None
        self._pause_started_ms: Optional[int] = None
        self._paused_accum_ms: int = 0

    @property
    def started(self) -> bool:
        return self._start_ms is not None

    @property
    def paused(self) -> bool:
        return self._pause_started_ms is not None

    def start(self) -> None:
        """Record the start timestamp and reset the paused accumulator."""
        if self.started:
            logger.warning("Session clock already started")
            return

        self._start_ms = self._now()
        self._pause_started_ms = None
        self._paused_accum_ms = 0

    def pause(self) -> None:
        """Freeze elapsed time at the current instant."""
        if not self.started or self.paused:
            return

        self._pause_started_ms = self._now()

    def resume(self) -> None:
        """Continue counting, adding the paused interval to the accumulator."""
        if not self.paused:
            return

        self._paused_accum_ms += self._now() - self._pause_started_ms
        self._pause_started_ms = None

    def elapsed(self) -> int:
        """Running time in milliseconds since start, excluding pauses.

        Returns:
            int: Elapsed milliseconds; 0 before start, frozen while paused.
        """
        if self._start_ms is None:
            return 0

        reference = self._pause_started_ms if self.paused else self._now()
        return max(0, reference - self._start_ms - self._paused_accum_ms)
