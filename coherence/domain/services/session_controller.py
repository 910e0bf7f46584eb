"""Session controller driving a breathing session."""

import logging
from typing import Any, Callable, Optional

from ..entities.breathing_settings import SessionConfig
from ..entities.phase import BreathPhase, SessionStatus
from ..entities.session_state import SessionState
from ..exceptions import (
    ClockUnavailableError,
    InvalidConfigError,
    SchedulerUnavailableError,
)
from ..interfaces.audio_cue_dispatcher import AudioCueDispatcher
from ..interfaces.renderer import Renderer
from ..interfaces.tick_scheduler import TickScheduler
from .phase_scheduler import PhaseScheduler
from .session_clock import SessionClock, TimeSource, monotonic_ms

logger = logging.getLogger(__name__)


class SessionController:
    """
    Orchestrates the lifecycle of one breathing session at a time.

    The controller owns the session state, a session clock and a phase
    scheduler. On each tick it converts elapsed time into timer, progress,
    phase and counters, and notifies the renderer and audio dispatcher only
    when a value changes (timer and progress are refreshed every tick).

    It never runs on its own thread: every tick arms exactly one future tick
    through the host's TickScheduler, and pause/quit cancel the pending one.
    Hosts with several threads must serialize all calls into the controller.
    """

    def __init__(
        self,
        renderer: Renderer,
        audio: AudioCueDispatcher,
        scheduler: Optional[TickScheduler],
        time_source: TimeSource = monotonic_ms,
    ):
        self.renderer = renderer
        self.audio = audio
        self.scheduler = scheduler
        self._time_source = time_source

        self.state = SessionState()
        self.config: Optional[SessionConfig] = None
        self._clock: Optional[SessionClock] = None
        self._phases: Optional[PhaseScheduler] = None
        self._pending_tick: Any = None

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def has_pending_tick(self) -> bool:
        return self._pending_tick is not None

    # ===== Lifecycle actions =====

    def start(self, config: SessionConfig) -> None:
        """Start a fresh session.

        Args:
            config: Timing configuration for the session.

        Raises:
            InvalidConfigError: If the cycle or total duration is not positive.
            ClockUnavailableError: If the time source cannot be used.
            SchedulerUnavailableError: If ticks cannot be scheduled.
        """
        if self.state.status.is_active:
            logger.debug("Session already active, start ignored")
            return

        if config.total_duration_ms <= 0 or config.cycle_ms <= 0:
            raise InvalidConfigError(
                f"Session needs positive durations, got total={config.total_duration_ms}ms "
                f"cycle={config.cycle_ms}ms"
            )
        if self.scheduler is None:
            raise SchedulerUnavailableError("No tick scheduler available")

        clock = SessionClock(self._time_source)

        self.config = config
        self._phases = PhaseScheduler(config)
        self._clock = clock
        self.state = SessionState()

        self._safely(self.renderer.hide_end_screen)
        self._safely(self.audio.unlock)
        self._render_counts()
        self._safely(self.renderer.enter_session_mode)
        self._safely(self.renderer.set_pause_button_state, False)

        if not self._safely(self.audio.start_background):
            logger.info("Background audio not playing, continuing without it")

        try:
            clock.start()
        except Exception as e:
            self._stop_session(SessionStatus.ABORTED)
            raise ClockUnavailableError(f"Monotonic time source failed: {e}") from e

        self.state.status = SessionStatus.RUNNING
        self._safely(self.renderer.set_timer, config.total_seconds)
        self._safely(self.renderer.set_progress, 0.0)

        logger.info(
            f"Session started: total={config.total_duration_ms}ms inhale={config.inhale_ms}ms "
            f"hold={config.hold_ms}ms exhale={config.exhale_ms}ms"
        )

        try:
            self.tick()
        except SchedulerUnavailableError:
            self._stop_session(SessionStatus.ABORTED)
            raise

    def toggle_pause(self) -> None:
        """Pause a running session or resume a paused one."""
        if not self.state.status.is_active:
            logger.debug("No active session, pause toggle ignored")
            return

        if self.state.status == SessionStatus.RUNNING:
            self.state.status = SessionStatus.PAUSED
            self._cancel_pending_tick()
            self._clock.pause()
            self.state.elapsed_ms = min(self._clock.elapsed(), self.config.total_duration_ms)
            self._safely(self.audio.pause_all)
            self._safely(self.renderer.set_pause_button_state, True)
            logger.info(f"Session paused at {self._clock.elapsed()}ms")
        else:
            self._clock.resume()
            self.state.status = SessionStatus.RUNNING
            self._safely(self.renderer.set_pause_button_state, False)
            self._safely(self.audio.resume_background)
            logger.info(f"Session resumed at {self._clock.elapsed()}ms")
            try:
                self.tick()
            except SchedulerUnavailableError:
                self._stop_session(SessionStatus.ABORTED)
                raise

    def quit(self) -> None:
        """Abort the active session and return the display to idle."""
        if not self.state.status.is_active:
            logger.debug("No active session, quit ignored")
            return

        self._stop_session(SessionStatus.ABORTED)
        logger.info(f"Session aborted at {self.state.elapsed_ms}ms")

    # ===== Scheduling loop =====

    def tick(self) -> None:
        """Re-evaluate elapsed time and emit transition side effects.

        Invoked by the host scheduler. Does nothing unless the session is
        running; otherwise arms exactly one next tick, or finalizes the session
        once the total duration is reached.
        """
        if self.state.status != SessionStatus.RUNNING:
            return

        elapsed = self._clock.elapsed()
        total = self.config.total_duration_ms

        if elapsed >= total:
            self.state.elapsed_ms = total
            self._stop_session(SessionStatus.COMPLETED)
            logger.info(
                f"Session completed: {self.state.cycle_count} cycles, "
                f"{self.state.breath_count} breaths"
            )
            return

        self.state.elapsed_ms = elapsed

        remaining = total - elapsed
        self._safely(self.renderer.set_timer, -(-remaining // 1000))
        self._safely(self.renderer.set_progress, min(100.0, max(0.0, elapsed * 100 / total)))

        cycle_index = self._phases.cycle_index_at(elapsed)
        if cycle_index != self.state.cycle_index:
            self.state.cycle_index = cycle_index
            self.state.cycle_count = cycle_index
            self._render_counts()

        phase = self._phases.phase_for_elapsed(elapsed)
        if phase != self.state.phase:
            self.state.phase = phase
            self._on_phase_enter(phase)

        # Counted from the schedule so a coarse tick cannot lose an exhale
        breaths = self._phases.exhale_entries_at(elapsed)
        if breaths != self.state.breath_count:
            self.state.breath_count = breaths
            self._render_counts()

        self._arm()

    def _on_phase_enter(self, phase: BreathPhase) -> None:
        self._safely(self.renderer.set_phase, phase)

        if phase == BreathPhase.INHALE:
            self._safely(self.audio.play_inhale_cue)
        elif phase == BreathPhase.EXHALE:
            self._safely(self.audio.play_exhale_cue)

    def _arm(self) -> None:
        self._cancel_pending_tick()
        try:
            self._pending_tick = self.scheduler.schedule(self.tick)
        except RuntimeError as e:
            raise SchedulerUnavailableError(f"Cannot schedule session tick: {e}") from e

    def _cancel_pending_tick(self) -> None:
        if self._pending_tick is None:
            return
        handle, self._pending_tick = self._pending_tick, None
        self.scheduler.cancel(handle)

    def _stop_session(self, status: SessionStatus) -> None:
        self._cancel_pending_tick()
        self.state.status = status
        self.state.phase = BreathPhase.DONE if status == SessionStatus.COMPLETED else BreathPhase.IDLE

        self._safely(self.audio.stop_all)
        self._safely(self.renderer.exit_session_mode)
        self._safely(self.renderer.set_phase, self.state.phase)
        self._safely(self.renderer.set_timer, self.config.total_seconds)
        self._safely(self.renderer.set_progress, 0.0)

        if status == SessionStatus.COMPLETED:
            self._safely(self.renderer.show_end_screen)

    # ===== Collaborator calls =====

    def _render_counts(self) -> None:
        self._safely(self.renderer.set_counts, self.state.cycle_count, self.state.breath_count)

    @staticmethod
    def _safely(action: Callable[..., Any], *args: Any) -> Any:
        """Call a renderer or audio method, logging and absorbing any failure."""
        try:
            return action(*args)
        except Exception as e:
            name = getattr(action, "__qualname__", repr(action))
            logger.warning(f"Collaborator call {name} failed: {e}", exc_info=True)
            return None
