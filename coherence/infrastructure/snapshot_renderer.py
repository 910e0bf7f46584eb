"""In-memory renderer that keeps a snapshot of the display."""

from ..domain.entities.display_state import DisplayState, format_time
from ..domain.entities.phase import BreathPhase
from ..domain.interfaces.renderer import Renderer


class SnapshotRenderer(Renderer):
    """Renderer that records what a screen would show.

    Used by the HTTP API to report the display, and as the base of the
    console renderer.
    """

    def __init__(self):
        self.display = DisplayState()

    def snapshot(self) -> DisplayState:
        """Return a copy of the current display state."""
        return self.display.model_copy()

    def set_phase(self, phase: BreathPhase) -> None:
        self.display.phase = BreathPhase(phase)

    def set_timer(self, remaining_seconds: int) -> None:
        self.display.remaining_seconds = max(0, int(remaining_seconds))
        self.display.timer_text = format_time(remaining_seconds)

    def set_progress(self, percent: float) -> None:
        self.display.progress = max(0.0, min(100.0, float(percent)))

    def set_counts(self, cycles: int, breaths: int) -> None:
        self.display.cycles = cycles
        self.display.breaths = breaths

    def enter_session_mode(self) -> None:
        self.display.session_mode = True

    def exit_session_mode(self) -> None:
        self.display.session_mode = False
        self.display.paused = False

    def set_pause_button_state(self, paused: bool) -> None:
        self.display.paused = paused

    def show_end_screen(self) -> None:
        self.display.end_screen_visible = True

    def hide_end_screen(self) -> None:
        self.display.end_screen_visible = False
