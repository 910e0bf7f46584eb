"""Terminal renderer."""

import sys
from typing import Optional, TextIO

from ..domain.entities.phase import BreathPhase
from .snapshot_renderer import SnapshotRenderer

PHASE_LABELS = {
    BreathPhase.IDLE: "Ready",
    BreathPhase.INHALE: "Breathe in",
    BreathPhase.HOLD: "Hold",
    BreathPhase.EXHALE: "Breathe out",
    BreathPhase.DONE: "Done",
}


class ConsoleRenderer(SnapshotRenderer):
    """Renders the session as a single status line rewritten in place."""

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__()
        self.stream = stream or sys.stdout
        self._last_line: Optional[str] = None

    def status_line(self) -> str:
        display = self.display
        label = "Paused" if display.paused else PHASE_LABELS[display.phase]
        return (
            f"{label:<11} {display.timer_text}  {display.progress:5.1f}%  "
            f"cycles {display.cycles}  breaths {display.breaths}"
        )

    def _refresh(self) -> None:
        if not self.display.session_mode:
            return
        line = self.status_line()
        if line == self._last_line:
            return
        self._last_line = line
        self.stream.write(f"\r{line}")
        self.stream.flush()

    def set_phase(self, phase: BreathPhase) -> None:
        super().set_phase(phase)
        self._refresh()

    def set_timer(self, remaining_seconds: int) -> None:
        super().set_timer(remaining_seconds)
        self._refresh()

    def set_progress(self, percent: float) -> None:
        # Progress changes every tick; the line is redrawn with the timer instead
        super().set_progress(percent)

    def set_counts(self, cycles: int, breaths: int) -> None:
        super().set_counts(cycles, breaths)
        self._refresh()

    def set_pause_button_state(self, paused: bool) -> None:
        super().set_pause_button_state(paused)
        self._refresh()

    def exit_session_mode(self) -> None:
        if self.display.session_mode:
            self.stream.write("\n")
            self.stream.flush()
        super().exit_session_mode()
        self._last_line = None

    def show_end_screen(self) -> None:
        super().show_end_screen()
        self.stream.write(
            f"Session complete: {self.display.cycles} cycles, {self.display.breaths} breaths\n"
        )
        self.stream.flush()
