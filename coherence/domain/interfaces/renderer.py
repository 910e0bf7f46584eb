"""Renderer protocol."""

from typing import Protocol, runtime_checkable

from ..entities.phase import BreathPhase


@runtime_checkable
class Renderer(Protocol):
    """Protocol for surfaces that display a breathing session.

    Implementations may draw to a screen, a terminal or keep an in-memory
    snapshot. The session controller only calls these methods on observable
    transitions, plus timer and progress updates on every tick.
    """

    def set_phase(self, phase: BreathPhase) -> None:
        """Show the current breathing phase."""
        ...

    def set_timer(self, remaining_seconds: int) -> None:
        """Show the remaining session time.

        Args:
            remaining_seconds: Whole seconds left, rounded up.
        """
        ...

    def set_progress(self, percent: float) -> None:
        """Show session progress.

        Args:
            percent: Progress between 0 and 100.
        """
        ...

    def set_counts(self, cycles: int, breaths: int) -> None:
        """Show completed cycle and breath counters."""
        ...

    def enter_session_mode(self) -> None:
        ...

    def exit_session_mode(self) -> None:
        ...

    def set_pause_button_state(self, paused: bool) -> None:
        ...

    def show_end_screen(self) -> None:
        """Signal that the session completed naturally."""
        ...

    def hide_end_screen(self) -> None:
        ...
