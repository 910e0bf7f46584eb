"""Breathing phase and session lifecycle enums."""

from enum import Enum


class BreathPhase(str, Enum):
    """Stage of a breathing cycle as shown to the user."""
    IDLE = "idle"
    INHALE = "inhale"
    HOLD = "hold"
    EXHALE = "exhale"
    DONE = "done"


class SessionStatus(str, Enum):
    """Lifecycle state of a breathing session."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"
    ABORTED = "aborted"

    @property
    def is_active(self) -> bool:
        """True while the session is running or paused."""
        return self in (SessionStatus.RUNNING, SessionStatus.PAUSED)
