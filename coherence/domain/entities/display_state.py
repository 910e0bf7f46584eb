"""Display snapshot entity."""

from pydantic import BaseModel, Field

from .phase import BreathPhase


def format_time(total_seconds: float) -> str:
    """Format a number of seconds as MM:SS, flooring and clamping at zero."""
    seconds = max(0, int(total_seconds))
    minutes, rest = divmod(seconds, 60)
    return f"{minutes:02d}:{rest:02d}"


class DisplayState(BaseModel):
    """What a renderer is currently showing."""

    phase: BreathPhase = BreathPhase.IDLE
    remaining_seconds: int = 0
    timer_text: str = "00:00"
    progress: float = Field(default=0.0, ge=0.0, le=100.0)
    cycles: int = 0
    breaths: int = 0
    session_mode: bool = False
    paused: bool = False
    end_screen_visible: bool = False
