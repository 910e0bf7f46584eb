"""Domain entities for the breathing coach application."""

from .breathing_settings import BreathingSettings, SessionConfig
from .display_state import DisplayState, format_time
from .phase import BreathPhase, SessionStatus
from .session_state import SessionState

__all__ = [
    # Settings and configuration
    "BreathingSettings",
    "SessionConfig",
    # Lifecycle enums
    "BreathPhase",
    "SessionStatus",
    # Session state
    "SessionState",
    # Display
    "DisplayState",
    "format_time",
]
