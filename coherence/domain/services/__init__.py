"""Domain services for the breathing coach application."""

from .phase_scheduler import PhaseScheduler
from .session_clock import SessionClock, monotonic_ms
from .session_controller import SessionController

__all__ = ["PhaseScheduler", "SessionClock", "SessionController", "monotonic_ms"]
