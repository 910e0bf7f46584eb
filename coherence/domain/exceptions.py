"""Domain exceptions for the breathing coach."""


class CoherenceError(Exception):
    """Base class for breathing coach errors."""


class InvalidConfigError(CoherenceError, ValueError):
    """Raised when a session configuration cannot drive a session."""


class SessionInitError(CoherenceError, RuntimeError):
    """Raised when a session cannot be initialized by its host."""


class ClockUnavailableError(SessionInitError):
    """Raised when no usable monotonic time source is available."""


class SchedulerUnavailableError(SessionInitError):
    """Raised when no usable tick scheduling primitive is available."""
