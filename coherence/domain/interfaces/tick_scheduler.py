"""Tick scheduler protocol."""

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class TickScheduler(Protocol):
    """Protocol for the host's one-shot scheduling primitive.

    Each call to ``schedule`` requests exactly one future invocation of the
    callback, like a per-frame callback in a UI toolkit.
    """

    def schedule(self, callback: Callable[[], None]) -> Any:
        """Request one future invocation of ``callback``.

        Args:
            callback: Zero-argument function to invoke.

        Returns:
            An opaque handle accepted by ``cancel``.

        Raises:
            RuntimeError: If the host cannot schedule callbacks.
        """
        ...

    def cancel(self, handle: Any) -> None:
        """Cancel a pending invocation. Cancelling a fired handle is a no-op."""
        ...
