"""Audio cue dispatcher protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AudioCueDispatcher(Protocol):
    """Protocol for audio cue and background music playback.

    All calls are fire-and-forget from the controller's point of view.
    Implementations should swallow playback failures (autoplay restrictions,
    missing files); the controller guards against them anyway.
    """

    def unlock(self) -> None:
        """Best-effort unlock of the audio output on a user gesture."""
        ...

    def play_inhale_cue(self) -> None:
        ...

    def play_exhale_cue(self) -> None:
        ...

    def start_background(self) -> bool:
        """Start background music from the beginning.

        Returns:
            bool: True if background music is playing.
        """
        ...

    def pause_all(self) -> None:
        """Pause cues and background music."""
        ...

    def resume_background(self) -> None:
        """Resume background music only; cues are transient and not resumed."""
        ...

    def stop_all(self) -> None:
        """Stop and rewind cues and background music."""
        ...
