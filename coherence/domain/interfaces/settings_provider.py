"""Settings provider protocol."""

from typing import Protocol, runtime_checkable

from ..entities.breathing_settings import BreathingSettings


@runtime_checkable
class SettingsProvider(Protocol):
    """Protocol for breathing settings sources."""

    def get_breathing_settings(self) -> BreathingSettings:
        """Retrieve the current breathing settings.

        Values are clamped to their ranges by the provider; the session core
        performs no further validation.

        Returns:
            BreathingSettings: The current settings.
        """
        ...
