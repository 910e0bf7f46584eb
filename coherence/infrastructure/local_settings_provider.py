"""Local in-memory implementation of SettingsProvider."""

import logging
from typing import Any, Optional

from ..domain.entities.breathing_settings import (
    DURATION_MIN_RANGE,
    EXHALE_SEC_RANGE,
    HOLD_SEC_RANGE,
    INHALE_SEC_RANGE,
    BreathingSettings,
)
from ..domain.interfaces.settings_provider import SettingsProvider

logger = logging.getLogger(__name__)

_RANGES = {
    "duration_min": DURATION_MIN_RANGE,
    "inhale_sec": INHALE_SEC_RANGE,
    "hold_sec": HOLD_SEC_RANGE,
    "exhale_sec": EXHALE_SEC_RANGE,
}


def clamp_int(value: Any, minimum: int, maximum: int, fallback: int) -> int:
    """Parse ``value`` as an integer and clamp it into ``[minimum, maximum]``.

    Args:
        value: Raw value, e.g. a slider position or an environment string.
        minimum: Lowest accepted value.
        maximum: Highest accepted value.
        fallback: Returned when ``value`` is not an integer.

    Returns:
        int: The clamped value, or ``fallback``.
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        return fallback
    return min(maximum, max(minimum, number))


class LocalSettingsProvider(SettingsProvider):
    """Local in-memory implementation of the SettingsProvider protocol.

    Keeps the breathing settings in memory and clamps every update into the
    accepted ranges, so the session core always receives valid values.
    """

    def __init__(self, **initial: Any):
        """Initialize the provider.

        Args:
            **initial: Optional raw values for duration_min, inhale_sec,
                hold_sec and exhale_sec; missing or unparseable values use
                the defaults.
        """
        self._settings = BreathingSettings()
        if initial:
            self.update(**initial)

    def get_breathing_settings(self) -> BreathingSettings:
        """Retrieve the current breathing settings.

        Returns:
            BreathingSettings: A copy of the stored settings.
        """
        return self._settings.model_copy()

    def update(self, **values: Optional[Any]) -> BreathingSettings:
        """Update some settings, clamping each value into its range.

        ``None`` leaves a setting unchanged; a value that is not an integer
        falls back to the current one.

        Args:
            **values: Raw values keyed by setting name.

        Returns:
            BreathingSettings: The updated settings.

        Raises:
            ValueError: If an unknown setting name is given.
        """
        unknown = set(values) - set(_RANGES)
        if unknown:
            raise ValueError(f"Unknown breathing settings: {', '.join(sorted(unknown))}")

        current = self._settings.model_dump()
        for name, raw in values.items():
            if raw is None:
                continue
            minimum, maximum = _RANGES[name]
            current[name] = clamp_int(raw, minimum, maximum, current[name])

        self._settings = BreathingSettings(**current)
        logger.debug(f"Breathing settings updated: {self._settings.model_dump()}")
        return self.get_breathing_settings()

    def reset(self) -> None:
        """Restore the default settings."""
        self._settings = BreathingSettings()
