"""Breathing settings entity and session configuration."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import InvalidConfigError

DURATION_MIN_RANGE = (1, 30)
INHALE_SEC_RANGE = (3, 10)
HOLD_SEC_RANGE = (0, 5)
EXHALE_SEC_RANGE = (3, 10)


class BreathingSettings(BaseModel):
    """User-facing breathing settings, already clamped to their ranges."""

    duration_min: int = Field(default=5, ge=DURATION_MIN_RANGE[0], le=DURATION_MIN_RANGE[1], description="Session length in minutes")
    inhale_sec: int = Field(default=5, ge=INHALE_SEC_RANGE[0], le=INHALE_SEC_RANGE[1], description="Inhale duration in seconds")
    hold_sec: int = Field(default=0, ge=HOLD_SEC_RANGE[0], le=HOLD_SEC_RANGE[1], description="Hold duration in seconds")
    exhale_sec: int = Field(default=5, ge=EXHALE_SEC_RANGE[0], le=EXHALE_SEC_RANGE[1], description="Exhale duration in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "duration_min": 5,
                "inhale_sec": 4,
                "hold_sec": 2,
                "exhale_sec": 6,
            }
        }
    )


class SessionConfig(BaseModel):
    """Immutable timing configuration for one breathing session, in milliseconds."""

    model_config = ConfigDict(frozen=True)

    total_duration_ms: int = Field(gt=0)
    inhale_ms: int = Field(gt=0)
    hold_ms: int = Field(default=0, ge=0)
    exhale_ms: int = Field(gt=0)

    @property
    def cycle_ms(self) -> int:
        """Length of one inhale, hold and exhale sequence."""
        return self.inhale_ms + self.hold_ms + self.exhale_ms

    @property
    def total_seconds(self) -> int:
        """Session length in whole seconds, rounded up."""
        return -(-self.total_duration_ms // 1000)

    @classmethod
    def from_settings(cls, settings: BreathingSettings) -> "SessionConfig":
        """Build a session configuration from breathing settings.

        Args:
            settings: Minute and second based settings from the settings provider.

        Returns:
            SessionConfig: The millisecond based configuration.

        Raises:
            InvalidConfigError: If the settings cannot produce a valid configuration.
        """
        try:
            return cls(
                total_duration_ms=settings.duration_min * 60 * 1000,
                inhale_ms=settings.inhale_sec * 1000,
                hold_ms=settings.hold_sec * 1000,
                exhale_ms=settings.exhale_sec * 1000,
            )
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid breathing settings: {e}") from e
