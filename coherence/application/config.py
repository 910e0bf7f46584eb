"""Application configuration using Pydantic Settings."""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COHERENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "coherence"
    app_version: str = "0.1.0"
    debug: bool = False

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Scheduling loop
    tick_interval_ms: int = 16

    # Default breathing settings (clamped by the settings provider)
    session_duration_min: int = 5
    inhale_sec: int = 5
    hold_sec: int = 0
    exhale_sec: int = 5

    # Audio selection, empty means no sound
    inhale_sound: Optional[str] = "Inhale1.m4a"
    exhale_sound: Optional[str] = "Exhale1.m4a"
    music_track: Optional[str] = "Music1.mp3"


# Create a singleton instance
settings = Settings()
