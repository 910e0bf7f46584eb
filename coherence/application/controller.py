"""Breathing Coach Controller for wiring providers into a session."""

import logging
from typing import Any, Optional

from ..domain.entities import BreathingSettings, SessionConfig
from ..domain.interfaces.audio_cue_dispatcher import AudioCueDispatcher
from ..domain.interfaces.renderer import Renderer
from ..domain.interfaces.settings_provider import SettingsProvider
from ..domain.interfaces.tick_scheduler import TickScheduler
from ..domain.services import SessionController, monotonic_ms
from ..domain.services.session_clock import TimeSource
from ..infrastructure.local_settings_provider import LocalSettingsProvider
from ..infrastructure.logging_audio_cue_dispatcher import LoggingAudioCueDispatcher
from ..infrastructure.tick_schedulers import AsyncioTickScheduler
from .config import Settings

logger = logging.getLogger(__name__)


class BreathingCoachController:
    """
    Controller for coordinating breathing sessions.

    This controller is injected with all necessary providers, reads the
    breathing settings at start and delegates the session lifecycle to a
    SessionController, keeping the API and console layers thin.
    """

    def __init__(
        self,
        settings_provider: SettingsProvider,
        renderer: Renderer,
        audio: AudioCueDispatcher,
        scheduler: Optional[TickScheduler],
        time_source: TimeSource = monotonic_ms,
    ):
        """
        Initialize the controller with injected dependencies.

        Args:
            settings_provider: Provider for breathing settings
            renderer: Display surface for the session
            audio: Dispatcher for cues and background music
            scheduler: Host scheduling primitive for ticks
            time_source: Monotonic millisecond clock
        """
        self.settings_provider = settings_provider
        self.renderer = renderer
        self.audio = audio
        self.session_controller = SessionController(
            renderer=renderer,
            audio=audio,
            scheduler=scheduler,
            time_source=time_source,
        )

        logger.info("BreathingCoachController initialized with providers")

    def start_session(self) -> dict:
        """
        Start a session with the current breathing settings.

        Starting while a session is active is a no-op.

        Returns:
            Dict containing the session state

        Raises:
            InvalidConfigError: If the settings cannot drive a session.
            SessionInitError: If the clock or scheduler is unavailable.
        """
        if not self.session_controller.status.is_active:
            settings = self.settings_provider.get_breathing_settings()
            logger.info(f"Starting session with settings {settings.model_dump()}")
            self.session_controller.start(SessionConfig.from_settings(settings))
        return self.get_session_state()

    def toggle_pause(self) -> dict:
        self.session_controller.toggle_pause()
        return self.get_session_state()

    def quit_session(self) -> dict:
        self.session_controller.quit()
        return self.get_session_state()

    def get_breathing_settings(self) -> BreathingSettings:
        return self.settings_provider.get_breathing_settings()

    def get_session_state(self) -> dict:
        """
        Get the current session state as a dictionary.

        Returns:
            Dictionary representation of session state
        """
        state = self.session_controller.state
        config = self.session_controller.config
        data: dict[str, Any] = state.model_dump(mode="json")
        data["total_duration_ms"] = config.total_duration_ms if config else None
        data["remaining_ms"] = max(0, config.total_duration_ms - state.elapsed_ms) if config else None
        return data

    def get_display(self) -> Optional[dict]:
        """
        Get what the renderer currently shows, when it keeps a snapshot.

        Returns:
            Dict of the display state, or None for renderers without snapshots
        """
        snapshot = getattr(self.renderer, "snapshot", None)
        if snapshot is None:
            return None
        return snapshot().model_dump(mode="json")

    def get_health_status(self) -> dict:
        """
        Get application health status.

        Returns:
            Dict containing health status information
        """
        return {
            "status": "healthy",
            "session_status": self.session_controller.status.value,
            "providers": {
                "settings_provider": type(self.settings_provider).__name__,
                "renderer": type(self.renderer).__name__,
                "audio": type(self.audio).__name__,
                "scheduler": type(self.session_controller.scheduler).__name__,
            },
        }


def create_controller(app_settings: Settings, renderer: Renderer) -> BreathingCoachController:
    """
    Build a controller from application settings with local providers.

    Args:
        app_settings: Application settings
        renderer: Display surface for the session

    Returns:
        BreathingCoachController wired with an asyncio tick scheduler
    """
    settings_provider = LocalSettingsProvider(
        duration_min=app_settings.session_duration_min,
        inhale_sec=app_settings.inhale_sec,
        hold_sec=app_settings.hold_sec,
        exhale_sec=app_settings.exhale_sec,
    )
    audio = LoggingAudioCueDispatcher(
        inhale_sound=app_settings.inhale_sound or None,
        exhale_sound=app_settings.exhale_sound or None,
        music_track=app_settings.music_track or None,
    )
    return BreathingCoachController(
        settings_provider=settings_provider,
        renderer=renderer,
        audio=audio,
        scheduler=AsyncioTickScheduler(interval_ms=app_settings.tick_interval_ms),
    )
