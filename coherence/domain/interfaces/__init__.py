"""Domain interfaces for the breathing coach application."""

from .audio_cue_dispatcher import AudioCueDispatcher
from .renderer import Renderer
from .settings_provider import SettingsProvider
from .tick_scheduler import TickScheduler

__all__ = ["AudioCueDispatcher", "Renderer", "SettingsProvider", "TickScheduler"]
