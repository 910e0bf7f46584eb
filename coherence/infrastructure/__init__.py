"""Infrastructure layer components."""

from .console_renderer import ConsoleRenderer
from .local_settings_provider import LocalSettingsProvider
from .logging_audio_cue_dispatcher import LoggingAudioCueDispatcher
from .snapshot_renderer import SnapshotRenderer
from .tick_schedulers import AsyncioTickScheduler, ManualTickScheduler

__all__ = [
    "AsyncioTickScheduler",
    "ConsoleRenderer",
    "LocalSettingsProvider",
    "LoggingAudioCueDispatcher",
    "ManualTickScheduler",
    "SnapshotRenderer",
]
