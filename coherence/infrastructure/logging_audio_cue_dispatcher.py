"""Audio cue dispatcher that logs playback instead of producing sound."""

import logging
from typing import Optional

from ..domain.interfaces.audio_cue_dispatcher import AudioCueDispatcher

logger = logging.getLogger(__name__)

DEFAULT_INHALE_SOUND = "Inhale1.m4a"
DEFAULT_EXHALE_SOUND = "Exhale1.m4a"
DEFAULT_MUSIC_TRACK = "Music1.mp3"


class LoggingAudioCueDispatcher(AudioCueDispatcher):
    """AudioCueDispatcher for headless hosts and development.

    Tracks which sounds are selected and whether background music would be
    playing, and logs every cue. A selection of ``None`` means no sound.
    """

    def __init__(
        self,
        inhale_sound: Optional[str] = DEFAULT_INHALE_SOUND,
        exhale_sound: Optional[str] = DEFAULT_EXHALE_SOUND,
        music_track: Optional[str] = DEFAULT_MUSIC_TRACK,
    ):
        self.inhale_sound = inhale_sound
        self.exhale_sound = exhale_sound
        self.music_track = music_track

        self.unlocked = False
        self.background_playing = False
        self.cues_played = 0

    def unlock(self) -> None:
        if self.unlocked:
            return
        self.unlocked = True
        logger.debug("Audio output unlocked")

    def play_inhale_cue(self) -> None:
        self._play_cue("inhale", self.inhale_sound)

    def play_exhale_cue(self) -> None:
        self._play_cue("exhale", self.exhale_sound)

    def _play_cue(self, kind: str, sound: Optional[str]) -> None:
        if not sound:
            return
        self.cues_played += 1
        logger.info(f"Playing {kind} cue {sound}")

    def start_background(self) -> bool:
        if not self.music_track:
            self.background_playing = False
            return False
        self.background_playing = True
        logger.info(f"Background music {self.music_track} started")
        return True

    def pause_all(self) -> None:
        logger.debug("All sounds paused")

    def resume_background(self) -> None:
        # Only music that was playing before the pause comes back
        if not self.music_track or not self.background_playing:
            return
        logger.debug(f"Background music {self.music_track} resumed")

    def stop_all(self) -> None:
        self.background_playing = False
        logger.debug("All sounds stopped")
