"""Tests for BreathingCoachController."""

from unittest.mock import MagicMock

import pytest

from coherence.application.config import Settings
from coherence.application.controller import BreathingCoachController, create_controller
from coherence.domain.entities import BreathingSettings, SessionStatus
from coherence.domain.exceptions import InvalidConfigError
from coherence.domain.interfaces import Renderer, SettingsProvider
from coherence.infrastructure import (
    AsyncioTickScheduler,
    LocalSettingsProvider,
    LoggingAudioCueDispatcher,
    ManualTickScheduler,
    SnapshotRenderer,
)


@pytest.fixture
def scheduler():
    return ManualTickScheduler()


@pytest.fixture
def settings_provider():
    return LocalSettingsProvider(duration_min=1, inhale_sec=4, hold_sec=2, exhale_sec=6)


@pytest.fixture
def controller(settings_provider, scheduler, fake_time):
    return BreathingCoachController(
        settings_provider=settings_provider,
        renderer=SnapshotRenderer(),
        audio=LoggingAudioCueDispatcher(),
        scheduler=scheduler,
        time_source=fake_time,
    )


def test_start_session_reads_settings(controller, scheduler, fake_time):
    """Test that a session starts with the provider's settings."""
    state = controller.start_session()

    assert state["status"] == "running"
    assert state["phase"] == "inhale"
    assert state["total_duration_ms"] == 60_000
    assert state["remaining_ms"] == 60_000
    assert controller.session_controller.config.cycle_ms == 12_000

    fake_time.advance(6_500)
    scheduler.run_pending()

    state = controller.get_session_state()
    assert state["phase"] == "exhale"
    assert state["breath_count"] == 1
    assert state["remaining_ms"] == 53_500


def test_start_session_when_active_is_noop(controller, settings_provider, fake_time, scheduler):
    """Test that settings changes do not affect an active session."""
    controller.start_session()
    settings_provider.update(duration_min=20)

    fake_time.advance(1_000)
    scheduler.run_pending()
    state = controller.start_session()

    assert state["total_duration_ms"] == 60_000
    assert state["elapsed_ms"] == 1_000


def test_pause_and_quit(controller):
    """Test the lifecycle actions return the updated state."""
    controller.start_session()

    assert controller.toggle_pause()["status"] == "paused"
    assert controller.toggle_pause()["status"] == "running"
    assert controller.quit_session()["status"] == "aborted"
    assert controller.quit_session()["status"] == "aborted"


def test_state_before_any_session(controller):
    """Test the state reported before a session starts."""
    state = controller.get_session_state()

    assert state["status"] == "idle"
    assert state["cycle_index"] == -1
    assert state["total_duration_ms"] is None
    assert state["remaining_ms"] is None


def test_display_snapshot(controller):
    """Test that the display comes from the snapshot renderer."""
    controller.start_session()

    display = controller.get_display()

    assert display["session_mode"] is True
    assert display["phase"] == "inhale"
    assert display["timer_text"] == "01:00"


def test_display_unavailable_without_snapshot(scheduler, fake_time):
    """Test renderers without snapshots report no display."""
    controller = BreathingCoachController(
        settings_provider=LocalSettingsProvider(),
        renderer=MagicMock(spec=Renderer),
        audio=LoggingAudioCueDispatcher(),
        scheduler=scheduler,
        time_source=fake_time,
    )

    assert controller.get_display() is None


def test_invalid_settings_surface_on_start(scheduler, fake_time):
    """Test that unusable settings prevent the session from starting."""
    provider = MagicMock(spec=SettingsProvider)
    provider.get_breathing_settings.return_value = BreathingSettings.model_construct(
        duration_min=0, inhale_sec=4, hold_sec=0, exhale_sec=4
    )
    controller = BreathingCoachController(
        settings_provider=provider,
        renderer=SnapshotRenderer(),
        audio=LoggingAudioCueDispatcher(),
        scheduler=scheduler,
        time_source=fake_time,
    )

    with pytest.raises(InvalidConfigError):
        controller.start_session()

    assert controller.session_controller.status == SessionStatus.IDLE


def test_health_status(controller):
    """Test the health report."""
    health = controller.get_health_status()

    assert health["status"] == "healthy"
    assert health["session_status"] == "idle"
    assert health["providers"] == {
        "settings_provider": "LocalSettingsProvider",
        "renderer": "SnapshotRenderer",
        "audio": "LoggingAudioCueDispatcher",
        "scheduler": "ManualTickScheduler",
    }


def test_create_controller_from_settings():
    """Test wiring a controller from application settings."""
    app_settings = Settings(
        _env_file=None,
        session_duration_min=99,
        inhale_sec=4,
        hold_sec=1,
        exhale_sec=6,
        tick_interval_ms=40,
        music_track="",
    )

    controller = create_controller(app_settings, SnapshotRenderer())

    settings = controller.get_breathing_settings()
    assert settings.duration_min == 30
    assert settings.inhale_sec == 4
    assert settings.hold_sec == 1
    assert settings.exhale_sec == 6
    assert controller.audio.music_track is None
    assert isinstance(controller.session_controller.scheduler, AsyncioTickScheduler)
    assert controller.session_controller.scheduler.interval_ms == 40
