"""Tests for LocalSettingsProvider."""

import pytest

from coherence.domain.entities import BreathingSettings
from coherence.infrastructure.local_settings_provider import LocalSettingsProvider, clamp_int


@pytest.fixture
def provider():
    """Create a fresh LocalSettingsProvider for each test."""
    return LocalSettingsProvider()


@pytest.mark.parametrize(
    "value,expected",
    [(5, 5), ("7", 7), (0, 1), (99, 30), ("abc", 12), (None, 12), (3.9, 3)],
)
def test_clamp_int(value, expected):
    """Test integer parsing with clamping and fallback."""
    assert clamp_int(value, 1, 30, 12) == expected


def test_defaults(provider):
    """Test that an empty provider returns default settings."""
    assert provider.get_breathing_settings() == BreathingSettings()


def test_initial_values_are_clamped():
    """Test that constructor values are clamped into range."""
    provider = LocalSettingsProvider(duration_min=45, inhale_sec=1, hold_sec=9, exhale_sec="6")

    settings = provider.get_breathing_settings()

    assert settings.duration_min == 30
    assert settings.inhale_sec == 3
    assert settings.hold_sec == 5
    assert settings.exhale_sec == 6


def test_partial_update_keeps_other_values(provider):
    """Test that None and omitted values are left unchanged."""
    provider.update(inhale_sec=4, hold_sec=2, exhale_sec=6)

    settings = provider.update(duration_min=10, inhale_sec=None)

    assert settings.duration_min == 10
    assert settings.inhale_sec == 4
    assert settings.hold_sec == 2
    assert settings.exhale_sec == 6


def test_unparseable_value_falls_back_to_current(provider):
    """Test that junk input keeps the current value."""
    provider.update(duration_min=12)

    settings = provider.update(duration_min="twelve")

    assert settings.duration_min == 12


def test_unknown_setting_rejected(provider):
    """Test that unknown setting names raise."""
    with pytest.raises(ValueError, match="Unknown breathing settings: volume"):
        provider.update(volume=3)


def test_returned_settings_are_copies(provider):
    """Test that callers cannot mutate the stored settings."""
    settings = provider.get_breathing_settings()
    settings.duration_min = 20

    assert provider.get_breathing_settings().duration_min == 5


def test_reset(provider):
    """Test restoring the defaults."""
    provider.update(duration_min=20)
    provider.reset()

    assert provider.get_breathing_settings().duration_min == 5
