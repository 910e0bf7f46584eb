"""Tests for the snapshot and console renderers."""

import io

import pytest

from coherence.domain.entities import BreathPhase
from coherence.infrastructure.console_renderer import ConsoleRenderer
from coherence.infrastructure.snapshot_renderer import SnapshotRenderer


@pytest.fixture
def renderer():
    return SnapshotRenderer()


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def console(stream):
    return ConsoleRenderer(stream=stream)


def test_snapshot_tracks_display(renderer):
    """Test that every renderer call is reflected in the snapshot."""
    renderer.enter_session_mode()
    renderer.set_phase(BreathPhase.INHALE)
    renderer.set_timer(125)
    renderer.set_progress(42.5)
    renderer.set_counts(3, 4)
    renderer.set_pause_button_state(True)

    display = renderer.snapshot()

    assert display.session_mode is True
    assert display.phase == BreathPhase.INHALE
    assert display.remaining_seconds == 125
    assert display.timer_text == "02:05"
    assert display.progress == 42.5
    assert display.cycles == 3
    assert display.breaths == 4
    assert display.paused is True


def test_progress_is_clamped(renderer):
    """Test that progress stays within 0 and 100."""
    renderer.set_progress(140.0)
    assert renderer.snapshot().progress == 100.0

    renderer.set_progress(-5)
    assert renderer.snapshot().progress == 0.0


def test_exit_session_mode_clears_pause(renderer):
    """Test leaving the session display also clears the pause state."""
    renderer.enter_session_mode()
    renderer.set_pause_button_state(True)

    renderer.exit_session_mode()

    assert renderer.snapshot().session_mode is False
    assert renderer.snapshot().paused is False


def test_end_screen(renderer):
    """Test showing and hiding the completion screen."""
    renderer.show_end_screen()
    assert renderer.snapshot().end_screen_visible is True

    renderer.hide_end_screen()
    assert renderer.snapshot().end_screen_visible is False


def test_snapshot_is_a_copy(renderer):
    """Test that snapshots do not change after later updates."""
    display = renderer.snapshot()
    renderer.set_counts(9, 9)

    assert display.cycles == 0


def test_console_silent_outside_session(console, stream):
    """Test that the console only draws while in session mode."""
    console.set_timer(300)
    console.set_phase(BreathPhase.IDLE)

    assert stream.getvalue() == ""


def test_console_writes_status_line(console, stream):
    """Test the status line content."""
    console.enter_session_mode()
    console.set_counts(1, 2)
    console.set_progress(10.0)
    console.set_phase(BreathPhase.EXHALE)
    console.set_timer(61)

    last = stream.getvalue().split("\r")[-1]
    assert last.startswith("Breathe out")
    assert "01:01" in last
    assert " 10.0%" in last
    assert "cycles 1" in last
    assert "breaths 2" in last


def test_console_does_not_repeat_unchanged_lines(console, stream):
    """Test that identical updates are written once."""
    console.enter_session_mode()
    console.set_phase(BreathPhase.INHALE)
    console.set_timer(30)
    written = stream.getvalue()

    console.set_timer(30)
    console.set_progress(12.0)

    assert stream.getvalue() == written


def test_console_shows_pause(console, stream):
    """Test that the paused state replaces the phase label."""
    console.enter_session_mode()
    console.set_phase(BreathPhase.HOLD)
    console.set_pause_button_state(True)

    assert stream.getvalue().split("\r")[-1].startswith("Paused")


def test_console_end_of_session(console, stream):
    """Test the completion message."""
    console.enter_session_mode()
    console.set_counts(24, 25)
    console.set_phase(BreathPhase.INHALE)
    console.exit_session_mode()
    console.show_end_screen()

    assert stream.getvalue().endswith("\nSession complete: 24 cycles, 25 breaths\n")
