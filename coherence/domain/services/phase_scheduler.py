"""Pure mapping from elapsed session time to breathing phase and cycle."""

from ..entities.breathing_settings import SessionConfig
from ..entities.phase import BreathPhase


def cycle_position(config: SessionConfig, elapsed_ms: int) -> int:
    """Offset of ``elapsed_ms`` within its breathing cycle."""
    return elapsed_ms % config.cycle_ms


def phase_at(config: SessionConfig, position_ms: int) -> BreathPhase:
    """Phase at an offset within a cycle.

    Intervals are half-open and partition ``[0, cycle_ms)``:
    inhale ``[0, inhale)``, hold ``[inhale, inhale + hold)``,
    exhale ``[inhale + hold, cycle)``. With no hold the hold interval is empty.
    """
    if position_ms < config.inhale_ms:
        return BreathPhase.INHALE
    if position_ms < config.inhale_ms + config.hold_ms:
        return BreathPhase.HOLD
    return BreathPhase.EXHALE


def cycle_index_at(config: SessionConfig, elapsed_ms: int) -> int:
    """Number of whole cycles completed at ``elapsed_ms``."""
    return elapsed_ms // config.cycle_ms


def exhale_entries_at(config: SessionConfig, elapsed_ms: int) -> int:
    """Number of transitions into exhale that happened in ``[0, elapsed_ms]``."""
    entered = cycle_position(config, elapsed_ms) >= config.inhale_ms + config.hold_ms
    return cycle_index_at(config, elapsed_ms) + (1 if entered else 0)


class PhaseScheduler:
    """Stateless phase scheduler bound to one session configuration."""

    def __init__(self, config: SessionConfig):
        self.config = config

    def cycle_position(self, elapsed_ms: int) -> int:
        return cycle_position(self.config, elapsed_ms)

    def phase_at(self, position_ms: int) -> BreathPhase:
        return phase_at(self.config, position_ms)

    def phase_for_elapsed(self, elapsed_ms: int) -> BreathPhase:
        return phase_at(self.config, cycle_position(self.config, elapsed_ms))

    def cycle_index_at(self, elapsed_ms: int) -> int:
        return cycle_index_at(self.config, elapsed_ms)

    def exhale_entries_at(self, elapsed_ms: int) -> int:
        return exhale_entries_at(self.config, elapsed_ms)
