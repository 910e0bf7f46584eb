"""Session state entity for a breathing session."""

from pydantic import BaseModel, Field, computed_field

from .phase import BreathPhase, SessionStatus


class SessionState(BaseModel):
    """Mutable state of one breathing session.

    Owned by a single SessionController; a new session always gets a new instance.
    """

    status: SessionStatus = SessionStatus.IDLE
    phase: BreathPhase = BreathPhase.IDLE
    elapsed_ms: int = Field(default=0, ge=0)
    cycle_index: int = Field(default=-1, ge=-1)
    cycle_count: int = Field(default=0, ge=0)
    breath_count: int = Field(default=0, ge=0)

    @computed_field
    @property
    def running(self) -> bool:
        return self.status.is_active

    @computed_field
    @property
    def paused(self) -> bool:
        return self.status == SessionStatus.PAUSED
