"""Shared fixtures for unit tests."""

import pytest


class FakeTime:
    """Controllable millisecond time source."""

    def __init__(self, now: int = 10_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def fake_time():
    return FakeTime()
