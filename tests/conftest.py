from __future__ import annotations

import pytest

from tilemerge.spawn import Spawner


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class StubRandom:
    """Always picks the first candidate cell and rolls a fixed number."""

    def __init__(self, roll=0.9):
        self.roll = roll

    def choice(self, seq):
        return seq[0]

    def random(self):
        return self.roll


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def seeded_spawner():
    return Spawner.seeded(1234)


@pytest.fixture
def twos_spawner():
    """Spawner that always drops a 2 on the first empty cell."""
    return Spawner(StubRandom(roll=0.9), four_probability=0.5)


class SequenceRandom(StubRandom):
    """Picks the first candidate cell and cycles through the given rolls."""

    def __init__(self, rolls):
        self.rolls = list(rolls)
        self.index = 0

    def random(self):
        roll = self.rolls[self.index % len(self.rolls)]
        self.index += 1
        return roll
