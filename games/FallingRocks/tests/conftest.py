"""Pytest fixtures for Falling Rocks tests."""
import random

import pytest

from models import EntityCategory
from games.FallingRocks.geometry import compute_geometry
from games.FallingRocks.simulation import Simulation


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


class StubRandom:
    """Random source that always picks one category and one value."""

    def __init__(self, category: EntityCategory, value: float = 0.5):
        self.category = category
        self.value = value

    def choice(self, seq):
        assert self.category in seq
        return self.category

    def random(self) -> float:
        return self.value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def geometry():
    """Unscaled 800x600 field."""
    return compute_geometry(800, 1000)


@pytest.fixture
def narrow_geometry():
    """Half-scale 400x300 field."""
    return compute_geometry(400, 1000)


@pytest.fixture
def sim(clock):
    return Simulation(viewport_width=800, viewport_height=1000, seed=42, clock=clock)


@pytest.fixture
def stub_random():
    """Factory for StubRandom instances."""
    return StubRandom
