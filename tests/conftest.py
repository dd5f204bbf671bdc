"""Pytest configuration and fixtures."""

import random
import sys
import os

import pytest

# Add the project root to sys.path for all tests
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from game.position import Position


class ScriptedRandom(random.Random):
    """Random source that hands out predetermined values.

    ``randint`` goes through ``randrange`` in the standard library, so both
    draw from the same script.
    """

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop=None, step=1):
        self.calls.append((start, stop))
        return self.values.pop(0)


class StubSpy:
    """Spy double that counts reads and lets tests move the target."""

    def __init__(self, position, uses=0):
        self.position = Position(*position)
        self.uses = uses
        self.reads = 0

    def get_number_of_uses(self):
        return self.uses

    def get_position(self):
        self.uses += 1
        self.reads += 1
        return self.position


@pytest.fixture
def scripted_random():
    """Factory for random sources with scripted draws."""
    return ScriptedRandom


@pytest.fixture
def make_spy():
    """Factory for spy doubles."""
    return StubSpy


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)
