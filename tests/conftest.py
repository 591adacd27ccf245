"""Shared test fixtures."""

import pytest


class FixedRandom:
    """Random source that always returns the same value and counts draws."""

    def __init__(self, value: float = 0.5):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_random():
    """Factory for constant random sources."""
    return FixedRandom


class SequenceRandom:
    """Random source that returns the given values in turn."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def sequence_random():
    """Factory for random sources replaying a fixed sequence."""
    return SequenceRandom
