import pytest

EXAMPLE_NUMS = [-1, 0, 1, 2, 3]
EXAMPLE_PROBS = [0.01, 0.3, 0.58, 0.1, 0.01]


class FixedSource:
    """Uniform source replaying predetermined values."""

    def __init__(self, values):
        self._values = iter(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return next(self._values)


class ExplodingSource:
    """Uniform source that must never be consulted."""

    def random(self):
        raise AssertionError("random source consulted")


@pytest.fixture
def example_nums():
    return list(EXAMPLE_NUMS)


@pytest.fixture
def example_probs():
    return list(EXAMPLE_PROBS)


@pytest.fixture
def fixed_source():
    """Factory for uniform sources replaying the given values."""
    return FixedSource


@pytest.fixture
def exploding_source():
    return ExplodingSource()
