import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class FixedRng:
    """Stands in for a numpy Generator, handing out queued integers."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.values.pop(0)


@pytest.fixture
def fixed_rng():
    return FixedRng
