import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from antsys import ACOConfig


class FixedDraws:
    """Stands in for random.Random: returns the same value every draw."""

    def __init__(self, value=0.0):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


class ScriptedDraws:
    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.fixture
def small_costs():
    return [[0, 1, 2], [1, 0, 1], [2, 1, 0]]


@pytest.fixture
def small_cfg():
    return ACOConfig(alpha=1.0, beta=1.0, rho=0.5, Q=1.0, tau0=1.0, n_ants=1, start=0)


@pytest.fixture
def asym_costs():
    return [
        [0, 3, 7, 2, 9],
        [4, 0, 1, 8, 6],
        [5, 2, 0, 3, 7],
        [1, 9, 4, 0, 2],
        [6, 5, 8, 3, 0],
    ]
