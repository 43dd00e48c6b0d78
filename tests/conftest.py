"""Shared fixtures for the curve tests."""

import numpy as np
import pytest

from lmm_curve import Curve, RandomSource


class FixedRandomSource(RandomSource):
    """Random source returning the same pair on every draw and counting draws."""

    def __init__(self, z0: float, z1: float):
        super().__init__(0)
        self.pair = (z0, z1)
        self.draws = 0

    def normal_pair(self):
        self.draws += 1
        return self.pair


@pytest.fixture
def rng():
    return RandomSource(20240607)


@pytest.fixture
def fixed_source():
    return FixedRandomSource


@pytest.fixture
def arrays():
    t = np.array([0.5, 1.0, 1.5, 2.0])
    rate = np.array([0.03, 0.035, 0.04, 0.045])
    sigma = np.array([0.1, 0.15, 0.2, 0.25])
    return t, rate, sigma


@pytest.fixture
def curve(arrays):
    return Curve.from_arrays(*arrays)
