"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded numpy generator for reproducible reference data."""
    return np.random.default_rng(42)


@pytest.fixture
def three_groups(rng):
    """Three unbalanced normal groups with clear mean differences."""
    return [
        rng.normal(10.0, 2.0, 8),
        rng.normal(12.0, 2.0, 11),
        rng.normal(15.0, 2.0, 9),
    ]


@pytest.fixture
def two_groups(rng):
    """Two groups with unequal variances and sizes (a Welch setting)."""
    return rng.normal(5.0, 1.0, 12), rng.normal(4.0, 3.0, 20)


@pytest.fixture
def rm_data():
    """4 subjects x 3 conditions reaction-time matrix."""
    return np.array([
        [400.0, 440.0, 520.0],
        [350.0, 410.0, 450.0],
        [500.0, 540.0, 620.0],
        [420.0, 490.0, 510.0],
    ])
