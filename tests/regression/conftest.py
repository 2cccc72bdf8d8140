"""
Shared fixtures for regression tests.
"""

import numpy as np
import pytest

from pystatbook.rng import generate_moderation_data


@pytest.fixture
def simple_data(rng):
    """y = 2 + 0.5 x + noise, n = 60."""
    x = rng.normal(10.0, 3.0, 60)
    y = 2.0 + 0.5 * x + rng.normal(0.0, 1.0, 60)
    return x, y


@pytest.fixture
def moderation_data():
    """Seeded moderated-regression sample (z, x, y), n = 120."""
    return generate_moderation_data(120, a=1.0, b=0.4, c=0.3, d=0.6, seed=31)
