"""
Tests for the simulated distribution of a product of two estimates.
"""

import numpy as np
import pytest

from pystatbook.core.exceptions import ValidationError
from pystatbook.montecarlo import simulate_product_distribution


class TestProductSimulation:

    def test_reproducible(self):
        a = simulate_product_distribution(0.3, 0.4, 0.1, 0.1, 200, seed=9)
        b = simulate_product_distribution(0.3, 0.4, 0.1, 0.1, 200, seed=9)
        assert a.products == b.products
        assert a.skewness == b.skewness

    def test_mean_is_product(self):
        sol = simulate_product_distribution(0.5, 0.5, 0.1, 0.1, 4000, seed=2)
        assert sol.mean == pytest.approx(0.25, abs=0.01)
        expected_sd = np.sqrt(0.25 * 0.01 + 0.25 * 0.01 + 0.01 * 0.01)
        assert sol.std == pytest.approx(expected_sd, rel=0.1)

    def test_small_paths_are_skewed(self):
        sol = simulate_product_distribution(0.2, 0.2, 0.1, 0.1, 3000, seed=4)
        assert sol.skewness > 0.2

    def test_zero_se_is_degenerate(self):
        sol = simulate_product_distribution(0.3, 0.4, 0.0, 0.0, 50, seed=1)
        np.testing.assert_allclose(sol.products.values, 0.12)
        assert np.isnan(sol.skewness)
        assert sol.warnings

    def test_negative_se(self):
        with pytest.raises(ValidationError):
            simulate_product_distribution(0.3, 0.4, -0.1, 0.1, 50, seed=1)

    def test_summary(self):
        text = simulate_product_distribution(0.3, 0.4, 0.1, 0.1, 100, seed=1).summary()
        assert "skew" in text.lower()
