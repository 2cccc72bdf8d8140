"""
Tests for power, sample size and effect sizes.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pystatbook.core.exceptions import ValidationError
from pystatbook.power import (
    calculate_power,
    cohens_d,
    cohens_d_from_stats,
    distribution_overlap,
    eta_squared,
    omega_squared,
    required_sample_size,
)


class TestPower:

    def test_zero_effect_is_alpha(self):
        assert calculate_power(0.0, 30) == pytest.approx(0.05, rel=1e-12)
        assert calculate_power(0.0, 30, alpha=0.01) == pytest.approx(0.01, rel=1e-12)

    def test_known_value(self):
        ncp = 0.5 * np.sqrt(32.0)
        expected = sp_stats.norm.sf(1.959963984540054 - ncp) + sp_stats.norm.cdf(-1.959963984540054 - ncp)
        assert calculate_power(0.5, 64) == pytest.approx(expected, rel=1e-10)

    def test_increases_with_n(self):
        powers = [calculate_power(0.4, n) for n in (10, 20, 40, 80)]
        assert powers == sorted(powers)

    def test_one_tailed_more_powerful(self):
        assert calculate_power(0.5, 30, tails=1) > calculate_power(0.5, 30, tails=2)

    def test_no_data(self):
        assert calculate_power(0.5, 0) == 0.0

    def test_bad_tails(self):
        with pytest.raises(ValidationError):
            calculate_power(0.5, 20, tails=3)


class TestSampleSize:

    def test_medium_effect(self):
        assert required_sample_size(0.5) == 63

    def test_reaches_target(self):
        n = required_sample_size(0.5, power=0.8)
        assert calculate_power(0.5, n) >= 0.8
        assert calculate_power(0.5, n - 1) < 0.8

    def test_sign_ignored(self):
        assert required_sample_size(-0.3) == required_sample_size(0.3)

    def test_zero_effect_rejected(self):
        with pytest.raises(ValidationError, match="non-zero"):
            required_sample_size(0.0)

    def test_bad_power(self):
        with pytest.raises(ValidationError):
            required_sample_size(0.5, power=1.0)


class TestEffectSizes:

    def test_cohens_d(self, two_groups):
        x, y = two_groups
        pooled = np.sqrt(
            ((x.size - 1) * np.var(x, ddof=1) + (y.size - 1) * np.var(y, ddof=1))
            / (x.size + y.size - 2)
        )
        assert cohens_d(x, y) == pytest.approx((np.mean(x) - np.mean(y)) / pooled)

    def test_cohens_d_degenerate(self):
        assert np.isnan(cohens_d([1.0], [2.0, 3.0]))
        assert np.isnan(cohens_d([1.0, 1.0], [1.0, 1.0]))
        assert np.isnan(cohens_d_from_stats(1.0, 0.0))

    def test_overlap(self):
        assert distribution_overlap(0.0) == pytest.approx(1.0)
        assert distribution_overlap(1.0) == pytest.approx(2.0 * sp_stats.norm.cdf(-0.5))
        assert distribution_overlap(-1.0) == distribution_overlap(1.0)

    def test_eta_squared(self):
        assert eta_squared(38.0, 44.0) == pytest.approx(38.0 / 44.0)
        assert np.isnan(eta_squared(0.0, 0.0))

    def test_omega_squared(self):
        assert omega_squared(38.0, 2, 1.0, 44.0) == pytest.approx(36.0 / 45.0)
