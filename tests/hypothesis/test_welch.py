"""
Tests for welch_t_test() against scipy.stats.ttest_ind.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from pystatbook.core.exceptions import ValidationError
from pystatbook.hypothesis import welch_t_test


class TestWelch:

    def test_matches_scipy(self, two_groups):
        x, y = two_groups
        sol = welch_t_test(x, y)
        ref = sp_stats.ttest_ind(x, y, equal_var=False)
        assert sol.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert sol.p_value == pytest.approx(ref.pvalue, rel=1e-10)
        assert sol.method == "Welch Two Sample t-test"
        assert sol.alternative == "two.sided"

    def test_welch_df(self, two_groups):
        x, y = two_groups
        vx, vy = np.var(x, ddof=1) / x.size, np.var(y, ddof=1) / y.size
        expected = (vx + vy) ** 2 / (vx ** 2 / (x.size - 1) + vy ** 2 / (y.size - 1))
        assert welch_t_test(x, y).df == pytest.approx(expected, rel=1e-12)

    def test_pooled_matches_scipy(self, two_groups):
        x, y = two_groups
        sol = welch_t_test(x, y, var_equal=True)
        ref = sp_stats.ttest_ind(x, y, equal_var=True)
        assert sol.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert sol.p_value == pytest.approx(ref.pvalue, rel=1e-10)
        assert sol.df == x.size + y.size - 2

    @pytest.mark.parametrize("alternative", ["less", "greater"])
    def test_one_sided(self, two_groups, alternative):
        x, y = two_groups
        sol = welch_t_test(x, y, alternative=alternative)
        ref = sp_stats.ttest_ind(x, y, equal_var=False, alternative=alternative)
        assert sol.p_value == pytest.approx(ref.pvalue, rel=1e-10)

    def test_conf_int(self, two_groups):
        x, y = two_groups
        sol = welch_t_test(x, y, conf_level=0.9)
        t_crit = sp_stats.t.ppf(0.95, sol.df)
        diff = np.mean(x) - np.mean(y)
        assert_allclose(sol.conf_int, [diff - t_crit * sol.std_error, diff + t_crit * sol.std_error])
        assert sol.conf_level == 0.9

    def test_estimates(self, two_groups):
        x, y = two_groups
        sol = welch_t_test(x, y)
        assert sol.estimate == {
            "mean of x": pytest.approx(np.mean(x)),
            "mean of y": pytest.approx(np.mean(y)),
        }
        assert sol.effect == pytest.approx(np.mean(x) - np.mean(y))

    def test_group_of_one_is_undefined(self):
        sol = welch_t_test([1.0], [2.0, 3.0, 4.0])
        assert not sol.is_defined
        assert np.isnan(sol.p_value)
        assert any("at least 2" in w for w in sol.warnings)

    def test_zero_variance_is_undefined(self):
        sol = welch_t_test([2.0, 2.0, 2.0], [2.0, 2.0])
        assert not sol.is_defined
        assert any("zero variance" in w for w in sol.warnings)

    def test_bad_alternative(self):
        with pytest.raises(ValidationError):
            welch_t_test([1.0, 2.0], [3.0, 4.0], alternative="two-sided")

    def test_summary_format(self, two_groups):
        x, y = two_groups
        text = welch_t_test(x, y).summary()
        assert "Welch Two Sample t-test" in text
        assert "p-value" in text
