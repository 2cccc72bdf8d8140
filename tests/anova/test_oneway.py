"""
Tests for one-way ANOVA.

Validates:
    - F and p against scipy.stats.f_oneway
    - F = t^2 for two groups (pooled-variance t)
    - Table arithmetic and effect sizes
    - Degenerate designs give nan with a warning
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pystatbook.core.compute.tolerances import SS_IDENTITY
from pystatbook.core.exceptions import ValidationError
from pystatbook.anova import anova_oneway
from pystatbook.hypothesis import welch_t_test


class TestOneway:

    def test_matches_scipy(self, three_groups):
        sol = anova_oneway(three_groups)
        ref = sp_stats.f_oneway(*three_groups)
        assert sol.f_value == pytest.approx(ref.statistic, rel=1e-10)
        assert sol.p_value == pytest.approx(ref.pvalue, rel=1e-8)

    def test_degrees_of_freedom(self, three_groups):
        sol = anova_oneway(three_groups)
        assert sol.df_between == 2
        assert sol.df_within == 25
        assert sol.df_total == 27
        assert sol.n_groups == 3
        assert sol.n_obs == 28

    def test_ss_identity(self, three_groups):
        sol = anova_oneway(three_groups)
        assert sol.ss_total == pytest.approx(
            sol.ss_between + sol.ss_within, rel=SS_IDENTITY.rtol
        )
        assert sol.ms_between == pytest.approx(sol.ss_between / 2)
        assert sol.ms_within == pytest.approx(sol.ss_within / 25)

    def test_two_groups_f_is_t_squared(self, two_groups):
        x, y = two_groups
        sol = anova_oneway([x, y])
        t = welch_t_test(x, y, var_equal=True)
        assert sol.f_value == pytest.approx(t.statistic ** 2, rel=1e-10)
        assert sol.p_value == pytest.approx(t.p_value, rel=1e-8)

    def test_effect_sizes(self, three_groups):
        sol = anova_oneway(three_groups)
        assert sol.eta_squared == pytest.approx(sol.ss_between / sol.ss_total)
        expected_omega = (
            (sol.ss_between - sol.df_between * sol.ms_within)
            / (sol.ss_total + sol.ms_within)
        )
        assert sol.omega_squared == pytest.approx(expected_omega)
        assert sol.omega_squared < sol.eta_squared

    def test_known_table(self):
        sol = anova_oneway([[4, 5, 6], [6, 7, 8], [9, 10, 11]])
        assert sol.ss_between == pytest.approx(38.0)
        assert sol.ss_within == pytest.approx(6.0)
        assert sol.f_value == pytest.approx(19.0)
        assert list(sol.group_means) == pytest.approx([5.0, 7.0, 10.0])
        assert sol.grand_mean == pytest.approx(22.0 / 3.0)

    def test_singleton_groups_undefined(self):
        sol = anova_oneway([[1.0], [2.0], [4.0]])
        assert not sol.is_defined
        assert np.isnan(sol.f_value)
        assert sol.warnings

    def test_zero_within_variance_undefined(self):
        sol = anova_oneway([[1.0, 1.0], [3.0, 3.0]])
        assert not sol.is_defined
        assert any("Zero within-group variance" in w for w in sol.warnings)

    def test_one_group_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 groups"):
            anova_oneway([[1.0, 2.0, 3.0]])

    def test_summary(self, three_groups):
        text = anova_oneway(three_groups).summary()
        assert "Between" in text
        assert "Residuals" in text
