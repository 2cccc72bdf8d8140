"""
Tests for mixed (between x within) ANOVA.

Reference data: two appeal types (emotional, rational) as the between
factor, attitude measured immediately and after a delay as the within
factor, four subjects per group.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pystatbook.core.exceptions import DimensionError, ValidationError
from pystatbook.anova import anova_mixed, anova_oneway, anova_rm


@pytest.fixture
def appeal():
    emotional = np.array([[6.4, 5.2], [5.4, 3.0], [6.6, 4.2], [5.6, 4.4]])
    rational = np.array([[4.4, 4.6], [3.4, 5.2], [4.4, 5.2], [3.8, 5.0]])
    return [emotional, rational]


class TestKnownTable:

    def test_sums_of_squares(self, appeal):
        sol = anova_mixed(appeal, factor_names=('Appeal', 'Time'))
        expected = {
            'Appeal': 1.44,
            'S/Appeal': 3.08,
            'Time': 0.64,
            'Appeal:Time': 7.84,
            'Time:S/Appeal': 1.40,
        }
        for term, ss in expected.items():
            assert sol.row(term).sum_sq == pytest.approx(ss, rel=1e-9), term
        assert sol.ss_total == pytest.approx(14.40, rel=1e-10)

    def test_df(self, appeal):
        sol = anova_mixed(appeal)
        assert [row.df for row in sol.table] == [1, 6, 1, 1, 6]

    def test_f_uses_matching_error_term(self, appeal):
        sol = anova_mixed(appeal, factor_names=('Appeal', 'Time'))
        assert sol.f_value('Appeal') == pytest.approx(2.805195, rel=1e-6)
        assert sol.f_value('Time') == pytest.approx(2.742857, rel=1e-6)
        assert sol.f_value('Appeal:Time') == pytest.approx(33.6, rel=1e-9)
        assert sol.p_value('Appeal:Time') == pytest.approx(
            sp_stats.f.sf(33.6, 1, 6), rel=1e-6
        )
        assert sol.error_terms == {
            'Appeal': 'S/Appeal',
            'Time': 'Time:S/Appeal',
            'Appeal:Time': 'Time:S/Appeal',
        }
        assert sol.error_row('Appeal').df == 6

    def test_means(self, appeal):
        sol = anova_mixed(appeal)
        np.testing.assert_allclose(sol.cell_means, [[6.0, 4.2], [4.0, 5.0]])
        np.testing.assert_allclose(sol.group_means, [5.1, 4.5])
        np.testing.assert_allclose(sol.condition_means, [5.0, 4.6])
        assert sol.grand_mean == pytest.approx(4.8)
        assert sol.n_subjects == 8
        assert sol.group_ns.tolist() == [4, 4]

    def test_error_rows_have_no_f(self, appeal):
        sol = anova_mixed(appeal)
        assert sol.row('S/A').f_value is None
        assert sol.row('B:S/A').f_value is None

    def test_summary(self, appeal):
        text = anova_mixed(appeal, factor_names=('Appeal', 'Time')).summary()
        assert 'Appeal tested against S/Appeal' in text


class TestDecomposition:

    def test_unequal_groups_add_up(self, rng):
        groups = [rng.normal(10.0, 2.0, (n, 3)) for n in (5, 8, 6)]
        sol = anova_mixed(groups)
        total = sum(row.sum_sq for row in sol.table)
        assert total == pytest.approx(sol.ss_total, rel=1e-10)
        assert not sol.info['balanced']

    def test_between_f_matches_oneway_on_subject_means(self, rng):
        groups = [rng.normal(m, 1.5, (n, 4)) for m, n in ((5.0, 6), (6.0, 9))]
        sol = anova_mixed(groups)
        ref = anova_oneway([g.mean(axis=1) for g in groups])
        assert sol.f_value('A') == pytest.approx(ref.f_value, rel=1e-9)
        assert sol.p_value('A') == pytest.approx(ref.p_value, rel=1e-8)

    def test_within_terms_match_rm_when_groups_share_profile(self, rng):
        base = rng.normal(20.0, 3.0, (6, 3))
        shifted = base + 5.0
        sol = anova_mixed([base, shifted])
        ref = anova_rm(np.vstack([base, shifted]))
        assert sol.row('A:B').sum_sq == pytest.approx(0.0, abs=1e-9)
        assert sol.row('B').sum_sq == pytest.approx(ref.ss_conditions, rel=1e-9)


class TestDegenerate:

    def test_one_subject_per_group(self):
        sol = anova_mixed([[[1.0, 2.0]], [[3.0, 5.0]]])
        assert not sol.is_defined
        assert any('One subject per group' in w for w in sol.warnings)

    def test_parallel_profiles_leave_no_residual(self):
        groups = [[[1.0, 2.0], [3.0, 4.0]], [[2.0, 4.0], [5.0, 7.0]]]
        sol = anova_mixed(groups)
        assert np.isnan(sol.f_value('B'))
        assert np.isfinite(sol.f_value('A'))
        assert any('Zero residual' in w for w in sol.warnings)


class TestValidation:

    def test_one_group(self, appeal):
        with pytest.raises(ValidationError, match="at least 2 groups"):
            anova_mixed(appeal[:1])

    def test_condition_mismatch(self, appeal):
        with pytest.raises(DimensionError):
            anova_mixed([appeal[0], appeal[1][:, :1]])

    def test_one_condition(self):
        with pytest.raises(ValidationError, match="at least 2 conditions"):
            anova_mixed([[[1.0], [2.0]], [[3.0], [4.0]]])

    def test_not_a_matrix(self):
        with pytest.raises(DimensionError):
            anova_mixed([[1.0, 2.0], [3.0, 4.0]])

    def test_non_finite(self, appeal):
        bad = appeal[0].copy()
        bad[0, 0] = np.nan
        with pytest.raises(ValidationError, match="non-finite"):
            anova_mixed([bad, appeal[1]])
