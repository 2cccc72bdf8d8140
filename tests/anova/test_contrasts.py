"""
Tests for planned contrasts.

Validates:
    - Weight validation reports the literal sum
    - Contrast estimates and orthogonality
    - Orthogonal contrasts partition SS_between
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pystatbook.core.exceptions import DimensionError, ValidationError
from pystatbook.anova import (
    anova_oneway,
    are_contrasts_orthogonal,
    compute_contrast,
    contrast_f_test,
    validate_contrast_weights,
)
from pystatbook.rng import generate_group_data

MEANS = [85.0, 79.0, 68.0]
PSI_1 = [1.0, 1.0, -2.0]
PSI_2 = [1.0, -1.0, 0.0]


class TestValidation:

    def test_invalid_sum_reported(self):
        check = validate_contrast_weights([1, 1, 1])
        assert check.sum == 3.0
        assert not check.is_valid

    def test_valid(self):
        check = validate_contrast_weights([0.5, 0.5, -1.0])
        assert check.sum == 0.0
        assert check.is_valid


class TestEstimates:

    def test_psi(self):
        assert compute_contrast(PSI_1, MEANS) == pytest.approx(28.0)
        assert compute_contrast(PSI_2, MEANS) == pytest.approx(6.0)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            compute_contrast([1, -1], MEANS)

    def test_orthogonal(self):
        check = are_contrasts_orthogonal(PSI_1, PSI_2)
        assert check.dot_product == 0.0
        assert check.is_orthogonal

    def test_not_orthogonal(self):
        check = are_contrasts_orthogonal([1, -1, 0], [1, 0, -1])
        assert check.dot_product == 1.0
        assert not check.is_orthogonal

    def test_unequal_n_orthogonality(self):
        check = are_contrasts_orthogonal(PSI_1, PSI_2, ns=[10, 20, 10])
        assert check.dot_product == pytest.approx(0.1 - 0.05)
        assert not check.is_orthogonal


class TestContrastFTest:

    @pytest.fixture
    def groups(self):
        return generate_group_data([85.0, 79.0, 68.0], 10.0, 10, seed=5)

    def test_orthogonal_contrasts_partition_ss_between(self, groups):
        anova = anova_oneway(groups)
        means = anova.group_means
        t1 = contrast_f_test(PSI_1, means, 10, anova.ms_within, anova.df_within)
        t2 = contrast_f_test(PSI_2, means, 10, anova.ms_within, anova.df_within)
        assert t1.ss_contrast + t2.ss_contrast == pytest.approx(anova.ss_between, rel=1e-10)

    def test_f_and_p(self, groups):
        anova = anova_oneway(groups)
        test = contrast_f_test(PSI_2, anova.group_means, 10, anova.ms_within, anova.df_within)
        psi = anova.group_means[0] - anova.group_means[1]
        assert test.psi_hat == pytest.approx(psi)
        assert test.ss_contrast == pytest.approx(psi ** 2 / 0.2)
        assert test.f_value == pytest.approx(test.ss_contrast / anova.ms_within)
        assert test.p_value == pytest.approx(sp_stats.f.sf(test.f_value, 1, 27))
        assert test.df_numerator == 1
        assert test.df_denominator == 27
        assert test.t_value ** 2 == pytest.approx(test.f_value)

    def test_unequal_sizes(self):
        test = contrast_f_test(PSI_2, MEANS, [4, 6, 5], 25.0, 12)
        assert test.ss_contrast == pytest.approx(36.0 / (1 / 4 + 1 / 6))

    def test_invalid_weights_raise(self):
        with pytest.raises(ValidationError, match="sum to zero"):
            contrast_f_test([1, 1, 1], MEANS, 10, 25.0, 27)

    def test_all_zero_weights_raise(self):
        with pytest.raises(ValidationError, match="non-zero"):
            contrast_f_test([0, 0, 0], MEANS, 10, 25.0, 27)

    def test_zero_error_is_undefined(self):
        test = contrast_f_test(PSI_2, MEANS, 10, 0.0, 27)
        assert not test.is_defined
        assert np.isnan(test.f_value)
