"""
Tests for outlier thresholds and screening.
"""

import numpy as np
import pytest

from pystatbook.core.exceptions import ValidationError
from pystatbook.outliers import (
    DEFAULT_MULTIPLIERS,
    MAD_CONSISTENCY,
    across_condition_outliers,
    identify_outliers,
    outlier_thresholds,
    remove_at_indices,
    within_condition_outliers,
)

SAMPLE = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 100.0]


class TestThresholds:

    def test_iqr(self):
        bounds = outlier_thresholds(SAMPLE, 'iqr')
        assert (bounds.lower, bounds.upper) == (-5.0, 15.0)
        assert bounds.multiplier == 1.5

    def test_median_iqr(self):
        bounds = outlier_thresholds(SAMPLE, 'median_iqr')
        assert (bounds.lower, bounds.upper) == (-2.5, 12.5)

    def test_zscore_uses_population_sd(self):
        x = np.array(SAMPLE)
        bounds = outlier_thresholds(x, 'zscore', multiplier=2.0)
        sd = np.std(x)
        assert bounds.lower == pytest.approx(x.mean() - 2.0 * sd)
        assert bounds.upper == pytest.approx(x.mean() + 2.0 * sd)

    def test_mad(self):
        bounds = outlier_thresholds(SAMPLE, 'mad')
        half_width = 2.5 * MAD_CONSISTENCY * 2.0
        assert bounds.lower == pytest.approx(5.0 - half_width)
        assert bounds.upper == pytest.approx(5.0 + half_width)

    def test_defaults(self):
        assert DEFAULT_MULTIPLIERS == {'iqr': 1.5, 'median_iqr': 1.5, 'zscore': 2.5, 'mad': 2.5}

    def test_unknown_method(self):
        with pytest.raises(ValidationError, match="method"):
            outlier_thresholds(SAMPLE, 'grubbs')

    def test_empty(self):
        with pytest.raises(ValidationError):
            outlier_thresholds([], 'iqr')

    def test_negative_multiplier(self):
        with pytest.raises(ValidationError):
            outlier_thresholds(SAMPLE, 'iqr', multiplier=-1.0)


class TestIdentify:

    @pytest.mark.parametrize("method", ['iqr', 'median_iqr', 'zscore', 'mad'])
    def test_flags_extreme_value(self, method):
        assert identify_outliers(SAMPLE, method).tolist() == [8]

    def test_boundary_value_not_flagged(self):
        bounds = outlier_thresholds([1.0, 2.0, 3.0, 4.0], 'iqr', 1.0)
        assert (bounds.lower, bounds.upper) == (-0.5, 5.5)
        assert not bounds.is_outlier(5.5)
        assert bounds.is_outlier(5.6)

    def test_constant_sample(self):
        assert identify_outliers([3.0, 3.0, 3.0], 'zscore').size == 0


class TestConditions:

    GROUPS = [
        [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 50.0],
        [40.0, 45.0, 50.0, 55.0, 60.0, 45.0, 50.0, 55.0],
    ]

    def test_within(self):
        result = within_condition_outliers(self.GROUPS)
        assert not result.pooled
        assert [idx.tolist() for idx in result.indices] == [[7], []]
        assert result.thresholds[0] != result.thresholds[1]
        assert result.n_flagged == 1

    def test_across(self):
        result = across_condition_outliers(self.GROUPS)
        assert result.pooled
        assert result.thresholds[0] == result.thresholds[1]
        assert [idx.tolist() for idx in result.indices] == [[], []]
        assert result.thresholds[0].lower == pytest.approx(4.5 - 1.5 * 45.5)


class TestRemove:

    def test_remove(self):
        original = np.array([1.0, 2.0, 3.0, 4.0])
        out = remove_at_indices(original, [1, 3])
        assert out.tolist() == [1.0, 3.0]
        assert original.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_remove_nothing(self):
        assert remove_at_indices([1.0, 2.0], []).tolist() == [1.0, 2.0]

    def test_out_of_range(self):
        with pytest.raises(ValidationError):
            remove_at_indices([1.0, 2.0], [2])

    def test_round_trip_with_identify(self):
        idx = identify_outliers(SAMPLE)
        assert remove_at_indices(SAMPLE, idx).max() == 8.0
