"""
Tests for ReplicateSet, percentile_ci and histogram_bins.
"""

import numpy as np
import pytest

from pystatbook.core.exceptions import ValidationError
from pystatbook.montecarlo import HistogramBin, ReplicateSet, histogram_bins, percentile_ci


class TestReplicateSet:

    def test_empty(self):
        rs = ReplicateSet()
        assert len(rs) == 0
        assert np.isnan(rs.mean())
        lo, hi = rs.percentile_ci()
        assert np.isnan(lo) and np.isnan(hi)

    def test_extend_returns_new_set(self):
        rs = ReplicateSet.from_values([1.0, 2.0])
        bigger = rs.extend([3.0])
        assert len(rs) == 2
        assert list(bigger) == [1.0, 2.0, 3.0]

    def test_values_read_only(self):
        rs = ReplicateSet.from_values([1.0, 2.0])
        with pytest.raises(ValueError):
            rs.values[0] = 5.0

    def test_finite_and_failed(self):
        rs = ReplicateSet.from_values([1.0, np.nan, 3.0])
        assert rs.n_failed == 1
        assert rs.finite.tolist() == [1.0, 3.0]
        assert rs.mean() == pytest.approx(2.0)
        assert rs.std() == pytest.approx(np.sqrt(2.0))

    def test_equality(self):
        assert ReplicateSet.from_values([1.0, 2.0]) == ReplicateSet.from_values([1.0, 2.0])
        assert ReplicateSet.from_values([1.0, 2.0]) != ReplicateSet.from_values([2.0, 1.0])


class TestPercentileCI:

    def test_linear_interpolation(self):
        values = np.arange(1.0, 101.0)
        lo, hi = percentile_ci(values, 0.95)
        assert lo == pytest.approx(np.quantile(values, 0.025))
        assert hi == pytest.approx(np.quantile(values, 0.975))

    def test_symmetric_data_symmetric_interval(self):
        values = np.linspace(-1.0, 1.0, 201)
        lo, hi = percentile_ci(values, 0.9)
        assert lo == pytest.approx(-hi)

    def test_ignores_nan(self):
        assert percentile_ci([np.nan, 1.0, 2.0, 3.0], 0.5) == percentile_ci([1.0, 2.0, 3.0], 0.5)

    def test_no_finite_values(self):
        lo, hi = percentile_ci([np.nan, np.nan])
        assert np.isnan(lo) and np.isnan(hi)


class TestHistogram:

    def test_last_bin_includes_right_edge(self):
        bins = histogram_bins([0.0, 1.0, 2.0, 3.0, 4.0], 4)
        assert [b.count for b in bins] == [1, 1, 1, 2]
        assert bins[0].left == 0.0
        assert bins[-1].right == 4.0

    def test_bin_geometry(self):
        bins = histogram_bins([0.0, 10.0], 5)
        assert bins[1] == HistogramBin(left=2.0, right=4.0, count=0)
        assert bins[1].center == 3.0

    def test_empty_values(self):
        assert histogram_bins([], 10) == ()
        assert histogram_bins([np.nan], 10) == ()

    def test_single_distinct_value(self):
        bins = histogram_bins([3.0, 3.0, 3.0], 2)
        assert bins[0].left == 2.5
        assert bins[-1].right == 3.5
        assert sum(b.count for b in bins) == 3

    def test_single_value_with_explicit_lower(self):
        bins = histogram_bins([0.0, 0.0], 5, lower=0.0)
        assert bins[0].left == 0.0
        assert bins[-1].right == 0.5
        assert [b.count for b in bins] == [2, 0, 0, 0, 0]

    def test_single_value_with_explicit_upper(self):
        bins = histogram_bins([0.0, 0.0], 5, upper=0.0)
        assert bins[0].left == -0.5
        assert bins[-1].right == 0.0
        assert [b.count for b in bins] == [0, 0, 0, 0, 2]

    def test_explicit_range_excludes_outside(self):
        bins = histogram_bins([-5.0, 0.5, 1.5, 99.0], 2, lower=0.0, upper=2.0)
        assert [b.count for b in bins] == [1, 1]

    def test_explicit_range_with_no_data(self):
        bins = histogram_bins([], 3, lower=0.0, upper=3.0)
        assert [b.count for b in bins] == [0, 0, 0]

    def test_invalid_range(self):
        with pytest.raises(ValidationError):
            histogram_bins([1.0, 2.0], 3, lower=2.0, upper=1.0)
