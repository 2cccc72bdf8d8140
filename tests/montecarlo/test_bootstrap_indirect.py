"""
Tests for the bootstrap of the indirect effect.

Verifies the observed estimate, seed reproducibility, batching, interval
stability across runs and the handling of resamples with a singular design.
"""

import numpy as np
import pytest

from pystatbook.core.exceptions import DimensionError, ValidationError
from pystatbook.montecarlo import ReplicateSet, bootstrap_indirect_effect
from pystatbook.regression import fit_simple, fit_two_predictor
from pystatbook.rng import generate_mediation_data


@pytest.fixture
def mediation():
    return generate_mediation_data(40, a=0.5, b=0.5, c_prime=0.1, seed=3)


class TestObserved:

    def test_paths(self, mediation):
        x, m, y = mediation
        sol = bootstrap_indirect_effect(x, m, y, n_replicates=20, seed=1)
        assert sol.a == pytest.approx(fit_simple(m, x).coef('x'))
        assert sol.b == pytest.approx(fit_two_predictor(y, x, m).coef('x2'))
        assert sol.estimate == pytest.approx(sol.a * sol.b)


class TestReplicates:

    def test_seed_reproducible(self, mediation):
        x, m, y = mediation
        a = bootstrap_indirect_effect(x, m, y, n_replicates=100, seed=7)
        b = bootstrap_indirect_effect(x, m, y, n_replicates=100, seed=7)
        assert a.replicates == b.replicates
        assert a.percentile_ci() == b.percentile_ci()

    def test_different_seeds_differ(self, mediation):
        x, m, y = mediation
        a = bootstrap_indirect_effect(x, m, y, n_replicates=50, seed=7)
        b = bootstrap_indirect_effect(x, m, y, n_replicates=50, seed=8)
        assert a.replicates != b.replicates

    def test_summary_statistics(self, mediation):
        x, m, y = mediation
        sol = bootstrap_indirect_effect(x, m, y, n_replicates=300, seed=11)
        values = sol.replicates.finite
        assert sol.n_replicates == 300
        assert sol.n_failed == 0
        assert sol.se == pytest.approx(np.std(values, ddof=1))
        assert sol.bias == pytest.approx(np.mean(values) - sol.estimate)
        lo, hi = sol.percentile_ci(0.95)
        assert lo < sol.estimate < hi
        assert (lo, hi) == pytest.approx(tuple(np.quantile(values, [0.025, 0.975])))

    def test_batches_merge(self, mediation):
        x, m, y = mediation
        first = bootstrap_indirect_effect(x, m, y, n_replicates=30, seed=1)
        second = bootstrap_indirect_effect(x, m, y, n_replicates=20, seed=2)
        merged = first.replicates.extend(second.replicates)
        assert len(merged) == 50
        np.testing.assert_array_equal(merged.values[:30], first.replicates.values)
        assert len(first.replicates) == 30

    def test_histogram_counts_all_finite(self, mediation):
        x, m, y = mediation
        sol = bootstrap_indirect_effect(x, m, y, n_replicates=120, seed=4)
        bins = sol.histogram(15)
        assert len(bins) == 15
        assert sum(b.count for b in bins) == 120


class TestIntervalStability:
    """Percentile intervals from repeated runs tighten as replicates grow."""

    @staticmethod
    def _intervals(data, n_replicates, seeds):
        x, m, y = data
        return np.array([
            bootstrap_indirect_effect(x, m, y, n_replicates=n_replicates, seed=s).percentile_ci()
            for s in seeds
        ])

    def test_spread_across_runs_shrinks(self, mediation):
        seeds = range(100, 108)
        small = self._intervals(mediation, 25, seeds)
        large = self._intervals(mediation, 1000, seeds)

        width_small = small[:, 1] - small[:, 0]
        width_large = large[:, 1] - large[:, 0]
        assert np.std(width_large) < np.std(width_small)
        assert np.ptp(large[:, 0]) < np.ptp(small[:, 0])
        assert np.ptp(large[:, 1]) < np.ptp(small[:, 1])

    def test_large_runs_agree(self, mediation):
        large = self._intervals(mediation, 800, range(200, 204))
        width = large[:, 1] - large[:, 0]
        assert np.ptp(width) < 0.25 * np.mean(width)


class TestSingularResamples:

    def test_recorded_as_nan_with_warning(self):
        x = np.array([0.0, 0.0, 0.0, 1.0])
        m = np.array([1.0, 2.0, 3.0, 4.0])
        y = np.array([2.0, 1.0, 4.0, 3.0])
        with pytest.warns(RuntimeWarning, match="singular"):
            sol = bootstrap_indirect_effect(x, m, y, n_replicates=60, seed=5)
        assert sol.n_failed > 0
        assert sol.n_failed == int(np.sum(np.isnan(sol.replicates.values)))
        assert sol.replicates.n_failed == sol.n_failed
        assert any("singular" in w for w in sol.warnings)
        assert np.all(np.isfinite(sol.replicates.finite))


class TestValidation:

    def test_too_few_observations(self):
        with pytest.raises(ValidationError, match="at least 4"):
            bootstrap_indirect_effect([1.0, 2.0, 3.0], [1.0, 3.0, 2.0], [2.0, 1.0, 3.0], 10, 1)

    def test_length_mismatch(self, mediation):
        x, m, y = mediation
        with pytest.raises(DimensionError):
            bootstrap_indirect_effect(x, m[:-1], y, 10, 1)

    def test_replicate_count(self, mediation):
        x, m, y = mediation
        with pytest.raises(ValidationError):
            bootstrap_indirect_effect(x, m, y, 0, 1)
