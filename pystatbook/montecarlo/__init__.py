"""
Resampling and Monte Carlo simulation.

Public API:
    bootstrap_indirect_effect(x, m, y, n_replicates, seed)
    simulate_product_distribution(a, b, se_a, se_b, n_simulations, seed)
    percentile_ci(values, conf_level)
    histogram_bins(values, n_bins, lower, upper)
    ReplicateSet  - immutable, growing replicate collection
"""

from pystatbook.montecarlo._common import (
    HistogramBin,
    IndirectBootParams,
    ProductSimParams,
)
from pystatbook.montecarlo._ci import percentile_ci
from pystatbook.montecarlo._histogram import histogram_bins
from pystatbook.montecarlo._replicates import ReplicateSet
from pystatbook.montecarlo.solution import IndirectBootSolution, ProductSimSolution
from pystatbook.montecarlo.solvers import (
    bootstrap_indirect_effect,
    simulate_product_distribution,
)

__all__ = [
    "bootstrap_indirect_effect",
    "simulate_product_distribution",
    "percentile_ci",
    "histogram_bins",
    "ReplicateSet",
    "HistogramBin",
    "IndirectBootParams",
    "ProductSimParams",
    "IndirectBootSolution",
    "ProductSimSolution",
]
