"""
Power analysis and effect sizes.

Public API:
    calculate_power(effect_size, n_per_group, alpha, tails)
    required_sample_size(effect_size, power, alpha, tails)
    cohens_d(x, y), cohens_d_from_stats(mean_diff, pooled_sd)
    distribution_overlap(d)
    eta_squared(ss_effect, ss_total)
    omega_squared(ss_between, df_between, ms_within, ss_total)
"""

from pystatbook.power.effect_sizes import (
    cohens_d,
    cohens_d_from_stats,
    distribution_overlap,
    eta_squared,
    omega_squared,
)
from pystatbook.power.solvers import calculate_power, required_sample_size

__all__ = [
    "calculate_power",
    "required_sample_size",
    "cohens_d",
    "cohens_d_from_stats",
    "distribution_overlap",
    "eta_squared",
    "omega_squared",
]
