"""
Standardized effect sizes.

cohens_d uses the pooled SD of two samples; the overlap coefficient of two
unit-variance normals d apart is OVL = 2 Phi(-|d| / 2).
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike
from scipy import stats as sp_stats

from pystatbook.core.validation import check_sample


def cohens_d_from_stats(mean_diff: float, pooled_sd: float) -> float:
    """d = mean difference / pooled SD; nan when pooled_sd <= 0."""
    if not pooled_sd > 0:
        return float('nan')
    return float(mean_diff / pooled_sd)


def cohens_d(x: ArrayLike, y: ArrayLike) -> float:
    """
    Cohen's d for mean(x) - mean(y), standardized by the pooled SD.

    Returns nan when either sample has fewer than two values or the pooled
    SD is zero.
    """
    x_arr = check_sample(x, "x")
    y_arr = check_sample(y, "y")
    nx, ny = x_arr.size, y_arr.size
    if nx < 2 or ny < 2:
        return float('nan')
    pooled_var = (
        (nx - 1) * np.var(x_arr, ddof=1) + (ny - 1) * np.var(y_arr, ddof=1)
    ) / (nx + ny - 2)
    return cohens_d_from_stats(
        float(np.mean(x_arr) - np.mean(y_arr)), math.sqrt(pooled_var)
    )


def distribution_overlap(d: float) -> float:
    """Shared area of two unit-variance normal densities whose means differ by d."""
    return float(2.0 * sp_stats.norm.cdf(-abs(d) / 2.0))


def eta_squared(ss_effect: float, ss_total: float) -> float:
    """SS_effect / SS_total; nan when SS_total is zero."""
    if ss_total == 0:
        return float('nan')
    return float(ss_effect / ss_total)


def omega_squared(
    ss_between: float,
    df_between: int,
    ms_within: float,
    ss_total: float,
) -> float:
    """
    (SS_between - df_between MS_within) / (SS_total + MS_within).

    Less biased than eta squared; can be slightly negative for tiny effects
    and is reported as computed.
    """
    denom = ss_total + ms_within
    if denom == 0 or np.isnan(denom):
        return float('nan')
    return float((ss_between - df_between * ms_within) / denom)
