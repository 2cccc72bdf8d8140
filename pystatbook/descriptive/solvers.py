"""
Descriptive statistics.

Public API:
    mean(sample)
    standard_deviation(sample, sample_correction=True)
    group_statistics(groups)
    sum_of_squares(groups)
    quartiles(sample)
    median_absolute_deviation(sample)
    quantile(sample, q)

Empty input gives nan rather than a substituted 0.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from pystatbook.core.exceptions import ValidationError
from pystatbook.core.validation import check_sample, check_groups
from pystatbook.descriptive._common import GroupStatistics, SumOfSquares, Quartiles
from pystatbook.descriptive._quartiles import tukey_hinges, mad_raw


def mean(sample: ArrayLike) -> float:
    """Arithmetic mean; nan for an empty sample."""
    x = check_sample(sample, "sample")
    if x.size == 0:
        return float('nan')
    return float(np.sum(x) / x.size)


def standard_deviation(sample: ArrayLike, sample_correction: bool = True) -> float:
    """
    Standard deviation with divisor n - 1 (sample_correction=True) or n.

    Returns nan when the divisor would be zero (empty sample, or a single
    value with the correction).
    """
    x = check_sample(sample, "sample")
    n = x.size
    divisor = n - 1 if sample_correction else n
    if divisor <= 0:
        return float('nan')
    m = np.sum(x) / n
    return math.sqrt(float(np.sum((x - m) ** 2)) / divisor)


def group_statistics(groups: Sequence[ArrayLike]) -> GroupStatistics:
    """
    Per-group means, variances, SDs and sizes plus the grand mean.

    Raises:
        ValidationError: If groups is empty or any group is empty
    """
    arrays = check_groups(groups, "groups")
    ns = np.array([g.size for g in arrays], dtype=np.intp)
    means = np.array([np.mean(g) for g in arrays])
    variances = np.array([
        np.sum((g - g.mean()) ** 2) / (g.size - 1) if g.size > 1 else np.nan
        for g in arrays
    ])
    all_values = np.concatenate(arrays)

    return GroupStatistics(
        means=means,
        variances=variances,
        sds=np.sqrt(variances),
        ns=ns,
        grand_mean=float(np.mean(all_values)),
        total_n=int(ns.sum()),
    )


def sum_of_squares(groups: Sequence[ArrayLike]) -> SumOfSquares:
    """
    Between/within/total sums of squares, each summed from its definition.

    SS_within is Σ(x - mean_g)² rather than SS_total - SS_between, so the
    identity SS_total = SS_between + SS_within is a check, not a tautology.
    """
    arrays = check_groups(groups, "groups")
    all_values = np.concatenate(arrays)
    grand = np.mean(all_values)

    ss_total = float(np.sum((all_values - grand) ** 2))
    ss_between = float(sum(g.size * (g.mean() - grand) ** 2 for g in arrays))
    ss_within = float(sum(np.sum((g - g.mean()) ** 2) for g in arrays))

    return SumOfSquares(ss_total=ss_total, ss_between=ss_between, ss_within=ss_within)


def quartiles(sample: ArrayLike) -> Quartiles:
    """
    Tukey-hinge quartiles (the convention used for box plots).

    Raises:
        ValidationError: If the sample is empty
    """
    x = check_sample(sample, "sample")
    if x.size == 0:
        raise ValidationError("sample: quartiles of an empty sample are undefined")
    q1, med, q3 = tukey_hinges(x)
    return Quartiles(q1=q1, median=med, q3=q3, iqr=q3 - q1)


def median_absolute_deviation(sample: ArrayLike) -> float:
    """Unscaled MAD, median(|x - median(x)|); nan for an empty sample."""
    return mad_raw(check_sample(sample, "sample"))


def quantile(sample: ArrayLike, q: float | ArrayLike) -> float | np.ndarray:
    """
    Sample quantile with linear interpolation between order statistics.

    Equivalent to R type 7 / numpy's default 'linear' method.
    """
    x = check_sample(sample, "sample")
    probs = np.asarray(q, dtype=np.float64)
    if np.any((probs < 0) | (probs > 1)):
        raise ValidationError(f"q: probabilities must be in [0, 1], got {q}")
    if x.size == 0:
        return float('nan') if probs.ndim == 0 else np.full(probs.shape, np.nan)
    result = np.quantile(x, probs, method='linear')
    return float(result) if probs.ndim == 0 else result
