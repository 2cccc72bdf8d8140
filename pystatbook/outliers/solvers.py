"""
Outlier thresholds and screening.

Methods (k is the multiplier):
    'iqr'         Q1 - k IQR, Q3 + k IQR            (default k = 1.5)
    'median_iqr'  median -/+ k IQR                  (default k = 1.5)
    'zscore'      mean -/+ k SD, population SD      (default k = 2.5)
    'mad'         median -/+ k 1.4826 MAD           (default k = 2.5)

Quartiles are Tukey hinges. Screening within conditions computes each
group's own thresholds; screening across conditions pools all groups
first, which avoids flagging by condition.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatbook.core.exceptions import ValidationError
from pystatbook.core.validation import check_sample, check_groups
from pystatbook.descriptive import quartiles, median_absolute_deviation, standard_deviation
from pystatbook.outliers._common import OutlierThresholds, ConditionOutliers

# Scales the MAD to estimate the SD of normal data.
MAD_CONSISTENCY = 1.4826

DEFAULT_MULTIPLIERS = {
    'iqr': 1.5,
    'median_iqr': 1.5,
    'zscore': 2.5,
    'mad': 2.5,
}

OUTLIER_METHODS = tuple(DEFAULT_MULTIPLIERS)


def _thresholds(x: NDArray, method: str, multiplier: float | None) -> OutlierThresholds:
    if method not in DEFAULT_MULTIPLIERS:
        raise ValidationError(f"method: must be one of {OUTLIER_METHODS}, got {method!r}")
    if x.size == 0:
        raise ValidationError("sample: cannot compute outlier thresholds of an empty sample")
    k = DEFAULT_MULTIPLIERS[method] if multiplier is None else float(multiplier)
    if k < 0:
        raise ValidationError(f"multiplier: must be non-negative, got {k}")

    if method == 'iqr':
        q = quartiles(x)
        lower, upper = q.q1 - k * q.iqr, q.q3 + k * q.iqr
    elif method == 'median_iqr':
        q = quartiles(x)
        lower, upper = q.median - k * q.iqr, q.median + k * q.iqr
    elif method == 'zscore':
        center = float(np.mean(x))
        sd = standard_deviation(x, sample_correction=False)
        lower, upper = center - k * sd, center + k * sd
    else:
        center = quartiles(x).median
        scaled = MAD_CONSISTENCY * median_absolute_deviation(x)
        lower, upper = center - k * scaled, center + k * scaled

    return OutlierThresholds(lower=float(lower), upper=float(upper), method=method, multiplier=k)


def outlier_thresholds(
    sample: ArrayLike,
    method: str = 'iqr',
    multiplier: float | None = None,
) -> OutlierThresholds:
    """
    Lower and upper outlier bounds of one sample.

    Args:
        sample: Data
        method: 'iqr', 'median_iqr', 'zscore' or 'mad'
        multiplier: k; the method's default when None

    Raises:
        ValidationError: For an unknown method or an empty sample
    """
    return _thresholds(check_sample(sample, "sample"), method, multiplier)


def identify_outliers(
    sample: ArrayLike,
    method: str = 'iqr',
    multiplier: float | None = None,
) -> NDArray[np.intp]:
    """Indices of observations outside the sample's own thresholds."""
    x = check_sample(sample, "sample")
    bounds = _thresholds(x, method, multiplier)
    return np.flatnonzero(bounds.is_outlier(x))


def within_condition_outliers(
    groups: Sequence[ArrayLike],
    method: str = 'iqr',
    multiplier: float | None = None,
) -> ConditionOutliers:
    """Screen every group against thresholds computed from that group alone."""
    arrays = check_groups(groups, "groups")
    bounds = tuple(_thresholds(g, method, multiplier) for g in arrays)
    return ConditionOutliers(
        thresholds=bounds,
        indices=tuple(np.flatnonzero(b.is_outlier(g)) for b, g in zip(bounds, arrays)),
        pooled=False,
    )


def across_condition_outliers(
    groups: Sequence[ArrayLike],
    method: str = 'iqr',
    multiplier: float | None = None,
) -> ConditionOutliers:
    """Screen every group against one set of thresholds from the pooled data."""
    arrays = check_groups(groups, "groups")
    bounds = _thresholds(np.concatenate(arrays), method, multiplier)
    return ConditionOutliers(
        thresholds=(bounds,) * len(arrays),
        indices=tuple(np.flatnonzero(bounds.is_outlier(g)) for g in arrays),
        pooled=True,
    )


def remove_at_indices(sample: ArrayLike, indices: ArrayLike) -> NDArray[np.floating]:
    """
    New sample without the given positions; the input is not modified.

    Raises:
        ValidationError: If an index is out of range
    """
    x = check_sample(sample, "sample")
    idx = np.asarray(indices, dtype=np.intp).ravel()
    if idx.size and (idx.min() < 0 or idx.max() >= x.size):
        raise ValidationError(
            f"indices: must be in [0, {x.size}), got {idx.tolist()}"
        )
    keep = np.ones(x.size, dtype=bool)
    keep[idx] = False
    return x[keep]
