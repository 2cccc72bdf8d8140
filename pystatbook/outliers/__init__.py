"""
Outlier thresholds and screening.

Public API:
    outlier_thresholds(sample, method, multiplier)
    identify_outliers(sample, method, multiplier)
    within_condition_outliers(groups, method, multiplier)
    across_condition_outliers(groups, method, multiplier)
    remove_at_indices(sample, indices)
"""

from pystatbook.outliers._common import OutlierThresholds, ConditionOutliers
from pystatbook.outliers.solvers import (
    MAD_CONSISTENCY,
    DEFAULT_MULTIPLIERS,
    OUTLIER_METHODS,
    outlier_thresholds,
    identify_outliers,
    within_condition_outliers,
    across_condition_outliers,
    remove_at_indices,
)

__all__ = [
    "outlier_thresholds",
    "identify_outliers",
    "within_condition_outliers",
    "across_condition_outliers",
    "remove_at_indices",
    "OutlierThresholds",
    "ConditionOutliers",
    "MAD_CONSISTENCY",
    "DEFAULT_MULTIPLIERS",
    "OUTLIER_METHODS",
]
