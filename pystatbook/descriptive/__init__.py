"""
Descriptive statistics module.

Public API:
    mean(sample)                - Arithmetic mean
    standard_deviation(sample)  - SD with n-1 or n divisor
    group_statistics(groups)    - Per-group means/variances/sizes, grand mean
    sum_of_squares(groups)      - SS_total, SS_between, SS_within
    quartiles(sample)           - Tukey hinges and IQR
    median_absolute_deviation   - Unscaled MAD
    quantile(sample, q)         - Linear-interpolation quantile
"""

from pystatbook.descriptive._common import GroupStatistics, SumOfSquares, Quartiles
from pystatbook.descriptive.solvers import (
    mean,
    standard_deviation,
    group_statistics,
    sum_of_squares,
    quartiles,
    median_absolute_deviation,
    quantile,
)

__all__ = [
    "mean",
    "standard_deviation",
    "group_statistics",
    "sum_of_squares",
    "quartiles",
    "median_absolute_deviation",
    "quantile",
    "GroupStatistics",
    "SumOfSquares",
    "Quartiles",
]
