"""
Result payloads for descriptive statistics.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class GroupStatistics:
    """
    Per-group summary of a group set.

    Variances and SDs use the n-1 divisor; a group of size one has
    variance nan. grand_mean is the mean of all raw values, so with
    unequal group sizes it differs from the mean of group means.
    """
    means: NDArray[np.floating]
    variances: NDArray[np.floating]
    sds: NDArray[np.floating]
    ns: NDArray[np.intp]
    grand_mean: float
    total_n: int

    @property
    def k(self) -> int:
        return len(self.ns)


@dataclass(frozen=True)
class SumOfSquares:
    """One-way variance decomposition, each term computed directly."""
    ss_total: float
    ss_between: float
    ss_within: float


@dataclass(frozen=True)
class Quartiles:
    """Tukey-hinge quartiles."""
    q1: float
    median: float
    q3: float
    iqr: float
