"""
Result payloads for outlier screening.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class OutlierThresholds:
    """Observations strictly outside [lower, upper] are outliers."""
    lower: float
    upper: float
    method: str
    multiplier: float

    def is_outlier(self, values) -> NDArray[np.bool_]:
        values = np.asarray(values, dtype=np.float64)
        return (values < self.lower) | (values > self.upper)


@dataclass(frozen=True)
class ConditionOutliers:
    """
    Outlier screen of a group set.

    thresholds[i] applies to group i; with pooled=True every group shares
    the thresholds computed from all groups combined. indices[i] are the
    positions flagged within group i.
    """
    thresholds: tuple[OutlierThresholds, ...]
    indices: tuple[NDArray[np.intp], ...]
    pooled: bool

    @property
    def n_flagged(self) -> int:
        return int(sum(idx.size for idx in self.indices))
