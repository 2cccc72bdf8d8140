"""
Immutable, growing collection of scalar replicates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatbook.core.validation import check_array
from pystatbook.montecarlo._ci import percentile_ci
from pystatbook.montecarlo._histogram import histogram_bins


def _frozen(values: ArrayLike) -> NDArray[np.floating[Any]]:
    arr = check_array(values, "values").ravel()
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True)
class ReplicateSet:
    """
    Multiset of bootstrap / simulation replicates.

    Never mutated: extend() returns a new set holding the old values
    followed by the new ones. Reset by dropping the object and starting
    from ReplicateSet().

    Examples:
        >>> rs = ReplicateSet()
        >>> rs = rs.extend([0.1, 0.2]).extend([0.3])
        >>> len(rs)
        3
    """
    _values: NDArray[np.floating[Any]] = field(
        default_factory=lambda: _frozen(np.empty(0))
    )

    def __post_init__(self) -> None:
        if self._values.flags.writeable or self._values.dtype != np.float64:
            object.__setattr__(self, '_values', _frozen(self._values))

    @classmethod
    def from_values(cls, values: ArrayLike) -> ReplicateSet:
        return cls(_frozen(values))

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Read-only view of all replicates, nan included, in arrival order."""
        return self._values

    @property
    def finite(self) -> NDArray[np.floating[Any]]:
        """Replicates excluding nan (failed resamples)."""
        return self._values[np.isfinite(self._values)]

    @property
    def n_failed(self) -> int:
        return int(np.sum(~np.isfinite(self._values)))

    def extend(self, values: ArrayLike | ReplicateSet) -> ReplicateSet:
        """Return a new set with `values` appended."""
        if isinstance(values, ReplicateSet):
            values = values.values
        return ReplicateSet(_frozen(np.concatenate([self._values, _frozen(values)])))

    def mean(self) -> float:
        finite = self.finite
        return float(np.mean(finite)) if finite.size else float('nan')

    def std(self) -> float:
        """Sample SD (n - 1 divisor) of the finite replicates."""
        finite = self.finite
        return float(np.std(finite, ddof=1)) if finite.size > 1 else float('nan')

    def percentile_ci(self, conf_level: float = 0.95) -> tuple[float, float]:
        return percentile_ci(self._values, conf_level)

    def histogram(self, n_bins: int, lower: float | None = None, upper: float | None = None):
        return histogram_bins(self._values, n_bins, lower, upper)

    def __len__(self) -> int:
        return int(self._values.size)

    def __iter__(self):
        return iter(self._values.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReplicateSet):
            return NotImplemented
        return np.array_equal(self._values, other._values, equal_nan=True)

    def __hash__(self) -> int:
        return hash(self._values.tobytes())

    def __repr__(self) -> str:
        return f"ReplicateSet(n={len(self)}, n_failed={self.n_failed})"
