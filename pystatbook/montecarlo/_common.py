"""
Common data structures for resampling and simulation.

IndirectBootParams and ProductSimParams are the parameter payloads wrapped
by Result[P] and exposed through Solution classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pystatbook.montecarlo._replicates import ReplicateSet


@dataclass(frozen=True)
class HistogramBin:
    """One histogram bin [left, right); the last bin also holds `right`."""
    left: float
    right: float
    count: int

    @property
    def center(self) -> float:
        return 0.5 * (self.left + self.right)


@dataclass(frozen=True)
class IndirectBootParams:
    """
    Parameter payload for the bootstrap of a*b.

    - a, b, ab: estimates on the original data
    - replicates: a*b from each resample (nan where the resample's design
      was singular)
    - n_failed: number of nan replicates
    """
    a: float
    b: float
    ab: float
    replicates: ReplicateSet
    n_failed: int
    seed: int


@dataclass(frozen=True)
class ProductSimParams:
    """
    Parameter payload for the product-of-coefficients simulation.

    Draws a_hat ~ N(a, se_a) and b_hat ~ N(b, se_b) independently and
    records a_hat * b_hat.
    """
    a: float
    b: float
    se_a: float
    se_b: float
    products: ReplicateSet
    skewness: float
    seed: int
