"""
Solution wrappers for resampling and simulation results.

IndirectBootSolution and ProductSimSolution wrap Result[P] and provide
convenient accessors and summary output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pystatbook.core.formatting import format_number
from pystatbook.core.result import Result
from pystatbook.montecarlo._common import (
    HistogramBin,
    IndirectBootParams,
    ProductSimParams,
)
from pystatbook.montecarlo._replicates import ReplicateSet


@dataclass
class IndirectBootSolution:
    """
    Bootstrap distribution of the indirect effect a*b.

    One batch of replicates. Accumulate batches with
    ``total = total.extend(sol.replicates)``, giving each batch its own seed.
    """
    _result: Result[IndirectBootParams]

    @property
    def a(self) -> float:
        """X -> M slope on the original data."""
        return self._result.params.a

    @property
    def b(self) -> float:
        """M -> Y slope (controlling for X) on the original data."""
        return self._result.params.b

    @property
    def estimate(self) -> float:
        """Observed indirect effect a*b."""
        return self._result.params.ab

    @property
    def replicates(self) -> ReplicateSet:
        return self._result.params.replicates

    @property
    def n_replicates(self) -> int:
        return len(self._result.params.replicates)

    @property
    def n_failed(self) -> int:
        return self._result.params.n_failed

    @property
    def seed(self) -> int:
        return self._result.params.seed

    @property
    def se(self) -> float:
        """Bootstrap standard error: SD of the finite replicates."""
        return self.replicates.std()

    @property
    def bias(self) -> float:
        return self.replicates.mean() - self.estimate

    def percentile_ci(self, conf_level: float = 0.95) -> tuple[float, float]:
        return self.replicates.percentile_ci(conf_level)

    def histogram(
        self,
        n_bins: int,
        lower: float | None = None,
        upper: float | None = None,
    ) -> tuple[HistogramBin, ...]:
        return self.replicates.histogram(n_bins, lower, upper)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        return self._result.to_dict()

    def summary(self) -> str:
        """
        Produces:
            BOOTSTRAP OF THE INDIRECT EFFECT

                 original       bias    std. error
            a*b   0.25000    0.00312     0.06789
        """
        lo, hi = self.percentile_ci()
        lines = [
            "BOOTSTRAP OF THE INDIRECT EFFECT",
            "",
            f"Replicates: {self.n_replicates} (failed: {self.n_failed}), seed {self.seed}",
            "",
            f"{'':6}{'original':>12}{'bias':>12}{'std. error':>14}",
            f"{'a*b':6}{format_number(self.estimate):>12}"
            f"{format_number(self.bias):>12}{format_number(self.se):>14}",
            "",
            f"95% percentile CI: [{format_number(lo)}, {format_number(hi)}]",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"IndirectBootSolution(ab={self.estimate:.4g}, "
            f"n_replicates={self.n_replicates})"
        )


@dataclass
class ProductSimSolution:
    """Simulated distribution of a_hat * b_hat."""
    _result: Result[ProductSimParams]

    @property
    def products(self) -> ReplicateSet:
        return self._result.params.products

    @property
    def skewness(self) -> float:
        """Sample skewness of the products (0 for a normal distribution)."""
        return self._result.params.skewness

    @property
    def mean(self) -> float:
        return self.products.mean()

    @property
    def std(self) -> float:
        return self.products.std()

    @property
    def seed(self) -> int:
        return self._result.params.seed

    def percentile_ci(self, conf_level: float = 0.95) -> tuple[float, float]:
        return self.products.percentile_ci(conf_level)

    def histogram(
        self,
        n_bins: int,
        lower: float | None = None,
        upper: float | None = None,
    ) -> tuple[HistogramBin, ...]:
        return self.products.histogram(n_bins, lower, upper)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        return self._result.to_dict()

    def summary(self) -> str:
        p = self._result.params
        lo, hi = self.percentile_ci()
        return "\n".join([
            "PRODUCT-OF-COEFFICIENTS SIMULATION",
            "",
            f"a = {p.a:g} (SE {p.se_a:g}), b = {p.b:g} (SE {p.se_b:g})",
            f"Simulations: {len(self.products)}, seed {self.seed}",
            f"mean = {format_number(self.mean)}, sd = {format_number(self.std)}, "
            f"skewness = {format_number(self.skewness)}",
            f"95% percentile interval: [{format_number(lo)}, {format_number(hi)}]",
        ])

    def __repr__(self) -> str:
        return (
            f"ProductSimSolution(n={len(self.products)}, "
            f"skewness={self.skewness:.4f})"
        )
