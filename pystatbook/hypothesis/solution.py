"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides R's print.htest
format. JohnsonNeymanSolution wraps the boundary solver's output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pystatbook.core.formatting import format_pvalue, format_number
from pystatbook.core.result import Result
from pystatbook.hypothesis._common import (
    HTestParams,
    JohnsonNeymanParams,
    JohnsonNeymanBoundary,
    SignificanceRegion,
)


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. Undefined tests (too few observations,
    zero variance) have nan statistic and p_value and is_defined False.
    """
    _result: Result[HTestParams]

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float] | None:
        """Distribution parameters (e.g. {'df': 9})."""
        return self._result.params.parameter

    @property
    def df(self) -> float:
        """Degrees of freedom, nan for z tests."""
        param = self._result.params.parameter
        return param["df"] if param else float('nan')

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def conf_int(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def estimate(self) -> dict[str, float]:
        """Point estimate(s)."""
        return self._result.params.estimate

    @property
    def effect(self) -> float:
        """
        The tested quantity: mean difference, indirect effect a*b, or the
        simple effect b + d*x0.
        """
        est = self._result.params.estimate
        if len(est) == 2:
            first, second = est.values()
            return first - second
        return next(iter(est.values()))

    @property
    def std_error(self) -> float:
        return self._result.params.std_error

    @property
    def null_value(self) -> dict[str, float] | None:
        return self._result.params.null_value

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def extras(self) -> dict[str, Any] | None:
        return self._result.params.extras

    @property
    def is_defined(self) -> bool:
        return bool(np.isfinite(self.statistic))

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
        Format as R's print.htest output.

        Produces output like:
            Welch Two Sample t-test

        data:  x and y
        t = 2.2345, df = 17.43, p-value = 0.03891
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         0.1234567  4.5678901
        sample estimates:
        mean of x mean of y
         5.123456  2.789012
        """
        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]

        parts = [f"{p.statistic_name} = {format_number(p.statistic)}"]
        if p.parameter is not None:
            for name, val in p.parameter.items():
                parts.append(f"{name} = {format_number(val)}")
        parts.append(f"p-value = {format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        if p.null_value:
            nv_name, nv_val = next(iter(p.null_value.items()))
            relation = {
                "two.sided": "is not equal to",
                "less": "is less than",
                "greater": "is greater than",
            }[p.alternative]
            lines.append(f"alternative hypothesis: true {nv_name} {relation} {nv_val:g}")

        if p.conf_int is not None:
            lines.append(f"{int(round(p.conf_level * 100))} percent confidence interval:")
            lo, hi = p.conf_int
            lines.append(f" {format_number(lo)}  {format_number(hi)}")

        lines.append("sample estimates:")
        lines.append(" ".join(f"{n:>16s}" for n in p.estimate))
        lines.append(" ".join(f"{format_number(v):>16s}" for v in p.estimate.values()))

        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )


@dataclass
class JohnsonNeymanSolution:
    """
    Johnson-Neyman boundaries and the significance regions they delimit.

    Regions cover the whole real line in ascending order; boundaries are
    the finite region edges.
    """
    _result: Result[JohnsonNeymanParams]

    @property
    def boundaries(self) -> tuple[float, ...]:
        """Boundary moderator values, ascending (0, 1 or 2 of them)."""
        return tuple(bd.value for bd in self._result.params.boundaries)

    @property
    def boundary_details(self) -> tuple[JohnsonNeymanBoundary, ...]:
        return self._result.params.boundaries

    @property
    def regions(self) -> tuple[SignificanceRegion, ...]:
        return self._result.params.regions

    @property
    def significant_regions(self) -> tuple[SignificanceRegion, ...]:
        return tuple(r for r in self.regions if r.significant)

    @property
    def t_critical(self) -> float:
        return self._result.params.t_critical

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def df(self) -> float:
        return self._result.params.df

    @property
    def quadratic(self) -> tuple[float, float, float]:
        """Coefficients (A, B, C) of the boundary quadratic."""
        return self._result.params.quadratic

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def is_significant_at(self, x: float) -> bool:
        """Whether the simple effect at moderator value x is significant."""
        A, B, C = self.quadratic
        return bool((A * x + B) * x + C > 0)

    def to_dict(self) -> dict[str, Any]:
        return self._result.to_dict()

    def summary(self) -> str:
        lines = [
            "Johnson-Neyman Regions of Significance",
            "=" * 72,
            f"alpha = {self.alpha:g}, df = {self.df:g}, t crit = {self.t_critical:.4f}",
            "",
        ]
        if self.boundary_details:
            lines.append("Boundaries:")
            for bd in self.boundary_details:
                lines.append(f"  x = {bd.value:.4f}  (significant {bd.significant_side})")
            lines.append("")
        lines.append(f"{'From':>14} {'To':>14}  Significant")
        lines.append("-" * 72)
        for r in self.regions:
            lines.append(
                f"{format_number(r.lower):>14} {format_number(r.upper):>14}  "
                f"{'yes' if r.significant else 'no'}"
            )
        for w in self.warnings:
            lines.append(f"Note: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"JohnsonNeymanSolution(boundaries={self.boundaries})"
