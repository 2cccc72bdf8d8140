"""
Regression solution type.

Wraps Result[RegressionParams] with accessors, per-term lookups and an
R-style coefficient table.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pystatbook.core.exceptions import ValidationError
from pystatbook.core.formatting import significance_stars, format_pvalue, SIGNIF_LEGEND
from pystatbook.core.result import Result
from pystatbook.regression._common import RegressionParams


@dataclass
class RegressionSolution:
    """
    User-facing OLS results.

    Produced by fit_simple(), fit_two_predictor() and fit_moderated().
    """
    _result: Result[RegressionParams]

    @property
    def term_names(self) -> tuple[str, ...]:
        return self._result.params.term_names

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        return self._result.params.standard_errors

    @property
    def t_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.t_values

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.p_values

    @property
    def vcov(self) -> NDArray[np.floating[Any]]:
        """Coefficient covariance matrix sigma^2 (X'X)^-1."""
        return self._result.params.vcov

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def residual_std_error(self) -> float:
        return self._result.params.residual_std_error

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def condition_number(self) -> float:
        return self._result.params.condition_number

    @property
    def is_defined(self) -> bool:
        """True when every coefficient has a finite t statistic."""
        return bool(np.all(np.isfinite(self.t_values)))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def _index(self, term: str) -> int:
        try:
            return self.term_names.index(term)
        except ValueError:
            raise ValidationError(
                f"Unknown term {term!r}; model terms are {self.term_names}"
            ) from None

    def coef(self, term: str) -> float:
        """Coefficient of a named term, e.g. sol.coef('z:x')."""
        return float(self.coefficients[self._index(term)])

    def se(self, term: str) -> float:
        return float(self.standard_errors[self._index(term)])

    def covariance(self, term1: str, term2: str) -> float:
        """Entry of vcov for two named terms."""
        return float(self.vcov[self._index(term1), self._index(term2)])

    def to_dict(self) -> dict[str, Any]:
        return self._result.to_dict()

    def summary(self) -> str:
        """Generate R-style regression summary."""
        lines = [
            f"Linear Regression ({self.info.get('model', 'ols')})",
            "=" * 72,
            f"Observations: {self.n_obs}",
            "",
            "Coefficients:",
            f"{'':<14} {'Estimate':>12} {'Std. Error':>12} {'t value':>10} {'Pr(>|t|)':>12}",
            "-" * 72,
        ]
        for i, term in enumerate(self.term_names):
            p = self.p_values[i]
            lines.append(
                f"{term:<14} {self.coefficients[i]:>12.6f} "
                f"{self.standard_errors[i]:>12.6f} {self.t_values[i]:>10.3f} "
                f"{format_pvalue(p):>12} {significance_stars(p)}"
            )
        lines.append("-" * 72)
        lines.append(SIGNIF_LEGEND)
        lines.append("")
        lines.append(
            f"Residual standard error: {self.residual_std_error:.4f} "
            f"on {self.df_residual} degrees of freedom"
        )
        lines.append(f"Multiple R-squared: {self.r_squared:.4f}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(model={self.info.get('model')!r}, "
            f"n={self.n_obs}, r_squared={self.r_squared:.4f})"
        )
