"""
User-facing ANOVA solution types.

Each solution wraps a Result[Params] and provides convenient accessors,
formatted summary output (matching R conventions), and the ANOVA table.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pystatbook.core.formatting import significance_stars, SIGNIF_LEGEND
from pystatbook.core.result import Result
from pystatbook.anova._common import (
    AncovaParams,
    AnovaMixedParams,
    AnovaParams,
    AnovaRMParams,
    AnovaTableRow,
    FactorialParams,
)


def _table_lines(table: tuple[AnovaTableRow, ...]) -> list[str]:
    lines = [
        f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>12}",
        "-" * 72,
    ]
    for row in table:
        if row.f_value is not None:
            lines.append(
                f"{row.term:<20} {row.df:>6} {row.sum_sq:>14.4f} "
                f"{row.mean_sq:>14.4f} {row.f_value:>10.4f} "
                f"{row.p_value:>12.4e} {significance_stars(row.p_value)}"
            )
        else:
            lines.append(
                f"{row.term:<20} {row.df:>6} {row.sum_sq:>14.4f} "
                f"{row.mean_sq:>14.4f}"
            )
    lines.append("-" * 72)
    lines.append(SIGNIF_LEGEND)
    return lines


def _row(table: tuple[AnovaTableRow, ...], term: str) -> AnovaTableRow:
    return next(r for r in table if r.term == term)


# =====================================================================
# AnovaSolution  (one-way)
# =====================================================================


@dataclass
class AnovaSolution:
    """
    User-facing result for one-way between-subjects ANOVA.

    Produced by anova_oneway().
    """
    _result: Result[AnovaParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (rows: Between, Residuals)."""
        return self._result.params.table

    @property
    def ss_between(self) -> float:
        return _row(self.table, 'Between').sum_sq

    @property
    def ss_within(self) -> float:
        return _row(self.table, 'Residuals').sum_sq

    @property
    def ss_total(self) -> float:
        return self._result.params.ss_total

    @property
    def df_between(self) -> int:
        return _row(self.table, 'Between').df

    @property
    def df_within(self) -> int:
        return _row(self.table, 'Residuals').df

    @property
    def df_total(self) -> int:
        return self.n_obs - 1

    @property
    def ms_between(self) -> float:
        return _row(self.table, 'Between').mean_sq

    @property
    def ms_within(self) -> float:
        return _row(self.table, 'Residuals').mean_sq

    @property
    def f_value(self) -> float:
        return _row(self.table, 'Between').f_value

    @property
    def p_value(self) -> float:
        return _row(self.table, 'Between').p_value

    @property
    def is_defined(self) -> bool:
        return bool(np.isfinite(self.f_value))

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def n_groups(self) -> int:
        return self._result.params.n_groups

    @property
    def group_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.group_means

    @property
    def group_ns(self) -> NDArray[np.intp]:
        return self._result.params.group_ns

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

    @property
    def omega_squared(self) -> float:
        return self._result.params.omega_squared

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
        """Generate R-style ANOVA summary table."""
        lines = [
            "One-way Analysis of Variance",
            "=" * 72,
            f"Groups: {self.n_groups}   Observations: {self.n_obs}",
            "",
        ]
        lines.extend(_table_lines(self.table))
        lines.append("")
        lines.append(
            f"eta^2 = {self.eta_squared:.4f}, omega^2 = {self.omega_squared:.4f}"
        )
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSolution(k={self.n_groups}, n={self.n_obs}, "
            f"F={self.f_value:.4f}, p={self.p_value:.4g})"
        )


# =====================================================================
# AnovaRMSolution
# =====================================================================


@dataclass
class AnovaRMSolution:
    """
    User-facing result for repeated-measures ANOVA.

    Produced by anova_rm().
    """
    _result: Result[AnovaRMParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (rows: Conditions, Subjects, Residuals)."""
        return self._result.params.table

    @property
    def ss_conditions(self) -> float:
        return _row(self.table, 'Conditions').sum_sq

    @property
    def ss_subjects(self) -> float:
        return _row(self.table, 'Subjects').sum_sq

    @property
    def ss_residual(self) -> float:
        return _row(self.table, 'Residuals').sum_sq

    @property
    def ss_total(self) -> float:
        return self._result.params.ss_total

    @property
    def df_conditions(self) -> int:
        return _row(self.table, 'Conditions').df

    @property
    def df_subjects(self) -> int:
        return _row(self.table, 'Subjects').df

    @property
    def df_residual(self) -> int:
        return _row(self.table, 'Residuals').df

    @property
    def ms_conditions(self) -> float:
        return _row(self.table, 'Conditions').mean_sq

    @property
    def ms_residual(self) -> float:
        return _row(self.table, 'Residuals').mean_sq

    @property
    def f_value(self) -> float:
        return _row(self.table, 'Conditions').f_value

    @property
    def p_value(self) -> float:
        return _row(self.table, 'Conditions').p_value

    @property
    def is_defined(self) -> bool:
        return bool(np.isfinite(self.f_value))

    @property
    def n_subjects(self) -> int:
        return self._result.params.n_subjects

    @property
    def n_conditions(self) -> int:
        return self._result.params.n_conditions

    @property
    def condition_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.condition_means

    @property
    def subject_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.subject_means

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def partial_eta_squared(self) -> float:
        return self._result.params.partial_eta_squared

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
        """Generate repeated-measures ANOVA summary."""
        lines = [
            "Repeated-Measures Analysis of Variance",
            "=" * 72,
            f"Subjects: {self.n_subjects}   Conditions: {self.n_conditions}",
            "",
        ]
        lines.extend(_table_lines(self.table))
        lines.append("")
        lines.append(f"partial eta^2 = {self.partial_eta_squared:.4f}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaRMSolution(subjects={self.n_subjects}, "
            f"conditions={self.n_conditions}, F={self.f_value:.4f})"
        )


# =====================================================================
# AnovaFactorialSolution
# =====================================================================


@dataclass
class AnovaFactorialSolution:
    """
    User-facing result for two-way between-subjects ANOVA.

    Produced by anova_factorial(). Terms are addressed by the factor names
    given there; the interaction term is "A:B".
    """
    _result: Result[FactorialParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (rows: A, B, A:B, Residuals)."""
        return self._result.params.table

    @property
    def factor_names(self) -> tuple[str, str]:
        return self._result.params.factor_names

    @property
    def interaction_term(self) -> str:
        return ":".join(self.factor_names)

    def row(self, term: str) -> AnovaTableRow:
        """Table row for a term name, including 'Residuals'."""
        return _row(self.table, term)

    def f_value(self, term: str) -> float:
        return self.row(term).f_value

    def p_value(self, term: str) -> float:
        return self.row(term).p_value

    @property
    def ss_within(self) -> float:
        return _row(self.table, 'Residuals').sum_sq

    @property
    def ms_within(self) -> float:
        return _row(self.table, 'Residuals').mean_sq

    @property
    def df_within(self) -> int:
        return _row(self.table, 'Residuals').df

    @property
    def ss_total(self) -> float:
        return self._result.params.ss_total

    @property
    def is_defined(self) -> bool:
        return bool(np.isfinite(self.f_value(self.interaction_term)))

    @property
    def balanced(self) -> bool:
        return self._result.params.balanced

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def n_levels(self) -> tuple[int, int]:
        return self._result.params.n_levels

    @property
    def cell_means(self) -> NDArray[np.floating[Any]]:
        """(a x b) cell means; row j is level j of the first factor."""
        return self._result.params.cell_means

    @property
    def cell_ns(self) -> NDArray[np.intp]:
        return self._result.params.cell_ns

    @property
    def marginal_means_a(self) -> NDArray[np.floating[Any]]:
        return self._result.params.marginal_means_a

    @property
    def marginal_means_b(self) -> NDArray[np.floating[Any]]:
        return self._result.params.marginal_means_b

    @property
    def interaction_effects(self) -> NDArray[np.floating[Any]]:
        return self._result.params.interaction_effects

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def partial_eta_squared(self) -> dict[str, float]:
        return self._result.params.partial_eta_squared

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
        """Generate two-way ANOVA summary with cell means."""
        a, b = self.n_levels
        name_a, name_b = self.factor_names
        lines = [
            "Two-way Analysis of Variance (Type III SS)",
            "=" * 72,
            f"{name_a}: {a} levels   {name_b}: {b} levels   Observations: {self.n_obs}",
            "",
        ]
        lines.extend(_table_lines(self.table))
        lines.append("")
        lines.append("Cell means:")
        for j in range(a):
            cells = "  ".join(f"{m:>10.4f}" for m in self.cell_means[j])
            lines.append(f"  {name_a}[{j}]  {cells}")
        lines.append("")
        lines.append("partial eta^2: " + ", ".join(
            f"{term} = {eta:.4f}" for term, eta in self.partial_eta_squared.items()
        ))
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        a, b = self.n_levels
        return (
            f"AnovaFactorialSolution({a}x{b}, n={self.n_obs}, "
            f"F_interaction={self.f_value(self.interaction_term):.4f})"
        )


# =====================================================================
# AnovaMixedSolution
# =====================================================================


@dataclass
class AnovaMixedSolution:
    """
    User-facing result for a mixed (between x within) design.

    Produced by anova_mixed().
    """
    _result: Result[AnovaMixedParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (rows: A, S/A, B, A:B, B:S/A)."""
        return self._result.params.table

    @property
    def factor_names(self) -> tuple[str, str]:
        return self._result.params.factor_names

    @property
    def error_terms(self) -> dict[str, str]:
        """Maps each tested term to the row used as its error term."""
        return self._result.params.error_terms

    def row(self, term: str) -> AnovaTableRow:
        return _row(self.table, term)

    def f_value(self, term: str) -> float:
        return self.row(term).f_value

    def p_value(self, term: str) -> float:
        return self.row(term).p_value

    def error_row(self, term: str) -> AnovaTableRow:
        return self.row(self.error_terms[term])

    @property
    def is_defined(self) -> bool:
        return all(np.isfinite(self.f_value(t)) for t in self.error_terms)

    @property
    def ss_total(self) -> float:
        return self._result.params.ss_total

    @property
    def n_subjects(self) -> int:
        return self._result.params.n_subjects

    @property
    def n_groups(self) -> int:
        return self._result.params.n_groups

    @property
    def n_conditions(self) -> int:
        return self._result.params.n_conditions

    @property
    def group_ns(self) -> NDArray[np.intp]:
        return self._result.params.group_ns

    @property
    def group_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.group_means

    @property
    def condition_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.condition_means

    @property
    def cell_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.cell_means

    @property
    def subject_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.subject_means

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def partial_eta_squared(self) -> dict[str, float]:
        return self._result.params.partial_eta_squared

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
        name_a, name_b = self.factor_names
        lines = [
            "Mixed-Design Analysis of Variance",
            "=" * 72,
            f"Between: {name_a} ({self.n_groups} groups)   "
            f"Within: {name_b} ({self.n_conditions} conditions)   "
            f"Subjects: {self.n_subjects}",
            "",
        ]
        lines.extend(_table_lines(self.table))
        lines.append("")
        for term, error in self.error_terms.items():
            lines.append(
                f"{term} tested against {error}, "
                f"partial eta^2 = {self.partial_eta_squared[term]:.4f}"
            )
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaMixedSolution(groups={self.n_groups}, "
            f"conditions={self.n_conditions}, subjects={self.n_subjects})"
        )


# =====================================================================
# AncovaSolution
# =====================================================================


@dataclass
class AncovaSolution:
    """
    User-facing result for one-way ANCOVA.

    Produced by ancova().
    """
    _result: Result[AncovaParams]

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (rows: Covariate, Adjusted groups, Residuals)."""
        return self._result.params.table

    @property
    def f_value(self) -> float:
        """F for group differences after covariate adjustment."""
        return _row(self.table, 'Adjusted groups').f_value

    @property
    def p_value(self) -> float:
        return _row(self.table, 'Adjusted groups').p_value

    @property
    def f_covariate(self) -> float:
        return _row(self.table, 'Covariate').f_value

    @property
    def p_covariate(self) -> float:
        return _row(self.table, 'Covariate').p_value

    @property
    def ss_covariate(self) -> float:
        return _row(self.table, 'Covariate').sum_sq

    @property
    def ss_adjusted(self) -> float:
        return _row(self.table, 'Adjusted groups').sum_sq

    @property
    def ss_residual(self) -> float:
        return _row(self.table, 'Residuals').sum_sq

    @property
    def df_residual(self) -> int:
        return _row(self.table, 'Residuals').df

    @property
    def ms_residual(self) -> float:
        return _row(self.table, 'Residuals').mean_sq

    @property
    def ss_total(self) -> float:
        return self._result.params.ss_total

    @property
    def ss_between(self) -> float:
        """Unadjusted between-groups SS."""
        return self._result.params.ss_between

    @property
    def ss_within(self) -> float:
        """Unadjusted within-groups SS."""
        return self._result.params.ss_within

    @property
    def is_defined(self) -> bool:
        return bool(np.isfinite(self.f_value))

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def n_groups(self) -> int:
        return self._result.params.n_groups

    @property
    def group_ns(self) -> NDArray[np.intp]:
        return self._result.params.group_ns

    @property
    def raw_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.raw_means

    @property
    def covariate_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.covariate_means

    @property
    def adjusted_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.adjusted_means

    @property
    def pooled_slope(self) -> float:
        return self._result.params.pooled_slope

    @property
    def group_slopes(self) -> NDArray[np.floating[Any]]:
        return self._result.params.group_slopes

    @property
    def grand_mean_y(self) -> float:
        return self._result.params.grand_mean_y

    @property
    def grand_mean_x(self) -> float:
        return self._result.params.grand_mean_x

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
        """Generate ANCOVA summary with raw and adjusted means."""
        lines = [
            "Analysis of Covariance",
            "=" * 72,
            f"Groups: {self.n_groups}   Observations: {self.n_obs}   "
            f"Pooled slope: {self.pooled_slope:.4f}",
            "",
        ]
        lines.extend(_table_lines(self.table))
        lines.append("")
        lines.append(f"{'Group':<8} {'n':>5} {'Covariate':>12} {'Raw mean':>12} {'Adjusted':>12}")
        for j in range(self.n_groups):
            lines.append(
                f"{j:<8} {self.group_ns[j]:>5} {self.covariate_means[j]:>12.4f} "
                f"{self.raw_means[j]:>12.4f} {self.adjusted_means[j]:>12.4f}"
            )
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AncovaSolution(k={self.n_groups}, n={self.n_obs}, "
            f"F={self.f_value:.4f}, slope={self.pooled_slope:.4f})"
        )
