"""
Common data types for ANOVA and planned contrasts.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container.
"""

from dataclasses import dataclass
from typing import Any, NamedTuple

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of an ANOVA table (one term or residuals)."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float
    f_value: float | None    # None for Residuals / Subjects rows
    p_value: float | None


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way between-subjects ANOVA.

    ss_total, ss_between and ss_within are each summed from their
    definitions, so ss_total == ss_between + ss_within is a real check.
    """
    table: tuple[AnovaTableRow, ...]
    n_obs: int
    n_groups: int
    group_means: NDArray[np.floating[Any]]
    group_ns: NDArray[np.intp]
    grand_mean: float
    ss_total: float
    eta_squared: float
    omega_squared: float


@dataclass(frozen=True)
class AnovaRMParams:
    """
    Parameter payload for one-factor repeated-measures ANOVA.

    Decomposition without replication:
        SS_total = SS_conditions + SS_subjects + SS_residual
    with the subject x condition interaction as the error term.
    """
    table: tuple[AnovaTableRow, ...]
    n_subjects: int
    n_conditions: int
    condition_means: NDArray[np.floating[Any]]
    subject_means: NDArray[np.floating[Any]]
    grand_mean: float
    ss_total: float
    partial_eta_squared: float


@dataclass(frozen=True)
class FactorialParams:
    """
    Parameter payload for two-way between-subjects ANOVA.

    cell_means has shape (a, b); row i is level i of the first factor.
    interaction_effects holds mean_jk - mean_A_j - mean_B_k + grand per cell.
    """
    table: tuple[AnovaTableRow, ...]
    factor_names: tuple[str, str]
    n_obs: int
    n_levels: tuple[int, int]
    cell_means: NDArray[np.floating[Any]]
    cell_ns: NDArray[np.intp]
    marginal_means_a: NDArray[np.floating[Any]]
    marginal_means_b: NDArray[np.floating[Any]]
    interaction_effects: NDArray[np.floating[Any]]
    grand_mean: float
    ss_total: float
    partial_eta_squared: dict[str, float]
    balanced: bool


@dataclass(frozen=True)
class AnovaMixedParams:
    """
    Parameter payload for a mixed (between x within) design.

    The between-subjects factor A is tested against subjects within
    groups (S/A); the within-subjects factor B and A x B are tested
    against B x S/A. error_terms maps each tested term to its error row.
    """
    table: tuple[AnovaTableRow, ...]
    factor_names: tuple[str, str]
    error_terms: dict[str, str]
    n_subjects: int
    n_groups: int
    n_conditions: int
    group_ns: NDArray[np.intp]
    group_means: NDArray[np.floating[Any]]
    condition_means: NDArray[np.floating[Any]]
    cell_means: NDArray[np.floating[Any]]
    subject_means: NDArray[np.floating[Any]]
    grand_mean: float
    ss_total: float
    partial_eta_squared: dict[str, float]


@dataclass(frozen=True)
class AncovaParams:
    """
    Parameter payload for one-way ANCOVA with a single covariate.

    The covariate slope is pooled within groups. adjusted_means are
    mean_j - slope * (covariate_mean_j - grand_mean_x).
    """
    table: tuple[AnovaTableRow, ...]
    n_obs: int
    n_groups: int
    group_ns: NDArray[np.intp]
    raw_means: NDArray[np.floating[Any]]
    covariate_means: NDArray[np.floating[Any]]
    adjusted_means: NDArray[np.floating[Any]]
    pooled_slope: float
    group_slopes: NDArray[np.floating[Any]]
    grand_mean_y: float
    grand_mean_x: float
    ss_total: float
    ss_between: float
    ss_within: float


@dataclass(frozen=True)
class ContrastValidation:
    """Sum of contrast weights and whether it is zero within tolerance."""
    sum: float
    is_valid: bool


class OrthogonalityCheck(NamedTuple):
    """(dot_product, is_orthogonal) for two contrasts."""
    dot_product: float
    is_orthogonal: bool


@dataclass(frozen=True)
class ContrastTest:
    """
    Single-df F test of a planned contrast.

    SS_contrast = psi^2 / sum(c_i^2 / n_i), which is n psi^2 / sum(c_i^2)
    with equal n. F = SS_contrast / MS_within on (1, df_within) df.
    """
    weights: NDArray[np.floating[Any]]
    psi_hat: float
    ss_contrast: float
    ms_contrast: float
    f_value: float
    p_value: float
    df_numerator: int
    df_denominator: int

    @property
    def is_defined(self) -> bool:
        return bool(np.isfinite(self.f_value))

    @property
    def t_value(self) -> float:
        """Signed t = sign(psi) sqrt(F) on df_within df."""
        return float(np.sign(self.psi_hat) * np.sqrt(self.f_value))
