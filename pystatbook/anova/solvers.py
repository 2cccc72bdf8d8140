"""
ANOVA entry points.

    anova_oneway(groups)          - one-way between-subjects ANOVA
    anova_rm(data)                - one-factor repeated-measures ANOVA
    anova_factorial(cells)        - two-way between-subjects ANOVA
    anova_mixed(groups)           - between x within (split-plot) ANOVA
    ancova(groups, covariates)    - one-way ANCOVA with one covariate
"""

from __future__ import annotations

from typing import Sequence

from numpy.typing import ArrayLike

from pystatbook.core.exceptions import DimensionError, ValidationError
from pystatbook.core.validation import check_array, check_2d, check_finite, check_groups
from pystatbook.anova._ancova import ancova_fit
from pystatbook.anova._factorial import factorial
from pystatbook.anova._mixed import mixed_design
from pystatbook.anova._oneway import oneway
from pystatbook.anova._repeated import repeated_measures
from pystatbook.anova.solution import (
    AncovaSolution,
    AnovaFactorialSolution,
    AnovaMixedSolution,
    AnovaRMSolution,
    AnovaSolution,
)


def anova_oneway(groups: Sequence[ArrayLike]) -> AnovaSolution:
    """
    One-way ANOVA.

    For k = 2 the F statistic equals the squared pooled-variance t.

    Args:
        groups: Sequence of samples, one per group; sizes may differ

    Returns:
        AnovaSolution

    Raises:
        ValidationError: If fewer than two groups are given or a group is
            empty

    Examples:
        >>> sol = anova_oneway([[4, 5, 6], [6, 7, 8], [9, 10, 11]])
        >>> sol.df_between, sol.df_within
        (2, 6)
    """
    arrays = check_groups(groups, "groups", min_groups=2)
    return AnovaSolution(_result=oneway(arrays))


def anova_rm(data: ArrayLike) -> AnovaRMSolution:
    """
    Repeated-measures ANOVA for an (n subjects x k conditions) matrix.

    The residual term is the subject x condition interaction; there is no
    F test for subjects.

    Raises:
        ValidationError: If data is not 2D with at least 2 subjects and
            2 conditions
    """
    arr = check_array(data, "data")
    check_2d(arr, "data")
    check_finite(arr, "data")
    n, k = arr.shape
    if n < 2 or k < 2:
        raise ValidationError(
            f"data: requires at least 2 subjects and 2 conditions, got shape {arr.shape}"
        )
    return AnovaRMSolution(_result=repeated_measures(arr))


def _check_factor_names(factor_names: Sequence[str]) -> tuple[str, str]:
    names = tuple(factor_names)
    if len(names) != 2 or not all(isinstance(s, str) and s for s in names):
        raise ValidationError(
            f"factor_names: expected two non-empty strings, got {factor_names!r}"
        )
    if names[0] == names[1]:
        raise ValidationError(f"factor_names: names must differ, got {names!r}")
    return names


def anova_factorial(
    cells: Sequence[Sequence[ArrayLike]],
    factor_names: Sequence[str] = ('A', 'B'),
) -> AnovaFactorialSolution:
    """
    Two-way between-subjects ANOVA.

    cells[j][k] holds the observations at level j of the first factor and
    level k of the second. An (a x b x n) array is accepted for a balanced
    design. Sums of squares are Type III; with equal cell sizes they are
    the textbook decomposition from marginal and cell means.

    Args:
        cells: Nested sequence of samples, a rows of b cells each
        factor_names: Names for the two factors, used as table terms

    Returns:
        AnovaFactorialSolution

    Raises:
        ValidationError: If either factor has fewer than two levels, a cell
            is empty, or the factor names are not two distinct strings
        DimensionError: If the rows have different numbers of cells

    Examples:
        >>> sol = anova_factorial([[[7, 8], [3, 4]], [[5, 6], [4, 5]]])
        >>> [row.term for row in sol.table]
        ['A', 'B', 'A:B', 'Residuals']
    """
    names = _check_factor_names(factor_names)
    try:
        rows = list(cells)
    except TypeError as e:
        raise ValidationError(f"cells: expected a nested sequence of samples: {e}") from e
    if len(rows) < 2:
        raise ValidationError(
            f"cells: first factor requires at least 2 levels, got {len(rows)}"
        )
    checked = [check_groups(row, f"cells[{j}]", min_groups=2) for j, row in enumerate(rows)]
    widths = {len(row) for row in checked}
    if len(widths) != 1:
        raise DimensionError(
            f"cells: every level of the first factor needs the same number of cells, "
            f"got {[len(row) for row in checked]}"
        )
    return AnovaFactorialSolution(_result=factorial(checked, names))


def anova_mixed(
    groups: Sequence[ArrayLike],
    factor_names: Sequence[str] = ('A', 'B'),
) -> AnovaMixedSolution:
    """
    Mixed-design ANOVA: groups are levels of the between-subjects factor,
    columns are levels of the within-subjects factor.

    Each group is an (n_j subjects x b conditions) matrix; group sizes may
    differ. The between factor is tested against subjects within groups,
    the within factor and the interaction against the within-subjects
    residual.

    Raises:
        ValidationError: If there are fewer than two groups, fewer than two
            conditions, or an empty group
        DimensionError: If the groups have different numbers of conditions
    """
    names = _check_factor_names(factor_names)
    arrays = []
    for j, g in enumerate(groups):
        arr = check_array(g, f"groups[{j}]")
        check_2d(arr, f"groups[{j}]")
        check_finite(arr, f"groups[{j}]")
        if arr.shape[0] == 0:
            raise ValidationError(f"groups[{j}]: group has no subjects")
        arrays.append(arr)
    if len(arrays) < 2:
        raise ValidationError(f"groups: requires at least 2 groups, got {len(arrays)}")
    widths = [arr.shape[1] for arr in arrays]
    if len(set(widths)) != 1:
        raise DimensionError(
            f"groups: every group needs the same number of conditions, got {widths}"
        )
    if widths[0] < 2:
        raise ValidationError(
            f"groups: requires at least 2 conditions, got {widths[0]}"
        )
    return AnovaMixedSolution(_result=mixed_design(arrays, names))


def ancova(
    groups: Sequence[ArrayLike],
    covariates: Sequence[ArrayLike],
) -> AncovaSolution:
    """
    One-way ANCOVA with a single covariate.

    Tests the covariate and the group differences that remain after
    adjusting for it, using a slope pooled within groups.

    Args:
        groups: Outcome samples, one per group
        covariates: Covariate samples aligned with groups

    Returns:
        AncovaSolution

    Raises:
        ValidationError: If fewer than two groups are given, the group and
            covariate counts differ, or there are too few observations to
            leave residual degrees of freedom
        DimensionError: If a covariate sample does not match its group
        SingularMatrixError: If the covariate is constant within every
            group or fully confounded with group membership
    """
    ys = check_groups(groups, "groups", min_groups=2)
    xs = check_groups(covariates, "covariates", min_groups=2)
    if len(xs) != len(ys):
        raise ValidationError(
            f"covariates: expected {len(ys)} groups to match groups, got {len(xs)}"
        )
    for j, (gy, gx) in enumerate(zip(ys, xs)):
        if gy.shape[0] != gx.shape[0]:
            raise DimensionError(
                f"covariates[{j}]: length {gx.shape[0]} does not match "
                f"groups[{j}] length {gy.shape[0]}"
            )
    n = sum(g.shape[0] for g in ys)
    if n <= len(ys) + 1:
        raise ValidationError(
            f"groups: requires more than {len(ys) + 1} observations in total "
            f"for {len(ys)} groups and one covariate, got {n}"
        )
    return AncovaSolution(_result=ancova_fit(ys, xs))
