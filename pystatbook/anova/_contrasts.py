"""
Planned (a priori) contrasts among group means.

A contrast is a weight vector c aligned with the groups, valid when
sum(c) == 0 within CONTRAST_SUM_TOL. Its estimate is psi = sum(c_i mean_i).

Two contrasts c and d are orthogonal when sum(c_i d_i) == 0, or with
unequal group sizes sum(c_i d_i / n_i) == 0. Orthogonal contrasts split
SS_between: for k - 1 mutually orthogonal contrasts the SS add up to it.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from pystatbook.core.compute.tolerances import CONTRAST_SUM_TOL, ORTHOGONALITY_TOL
from pystatbook.core.exceptions import ValidationError, DimensionError
from pystatbook.core.validation import check_sample
from pystatbook.anova._common import ContrastValidation, ContrastTest, OrthogonalityCheck


def _aligned(weights: ArrayLike, other: ArrayLike, other_name: str) -> tuple[NDArray, NDArray]:
    w = check_sample(weights, "weights")
    o = check_sample(other, other_name)
    if w.size != o.size:
        raise DimensionError(
            f"weights has {w.size} entries but {other_name} has {o.size}"
        )
    return w, o


def _group_sizes(n: int | Sequence[int], k: int) -> NDArray:
    ns = np.asarray(n, dtype=np.float64)
    if ns.ndim == 0:
        ns = np.full(k, float(ns))
    if ns.shape != (k,):
        raise DimensionError(f"n: expected a scalar or {k} group sizes, got shape {ns.shape}")
    if np.any(ns <= 0):
        raise ValidationError(f"n: group sizes must be positive, got {ns.tolist()}")
    return ns


def compute_contrast(weights: ArrayLike, means: ArrayLike) -> float:
    """psi = sum(weights * means)."""
    w, m = _aligned(weights, means, "means")
    return float(np.dot(w, m))


def validate_contrast_weights(weights: ArrayLike) -> ContrastValidation:
    """
    Report the literal sum of the weights and whether it is (near) zero.

    Examples:
        >>> validate_contrast_weights([1, 1, 1])
        ContrastValidation(sum=3.0, is_valid=False)
    """
    w = check_sample(weights, "weights")
    total = float(np.sum(w))
    return ContrastValidation(sum=total, is_valid=abs(total) <= CONTRAST_SUM_TOL)


def contrast_f_test(
    weights: ArrayLike,
    means: ArrayLike,
    n: int | Sequence[int],
    ms_within: float,
    df_within: int,
) -> ContrastTest:
    """
    F test of a planned contrast using the omnibus error term.

    Args:
        weights: Contrast weights, one per group, summing to zero
        means: Group means
        n: Common group size, or one size per group
        ms_within: MS_within from the one-way ANOVA
        df_within: df_within from the one-way ANOVA

    Returns:
        ContrastTest. With ms_within <= 0 the F statistic is nan.

    Raises:
        ValidationError: If the weights do not sum to zero or are all zero
    """
    w, m = _aligned(weights, means, "means")
    validation = validate_contrast_weights(w)
    if not validation.is_valid:
        raise ValidationError(
            f"weights: contrast weights must sum to zero, got sum={validation.sum:g}"
        )
    if not np.any(w):
        raise ValidationError("weights: at least one contrast weight must be non-zero")
    if df_within < 1:
        raise ValidationError(f"df_within: must be >= 1, got {df_within}")

    ns = _group_sizes(n, w.size)
    psi = float(np.dot(w, m))
    ss = psi * psi / float(np.sum(w * w / ns))

    if ms_within > 0:
        f_value = ss / ms_within
        p_value = float(sp_stats.f.sf(f_value, 1, df_within))
    else:
        f_value = p_value = float('nan')

    return ContrastTest(
        weights=w,
        psi_hat=psi,
        ss_contrast=ss,
        ms_contrast=ss,
        f_value=float(f_value),
        p_value=p_value,
        df_numerator=1,
        df_denominator=int(df_within),
    )


def are_contrasts_orthogonal(
    w1: ArrayLike,
    w2: ArrayLike,
    ns: Sequence[int] | None = None,
) -> OrthogonalityCheck:
    """
    Dot product of two contrasts (divided by n_i when ns is given) and
    whether it is zero within ORTHOGONALITY_TOL.
    """
    a, b = _aligned(w1, w2, "w2")
    products = a * b
    if ns is not None:
        products = products / _group_sizes(ns, a.size)
    dot = float(np.sum(products))
    return OrthogonalityCheck(dot_product=dot, is_orthogonal=abs(dot) <= ORTHOGONALITY_TOL)
