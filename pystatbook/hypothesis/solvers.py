"""
Public hypothesis-test entry points.

    welch_t_test(x, y)                  - Welch (or pooled) two-sample t
    sobel_test(a, b, se_a, se_b)        - normal-theory test of a*b
    simple_effect_test(...)             - spotlight test from raw estimates
    spotlight_test(model, x0)           - spotlight test from a moderated fit
    johnson_neyman(...)                 - regions of significance
    marginal_effect_band(...)           - pointwise CI band of b + d*x
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from pystatbook.core.exceptions import ValidationError
from pystatbook.core.validation import check_sample, check_probability
from pystatbook.hypothesis._common import VALID_ALTERNATIVES, MarginalEffectBand
from pystatbook.hypothesis._mediation import sobel
from pystatbook.hypothesis._moderation import (
    simple_effect,
    johnson_neyman_solve,
    marginal_band,
)
from pystatbook.hypothesis._t_test import two_sample_t
from pystatbook.hypothesis.solution import HTestSolution, JohnsonNeymanSolution

if TYPE_CHECKING:
    from pystatbook.regression.solution import RegressionSolution


def _check_df(df: float) -> float:
    df = float(df)
    if not df > 0:
        raise ValidationError(f"df: must be positive, got {df}")
    return df


def welch_t_test(
    x: ArrayLike,
    y: ArrayLike,
    *,
    var_equal: bool = False,
    conf_level: float = 0.95,
    alternative: str = "two.sided",
) -> HTestSolution:
    """
    Two-sample t-test of mean(x) - mean(y).

    Args:
        x: First sample
        y: Second sample
        var_equal: Pool the variances (Student) instead of Welch's
            unequal-variance df
        conf_level: Confidence level of the interval for the difference
        alternative: 'two.sided', 'less' or 'greater'

    Returns:
        HTestSolution. With fewer than two values in a group the statistic
        is nan and is_defined is False.
    """
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    conf_level = check_probability(conf_level, "conf_level")
    x_arr = check_sample(x, "x")
    y_arr = check_sample(y, "y")
    return HTestSolution(_result=two_sample_t(x_arr, y_arr, var_equal, conf_level, alternative))


def sobel_test(
    a: float,
    b: float,
    se_a: float,
    se_b: float,
    *,
    conf_level: float = 0.95,
) -> HTestSolution:
    """
    Sobel z test of the indirect effect a*b.

    Args:
        a: X -> M path coefficient
        b: M -> Y path coefficient (controlling for X)
        se_a: Standard error of a
        se_b: Standard error of b
    """
    if se_a < 0 or se_b < 0:
        raise ValidationError(f"standard errors must be non-negative, got {se_a}, {se_b}")
    conf_level = check_probability(conf_level, "conf_level")
    return HTestSolution(_result=sobel(float(a), float(b), float(se_a), float(se_b), conf_level))


def simple_effect_test(
    b: float,
    d: float,
    var_b: float,
    var_d: float,
    cov_bd: float,
    x0: float,
    df: float,
    *,
    conf_level: float = 0.95,
) -> HTestSolution:
    """
    t-test of the simple effect b + d*x0 of the focal predictor.

    Args:
        b: Coefficient of the focal predictor Z
        d: Coefficient of the Z:X interaction
        var_b: Var(b), from the coefficient covariance matrix
        var_d: Var(d)
        cov_bd: Cov(b, d)
        x0: Moderator value
        df: Residual df of the moderated model
    """
    df = _check_df(df)
    conf_level = check_probability(conf_level, "conf_level")
    result = simple_effect(
        float(b), float(d), float(var_b), float(var_d), float(cov_bd),
        float(x0), df, conf_level,
    )
    return HTestSolution(_result=result)


def _moderation_inputs(model: 'RegressionSolution') -> tuple[float, ...]:
    if 'z' not in model.term_names or 'z:x' not in model.term_names:
        raise ValidationError(
            f"model must be a moderated fit with terms 'z' and 'z:x', "
            f"got {model.term_names}"
        )
    return (
        model.coef('z'),
        model.coef('z:x'),
        model.covariance('z', 'z'),
        model.covariance('z:x', 'z:x'),
        model.covariance('z', 'z:x'),
        float(model.df_residual),
    )


def spotlight_test(
    model: 'RegressionSolution',
    x0: float,
    *,
    conf_level: float = 0.95,
) -> HTestSolution:
    """
    Spotlight test at moderator value x0, reading b, d and their
    covariances from a fit_moderated() solution.
    """
    b, d, var_b, var_d, cov_bd, df = _moderation_inputs(model)
    return simple_effect_test(b, d, var_b, var_d, cov_bd, x0, df, conf_level=conf_level)


def johnson_neyman(
    b: float,
    d: float,
    var_b: float,
    var_d: float,
    cov_bd: float,
    df: float,
    alpha: float = 0.05,
) -> JohnsonNeymanSolution:
    """
    Johnson-Neyman regions of significance for the simple effect b + d*x.

    Returns:
        JohnsonNeymanSolution with 0, 1 or 2 boundaries, the ordered
        regions between them and, per boundary, the significant side.
        At each boundary the simple-effect test has p == alpha.
    """
    df = _check_df(df)
    alpha = check_probability(alpha, "alpha")
    result = johnson_neyman_solve(
        float(b), float(d), float(var_b), float(var_d), float(cov_bd), df, alpha,
    )
    return JohnsonNeymanSolution(_result=result)


def johnson_neyman_from_model(
    model: 'RegressionSolution',
    alpha: float = 0.05,
) -> JohnsonNeymanSolution:
    """Johnson-Neyman analysis of a fit_moderated() solution."""
    b, d, var_b, var_d, cov_bd, df = _moderation_inputs(model)
    return johnson_neyman(b, d, var_b, var_d, cov_bd, df, alpha)


def marginal_effect_band(
    b: float,
    d: float,
    var_b: float,
    var_d: float,
    cov_bd: float,
    df: float,
    alpha: float,
    x_values: ArrayLike,
) -> MarginalEffectBand:
    """
    Simple effect b + d*x and its (1 - alpha) pointwise CI at each x.

    The band excludes zero exactly on the Johnson-Neyman significant
    regions.
    """
    df = _check_df(df)
    alpha = check_probability(alpha, "alpha")
    x_arr = check_sample(x_values, "x_values")
    return marginal_band(
        float(b), float(d), float(var_b), float(var_d), float(cov_bd), df, alpha, x_arr,
    )
