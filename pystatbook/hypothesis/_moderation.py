"""
Conditional (simple) effects in the moderated model Y = a + bZ + cX + dZX.

The effect of Z at X = x0 is theta(x0) = b + d*x0 with

    Var(theta) = Var(b) + x0^2 Var(d) + 2 x0 Cov(b, d)

Johnson-Neyman boundaries are the x where theta(x)^2 = t_crit^2 Var(theta),
i.e. the roots of

    A x^2 + B x + C = 0,
    A = d^2 - t^2 Var(d),  B = 2 (b d - t^2 Cov(b, d)),  C = b^2 - t^2 Var(b)

The effect is significant exactly where A x^2 + B x + C > 0.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pystatbook.core.result import Result
from pystatbook.hypothesis._common import (
    HTestParams,
    JohnsonNeymanBoundary,
    JohnsonNeymanParams,
    MarginalEffectBand,
    SignificanceRegion,
)

# Relative size below which the quadratic coefficient is treated as zero.
_DEGENERATE_REL = 1e-12


def simple_effect(
    b: float,
    d: float,
    var_b: float,
    var_d: float,
    cov_bd: float,
    x0: float,
    df: float,
    conf_level: float,
) -> Result[HTestParams]:
    effect = b + d * x0
    variance = var_b + x0 * x0 * var_d + 2.0 * x0 * cov_bd
    warnings_list = []

    if variance > 0 and df > 0:
        se = math.sqrt(variance)
        t_stat = effect / se
        p_value = float(min(1.0, 2.0 * sp_stats.t.sf(abs(t_stat), df)))
        t_crit = float(sp_stats.t.isf((1.0 - conf_level) / 2.0, df))
        conf_int = np.array([effect - t_crit * se, effect + t_crit * se])
    else:
        warnings_list.append(
            f"Variance of the simple effect is {variance:.4g} with df={df}; "
            f"t statistic is undefined"
        )
        se = math.sqrt(variance) if variance >= 0 else float('nan')
        t_stat = p_value = float('nan')
        conf_int = np.array([np.nan, np.nan])

    params = HTestParams(
        statistic=float(t_stat),
        statistic_name="t",
        parameter={"df": float(df)},
        p_value=p_value,
        conf_int=conf_int,
        conf_level=conf_level,
        estimate={"simple effect": float(effect)},
        null_value={"simple effect": 0.0},
        alternative="two.sided",
        method=f"Simple effect (spotlight) test at x = {x0:g}",
        data_name="moderated regression coefficients",
        std_error=float(se),
        extras={"x0": x0, "variance": variance},
    )
    return Result(
        params=params,
        info={"x0": x0},
        timing=None,
        method="spotlight",
        warnings=tuple(warnings_list),
    )


def _quadratic_roots(A: float, B: float, C: float, scale: float) -> list[float]:
    """Real roots of A x^2 + B x + C in ascending order (linear when A ~ 0)."""
    if abs(A) <= _DEGENERATE_REL * scale:
        if B == 0.0:
            return []
        return [-C / B]

    disc = B * B - 4.0 * A * C
    if disc < 0:
        return []
    if disc == 0:
        return [-B / (2.0 * A)]

    # q formulation avoids cancellation when B^2 >> 4AC
    q = -0.5 * (B + math.copysign(math.sqrt(disc), B))
    r1 = q / A
    r2 = C / q if q != 0 else -r1
    return sorted([r1, r2])


def _probe_point(lower: float, upper: float) -> float:
    if math.isinf(lower) and math.isinf(upper):
        return 0.0
    if math.isinf(lower):
        return upper - 1.0
    if math.isinf(upper):
        return lower + 1.0
    return 0.5 * (lower + upper)


def johnson_neyman_solve(
    b: float,
    d: float,
    var_b: float,
    var_d: float,
    cov_bd: float,
    df: float,
    alpha: float,
) -> Result[JohnsonNeymanParams]:
    t_crit = float(sp_stats.t.isf(alpha / 2.0, df))
    t2 = t_crit * t_crit

    A = d * d - t2 * var_d
    B = 2.0 * (b * d - t2 * cov_bd)
    C = b * b - t2 * var_b

    def g(x: float) -> float:
        return (A * x + B) * x + C

    scale = max(d * d, t2 * abs(var_d), np.finfo(float).tiny)
    roots = _quadratic_roots(A, B, C, scale)

    edges = [-math.inf] + roots + [math.inf]
    regions = []
    for lo, hi in zip(edges[:-1], edges[1:]):
        if lo == hi:
            continue
        regions.append(SignificanceRegion(
            lower=lo, upper=hi, significant=bool(g(_probe_point(lo, hi)) > 0),
        ))

    boundaries = []
    for root in roots:
        below = next(r for r in regions if r.upper == root).significant
        above = next(r for r in regions if r.lower == root).significant
        if below and above:
            side = 'both'
        elif below:
            side = 'below'
        elif above:
            side = 'above'
        else:
            side = 'neither'
        boundaries.append(JohnsonNeymanBoundary(value=float(root), significant_side=side))

    warnings_list = []
    if not roots:
        state = "significant" if regions[0].significant else "not significant"
        warnings_list.append(
            f"No Johnson-Neyman boundary: the simple effect is {state} at every x"
        )

    params = JohnsonNeymanParams(
        boundaries=tuple(boundaries),
        regions=tuple(regions),
        quadratic=(A, B, C),
        t_critical=t_crit,
        alpha=alpha,
        df=float(df),
        b=b,
        d=d,
    )
    return Result(
        params=params,
        info={"n_boundaries": len(boundaries)},
        timing=None,
        method="johnson_neyman",
        warnings=tuple(warnings_list),
    )


def marginal_band(
    b: float,
    d: float,
    var_b: float,
    var_d: float,
    cov_bd: float,
    df: float,
    alpha: float,
    x_values: NDArray,
) -> MarginalEffectBand:
    t_crit = float(sp_stats.t.isf(alpha / 2.0, df))
    effect = b + d * x_values
    variance = var_b + x_values ** 2 * var_d + 2.0 * x_values * cov_bd
    se = np.sqrt(np.where(variance >= 0, variance, np.nan))
    return MarginalEffectBand(
        x=x_values,
        effect=effect,
        std_error=se,
        lower=effect - t_crit * se,
        upper=effect + t_crit * se,
        conf_level=1.0 - alpha,
    )
