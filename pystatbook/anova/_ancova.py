"""
One-way ANCOVA with one covariate.

The covariate and adjusted-group terms come from model comparisons:

    full        y ~ 1 + group + x
    covariate   SS_within(y) - RSS(full)
    adjusted    RSS(y ~ 1 + x) - RSS(full)

The pooled within-group slope is the x coefficient of the full model, and
each adjusted mean is mean_j - slope * (xbar_j - xbar).
"""

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pystatbook.core.compute.linalg import least_squares
from pystatbook.core.compute.timing import Timer
from pystatbook.core.result import Result
from pystatbook.descriptive import sum_of_squares
from pystatbook.anova._common import AncovaParams, AnovaTableRow


def _treatment_columns(group_ns: NDArray) -> NDArray:
    labels = np.repeat(np.arange(group_ns.size), group_ns)
    return np.column_stack([
        (labels == j).astype(np.float64) for j in range(1, group_ns.size)
    ])


def ancova_fit(ys: list[NDArray], xs: list[NDArray]) -> Result[AncovaParams]:
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    a = len(ys)
    group_ns = np.array([g.size for g in ys], dtype=np.intp)
    y = np.concatenate(ys)
    x = np.concatenate(xs)
    n = y.size

    raw_means = np.array([g.mean() for g in ys])
    covariate_means = np.array([g.mean() for g in xs])
    grand_y = float(y.mean())
    grand_x = float(x.mean())

    sums = sum_of_squares(ys)

    with timer.section('model_comparisons'):
        intercept = np.ones((n, 1))
        full = least_squares(
            np.hstack([intercept, _treatment_columns(group_ns), x[:, None]]),
            y,
            matrix_name='group and covariate design',
        )
        covariate_only = least_squares(
            np.hstack([intercept, x[:, None]]), y, matrix_name='covariate design'
        )

    slope = float(full.coefficients[-1])
    adjusted_means = raw_means - slope * (covariate_means - grand_x)

    ss_residual = full.rss
    ss_covariate = max(sums.ss_within - ss_residual, 0.0)
    ss_adjusted = max(covariate_only.rss - ss_residual, 0.0)

    group_slopes = np.array([
        np.sum((gx - gx.mean()) * (gy - gy.mean())) / np.sum((gx - gx.mean()) ** 2)
        if np.ptp(gx) > 0 else np.nan
        for gy, gx in zip(ys, xs)
    ])
    if np.any(np.isnan(group_slopes)):
        warnings_list.append(
            "Covariate is constant within a group; that group's slope is undefined"
        )

    df_groups = a - 1
    df_residual = n - a - 1
    ms_residual = ss_residual / df_residual
    ms_covariate = ss_covariate
    ms_adjusted = ss_adjusted / df_groups

    if ms_residual > 0:
        f_cov = ms_covariate / ms_residual
        p_cov = float(sp_stats.f.sf(f_cov, 1, df_residual))
        f_adj = ms_adjusted / ms_residual
        p_adj = float(sp_stats.f.sf(f_adj, df_groups, df_residual))
    else:
        f_cov = p_cov = f_adj = p_adj = float('nan')
        warnings_list.append("Zero residual variance after adjustment; F is undefined")

    timer.stop()

    table = (
        AnovaTableRow('Covariate', 1, ss_covariate, ms_covariate, float(f_cov), p_cov),
        AnovaTableRow('Adjusted groups', df_groups, ss_adjusted, ms_adjusted,
                      float(f_adj), p_adj),
        AnovaTableRow('Residuals', df_residual, ss_residual, ms_residual, None, None),
    )

    params = AncovaParams(
        table=table,
        n_obs=n,
        n_groups=a,
        group_ns=group_ns,
        raw_means=raw_means,
        covariate_means=covariate_means,
        adjusted_means=adjusted_means,
        pooled_slope=slope,
        group_slopes=group_slopes,
        grand_mean_y=grand_y,
        grand_mean_x=grand_x,
        ss_total=sums.ss_total,
        ss_between=sums.ss_between,
        ss_within=sums.ss_within,
    )

    return Result(
        params=params,
        info={'design': 'ancova', 'n_covariates': 1},
        timing=timer.result(),
        method='ancova',
        warnings=tuple(warnings_list),
    )
