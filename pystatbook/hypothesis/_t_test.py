"""
Two-sample t-test (Welch and pooled variance).

Welch-Satterthwaite df:
    df = (v1/n1 + v2/n2)^2 / ((v1/n1)^2/(n1-1) + (v2/n2)^2/(n2-1))

A group with fewer than two values, or zero variance in both groups, makes
the statistic undefined: t, df and p are nan and a warning is recorded.
"""

from __future__ import annotations

import numpy as np
from scipy import stats as sp_stats

from pystatbook.core.compute.timing import Timer
from pystatbook.core.result import Result
from pystatbook.hypothesis._common import HTestParams


def _t_pvalue(t_stat: float, df: float, alternative: str) -> float:
    """Compute p-value from t distribution."""
    if np.isnan(t_stat) or np.isnan(df) or df <= 0:
        return np.nan
    if alternative == "two.sided":
        return float(min(1.0, 2.0 * sp_stats.t.sf(abs(t_stat), df)))
    elif alternative == "less":
        return float(sp_stats.t.cdf(t_stat, df))
    else:  # greater
        return float(sp_stats.t.sf(t_stat, df))


def _t_conf_int(
    estimate: float,
    se: float,
    df: float,
    conf_level: float,
    alternative: str,
) -> np.ndarray:
    """Compute confidence interval for the mean difference."""
    alpha = 1.0 - conf_level

    if np.isnan(se) or np.isnan(df) or df <= 0 or se == 0.0:
        return np.array([np.nan, np.nan])

    if alternative == "two.sided":
        t_crit = sp_stats.t.ppf(1.0 - alpha / 2.0, df)
        return np.array([estimate - t_crit * se, estimate + t_crit * se])
    elif alternative == "less":
        t_crit = sp_stats.t.ppf(1.0 - alpha, df)
        return np.array([-np.inf, estimate + t_crit * se])
    else:  # greater
        t_crit = sp_stats.t.ppf(1.0 - alpha, df)
        return np.array([estimate - t_crit * se, np.inf])


def two_sample_t(
    x: np.ndarray,
    y: np.ndarray,
    var_equal: bool,
    conf_level: float,
    alternative: str,
) -> Result[HTestParams]:
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    nx, ny = x.size, y.size
    mx = float(np.mean(x)) if nx else np.nan
    my = float(np.mean(y)) if ny else np.nan
    estimate = mx - my

    if nx < 2 or ny < 2:
        warnings_list.append(
            f"Each group needs at least 2 observations (got {nx} and {ny}); "
            f"t statistic is undefined"
        )
        t_stat = df = se = np.nan
    else:
        vx = float(np.var(x, ddof=1))
        vy = float(np.var(y, ddof=1))
        if var_equal:
            df = float(nx + ny - 2)
            pooled = ((nx - 1) * vx + (ny - 1) * vy) / df
            se = float(np.sqrt(pooled * (1.0 / nx + 1.0 / ny)))
        else:
            sx2 = vx / nx
            sy2 = vy / ny
            se = float(np.sqrt(sx2 + sy2))
            if se > 0:
                df = (sx2 + sy2) ** 2 / (sx2 ** 2 / (nx - 1) + sy2 ** 2 / (ny - 1))
            else:
                df = np.nan
        if se > 0:
            t_stat = estimate / se
        else:
            warnings_list.append("Both groups have zero variance; t statistic is undefined")
            t_stat = np.nan

    p_value = _t_pvalue(t_stat, df, alternative)
    conf_int = _t_conf_int(estimate, se, df, conf_level, alternative)
    timer.stop()

    method = " Two Sample t-test" if var_equal else "Welch Two Sample t-test"
    params = HTestParams(
        statistic=float(t_stat),
        statistic_name="t",
        parameter={"df": float(df)},
        p_value=p_value,
        conf_int=conf_int,
        conf_level=conf_level,
        estimate={"mean of x": mx, "mean of y": my},
        null_value={"difference in means": 0.0},
        alternative=alternative,
        method=method,
        data_name="x and y",
        std_error=float(se),
        extras={"n_x": nx, "n_y": ny},
    )
    return Result(
        params=params,
        info={"var_equal": var_equal},
        timing=timer.result(),
        method="welch_t" if not var_equal else "pooled_t",
        warnings=tuple(warnings_list),
    )
