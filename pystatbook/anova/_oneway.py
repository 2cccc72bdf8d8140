"""
One-way ANOVA from a group set.

df_between = k - 1, df_within = N - k, F = MS_between / MS_within.
Degenerate input (every group a singleton, or zero within-group variance)
gives nan F and p with a warning; a group count below two is a
ValidationError raised by the solver.
"""

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pystatbook.core.compute.timing import Timer
from pystatbook.core.result import Result
from pystatbook.anova._common import AnovaParams, AnovaTableRow
from pystatbook.descriptive import group_statistics, sum_of_squares
from pystatbook.power.effect_sizes import eta_squared, omega_squared


def oneway(groups: list[NDArray]) -> Result[AnovaParams]:
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('sum_of_squares'):
        stats = group_statistics(groups)
        ss = sum_of_squares(groups)

    k = stats.k
    n = stats.total_n
    df_between = k - 1
    df_within = n - k

    ms_between = ss.ss_between / df_between
    if df_within > 0:
        ms_within = ss.ss_within / df_within
    else:
        ms_within = float('nan')
        warnings_list.append(
            f"No within-group degrees of freedom (N={n}, k={k}); F is undefined"
        )

    if df_within > 0 and ms_within > 0:
        f_value = ms_between / ms_within
        p_value = float(sp_stats.f.sf(f_value, df_between, df_within))
    else:
        if df_within > 0:
            warnings_list.append("Zero within-group variance; F is undefined")
        f_value = p_value = float('nan')

    timer.stop()

    table = (
        AnovaTableRow(
            term='Between',
            df=df_between,
            sum_sq=ss.ss_between,
            mean_sq=ms_between,
            f_value=float(f_value),
            p_value=p_value,
        ),
        AnovaTableRow(
            term='Residuals',
            df=df_within,
            sum_sq=ss.ss_within,
            mean_sq=ms_within,
            f_value=None,
            p_value=None,
        ),
    )

    params = AnovaParams(
        table=table,
        n_obs=n,
        n_groups=k,
        group_means=stats.means,
        group_ns=stats.ns,
        grand_mean=stats.grand_mean,
        ss_total=ss.ss_total,
        eta_squared=eta_squared(ss.ss_between, ss.ss_total),
        omega_squared=omega_squared(ss.ss_between, df_between, ms_within, ss.ss_total),
    )

    return Result(
        params=params,
        info={'design': 'oneway', 'balanced': bool(np.all(stats.ns == stats.ns[0]))},
        timing=timer.result(),
        method='anova_oneway',
        warnings=tuple(warnings_list),
    )
