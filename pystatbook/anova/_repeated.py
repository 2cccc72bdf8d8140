"""
One-factor repeated-measures ANOVA on a subjects x conditions matrix.

Each term is summed from its definition:

    SS_conditions = n * sum_j (mean_j - grand)^2
    SS_subjects   = k * sum_i (mean_i - grand)^2
    SS_residual   = sum_ij (x_ij - mean_i - mean_j + grand)^2

F = MS_conditions / MS_residual on (k - 1, (k - 1)(n - 1)) df. Subjects are
never tested.
"""

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pystatbook.core.compute.timing import Timer
from pystatbook.core.result import Result
from pystatbook.anova._common import AnovaRMParams, AnovaTableRow


def repeated_measures(data: NDArray) -> Result[AnovaRMParams]:
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    n, k = data.shape
    grand = float(np.mean(data))
    cond_means = data.mean(axis=0)
    subj_means = data.mean(axis=1)

    ss_total = float(np.sum((data - grand) ** 2))
    ss_cond = float(n * np.sum((cond_means - grand) ** 2))
    ss_subj = float(k * np.sum((subj_means - grand) ** 2))
    interaction = data - subj_means[:, None] - cond_means[None, :] + grand
    ss_resid = float(np.sum(interaction ** 2))

    df_cond = k - 1
    df_subj = n - 1
    df_resid = df_cond * df_subj

    ms_cond = ss_cond / df_cond
    ms_subj = ss_subj / df_subj
    ms_resid = ss_resid / df_resid

    if ms_resid > 0:
        f_value = ms_cond / ms_resid
        p_value = float(sp_stats.f.sf(f_value, df_cond, df_resid))
    else:
        warnings_list.append(
            "Residual (subject x condition) variance is zero; F is undefined"
        )
        f_value = p_value = float('nan')

    denom = ss_cond + ss_resid
    partial_eta = ss_cond / denom if denom > 0 else float('nan')

    timer.stop()

    table = (
        AnovaTableRow('Conditions', df_cond, ss_cond, ms_cond, float(f_value), p_value),
        AnovaTableRow('Subjects', df_subj, ss_subj, ms_subj, None, None),
        AnovaTableRow('Residuals', df_resid, ss_resid, ms_resid, None, None),
    )

    params = AnovaRMParams(
        table=table,
        n_subjects=n,
        n_conditions=k,
        condition_means=cond_means,
        subject_means=subj_means,
        grand_mean=grand,
        ss_total=ss_total,
        partial_eta_squared=partial_eta,
    )

    return Result(
        params=params,
        info={'design': 'repeated_measures'},
        timing=timer.result(),
        method='anova_rm',
        warnings=tuple(warnings_list),
    )
