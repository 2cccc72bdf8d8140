"""
Mixed (split-plot) ANOVA: one between-subjects factor A with a levels and
one within-subjects factor B with b levels.

Each group is an (n_j x b) matrix of subjects by conditions. With N
subjects in total, every term is summed from its definition:

    SS_A     = b sum_j n_j (mean_j - grand)^2
    SS_S/A   = b sum_i (mean_i - mean_j(i))^2
    SS_B     = N sum_k (mean_k - grand)^2
    SS_AB    = sum_j n_j sum_k (mean_jk - mean_j - mean_k + grand)^2
    SS_B:S/A = sum_ik (y_ik - mean_j(i)k - mean_i + mean_j(i))^2

The five terms add up to SS_total for any group sizes. A is tested against
S/A on (a - 1, N - a) df; B and A x B are tested against B:S/A on
(b - 1, (N - a)(b - 1)) and ((a - 1)(b - 1), (N - a)(b - 1)) df.
"""

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pystatbook.core.compute.timing import Timer
from pystatbook.core.result import Result
from pystatbook.anova._common import AnovaMixedParams, AnovaTableRow


def _f_test(ms: float, ms_error: float, df: int, df_error: int) -> tuple[float, float]:
    if df_error > 0 and ms_error > 0:
        f_value = ms / ms_error
        return float(f_value), float(sp_stats.f.sf(f_value, df, df_error))
    return float('nan'), float('nan')


def mixed_design(
    groups: list[NDArray],
    factor_names: tuple[str, str],
) -> Result[AnovaMixedParams]:
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    name_a, name_b = factor_names
    subjects_term = f"S/{name_a}"
    residual_term = f"{name_b}:S/{name_a}"
    interaction_term = f"{name_a}:{name_b}"

    a = len(groups)
    b = groups[0].shape[1]
    group_ns = np.array([g.shape[0] for g in groups], dtype=np.intp)
    data = np.vstack(groups)
    labels = np.repeat(np.arange(a), group_ns)
    n_subjects = data.shape[0]

    grand = float(data.mean())
    group_means = np.array([g.mean() for g in groups])
    condition_means = data.mean(axis=0)
    cell_means = np.array([g.mean(axis=0) for g in groups])
    subject_means = data.mean(axis=1)

    ss_total = float(np.sum((data - grand) ** 2))
    ss_a = float(b * np.sum(group_ns * (group_means - grand) ** 2))
    ss_sa = float(b * np.sum((subject_means - group_means[labels]) ** 2))
    ss_b = float(n_subjects * np.sum((condition_means - grand) ** 2))
    effects_ab = cell_means - group_means[:, None] - condition_means[None, :] + grand
    ss_ab = float(np.sum(group_ns[:, None] * effects_ab ** 2))
    residual = (data - cell_means[labels] - subject_means[:, None]
                + group_means[labels][:, None])
    ss_res = float(np.sum(residual ** 2))

    df_a = a - 1
    df_sa = n_subjects - a
    df_b = b - 1
    df_ab = df_a * df_b
    df_res = df_sa * df_b

    ms_a = ss_a / df_a
    ms_b = ss_b / df_b
    ms_ab = ss_ab / df_ab
    ms_sa = ss_sa / df_sa if df_sa > 0 else float('nan')
    ms_res = ss_res / df_res if df_res > 0 else float('nan')

    if df_sa == 0:
        warnings_list.append(
            f"One subject per group (N={n_subjects}, groups={a}); no F tests are defined"
        )
    else:
        if ms_sa == 0:
            warnings_list.append(
                f"Zero variance of subjects within groups; F for {name_a} is undefined"
            )
        if ms_res == 0:
            warnings_list.append(
                f"Zero residual ({residual_term}) variance; F for {name_b} and "
                f"{interaction_term} is undefined"
            )

    f_a, p_a = _f_test(ms_a, ms_sa, df_a, df_sa)
    f_b, p_b = _f_test(ms_b, ms_res, df_b, df_res)
    f_ab, p_ab = _f_test(ms_ab, ms_res, df_ab, df_res)

    def partial(ss: float, ss_error: float) -> float:
        denom = ss + ss_error
        return ss / denom if denom > 0 else float('nan')

    timer.stop()

    table = (
        AnovaTableRow(name_a, df_a, ss_a, ms_a, f_a, p_a),
        AnovaTableRow(subjects_term, df_sa, ss_sa, ms_sa, None, None),
        AnovaTableRow(name_b, df_b, ss_b, ms_b, f_b, p_b),
        AnovaTableRow(interaction_term, df_ab, ss_ab, ms_ab, f_ab, p_ab),
        AnovaTableRow(residual_term, df_res, ss_res, ms_res, None, None),
    )

    params = AnovaMixedParams(
        table=table,
        factor_names=(name_a, name_b),
        error_terms={
            name_a: subjects_term,
            name_b: residual_term,
            interaction_term: residual_term,
        },
        n_subjects=n_subjects,
        n_groups=a,
        n_conditions=b,
        group_ns=group_ns,
        group_means=group_means,
        condition_means=condition_means,
        cell_means=cell_means,
        subject_means=subject_means,
        grand_mean=grand,
        ss_total=ss_total,
        partial_eta_squared={
            name_a: partial(ss_a, ss_sa),
            name_b: partial(ss_b, ss_res),
            interaction_term: partial(ss_ab, ss_res),
        },
    )

    return Result(
        params=params,
        info={'design': 'mixed', 'balanced': bool(np.all(group_ns == group_ns[0]))},
        timing=timer.result(),
        method='anova_mixed',
        warnings=tuple(warnings_list),
    )
