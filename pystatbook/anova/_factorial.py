"""
Two-way between-subjects (factorial) ANOVA.

Sums of squares come from model comparisons on a deviation-coded design,
each term entering last (Type III):

    SS(term) = RSS(full model without term) - RSS(full model)

With equal cell sizes this reproduces the decomposition from marginal and
cell means,

    SS_A  = b n sum_j (mean_A_j - grand)^2
    SS_B  = a n sum_k (mean_B_k - grand)^2
    SS_AB = n sum_jk (mean_jk - mean_A_j - mean_B_k + grand)^2

and SS_A + SS_B + SS_AB + SS_within = SS_total. With unequal cell sizes the
terms are not orthogonal and that identity does not hold.
"""

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pystatbook.core.compute.linalg import least_squares
from pystatbook.core.compute.timing import Timer
from pystatbook.core.result import Result
from pystatbook.anova._common import AnovaTableRow, FactorialParams


def _deviation_coding(labels: NDArray, n_levels: int) -> NDArray:
    """Sum-to-zero columns: level j < L-1 is e_j, the last level is all -1."""
    last = (labels == n_levels - 1).astype(np.float64)
    return np.column_stack([
        (labels == j).astype(np.float64) - last for j in range(n_levels - 1)
    ])


def _interaction_columns(A: NDArray, B: NDArray) -> NDArray:
    return np.column_stack([
        A[:, i] * B[:, j] for i in range(A.shape[1]) for j in range(B.shape[1])
    ])


def factorial(
    cells: list[list[NDArray]],
    factor_names: tuple[str, str],
) -> Result[FactorialParams]:
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    name_a, name_b = factor_names
    a = len(cells)
    b = len(cells[0])
    flat = [(j, k, cells[j][k]) for j in range(a) for k in range(b)]

    y = np.concatenate([v for _, _, v in flat])
    label_a = np.concatenate([np.full(v.size, j) for j, _, v in flat])
    label_b = np.concatenate([np.full(v.size, k) for _, k, v in flat])
    n = y.size

    cell_ns = np.array([[cells[j][k].size for k in range(b)] for j in range(a)], dtype=np.intp)
    cell_means = np.array([[cells[j][k].mean() for k in range(b)] for j in range(a)])
    grand = float(y.mean())
    means_a = np.array([y[label_a == j].mean() for j in range(a)])
    means_b = np.array([y[label_b == k].mean() for k in range(b)])
    effects_ab = cell_means - means_a[:, None] - means_b[None, :] + grand
    balanced = bool(np.all(cell_ns == cell_ns[0, 0]))

    ss_total = float(np.sum((y - grand) ** 2))
    ss_within = float(np.sum((y - cell_means[label_a, label_b]) ** 2))

    interaction_name = f"{name_a}:{name_b}"
    with timer.section('model_comparisons'):
        intercept = np.ones((n, 1))
        A = _deviation_coding(label_a, a)
        B = _deviation_coding(label_b, b)
        terms = {
            name_a: A,
            name_b: B,
            interaction_name: _interaction_columns(A, B),
        }
        rss_full = least_squares(
            np.hstack([intercept, *terms.values()]), y, matrix_name='cell design'
        ).rss
        ss_terms = {}
        for term in terms:
            reduced = np.hstack([intercept] + [c for t, c in terms.items() if t != term])
            rss = least_squares(reduced, y, matrix_name=f'design without {term}').rss
            ss_terms[term] = max(rss - rss_full, 0.0)

    if not balanced:
        warnings_list.append(
            "Unequal cell sizes: Type III sums of squares do not add up to SS_total"
        )

    df_terms = {name_a: a - 1, name_b: b - 1, interaction_name: (a - 1) * (b - 1)}
    df_within = n - a * b
    if df_within > 0:
        ms_within = ss_within / df_within
    else:
        ms_within = float('nan')
        warnings_list.append(
            f"One observation per cell (N={n}, cells={a * b}); F is undefined"
        )
    if df_within > 0 and ms_within == 0:
        warnings_list.append("Zero within-cell variance; F is undefined")
    testable = df_within > 0 and ms_within > 0

    rows = []
    partial_eta = {}
    for term, ss in ss_terms.items():
        df = df_terms[term]
        ms = ss / df
        if testable:
            f_value = ms / ms_within
            p_value = float(sp_stats.f.sf(f_value, df, df_within))
        else:
            f_value = p_value = float('nan')
        rows.append(AnovaTableRow(term, df, ss, ms, float(f_value), p_value))
        denom = ss + ss_within
        partial_eta[term] = ss / denom if denom > 0 else float('nan')
    rows.append(AnovaTableRow('Residuals', df_within, ss_within, ms_within, None, None))

    timer.stop()

    params = FactorialParams(
        table=tuple(rows),
        factor_names=(name_a, name_b),
        n_obs=n,
        n_levels=(a, b),
        cell_means=cell_means,
        cell_ns=cell_ns,
        marginal_means_a=means_a,
        marginal_means_b=means_b,
        interaction_effects=effects_ab,
        grand_mean=grand,
        ss_total=ss_total,
        partial_eta_squared=partial_eta,
        balanced=balanced,
    )

    return Result(
        params=params,
        info={'design': 'factorial', 'ss_type': 'III', 'balanced': balanced},
        timing=timer.result(),
        method='anova_factorial',
        warnings=tuple(warnings_list),
    )
