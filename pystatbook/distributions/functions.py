"""
Density, distribution and critical-value functions.

Thin guards around scipy.stats so the lesson pages can call these with any
slider value:
    - scalar in, float out; array in, ndarray out
    - out-of-support x gives 0 density and the boundary probability
    - df <= 0 or NaN gives nan
    - nothing raises for finite df >= 1

f_pdf is the one place where the value is altered: at x = 0 with
df1 < 2 the density diverges, so it is evaluated at F_PDF_MIN_X instead.
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import ArrayLike
from scipy import stats as sp_stats

from pystatbook.core.compute.tolerances import F_PDF_MIN_X
from pystatbook.core.exceptions import ValidationError

Alternative = Literal['two.sided', 'less', 'greater']

_ALTERNATIVES = ('two.sided', 'less', 'greater')


def _out(values: np.ndarray, *inputs: ArrayLike):
    """Return a float when every input was scalar, else the array."""
    if all(np.ndim(v) == 0 for v in inputs):
        return float(values)
    return values


def _bad_df(*dfs: ArrayLike) -> np.ndarray:
    mask = np.zeros(np.broadcast(*dfs).shape, dtype=bool)
    for df in dfs:
        df = np.asarray(df, dtype=np.float64)
        mask = mask | np.isnan(df) | (df <= 0)
    return mask


def _check_alternative(alternative: str) -> None:
    if alternative not in _ALTERNATIVES:
        raise ValidationError(
            f"alternative: must be one of {_ALTERNATIVES}, got {alternative!r}"
        )


# ---------------------------------------------------------------------------
# Normal
# ---------------------------------------------------------------------------

def normal_pdf(x: ArrayLike, mean: float = 0.0, sd: float = 1.0):
    """exp(-(x-mean)²/2sd²) / (sd√(2π)); nan when sd <= 0."""
    with np.errstate(invalid='ignore'):
        values = np.where(
            np.asarray(sd) > 0,
            sp_stats.norm.pdf(x, loc=mean, scale=np.where(np.asarray(sd) > 0, sd, 1.0)),
            np.nan,
        )
    return _out(values, x, mean, sd)


def normal_cdf(x: ArrayLike, mean: float = 0.0, sd: float = 1.0):
    with np.errstate(invalid='ignore'):
        values = np.where(
            np.asarray(sd) > 0,
            sp_stats.norm.cdf(x, loc=mean, scale=np.where(np.asarray(sd) > 0, sd, 1.0)),
            np.nan,
        )
    return _out(values, x, mean, sd)


def normal_quantile(p: ArrayLike, mean: float = 0.0, sd: float = 1.0):
    """Inverse normal CDF; p = 0 and p = 1 map to -inf and +inf."""
    values = np.asarray(sp_stats.norm.ppf(p, loc=mean, scale=sd), dtype=np.float64)
    return _out(values, p, mean, sd)


def standard_error(sd: float, n: int) -> float:
    """sd / √n, the standard error of a mean; nan for n < 1."""
    if n < 1:
        return float('nan')
    return float(sd / np.sqrt(n))


def sampling_distribution_pdf(mean: float, sd: float, n: int, x: ArrayLike):
    """
    Density of the sampling distribution of the mean, N(mean, sd/√n), at x.
    """
    return normal_pdf(x, mean, standard_error(sd, n))


# ---------------------------------------------------------------------------
# Student's t
# ---------------------------------------------------------------------------

def t_pdf(x: ArrayLike, df: ArrayLike):
    bad = _bad_df(df)
    values = np.where(bad, np.nan, sp_stats.t.pdf(x, np.where(bad, 1.0, df)))
    return _out(values, x, df)


def t_cdf(x: ArrayLike, df: ArrayLike):
    bad = _bad_df(df)
    values = np.where(bad, np.nan, sp_stats.t.cdf(x, np.where(bad, 1.0, df)))
    return _out(values, x, df)


def t_p_value(t: ArrayLike, df: ArrayLike, alternative: Alternative = 'two.sided'):
    """
    P-value of a t statistic.

    Args:
        t: Observed statistic(s)
        df: Degrees of freedom (non-integer allowed)
        alternative: 'two.sided', 'less' or 'greater'
    """
    _check_alternative(alternative)
    bad = _bad_df(df) | np.isnan(np.asarray(t, dtype=np.float64))
    safe_df = np.where(bad, 1.0, df)
    safe_t = np.where(bad, 0.0, t)

    if alternative == 'two.sided':
        values = np.minimum(1.0, 2.0 * sp_stats.t.sf(np.abs(safe_t), safe_df))
    elif alternative == 'less':
        values = sp_stats.t.cdf(safe_t, safe_df)
    else:
        values = sp_stats.t.sf(safe_t, safe_df)
    return _out(np.where(bad, np.nan, values), t, df)


def t_critical(alpha: float, df: ArrayLike, tails: int = 2):
    """Upper critical value t such that P(T > t) = alpha / tails."""
    if tails not in (1, 2):
        raise ValidationError(f"tails: must be 1 or 2, got {tails}")
    bad = _bad_df(df)
    values = np.where(bad, np.nan, sp_stats.t.isf(alpha / tails, np.where(bad, 1.0, df)))
    return _out(values, df)


# ---------------------------------------------------------------------------
# F
# ---------------------------------------------------------------------------

def f_pdf(x: ArrayLike, df1: ArrayLike, df2: ArrayLike):
    """
    F density; 0 for x < 0.

    At x = 0 with df1 < 2 the true density is infinite; it is evaluated at
    F_PDF_MIN_X so callers get a large finite number.
    """
    x_arr = np.asarray(x, dtype=np.float64)
    df1_arr = np.asarray(df1, dtype=np.float64)
    bad = _bad_df(df1, df2)
    safe_df1 = np.where(bad, 1.0, df1_arr)
    safe_df2 = np.where(bad, 1.0, df2)

    x_eval = np.where((x_arr == 0) & (safe_df1 < 2), F_PDF_MIN_X, x_arr)
    density = np.where(x_eval < 0, 0.0, sp_stats.f.pdf(np.maximum(x_eval, 0.0), safe_df1, safe_df2))
    return _out(np.where(bad, np.nan, density), x, df1, df2)


def f_cdf(x: ArrayLike, df1: ArrayLike, df2: ArrayLike):
    """F distribution function; 0 for x <= 0."""
    bad = _bad_df(df1, df2)
    values = sp_stats.f.cdf(
        np.maximum(np.asarray(x, dtype=np.float64), 0.0),
        np.where(bad, 1.0, df1),
        np.where(bad, 1.0, df2),
    )
    return _out(np.where(bad, np.nan, values), x, df1, df2)


def f_p_value(f: ArrayLike, df1: ArrayLike, df2: ArrayLike):
    """Upper-tail probability P(F > f)."""
    f_arr = np.asarray(f, dtype=np.float64)
    bad = _bad_df(df1, df2) | np.isnan(f_arr)
    values = sp_stats.f.sf(
        np.maximum(np.where(bad, 0.0, f_arr), 0.0),
        np.where(bad, 1.0, df1),
        np.where(bad, 1.0, df2),
    )
    return _out(np.where(bad, np.nan, values), f, df1, df2)


def f_critical(alpha: float, df1: ArrayLike, df2: ArrayLike):
    """Critical value c with P(F > c) = alpha."""
    bad = _bad_df(df1, df2)
    values = sp_stats.f.isf(alpha, np.where(bad, 1.0, df1), np.where(bad, 1.0, df2))
    return _out(np.where(bad, np.nan, values), df1, df2)
