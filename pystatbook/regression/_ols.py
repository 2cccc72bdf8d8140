"""
Shared OLS path for every regression variant.

Builds sigma^2, the coefficient covariance matrix and per-term inference
from core.compute.linalg.least_squares.
"""

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pystatbook.core.compute.linalg import least_squares
from pystatbook.core.compute.timing import Timer
from pystatbook.core.exceptions import ValidationError
from pystatbook.core.result import Result
from pystatbook.regression._common import RegressionParams


def fit_design(
    X: NDArray,
    y: NDArray,
    term_names: tuple[str, ...],
    model: str,
) -> Result[RegressionParams]:
    """
    Fit y on the columns of X (intercept column included).

    Raises:
        ValidationError: If n <= p
        SingularMatrixError: If X is rank-deficient or ill-conditioned
    """
    n, p = X.shape
    if n <= p:
        raise ValidationError(
            f"{model} regression: need more observations than coefficients, "
            f"got n={n}, p={p}"
        )

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('least_squares'):
        ls = least_squares(X, y, matrix_name=f"{model} design")

    df = n - p
    sigma2 = ls.rss / df
    vcov = sigma2 * ls.xtx_inv
    se = np.sqrt(np.diag(vcov))

    with np.errstate(divide='ignore', invalid='ignore'):
        t_values = ls.coefficients / se
    t_values = np.where(np.isfinite(t_values), t_values, np.nan)
    p_values = np.where(
        np.isnan(t_values), np.nan, 2.0 * sp_stats.t.sf(np.abs(t_values), df)
    )

    tss = float(np.sum((y - y.mean()) ** 2))
    if tss == 0.0:
        r_squared = float('nan')
        warnings_list.append("Response is constant: R-squared is undefined")
    else:
        r_squared = 1.0 - ls.rss / tss
    if ls.rss == 0.0:
        warnings_list.append(
            "Perfect fit: residual variance is zero, t statistics are undefined"
        )

    timer.stop()

    params = RegressionParams(
        term_names=term_names,
        coefficients=ls.coefficients,
        standard_errors=se,
        t_values=t_values,
        p_values=p_values,
        vcov=vcov,
        residuals=ls.residuals,
        fitted_values=ls.fitted_values,
        rss=ls.rss,
        tss=tss,
        r_squared=r_squared,
        residual_std_error=float(np.sqrt(sigma2)),
        df_residual=df,
        n_obs=n,
        condition_number=ls.condition_number,
    )

    return Result(
        params=params,
        info={'model': model, 'n': n, 'p': p},
        timing=timer.result(),
        method='ols_qr',
        warnings=tuple(warnings_list),
    )
