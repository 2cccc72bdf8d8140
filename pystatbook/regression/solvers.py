"""
Public regression entry points.

Each fit builds an explicit design matrix (intercept first) and hands it
to the shared QR least-squares path, so all variants share one numerical
behavior, including the SingularMatrixError raised for degenerate designs.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatbook.core.validation import check_sample, check_consistent_length
from pystatbook.regression._ols import fit_design
from pystatbook.regression.solution import RegressionSolution


def _columns(names: tuple[str, ...], *arrays: ArrayLike) -> list[NDArray]:
    converted = [check_sample(a, n) for a, n in zip(arrays, names)]
    check_consistent_length(*converted, names=names)
    return converted


def fit_simple(y: ArrayLike, x: ArrayLike) -> RegressionSolution:
    """
    Fit y ~ x.

    Returns:
        RegressionSolution with terms ('(Intercept)', 'x'), df = n - 2

    Raises:
        ValidationError: If n <= 2
        SingularMatrixError: If x is constant
    """
    y_arr, x_arr = _columns(('y', 'x'), y, x)
    X = np.column_stack([np.ones_like(x_arr), x_arr])
    result = fit_design(X, y_arr, ('(Intercept)', 'x'), 'simple')
    return RegressionSolution(_result=result)


def fit_two_predictor(y: ArrayLike, x1: ArrayLike, x2: ArrayLike) -> RegressionSolution:
    """
    Fit y ~ x1 + x2.

    Returns:
        RegressionSolution with terms ('(Intercept)', 'x1', 'x2'), df = n - 3
    """
    y_arr, x1_arr, x2_arr = _columns(('y', 'x1', 'x2'), y, x1, x2)
    X = np.column_stack([np.ones_like(x1_arr), x1_arr, x2_arr])
    result = fit_design(X, y_arr, ('(Intercept)', 'x1', 'x2'), 'two_predictor')
    return RegressionSolution(_result=result)


def fit_moderated(y: ArrayLike, z: ArrayLike, x: ArrayLike) -> RegressionSolution:
    """
    Fit the interaction model y ~ z + x + z:x.

    Coefficient order is (intercept, z, x, z:x), i.e. (a, b, c, d) in
    Y = a + bZ + cX + dZX. The simple effect of Z at X = x0 is b + d*x0;
    its variance needs vcov['z', 'z'], vcov['z:x', 'z:x'] and
    vcov['z', 'z:x'], all available on the returned solution.

    Returns:
        RegressionSolution with terms ('(Intercept)', 'z', 'x', 'z:x'),
        df = n - 4 and the full 4x4 vcov

    Raises:
        ValidationError: If n <= 4
        SingularMatrixError: If the moderator (or x) has no variance or the
            design is otherwise ill-conditioned
    """
    y_arr, z_arr, x_arr = _columns(('y', 'z', 'x'), y, z, x)
    X = np.column_stack([np.ones_like(z_arr), z_arr, x_arr, z_arr * x_arr])
    result = fit_design(X, y_arr, ('(Intercept)', 'z', 'x', 'z:x'), 'moderated')
    return RegressionSolution(_result=result)


def residualize(y: ArrayLike, covariate: ArrayLike) -> NDArray:
    """Residuals of y ~ covariate (y with the linear covariate part removed)."""
    return fit_simple(y, covariate).residuals
