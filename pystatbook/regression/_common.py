"""
Parameter payload for the OLS fits.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class RegressionParams:
    """
    Immutable output of an OLS fit.

    vcov is the full sigma^2 (X'X)^-1 matrix in term_names order; spotlight
    tests and Johnson-Neyman boundaries need its off-diagonal entries.
    """
    term_names: tuple[str, ...]
    coefficients: NDArray[np.floating[Any]]
    standard_errors: NDArray[np.floating[Any]]
    t_values: NDArray[np.floating[Any]]
    p_values: NDArray[np.floating[Any]]
    vcov: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    r_squared: float
    residual_std_error: float
    df_residual: int
    n_obs: int
    condition_number: float
