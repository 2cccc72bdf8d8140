"""
Regression module.

Ordinary least squares for the three model shapes the lessons use, all
sharing one QR-based solver.

Public API:
    fit_simple(y, x)               - y ~ x
    fit_two_predictor(y, x1, x2)   - y ~ x1 + x2
    fit_moderated(y, z, x)         - y ~ z + x + z:x, with full vcov
    residualize(y, covariate)      - residuals of y ~ covariate
"""

from pystatbook.regression._common import RegressionParams
from pystatbook.regression.solution import RegressionSolution
from pystatbook.regression.solvers import (
    fit_simple,
    fit_two_predictor,
    fit_moderated,
    residualize,
)

__all__ = [
    "fit_simple",
    "fit_two_predictor",
    "fit_moderated",
    "residualize",
    "RegressionParams",
    "RegressionSolution",
]
