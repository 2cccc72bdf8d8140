"""
Small-matrix least squares via QR decomposition.

One routine serves every regression variant in the engine (simple,
two-predictor, moderated). Callers build the explicit design matrix,
including the intercept column; this module returns coefficients, the
unscaled covariance (X'X)^-1 and diagnostics.
"""

from dataclasses import dataclass
from typing import Literal, Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pystatbook.core.exceptions import SingularMatrixError
from pystatbook.core.compute.tolerances import CONDITION_THRESHOLD


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p) for reduced mode)
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


@dataclass(frozen=True)
class LeastSquaresResult:
    """
    Least-squares fit of y on the columns of X.

    Attributes:
        coefficients: beta, shape (p,)
        xtx_inv: (X'X)^-1, shape (p, p); multiply by sigma^2 for vcov
        fitted_values: X @ beta
        residuals: y - X @ beta
        rss: residual sum of squares
        condition_number: cond(X), ratio of extreme singular values
    """
    coefficients: NDArray[np.floating[Any]]
    xtx_inv: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    condition_number: float


def qr_cpu(
    X: NDArray[np.floating[Any]],
    mode: Literal['reduced', 'complete'] = 'reduced'
) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    Args:
        X: Matrix to decompose (n x p)
        mode: 'reduced' for economy QR, 'complete' for full QR

    Returns:
        QRResult with Q, R, and numerical rank
    """
    Q, R = np.linalg.qr(X, mode=mode)

    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and np.max(diag_R) > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * np.max(diag_R)
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, rank=rank)


def least_squares(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    *,
    matrix_name: str = 'X',
) -> LeastSquaresResult:
    """
    Solve min ||y - X beta||^2 via QR.

    X = QR, beta = R^-1 Q'y, (X'X)^-1 = R^-1 R^-T.

    Args:
        X: Design matrix (n x p), n > p, intercept column included
        y: Response vector (n,)
        matrix_name: Name used in error messages

    Returns:
        LeastSquaresResult

    Raises:
        SingularMatrixError: If X is rank-deficient or cond(X) exceeds
            CONDITION_THRESHOLD
    """
    n, p = X.shape
    qr_result = qr_cpu(X, mode='reduced')

    if qr_result.rank < p:
        raise SingularMatrixError(
            f"Design matrix is rank-deficient: rank={qr_result.rank}, expected={p}. "
            f"A predictor is constant or perfectly collinear.",
            matrix_name=matrix_name,
            rank=qr_result.rank,
            expected_rank=p,
        )

    R = qr_result.R[:p, :p]
    cond = float(np.linalg.cond(R))
    if not np.isfinite(cond) or cond > CONDITION_THRESHOLD:
        raise SingularMatrixError(
            f"Design matrix is nearly singular: cond({matrix_name})={cond:.3e} "
            f"exceeds {CONDITION_THRESHOLD:.0e}.",
            matrix_name=matrix_name,
            condition_number=cond,
            rank=qr_result.rank,
            expected_rank=p,
        )

    Qty = qr_result.Q.T @ y
    beta = solve_triangular(R, Qty[:p], lower=False)

    R_inv = solve_triangular(R, np.eye(p), lower=False)
    xtx_inv = R_inv @ R_inv.T

    fitted = X @ beta
    residuals = y - fitted

    return LeastSquaresResult(
        coefficients=beta,
        xtx_inv=xtx_inv,
        fitted_values=fitted,
        residuals=residuals,
        rss=float(residuals @ residuals),
        condition_number=cond,
    )
