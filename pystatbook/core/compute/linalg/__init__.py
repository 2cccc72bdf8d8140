"""
Linear algebra kernels for pystatbook.

Submodules:
    qr: QR decomposition and the shared small-matrix least-squares solver
"""

from pystatbook.core.compute.linalg.qr import (
    QRResult,
    LeastSquaresResult,
    qr_cpu,
    least_squares,
)

__all__ = [
    "QRResult",
    "LeastSquaresResult",
    "qr_cpu",
    "least_squares",
]
