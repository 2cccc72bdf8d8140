"""
Compute infrastructure shared by all domains.

Submodules:
    linalg: QR-based least squares
    timing: Timer / timed() for Result.timing
    tolerances: numerical tolerances and thresholds
"""

from pystatbook.core.compute.timing import Timer, timed
from pystatbook.core.compute.linalg import least_squares, LeastSquaresResult

__all__ = [
    "Timer",
    "timed",
    "least_squares",
    "LeastSquaresResult",
]
