"""
Core infrastructure for pystatbook.

Shared abstractions used by every domain subpackage (descriptive,
regression, anova, montecarlo, ...).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Least squares, timing, tolerances
"""

from pystatbook.core.result import Result
from pystatbook.core.exceptions import (
    StatBookError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "Result",
    "StatBookError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
