"""
Exception hierarchy for pystatbook.

All exceptions inherit from StatBookError so a lesson page can catch any
engine failure in one place and show "not enough data" instead of a number.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Degenerate numeric input (zero variance, singleton groups) is NOT an
      exception: solvers return NaN statistics and record a warning
"""


class StatBookError(Exception):
    """Base exception for all pystatbook errors."""
    pass


class ValidationError(StatBookError):
    """
    Input validation failed.

    Raised for invalid configuration: too few groups, more coefficients
    than observations, contrast weights that do not sum to zero, unknown
    method names.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when paired inputs (x, m, y) differ in length or a data matrix
    is not two-dimensional.
    """
    pass


class NumericalError(StatBookError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Design matrix is singular or nearly singular.

    Raised by the least-squares routine when X'X cannot be inverted
    reliably, e.g. a moderator with (near) zero variance in a generated
    sample.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number of the design matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of columns)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
