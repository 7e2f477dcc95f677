"""
Exception hierarchy for PyMatrices.

All exceptions inherit from PyMatricesError to allow catching any
library-specific error.

Design principles:
    - Kernel operations signal shape and singularity problems with sentinel
      values; exceptions are reserved for malformed input at construction
      time and for the checked solvers' raise_for_status()
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
"""


class PyMatricesError(Exception):
    """Base exception for all PyMatrices errors."""
    pass


class ValidationError(PyMatricesError):
    """
    Input validation failed.

    Raised when user-provided inputs (grids, indices, tolerances) fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised for ragged grids, negative dimensions, and by the checked
    solvers when an operation receives a matrix of the wrong shape.
    """
    pass


class NumericalError(PyMatricesError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by the checked solvers when an operation requires full rank
    but elimination found a zero pivot on the diagonal.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Number of pivots found during elimination
        expected_rank: Expected rank (the matrix order)
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
