"""
Core infrastructure for PyMatrices.

This module provides shared abstractions and utilities used by the
matrix kernel.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Pivot policies, precision helpers, timing
"""

from pymatrices.core.result import Result
from pymatrices.core.exceptions import (
    PyMatricesError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatricesError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
