"""
Numerical precision constants and utilities.

Provides comparison defaults and the unguarded scalar arithmetic used by the
vector helpers.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Scalar division with IEEE-754 semantics.

    Division by zero yields +/-inf, and 0/0 yields nan, instead of raising
    ZeroDivisionError as Python floats do.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        numerator / denominator as a Python float
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))


def ieee_sqrt(value: float) -> float:
    """Square root that yields nan for negative or nan input instead of raising."""
    with np.errstate(invalid='ignore'):
        return float(np.sqrt(np.float64(value)))


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)
