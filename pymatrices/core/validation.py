"""
Input validation utilities for PyMatrices.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. They guard construction and
element access only; kernel operations report shape problems through
sentinel values instead.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrices.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating ragged rows, mixed types or
    non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        DimensionError: If nested sequences have inconsistent lengths
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except ValueError as e:
        # numpy refuses ragged nested sequences outright
        raise DimensionError(f"{name}: rows have inconsistent lengths: {e}") from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        return result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_dimension(value: int, name: str) -> int:
    """
    Verify a row or column count is a non-negative integer.

    Args:
        value: Count to check
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        DimensionError: If value is negative or not integral
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DimensionError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 0:
        raise DimensionError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_index(index: int, bound: int, name: str) -> int:
    """
    Verify an index lies in [0, bound).

    Args:
        index: Index to check
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is out of range or not integral
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {type(index).__name__}")
    if index < 0 or index >= bound:
        raise ValidationError(f"{name}: index {index} out of range [0, {bound})")
    return int(index)


def check_tolerance(value: float, name: str) -> float:
    """
    Verify a tolerance is a finite, non-negative number.

    Args:
        value: Tolerance to check
        name: Parameter name for error messages

    Returns:
        The tolerance as a float

    Raises:
        ValidationError: If value is negative, NaN or infinite
    """
    try:
        tol = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number, got {value!r}") from e
    if not np.isfinite(tol) or tol < 0:
        raise ValidationError(f"{name}: must be finite and non-negative, got {tol}")
    return tol
