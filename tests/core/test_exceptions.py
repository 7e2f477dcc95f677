"""
Tests for PyMatrices exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatricesError)
    - Diagnostic attributes on SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrices.core.exceptions import (
    DimensionError,
    NumericalError,
    PyMatricesError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatricesError."""

    def test_validation_error_is_pymatrices_error(self):
        with pytest.raises(PyMatricesError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_numerical_error_is_pymatrices_error(self):
        with pytest.raises(PyMatricesError):
            raise NumericalError("computation failed")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_dimension_error_is_not_numerical_error(self):
        assert not isinstance(DimensionError("x"), NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            condition_number=1e18,
            rank=2,
            expected_rank=3,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.condition_number == 1e18
        assert err.rank == 2
        assert err.expected_rank == 3

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="A", rank=1)
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.rank == 1
