"""
Result types for the matrix kernel.

PLUResult and QRResult are the plain tuples returned by the sentinel-mode
decompositions. LinalgParams, Status and LinalgSolution form the tagged
outcome returned by the checked solvers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

from pymatrices.core.exceptions import DimensionError, SingularMatrixError
from pymatrices.core.result import Result
from pymatrices.matrix.matrix import Matrix


class PLUResult(NamedTuple):
    """P @ A == L @ U, with L unit lower triangular and U in row echelon form."""
    P: Matrix
    L: Matrix
    U: Matrix


class QRResult(NamedTuple):
    """Q @ R == A for full-rank A, with Q orthonormal and R upper triangular."""
    Q: Matrix
    R: Matrix


class Status(Enum):
    """Outcome of a checked computation."""
    OK = 'ok'
    SHAPE_MISMATCH = 'shape_mismatch'
    SINGULAR = 'singular'


@dataclass(frozen=True)
class LinalgParams:
    """
    Payload of a checked computation.

    `value` is exactly what the sentinel-mode operation returns, so a
    non-OK status still carries the documented sentinel.
    """
    value: Any
    status: Status
    rank: int
    swaps: int


@dataclass
class LinalgSolution:
    """
    User-facing checked result.

    Wraps Result[LinalgParams] and provides convenient accessors.
    """
    _result: Result[LinalgParams]
    _operation: str

    @property
    def value(self) -> Any:
        return self._result.params.value

    @property
    def status(self) -> Status:
        return self._result.params.status

    @property
    def ok(self) -> bool:
        return self._result.params.status is Status.OK

    @property
    def rank(self) -> int:
        """Pivots found by elimination, or orthonormal columns emitted by QR."""
        return self._result.params.rank

    @property
    def swaps(self) -> int:
        """Row exchanges performed during elimination."""
        return self._result.params.swaps

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def result(self) -> Result[LinalgParams]:
        return self._result

    def raise_for_status(self) -> Any:
        """
        Return the value, or raise if the computation did not succeed.

        Raises:
            DimensionError: The input had the wrong shape
            SingularMatrixError: The input was rank-deficient
        """
        status = self.status
        if status is Status.SHAPE_MISMATCH:
            shape = self.info.get('shape')
            raise DimensionError(
                f"{self._operation}: requires a square matrix, got shape {shape}"
            )
        if status is Status.SINGULAR:
            shape = self.info.get('shape')
            expected = shape[0] if shape else None
            raise SingularMatrixError(
                f"{self._operation}: matrix is singular "
                f"(rank={self.rank}, expected={expected})",
                matrix_name='A',
                rank=self.rank,
                expected_rank=expected,
            )
        return self.value

    def __repr__(self) -> str:
        return (
            f"LinalgSolution(operation={self._operation!r}, "
            f"status={self.status.value!r}, rank={self.rank})"
        )
