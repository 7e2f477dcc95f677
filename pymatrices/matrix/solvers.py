"""
Checked entry points with a tagged outcome.

The Matrix methods and pymatrices.matrix.decompositions collapse every
failure into a sentinel (0.0 or the null matrix). The functions here run
the same computations and return a LinalgSolution whose `status` says
which case occurred:

    Status.OK               the value is a genuine result
    Status.SHAPE_MISMATCH   the input was not square
    Status.SINGULAR         elimination found fewer pivots than rows

`value` is always identical to what the sentinel-mode call returns.
Call raise_for_status() to turn a non-OK status into an exception.
"""

from __future__ import annotations

from typing import Any, Callable
import warnings
from numpy.typing import ArrayLike

from pymatrices.core.compute.timing import timed
from pymatrices.core.compute.tolerances import PivotPolicy, select_pivot_policy
from pymatrices.core.result import Result
from pymatrices.matrix import decompositions as _dec
from pymatrices.matrix._elimination import Elimination
from pymatrices.matrix.matrix import Matrix
from pymatrices.matrix.solution import LinalgParams, LinalgSolution, Status


ELIMINATION_BACKEND = 'python_elimination'
GRAM_SCHMIDT_BACKEND = 'python_gram_schmidt'


def _ensure_matrix(a: ArrayLike | Matrix) -> Matrix:
    """Convert raw grid to Matrix if needed."""
    if isinstance(a, Matrix):
        return a
    return Matrix.from_grid(a)


def _suppressed_messages(state: Elimination | None) -> tuple[str, ...]:
    if state is None:
        return ()
    return tuple(
        f"pivot {peak:.3e} in column {col} below tolerance; column treated as zero"
        for col, peak in state.suppressed
    )


def _run_elimination(
    operation: str,
    a: ArrayLike | Matrix,
    pivot_tol: float | PivotPolicy | None,
    compute: Callable[[Matrix, PivotPolicy], tuple[Any, Elimination | None]],
    requires_square: bool,
    singular_is_failure: bool,
) -> LinalgSolution:
    matrix = _ensure_matrix(a)
    policy = select_pivot_policy(pivot_tol)

    with timed() as timer:
        value, state = compute(matrix, policy)

    if requires_square and not matrix.is_square():
        status = Status.SHAPE_MISMATCH
    elif singular_is_failure and state is not None and state.rank < matrix.rows:
        status = Status.SINGULAR
    else:
        status = Status.OK

    messages = _suppressed_messages(state)
    if status is Status.SINGULAR and operation == 'invert':
        message = f"matrix is singular (rank {state.rank} < {matrix.rows}); returning null matrix"
        warnings.warn(message, RuntimeWarning, stacklevel=3)
        messages = messages + (message,)

    result = Result(
        params=LinalgParams(
            value=value,
            status=status,
            rank=0 if state is None else state.rank,
            swaps=0 if state is None else state.swaps,
        ),
        info={
            'operation': operation,
            'shape': matrix.shape,
            'pivot_policy': policy.name,
            'pivots': [] if state is None else list(state.pivots),
        },
        timing=timer.result(),
        backend_name=ELIMINATION_BACKEND,
        warnings=messages,
    )
    return LinalgSolution(_result=result, _operation=operation)


def echelon(
    a: ArrayLike | Matrix,
    *,
    pivot_tol: float | PivotPolicy | None = None,
) -> LinalgSolution:
    """
    Row echelon form. Any shape is accepted, so the status is always OK.

    Parameters
    ----------
    a : Matrix or array-like
        Matrix to reduce.
    pivot_tol : float or PivotPolicy, optional
        Zero-pivot threshold. None uses the exact-zero test.
    """
    return _run_elimination('echelon', a, pivot_tol, _dec._ref,
                            requires_square=False, singular_is_failure=False)


def determinant(
    a: ArrayLike | Matrix,
    *,
    pivot_tol: float | PivotPolicy | None = None,
) -> LinalgSolution:
    """
    Determinant with the zero cases told apart.

    A non-square input reports SHAPE_MISMATCH and a rank-deficient square
    input reports SINGULAR; both carry the value 0.0 that det() returns.
    """
    return _run_elimination('determinant', a, pivot_tol, _dec._det,
                            requires_square=True, singular_is_failure=True)


def invert(
    a: ArrayLike | Matrix,
    *,
    pivot_tol: float | PivotPolicy | None = None,
) -> LinalgSolution:
    """
    Inverse with the null-matrix cases told apart.

    Emits a RuntimeWarning when the matrix is singular.
    """
    return _run_elimination('invert', a, pivot_tol, _dec._inverse,
                            requires_square=True, singular_is_failure=True)


def factor_plu(
    a: ArrayLike | Matrix,
    *,
    pivot_tol: float | PivotPolicy | None = None,
) -> LinalgSolution:
    """
    PLU factorization. Rank-deficient input still factors, so only a
    non-square input is reported (SHAPE_MISMATCH); `rank` gives the pivot
    count.
    """
    return _run_elimination('factor_plu', a, pivot_tol, _dec._plu,
                            requires_square=True, singular_is_failure=False)


def factor_qr(
    a: ArrayLike | Matrix,
    *,
    pivot_tol: float | PivotPolicy | None = None,
) -> LinalgSolution:
    """
    QR factorization through Gram-Schmidt.

    Reports SINGULAR (with a RuntimeWarning) when some column depended on
    earlier ones, since Q @ R then no longer reproduces A. `rank` is the
    number of orthonormal columns produced.
    """
    matrix = _ensure_matrix(a)
    policy = select_pivot_policy(pivot_tol)

    with timed() as timer:
        value, rank = _dec._qr(matrix, policy)

    messages: tuple[str, ...] = ()
    if not matrix.is_square():
        status = Status.SHAPE_MISMATCH
    elif rank < matrix.cols:
        status = Status.SINGULAR
        message = (
            f"columns are linearly dependent (rank {rank} < {matrix.cols}); "
            f"Q has {matrix.cols - rank} zero columns"
        )
        warnings.warn(message, RuntimeWarning, stacklevel=2)
        messages = (message,)
    else:
        status = Status.OK

    result = Result(
        params=LinalgParams(value=value, status=status, rank=rank, swaps=0),
        info={
            'operation': 'factor_qr',
            'shape': matrix.shape,
            'pivot_policy': policy.name,
            'orthonormal_columns': rank,
        },
        timing=timer.result(),
        backend_name=GRAM_SCHMIDT_BACKEND,
        warnings=messages,
    )
    return LinalgSolution(_result=result, _operation='factor_qr')
