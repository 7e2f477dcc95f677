"""
Echelon form, determinant, inverse, PLU, Gram-Schmidt and QR.

All functions take a Matrix and return new values. Invalid shapes and
singular input are reported through sentinels, never exceptions:

    det        non-square -> 0.0 (same value as a genuine zero determinant)
    inverse    non-square or singular -> null matrix
    plu        non-square -> (null, null, null)
    qr         non-square -> (null, null)

Every function accepts `pivot_tol`. The default (None) uses the exact-zero
pivot test; a positive tolerance treats pivots at or below it as zero.
Use pymatrices.matrix.solvers for a tagged outcome that tells the
sentinel cases apart.
"""

from __future__ import annotations

import numpy as np

from pymatrices.core.compute.tolerances import PivotPolicy, select_pivot_policy
from pymatrices.matrix._elimination import (
    Elimination,
    back_substitute,
    forward_eliminate,
)
from pymatrices.matrix.matrix import Matrix
from pymatrices.matrix.solution import PLUResult, QRResult
from pymatrices.matrix.vectors import dot, projection, unit


PivotArg = float | PivotPolicy | None


# === Internal forms returning elimination bookkeeping ===

def _ref(a: Matrix, policy: PivotPolicy) -> tuple[Matrix, Elimination]:
    state = forward_eliminate(a.to_numpy(), policy=policy)
    return Matrix._wrap(state.reduced), state


def _det(a: Matrix, policy: PivotPolicy) -> tuple[float, Elimination | None]:
    if not a.is_square():
        return 0.0, None
    state = forward_eliminate(a.to_numpy(), policy=policy)
    if not policy.is_exact and state.rank < a.rows:
        return 0.0, state
    with np.errstate(invalid='ignore', over='ignore'):
        value = state.sign * float(np.prod(np.diag(state.reduced)))
    return value, state


def _inverse(a: Matrix, policy: PivotPolicy) -> tuple[Matrix, Elimination | None]:
    if not a.is_square():
        return Matrix.null(), None
    n = a.rows
    state = forward_eliminate(
        a.to_numpy(),
        carry=np.eye(n, dtype=np.float64),
        policy=policy,
    )
    if state.rank < n or np.any(np.diag(state.reduced) == 0.0):
        return Matrix.null(), state
    return Matrix._wrap(back_substitute(state)), state


def _plu(a: Matrix, policy: PivotPolicy) -> tuple[PLUResult, Elimination | None]:
    if not a.is_square():
        return PLUResult(Matrix.null(), Matrix.null(), Matrix.null()), None
    state = forward_eliminate(a.to_numpy(), track_plu=True, policy=policy)
    lower = state.lower
    np.fill_diagonal(lower, 1.0)
    result = PLUResult(
        P=Matrix._wrap(state.permutation),
        L=Matrix._wrap(lower),
        U=Matrix._wrap(state.reduced),
    )
    return result, state


def _gram_schmidt(a: Matrix, policy: PivotPolicy) -> tuple[Matrix, int]:
    basis = Matrix(a.rows, a.cols)
    accepted: list[Matrix] = []
    for i in range(a.cols):
        column = a.col(i)
        shadow = Matrix(a.rows, 1)
        for q in accepted:
            shadow = shadow + projection(column, q)
        residual = column - shadow
        if policy.is_zero(float(np.max(np.abs(residual.to_numpy()), initial=0.0))):
            # dependent on earlier columns; its output slot stays zero
            continue
        q = unit(residual)
        basis = basis.implant(q, len(accepted))
        accepted.append(q)
    return basis, len(accepted)


def _qr(a: Matrix, policy: PivotPolicy) -> tuple[QRResult, int]:
    if not a.is_square():
        return QRResult(Matrix.null(), Matrix.null()), 0
    q, rank = _gram_schmidt(a, policy)
    n = a.rows
    r = np.zeros((n, n), dtype=np.float64)
    q_cols = [q.col(i) for i in range(n)]
    a_cols = [a.col(j) for j in range(n)]
    for i in range(n):
        for j in range(i, n):
            r[i, j] = dot(q_cols[i], a_cols[j])
    return QRResult(Q=q, R=Matrix._wrap(r)), rank


# === Public sentinel-mode API ===

def ref(a: Matrix, *, pivot_tol: PivotArg = None) -> Matrix:
    """
    Row echelon form by partial-pivoting Gaussian elimination.

    Works for any shape. Columns with no usable pivot are skipped.
    """
    return _ref(a, select_pivot_policy(pivot_tol))[0]


def det(a: Matrix, *, pivot_tol: PivotArg = None) -> float:
    """
    Determinant: sign of the row exchanges times the product of the
    eliminated diagonal.

    Returns 0.0 for non-square input, which cannot be told apart from a
    genuine zero determinant. solvers.determinant reports the difference.
    """
    return _det(a, select_pivot_policy(pivot_tol))[0]


def inverse(a: Matrix, *, pivot_tol: PivotArg = None) -> Matrix:
    """
    Inverse by Gauss-Jordan elimination.

    Returns the null matrix for non-square input or when a zero survives
    on the diagonal after forward elimination.
    """
    return _inverse(a, select_pivot_policy(pivot_tol))[0]


def plu(a: Matrix, *, pivot_tol: PivotArg = None) -> PLUResult:
    """
    Factor a square matrix as P @ A == L @ U.

    P is the accumulated row permutation, L is unit lower triangular with
    the elimination multipliers below the diagonal, and U is the echelon
    form. Since P is orthogonal, A == P.T @ L @ U.

    Returns three null matrices for non-square input.
    """
    return _plu(a, select_pivot_policy(pivot_tol))[0]


def gram_schmidt(a: Matrix, *, pivot_tol: PivotArg = None) -> Matrix:
    """
    Orthonormalize the columns of `a`, left to right.

    Each column has its projections onto the columns accepted so far
    removed. A zero residual (the column depends on earlier ones) is
    skipped, so a rank-r input gives r orthonormal columns packed to the
    left followed by zero columns. Output column j therefore need not
    come from input column j once a skip has happened.
    """
    return _gram_schmidt(a, select_pivot_policy(pivot_tol))[0]


def qr(a: Matrix, *, pivot_tol: PivotArg = None) -> QRResult:
    """
    QR factorization built on gram_schmidt.

    R[i, j] = dot(Q[:, i], A[:, j]) for j >= i, zero below the diagonal.
    Q @ R reproduces A when A has full rank.

    Returns two null matrices for non-square input.
    """
    return _qr(a, select_pivot_policy(pivot_tol))[0]
