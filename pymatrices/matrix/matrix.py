"""
Matrix: dense real-valued matrix with value semantics.

A Matrix owns a private, read-only float64 grid. Every producing operation
returns a new Matrix; nothing mutates a caller-visible operand. The 0x0
matrix is the null sentinel that operations return instead of raising
when shapes are invalid.

Construction:
    Matrix(rows, cols)              zero matrix
    Matrix.from_grid(grid)          copy of any two-level numeric sequence
    Matrix.identity(n), Matrix.swap(n, a, b), Matrix.row_add(n, r1, r2, v)
    Matrix.random(rows, cols, rng)
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.compute.precision import is_close
from pymatrices.core.compute.tolerances import CPU_FP64
from pymatrices.core.validation import (
    check_array,
    check_2d,
    check_dimension,
    check_index,
)

if TYPE_CHECKING:
    from pymatrices.core.compute.tolerances import PivotPolicy
    from pymatrices.matrix.solution import PLUResult, QRResult


DISPLAY_WIDTH = 8


def format_value(value: float, width: int = DISPLAY_WIDTH) -> str:
    """
    Render a value as fixed six-decimal text cut to exactly `width` characters.

    Short renderings are right-padded with zeros (spaces for inf/nan).
    """
    text = f"{value:f}"
    fill = '0' if np.isfinite(value) else ' '
    return text.ljust(width, fill)[:width]


class Matrix:
    """
    Dense real matrix with fixed shape and pure value semantics.

    Attributes are read-only: `rows`, `cols`, `shape`. Entries are read with
    `m[i, j]`. Arithmetic operators follow the kernel's sentinel policy:
    `+` and `-` work over the overlapping rectangle of mismatched operands,
    and matrix products with mismatched inner dimensions give the null
    matrix.
    """

    __slots__ = ('_data',)

    # Let numpy scalars defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int):
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        data = np.zeros((rows, cols), dtype=np.float64)
        data.flags.writeable = False
        self._data = data

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Matrix:
        """Take ownership of a private float64 array without copying."""
        obj = cls.__new__(cls)
        data.flags.writeable = False
        obj._data = data
        return obj

    # === Construction ===

    @classmethod
    def from_grid(cls, grid: ArrayLike | Matrix) -> Matrix:
        """
        Build a Matrix from a two-level numeric sequence or 2D array.

        The values are always copied. An empty sequence gives the null
        matrix; ragged rows raise DimensionError.
        """
        if isinstance(grid, Matrix):
            return grid.copy()
        data = check_array(grid, 'grid')
        if data.ndim == 1 and data.size == 0:
            return cls.null()
        check_2d(data, 'grid')
        return cls._wrap(data)

    def copy(self) -> Matrix:
        """Independent copy of this matrix."""
        return Matrix._wrap(self._data.copy())

    @classmethod
    def null(cls) -> Matrix:
        """The 0x0 null sentinel."""
        return cls(0, 0)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        n = check_dimension(n, 'n')
        return cls._wrap(np.eye(n, dtype=np.float64))

    eye = identity

    @classmethod
    def swap(cls, n: int, a: int, b: int) -> Matrix:
        """Elementary matrix that exchanges rows a and b when multiplied on the left."""
        n = check_dimension(n, 'n')
        a = check_index(a, n, 'a')
        b = check_index(b, n, 'b')
        data = np.eye(n, dtype=np.float64)
        data[[a, b]] = data[[b, a]]
        return cls._wrap(data)

    @classmethod
    def row_add(cls, n: int, r1: int, r2: int, v: float) -> Matrix:
        """Elementary matrix that adds v times row r1 to row r2 when multiplied on the left."""
        n = check_dimension(n, 'n')
        r1 = check_index(r1, n, 'r1')
        r2 = check_index(r2, n, 'r2')
        data = np.eye(n, dtype=np.float64)
        data[r2, r1] = float(v)
        return cls._wrap(data)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        rng: np.random.Generator | int | None = None,
    ) -> Matrix:
        """
        Matrix of independent uniform [0, 1) entries.

        Parameters
        ----------
        rows, cols : int
            Shape of the result.
        rng : numpy.random.Generator or int, optional
            Source of randomness. An int seeds a fresh Generator. Pass a
            Generator (or seed) for reproducible output.
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        gen = np.random.default_rng(rng)
        return cls._wrap(gen.random((rows, cols)))

    # === Shape and access ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        i = check_index(i, self.rows, 'row')
        j = check_index(j, self.cols, 'column')
        return float(self._data[i, j])

    def col(self, i: int) -> Matrix:
        """Column i as an (rows x 1) matrix."""
        i = check_index(i, self.cols, 'column')
        return Matrix._wrap(self._data[:, i:i + 1].copy())

    def row(self, i: int) -> Matrix:
        """Row i as a (1 x cols) matrix."""
        i = check_index(i, self.rows, 'row')
        return Matrix._wrap(self._data[i:i + 1, :].copy())

    def to_list(self) -> list[list[float]]:
        """Values as a fresh list of row lists."""
        return self._data.tolist()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Values as a fresh, writeable float64 array."""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        return np.array(self._data, dtype=dtype, copy=True)

    # === Predicates ===

    def is_square(self) -> bool:
        return self.rows == self.cols

    def is_row(self) -> bool:
        return self.rows == 1

    def is_column(self) -> bool:
        return self.cols == 1

    def is_null(self) -> bool:
        return self.rows == 0 and self.cols == 0

    def is_zero(self) -> bool:
        """True when every entry is exactly 0.0 (vacuously true for empty matrices)."""
        return not np.any(self._data != 0.0)

    # === Structural editors ===

    def remove_row(self, index: int) -> Matrix:
        """Copy without row `index`; null matrix if index is out of range."""
        if not 0 <= index < self.rows:
            return Matrix.null()
        return Matrix._wrap(np.delete(self._data, index, axis=0))

    def remove_col(self, index: int) -> Matrix:
        """Copy without column `index`; null matrix if index is out of range."""
        if not 0 <= index < self.cols:
            return Matrix.null()
        return Matrix._wrap(np.delete(self._data, index, axis=1))

    def emplace(self, sub: Matrix, row_offset: int, col_offset: int) -> Matrix:
        """
        Copy with `sub` written in starting at (row_offset, col_offset).

        Entries of `sub` that would land outside this matrix are dropped.
        """
        out = self._data.copy()
        r0, c0 = max(row_offset, 0), max(col_offset, 0)
        r1 = min(row_offset + sub.rows, self.rows)
        c1 = min(col_offset + sub.cols, self.cols)
        if r0 < r1 and c0 < c1:
            out[r0:r1, c0:c1] = sub._data[
                r0 - row_offset:r1 - row_offset,
                c0 - col_offset:c1 - col_offset,
            ]
        return Matrix._wrap(out)

    def implant(self, sub: Matrix, col_offset: int) -> Matrix:
        """Copy with `sub` written in from the top row, starting at column `col_offset`."""
        return self.emplace(sub, 0, col_offset)

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # === Arithmetic ===

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum over the overlapping rectangle."""
        n, m = min(self.rows, other.rows), min(self.cols, other.cols)
        return Matrix._wrap(self._data[:n, :m] + other._data[:n, :m])

    def sub(self, other: Matrix) -> Matrix:
        """Element-wise difference over the overlapping rectangle."""
        n, m = min(self.rows, other.rows), min(self.cols, other.cols)
        return Matrix._wrap(self._data[:n, :m] - other._data[:n, :m])

    def matmul(self, other: Matrix) -> Matrix:
        """Matrix product; null matrix if the inner dimensions differ."""
        if self.cols != other.rows:
            return Matrix.null()
        return Matrix._wrap(self._data @ other._data)

    def scale(self, factor: float) -> Matrix:
        with np.errstate(invalid='ignore', over='ignore'):
            return Matrix._wrap(self._data * float(factor))

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self.matmul(other)
        if isinstance(other, (int, float, np.integer, np.floating)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, (int, float, np.integer, np.floating)):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __lt__(self, other: Matrix) -> bool:
        """Lexicographic ordering of the row grids."""
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.to_list() < other.to_list()

    def allclose(
        self,
        other: Matrix,
        rtol: float = CPU_FP64.rtol,
        atol: float = CPU_FP64.atol,
    ) -> bool:
        """Same shape and every entry within |a - b| <= atol + rtol * |b|."""
        if self.shape != other.shape:
            return False
        return bool(np.all(is_close(self._data, other._data, rtol=rtol, atol=atol)))

    # === Elimination and decompositions ===

    def ref(self, pivot_tol: float | PivotPolicy | None = None) -> Matrix:
        """Row echelon form by partial-pivoting Gaussian elimination."""
        from pymatrices.matrix.decompositions import ref
        return ref(self, pivot_tol=pivot_tol)

    def det(self, pivot_tol: float | PivotPolicy | None = None) -> float:
        """Determinant; 0.0 for non-square input."""
        from pymatrices.matrix.decompositions import det
        return det(self, pivot_tol=pivot_tol)

    def inverse(self, pivot_tol: float | PivotPolicy | None = None) -> Matrix:
        """Inverse; null matrix for non-square or singular input."""
        from pymatrices.matrix.decompositions import inverse
        return inverse(self, pivot_tol=pivot_tol)

    def plu(self, pivot_tol: float | PivotPolicy | None = None) -> PLUResult:
        """(P, L, U) with P @ A == L @ U; three null matrices for non-square input."""
        from pymatrices.matrix.decompositions import plu
        return plu(self, pivot_tol=pivot_tol)

    def gram_schmidt(self, pivot_tol: float | PivotPolicy | None = None) -> Matrix:
        """Orthonormal basis of the column space, zero columns for dependent inputs."""
        from pymatrices.matrix.decompositions import gram_schmidt
        return gram_schmidt(self, pivot_tol=pivot_tol)

    def qr(self, pivot_tol: float | PivotPolicy | None = None) -> QRResult:
        """(Q, R) via Gram-Schmidt; two null matrices for non-square input."""
        from pymatrices.matrix.decompositions import qr
        return qr(self, pivot_tol=pivot_tol)

    # === Column-vector helpers ===

    def dot(self, other: Matrix) -> float:
        from pymatrices.matrix.vectors import dot
        return dot(self, other)

    def squared_norm(self) -> float:
        from pymatrices.matrix.vectors import squared_norm
        return squared_norm(self)

    def norm(self) -> float:
        from pymatrices.matrix.vectors import norm
        return norm(self)

    def projection(self, onto: Matrix) -> Matrix:
        """Projection of this vector onto the direction of `onto`."""
        from pymatrices.matrix.vectors import projection
        return projection(self, onto)

    def unit(self) -> Matrix:
        from pymatrices.matrix.vectors import unit
        return unit(self)

    # === Display ===

    def to_string(self, width: int = DISPLAY_WIDTH) -> str:
        """
        Diagnostic rendering: a "[rows cols]" header then one bracketed line
        per row. The null matrix renders as "[NULL]".
        """
        if self.is_null():
            return "[NULL]"
        lines = [f"[{self.rows} {self.cols}]"]
        for row in self._data:
            cells = " ".join(format_value(float(v), width) for v in row)
            lines.append(f"[ {cells} ]" if cells else "[ ]")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"
