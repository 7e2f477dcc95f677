"""
Dense real matrix kernel.

Provides the Matrix value type with partial-pivoting Gaussian elimination,
determinant, inverse, PLU, Gram-Schmidt and QR, plus column-vector
helpers. Failures are reported with sentinels (0.0 or the 0x0 null
matrix); the checked solvers report them as a tagged status instead.

Public API:
    Matrix                         - the value type
    ref, det, inverse, plu,
    gram_schmidt, qr               - sentinel-mode decompositions
    dot, squared_norm, norm,
    projection, unit               - column-vector helpers
    echelon, determinant, invert,
    factor_plu, factor_qr          - checked solvers
"""

from pymatrices.matrix.matrix import Matrix, format_value
from pymatrices.matrix.solution import (
    PLUResult,
    QRResult,
    Status,
    LinalgParams,
    LinalgSolution,
)
from pymatrices.matrix.vectors import dot, squared_norm, norm, projection, unit
from pymatrices.matrix.decompositions import (
    ref,
    det,
    inverse,
    plu,
    gram_schmidt,
    qr,
)
from pymatrices.matrix.solvers import (
    echelon,
    determinant,
    invert,
    factor_plu,
    factor_qr,
)

__all__ = [
    "Matrix",
    "format_value",
    "PLUResult",
    "QRResult",
    "Status",
    "LinalgParams",
    "LinalgSolution",
    "dot",
    "squared_norm",
    "norm",
    "projection",
    "unit",
    "ref",
    "det",
    "inverse",
    "plu",
    "gram_schmidt",
    "qr",
    "echelon",
    "determinant",
    "invert",
    "factor_plu",
    "factor_qr",
]
