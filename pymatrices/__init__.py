"""
PyMatrices: dense real-valued linear algebra in pure value semantics.

A small kernel of matrix operations (elimination, determinant, inverse,
PLU, Gram-Schmidt, QR) and column-vector helpers, reporting invalid
shapes and singular input with sentinel values.

Submodules:
    matrix: Matrix type, decompositions, vector helpers, checked solvers
    core: Exceptions, result envelope, validation, pivot policies
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pymatrices import matrix
from pymatrices.matrix import Matrix

__all__ = [
    "__version__",
    "matrix",
    "Matrix",
]
