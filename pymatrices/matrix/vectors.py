"""
Vector helpers on single-column matrices.

These are built on the generic transpose and product, so they accept
any matrices, but only column vectors give meaningful answers. Zero
vectors are not guarded against: projecting onto, or normalizing, a zero
vector yields inf/nan entries rather than an error.
"""

from __future__ import annotations

from pymatrices.core.compute.precision import ieee_divide, ieee_sqrt
from pymatrices.matrix.matrix import Matrix


def dot(a: Matrix, b: Matrix) -> float:
    """
    Top-left entry of a.T @ b.

    For column vectors this is the dot product. For wider inputs only that
    single entry is returned. If a.T @ b is undefined or empty the result
    is 0.0.
    """
    product = a.transpose() @ b
    if product.rows == 0 or product.cols == 0:
        return 0.0
    return product[0, 0]


def squared_norm(a: Matrix) -> float:
    return dot(a, a)


def norm(a: Matrix) -> float:
    return ieee_sqrt(squared_norm(a))


def projection(a: Matrix, onto: Matrix) -> Matrix:
    """Projection of `a` onto the direction of `onto`: onto * (a.onto / |onto|^2)."""
    return onto * ieee_divide(dot(a, onto), squared_norm(onto))


def unit(a: Matrix) -> Matrix:
    """`a` scaled to unit length."""
    return a * ieee_divide(1.0, norm(a))
