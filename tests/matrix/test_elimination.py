"""
Tests for the elimination engine: echelon form, determinant and inverse.

Includes the worked scenarios, the sentinel results for non-square and
singular input, and the exact-zero pivot rule.
"""

import numpy as np
import pytest

from pymatrices import Matrix
from pymatrices.matrix import det, inverse, ref
from pymatrices.matrix._elimination import back_substitute, forward_eliminate


# ═══════════════════════════════════════════════════════════════════════
# Forward elimination
# ═══════════════════════════════════════════════════════════════════════


class TestForwardEliminate:

    def test_does_not_modify_input(self):
        data = np.array([[0.0, 1.0], [1.0, 0.0]])
        forward_eliminate(data)
        np.testing.assert_array_equal(data, [[0.0, 1.0], [1.0, 0.0]])

    def test_largest_magnitude_pivot(self):
        state = forward_eliminate(np.array([[1.0, 5.0], [-3.0, 1.0], [2.0, 1.0]]))
        np.testing.assert_array_equal(state.reduced[0], [-3.0, 1.0])
        assert state.swaps == 1
        assert state.sign == -1.0

    def test_tie_keeps_first_row(self):
        state = forward_eliminate(np.array([[2.0, 1.0], [-2.0, 3.0]]))
        assert state.swaps == 0
        np.testing.assert_array_equal(state.reduced, [[2.0, 1.0], [0.0, 4.0]])

    def test_zero_column_advances_column_only(self):
        state = forward_eliminate(np.array([[0.0, 2.0, 1.0], [0.0, 4.0, 3.0]]))
        assert state.pivots == [(0, 1), (1, 2)]
        np.testing.assert_array_equal(state.reduced, [[0.0, 4.0, 3.0], [0.0, 0.0, -0.5]])

    def test_eliminated_entries_exactly_zero(self, rng):
        state = forward_eliminate(rng.standard_normal((4, 4)))
        assert np.all(np.tril(state.reduced, -1) == 0.0)

    def test_rank(self, singular_3x3):
        assert forward_eliminate(singular_3x3.to_numpy()).rank == 2

    def test_carried_matrix_follows_row_operations(self, rng):
        data = rng.standard_normal((3, 3))
        state = forward_eliminate(data, carry=np.eye(3))
        # carried @ A reproduces the reduced matrix
        np.testing.assert_allclose(state.carried @ data, state.reduced, atol=1e-12)

    def test_back_substitute(self):
        state = forward_eliminate(np.array([[2.0, 1.0], [1.0, 1.0]]), carry=np.eye(2))
        np.testing.assert_array_equal(back_substitute(state), [[1.0, -1.0], [-1.0, 2.0]])


# ═══════════════════════════════════════════════════════════════════════
# Echelon form
# ═══════════════════════════════════════════════════════════════════════


class TestEchelon:

    def test_anti_diagonal(self, anti_diagonal):
        assert anti_diagonal.ref().to_list() == [[1.0, 0.0], [0.0, 1.0]]

    def test_function_matches_method(self, small_invertible):
        assert ref(small_invertible) == small_invertible.ref()

    def test_wide_matrix_reduces_every_column(self):
        m = Matrix.from_grid([[1.0, 2.0, 3.0, 4.0], [2.0, 4.0, 7.0, 9.0]])
        assert m.ref().to_list() == [[2.0, 4.0, 7.0, 9.0], [0.0, 0.0, -0.5, -0.5]]

    def test_tall_matrix(self):
        m = Matrix.from_grid([[1.0], [4.0], [2.0]])
        assert m.ref().to_list() == [[4.0], [0.0], [0.0]]

    def test_zero_matrix_unchanged(self):
        assert Matrix(3, 2).ref() == Matrix(3, 2)

    def test_null(self):
        assert Matrix.null().ref().is_null()

    def test_leading_entries_move_right(self, rng):
        reduced = Matrix.from_grid(rng.standard_normal((4, 6))).ref().to_numpy()
        leads = [int(np.flatnonzero(row)[0]) for row in reduced if np.any(row)]
        assert leads == sorted(leads)
        assert len(set(leads)) == len(leads)


# ═══════════════════════════════════════════════════════════════════════
# Determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_small_invertible(self, small_invertible):
        assert small_invertible.det() == 1.0

    def test_row_swap_flips_sign(self, anti_diagonal):
        assert anti_diagonal.det() == -1.0

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
    def test_identity(self, n):
        assert Matrix.identity(n).det() == 1.0

    def test_zero_row(self):
        assert Matrix.from_grid([[1.0, 2.0], [0.0, 0.0]]).det() == 0.0
        assert Matrix.from_grid([[0.0, 0.0, 0.0], [1.0, 2.0, 3.0], [4.0, 5.0, 7.0]]).det() == 0.0

    def test_singular(self, singular_3x3):
        assert singular_3x3.det() == 0.0

    def test_non_square_is_zero(self, wide_2x3):
        assert wide_2x3.det() == 0.0
        assert det(wide_2x3) == 0.0

    def test_non_square_indistinguishable_from_zero_determinant(self, wide_2x3, singular_3x3):
        assert wide_2x3.det() == singular_3x3.det()

    def test_matches_numpy(self, random_square):
        assert random_square.det() == pytest.approx(np.linalg.det(random_square.to_numpy()), rel=1e-10)

    def test_multiplicative(self, rng):
        a = Matrix.from_grid(rng.standard_normal((4, 4)))
        b = Matrix.from_grid(rng.standard_normal((4, 4)))
        assert (a @ b).det() == pytest.approx(a.det() * b.det(), rel=1e-8)

    def test_triangular_is_diagonal_product(self):
        m = Matrix.from_grid([[2.0, 7.0, 1.0], [0.0, 3.0, 5.0], [0.0, 0.0, 4.0]])
        assert m.det() == 24.0


# ═══════════════════════════════════════════════════════════════════════
# Inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_small_invertible(self, small_invertible):
        assert small_invertible.inverse().to_list() == [[1.0, -1.0], [-1.0, 2.0]]

    def test_anti_diagonal_is_self_inverse(self, anti_diagonal):
        assert anti_diagonal.inverse() == anti_diagonal

    def test_singular_is_null(self, singular_3x3):
        assert singular_3x3.inverse().is_null()

    def test_zero_matrix_is_null(self):
        assert Matrix(2, 2).inverse().is_null()

    def test_non_square_is_null(self, wide_2x3):
        assert wide_2x3.inverse().is_null()
        assert inverse(wide_2x3).is_null()

    def test_both_sided_identity(self, random_square):
        inv = random_square.inverse()
        eye = Matrix.identity(5)
        assert (inv @ random_square).allclose(eye, atol=1e-10)
        assert (random_square @ inv).allclose(eye, atol=1e-10)

    def test_needs_pivoting(self):
        m = Matrix.from_grid([[0.0, 2.0, 1.0], [1.0, 0.0, 0.0], [3.0, 0.0, 1.0]])
        expected = np.linalg.inv(m.to_numpy())
        np.testing.assert_allclose(m.inverse().to_numpy(), expected, atol=1e-12)

    def test_tiny_nonzero_pivot_still_inverts(self):
        m = Matrix.from_grid([[0.5 ** 60, 0.0], [0.0, 1.0]])
        assert m.inverse().to_list() == [[2.0 ** 60, 0.0], [0.0, 1.0]]

    def test_null_chain_degrades(self, singular_3x3):
        out = singular_3x3.inverse() @ singular_3x3
        assert out.is_null()
