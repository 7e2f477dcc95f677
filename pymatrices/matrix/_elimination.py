"""
Partial-pivoting forward elimination shared by ref, det, inverse and PLU.

The engine walks a pivot position (h, k) from (0, 0). At each step it
picks the entry of largest magnitude in column k at or below row h (first
occurrence wins on ties). A column with no usable pivot advances k only.
Otherwise the pivot row is exchanged into row h and every row below has
the matching multiple of row h subtracted, with the eliminated entry set
to exactly 0.0.

Callers can ask for extra matrices to follow the same row operations:
a carried matrix (Gauss-Jordan inversion) and the P and L factors of PLU.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import warnings
import numpy as np
from numpy.typing import NDArray

from pymatrices.core.compute.tolerances import PivotPolicy, EXACT_PIVOT


@dataclass
class Elimination:
    """
    Working state after forward elimination.

    Attributes:
        reduced: The eliminated working copy (row echelon form)
        carried: Matrix that received the same row operations, if requested
        permutation: Accumulated row exchanges applied to the identity, if tracked
        lower: Multipliers stored at [i, h], if tracked (diagonal not yet set)
        sign: (-1) ** swaps
        swaps: Number of row exchanges
        pivots: (row, column) of every pivot used
        suppressed: (column, magnitude) of nonzero pivots the policy rejected
    """
    reduced: NDArray[np.floating[Any]]
    carried: NDArray[np.floating[Any]] | None = None
    permutation: NDArray[np.floating[Any]] | None = None
    lower: NDArray[np.floating[Any]] | None = None
    sign: float = 1.0
    swaps: int = 0
    pivots: list[tuple[int, int]] = field(default_factory=list)
    suppressed: list[tuple[int, float]] = field(default_factory=list)

    @property
    def rank(self) -> int:
        return len(self.pivots)


def _exchange(array: NDArray[np.floating[Any]] | None, a: int, b: int) -> None:
    if array is not None:
        array[[a, b]] = array[[b, a]]


def forward_eliminate(
    data: NDArray[np.floating[Any]],
    *,
    carry: NDArray[np.floating[Any]] | None = None,
    track_plu: bool = False,
    policy: PivotPolicy = EXACT_PIVOT,
) -> Elimination:
    """
    Reduce a copy of `data` to row echelon form.

    Args:
        data: Matrix values; never modified
        carry: Matrix to receive the same row operations (copied first)
        track_plu: Also accumulate the permutation and multiplier matrices
        policy: Zero-pivot rule; EXACT_PIVOT treats only 0.0 as zero

    Returns:
        Elimination with the reduced matrix and requested bookkeeping
    """
    work = np.array(data, dtype=np.float64, copy=True)
    n, m = work.shape
    state = Elimination(
        reduced=work,
        carried=None if carry is None else np.array(carry, dtype=np.float64, copy=True),
    )
    if track_plu:
        state.permutation = np.eye(n, dtype=np.float64)
        state.lower = np.zeros((n, n), dtype=np.float64)

    h = k = 0
    with np.errstate(invalid='ignore', over='ignore'):
        while h < n and k < m:
            magnitudes = np.abs(work[h:, k])
            # nan never wins the pivot search
            magnitudes = np.where(np.isnan(magnitudes), -np.inf, magnitudes)
            offset = int(np.argmax(magnitudes))
            peak = float(magnitudes[offset])

            if policy.is_zero(peak):
                if peak > 0.0:
                    state.suppressed.append((k, peak))
                    warnings.warn(
                        f"pivot {peak:.3e} in column {k} below tolerance "
                        f"{policy.atol:.3e}; column treated as zero",
                        RuntimeWarning,
                        stacklevel=3,
                    )
                k += 1
                continue

            pivot_row = h + offset
            if pivot_row != h:
                for array in (work, state.carried, state.permutation, state.lower):
                    _exchange(array, h, pivot_row)
                state.sign = -state.sign
                state.swaps += 1

            pivot = work[h, k]
            for i in range(h + 1, n):
                factor = work[i, k] / pivot
                work[i, k] = 0.0
                work[i, k + 1:] -= factor * work[h, k + 1:]
                if state.carried is not None:
                    state.carried[i, :] -= factor * state.carried[h, :]
                if state.lower is not None:
                    state.lower[i, h] = factor

            state.pivots.append((h, k))
            h += 1
            k += 1

    return state


def back_substitute(state: Elimination) -> NDArray[np.floating[Any]]:
    """
    Finish Gauss-Jordan inversion on a full-rank square elimination.

    Clears the entries above the diagonal of the reduced matrix, applying
    every row operation to the carried matrix as well, then divides each
    carried row by the matching diagonal entry.

    Args:
        state: Elimination of a square matrix with an identity carried along
               and no zero on the reduced diagonal

    Returns:
        The carried matrix after reduction, i.e. the inverse
    """
    work = state.reduced.copy()
    inv = state.carried.copy()
    n = work.shape[0]

    with np.errstate(invalid='ignore', over='ignore'):
        # h is both the row pivoted on and the column being cleared
        for h in range(1, n):
            for i in range(h):
                if work[i, h] == 0.0:
                    continue
                factor = work[i, h] / work[h, h]
                work[i, :] -= factor * work[h, :]
                inv[i, :] -= factor * inv[h, :]

        inv /= np.diag(work)[:, np.newaxis]
    return inv
