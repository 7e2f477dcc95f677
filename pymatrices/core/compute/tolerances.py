"""
Pivot policies and tolerance tiers.

Pivot policies decide when elimination treats a column as having no
usable pivot:
- EXACT_PIVOT (default): only an entry of exactly 0.0 is a zero pivot
- STRICT_PIVOT: entries with magnitude at or below 1e-12 are treated as zero

Tolerance tiers are the comparison tolerances used by Matrix.allclose
and the test suite.
"""

from dataclasses import dataclass

from pymatrices.core.validation import check_tolerance


@dataclass(frozen=True)
class PivotPolicy:
    """Zero-pivot threshold used by the elimination engine."""
    atol: float
    name: str

    @property
    def is_exact(self) -> bool:
        return self.atol == 0.0

    def is_zero(self, magnitude: float) -> bool:
        """True when a pivot of this absolute magnitude counts as zero."""
        # magnitudes are non-negative, so atol == 0.0 is an exact-zero test
        return magnitude <= self.atol


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact-zero pivot test
EXACT_PIVOT = PivotPolicy(atol=0.0, name='exact')

# Hardened pivot test for ill-conditioned input
STRICT_PIVOT = PivotPolicy(atol=1e-12, name='strict')

# Double precision comparison
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='Double precision, well-conditioned input',
)

# Double precision, ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e4)',
)


def select_pivot_policy(pivot_tol: 'float | PivotPolicy | None' = None) -> PivotPolicy:
    """
    Resolve a pivot tolerance argument to a PivotPolicy.

    None or 0.0 selects EXACT_PIVOT. A PivotPolicy is returned unchanged.
    Any other value must be a finite, non-negative number.
    """
    if pivot_tol is None:
        return EXACT_PIVOT
    if isinstance(pivot_tol, PivotPolicy):
        return pivot_tol
    atol = check_tolerance(pivot_tol, 'pivot_tol')
    if atol == 0.0:
        return EXACT_PIVOT
    if atol == STRICT_PIVOT.atol:
        return STRICT_PIVOT
    return PivotPolicy(atol=atol, name=f'atol={atol:g}')


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate comparison tier."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
