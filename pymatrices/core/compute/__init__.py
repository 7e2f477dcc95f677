"""
Shared compute infrastructure for PyMatrices.

This module provides pivot policies, precision helpers and timing
utilities shared by the matrix kernel.

Submodules:
    tolerances: Pivot policies and comparison tolerance tiers
    precision: Comparison defaults and IEEE-754 scalar helpers
    timing: Execution timing utilities
"""

from pymatrices.core.compute.tolerances import (
    PivotPolicy,
    ToleranceTier,
    EXACT_PIVOT,
    STRICT_PIVOT,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    select_pivot_policy,
    select_tolerance,
)
from pymatrices.core.compute.timing import Timer, timed

__all__ = [
    # Tolerances
    "PivotPolicy",
    "ToleranceTier",
    "EXACT_PIVOT",
    "STRICT_PIVOT",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_pivot_policy",
    "select_tolerance",
    # Timing
    "Timer",
    "timed",
]
