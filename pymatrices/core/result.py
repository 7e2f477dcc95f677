"""
Generic result container for checked PyMatrices computations.

The Result class is the envelope the checked solvers return. It carries
the payload together with timing, the name of the algorithm that produced
it, and any non-fatal numerical warnings.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (status, rank, swaps)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata recorded on every result."""
    import numpy as np
    from pymatrices import __version__

    return {
        'pymatrices_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for checked matrix computations.

    Type Parameters:
        P: The payload type

    Attributes:
        params: Computed payload (value, status, rank, ...)
        info: Structured metadata (operation, pivot policy, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Package and numpy versions

    Examples:
        >>> Result(
        ...     params=LinalgParams(value=1.0, status=Status.OK, rank=2, swaps=0),
        ...     info={'operation': 'determinant', 'pivot_policy': 'exact'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='python_elimination'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
