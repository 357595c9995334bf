"""
Generic result container for all PermStat computations.

The Result class provides a standardized envelope that every backend
returns. This enables shared tooling for timing, warnings and display
while allowing each method to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (worker count, batch size, device)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The method-specific parameter payload type

    Attributes:
        params: Method-specific parameters (statistic, p-value, ...)
        info: Structured metadata (sample sizes, workers, batch size)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PermutationParams(...),
        ...     info={'n_control': 9, 'n_treatment': 7, 'n_workers': 8},
        ...     timing={'total_seconds': 0.4, 'permutation_trials': 0.39},
        ...     backend_name='cpu_permutation'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
