"""
Core protocols for PermStat.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that CPU and GPU engines need no common base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter
    payload wrapped in a Result. The backend owns all hardware-specific
    computation (worker fan-out, device placement, batching).

    Backends are stateless between calls. All configuration is passed
    via the design or at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_permutation', 'gpu_cuda_permutation'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the statistical computation.

        Args:
            design: Validated design object

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If design is invalid for this backend
        """
        ...
