"""
Tests for the Backend protocol.
"""

from permstat.core.protocols import Backend
from permstat.montecarlo.backends.cpu import CPUPermutationBackend


class NotABackend:
    name = 'missing_solve'


class TestBackendProtocol:

    def test_cpu_backend_satisfies_protocol(self):
        assert isinstance(CPUPermutationBackend(), Backend)

    def test_object_without_solve_rejected(self):
        assert not isinstance(NotABackend(), Backend)
