"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from permstat.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_fields(self):
        result = Result(
            params=FakeParams(value=1.0),
            info={"n_workers": 4},
            timing={"total_seconds": 1.0, "permutation_trials": 0.9},
            backend_name="cpu_permutation",
        )
        assert result.params.value == 1.0
        assert result.info["n_workers"] == 4
        assert result.timing["permutation_trials"] == 0.9

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert not result.has_warning("anything")

    def test_has_warning_substring(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("n_workers=8 exceeds trials=2; using 2 workers",),
        )
        assert result.has_warning("exceeds trials")
        assert not result.has_warning("GPU")
