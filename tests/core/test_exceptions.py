"""
Tests for PermStat exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PermStatError)
    - Diagnostic attributes on sample, trial, non-finite and load errors
    - Default attribute values
"""

import pytest

from permstat.core.exceptions import (
    BackendUnavailableError,
    DimensionError,
    InvalidSampleSizeError,
    InvalidTrialCountError,
    NonFiniteValueError,
    PermStatError,
    SampleLoadError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PermStatError."""

    @pytest.mark.parametrize("exc", [
        DimensionError,
        InvalidSampleSizeError,
        InvalidTrialCountError,
        NonFiniteValueError,
    ])
    def test_validation_subclasses(self, exc):
        assert issubclass(exc, ValidationError)
        assert issubclass(exc, PermStatError)

    def test_validation_error_is_permstat_error(self):
        with pytest.raises(PermStatError):
            raise ValidationError("bad input")

    def test_sample_load_error_is_not_validation_error(self):
        err = SampleLoadError("cannot read")
        assert isinstance(err, PermStatError)
        assert not isinstance(err, ValidationError)

    def test_backend_unavailable_is_permstat_error(self):
        err = BackendUnavailableError("no GPU", backend="gpu")
        assert isinstance(err, PermStatError)
        assert not isinstance(err, ValidationError)
        assert err.backend == "gpu"


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_invalid_sample_size(self):
        err = InvalidSampleSizeError("control is empty", name="control", size=0)
        assert str(err) == "control is empty"
        assert err.name == "control"
        assert err.size == 0
        assert err.min_size == 1

    def test_invalid_trial_count(self):
        err = InvalidTrialCountError("trials must be >= 1", trials=0)
        assert err.trials == 0

    def test_non_finite_defaults(self):
        err = NonFiniteValueError("bad")
        assert err.name is None
        assert err.n_nan == 0
        assert err.n_inf == 0

    def test_sample_load_error(self):
        err = SampleLoadError("parse failed", path="c.dat", line_number=3)
        assert err.path == "c.dat"
        assert err.line_number == 3
