"""
Core infrastructure for PermStat.

This module provides shared abstractions, utilities, and backend
infrastructure used by the Monte Carlo methods.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    datasource: Sample file loading
    backends: Hardware detection
    compute: Timing
"""

from permstat.core.protocols import Backend
from permstat.core.result import Result
from permstat.core.exceptions import (
    PermStatError,
    ValidationError,
    DimensionError,
    InvalidSampleSizeError,
    InvalidTrialCountError,
    NonFiniteValueError,
    SampleLoadError,
    BackendUnavailableError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PermStatError",
    "ValidationError",
    "DimensionError",
    "InvalidSampleSizeError",
    "InvalidTrialCountError",
    "NonFiniteValueError",
    "SampleLoadError",
    "BackendUnavailableError",
]
