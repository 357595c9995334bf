"""
Exception hierarchy for PermStat.

All exceptions inherit from PermStatError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PermStatError(Exception):
    """Base exception for all PermStat errors."""
    pass


class ValidationError(PermStatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not a 1D sequence of numbers.
    """
    pass


class InvalidSampleSizeError(ValidationError):
    """
    A sample has fewer observations than required.

    Attributes:
        name: Which sample failed ('control', 'treatment', ...)
        size: Number of observations actually supplied
        min_size: Minimum number of observations required
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        size: int | None = None,
        min_size: int = 1
    ):
        super().__init__(message)
        self.name = name
        self.size = size
        self.min_size = min_size


class InvalidTrialCountError(ValidationError):
    """
    The requested number of permutation trials is unusable.

    Attributes:
        trials: The rejected trial count
    """

    def __init__(self, message: str, trials: object = None):
        super().__init__(message)
        self.trials = trials


class NonFiniteValueError(ValidationError):
    """
    A sample contains NaN or infinite values.

    Raised eagerly when the sample set is built, so a bad value can never
    reach a partial sum inside a trial.

    Attributes:
        name: Which sample failed
        n_nan: Number of NaN entries
        n_inf: Number of +/-Inf entries
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        n_nan: int = 0,
        n_inf: int = 0
    ):
        super().__init__(message)
        self.name = name
        self.n_nan = n_nan
        self.n_inf = n_inf


class SampleLoadError(PermStatError):
    """
    A sample file could not be read or parsed.

    Attributes:
        path: File being read
        line_number: 1-based line that failed to parse, if any
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        line_number: int | None = None
    ):
        super().__init__(message)
        self.path = path
        self.line_number = line_number


class BackendUnavailableError(PermStatError):
    """
    The requested compute backend cannot run on this machine.

    Raised when the GPU backend is requested without PyTorch installed
    or without a CUDA or MPS device.

    Attributes:
        backend: The requested backend name
    """

    def __init__(self, message: str, backend: str | None = None):
        super().__init__(message)
        self.backend = backend
