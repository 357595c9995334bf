"""
Design classes for permutation testing.

SampleSet holds the two samples and their pooled concatenation.
PermutationDesign adds the run configuration. Both are immutable and
validated at construction, so a backend never sees a bad value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from permstat.core.exceptions import ValidationError
from permstat.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_min_samples,
    check_positive_int,
    check_trials,
)

DEFAULT_TRIALS = 1_000_000
DEFAULT_BATCH_SIZE = 10_000


def _as_sample(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validate one sample and return a read-only float64 copy."""
    arr = check_array(values, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)
    check_min_samples(arr, 1, name)
    check_finite(arr, name)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True)
class SampleSet:
    """
    Control and treatment samples plus their pooled concatenation.

    Attributes:
        control: Control sample, shape (n_control,).
        treatment: Treatment sample, shape (n_treatment,).
        pooled: control followed by treatment, shape (n_control + n_treatment,).

    All three arrays are read-only. The pooled ordering matters: the first
    n_control entries are the identity labeling's control group.
    """
    control: NDArray[np.floating[Any]]
    treatment: NDArray[np.floating[Any]]
    pooled: NDArray[np.floating[Any]]

    @classmethod
    def from_samples(cls, control: ArrayLike, treatment: ArrayLike) -> SampleSet:
        """
        Build a validated SampleSet.

        Args:
            control: Control observations. Scalars are treated as a
                one-element sample.
            treatment: Treatment observations.

        Raises:
            ValidationError: If either sample is non-numeric.
            DimensionError: If either sample is not 1D.
            InvalidSampleSizeError: If either sample is empty.
            NonFiniteValueError: If either sample contains NaN or Inf.
        """
        control_arr = _as_sample(control, "control")
        treatment_arr = _as_sample(treatment, "treatment")

        pooled = np.concatenate([control_arr, treatment_arr])
        pooled.flags.writeable = False

        return cls(control=control_arr, treatment=treatment_arr, pooled=pooled)

    @property
    def n_control(self) -> int:
        return self.control.shape[0]

    @property
    def n_treatment(self) -> int:
        return self.treatment.shape[0]

    @property
    def n_pooled(self) -> int:
        return self.pooled.shape[0]


@dataclass(frozen=True)
class PermutationDesign:
    """
    Frozen design for a two-sample mean-difference permutation test.

    Attributes:
        samples: Validated SampleSet.
        trials: Number of random relabelings.
        n_workers: Parallel workers, or None for one per available CPU.
        batch_size: Trials drawn per vectorized batch inside a worker.
        seed: Root seed for the per-worker streams. None draws fresh OS
            entropy, so repeated runs use different permutations.
        conf_level: Confidence level of the Monte Carlo interval reported
            alongside the p-value.
    """
    samples: SampleSet
    trials: int
    n_workers: int | None
    batch_size: int
    seed: int | None
    conf_level: float

    @classmethod
    def for_permutation_test(
        cls,
        control: ArrayLike,
        treatment: ArrayLike,
        trials: int = DEFAULT_TRIALS,
        *,
        n_workers: int | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        seed: int | None = None,
        conf_level: float = 0.95,
    ) -> PermutationDesign:
        """
        Create a permutation test design with validation.

        Args:
            control: Control sample.
            treatment: Treatment sample.
            trials: Number of permutation trials. Must be >= 1.
            n_workers: Number of parallel workers (>= 1) or None.
            batch_size: Trials per vectorized batch. Must be >= 1.
            seed: Root seed, or None for OS entropy.
            conf_level: In (0, 1).

        Returns:
            Validated PermutationDesign.

        Raises:
            InvalidTrialCountError: If trials < 1.
            ValidationError: For any other invalid option.
        """
        samples = SampleSet.from_samples(control, treatment)
        trials = check_trials(trials)

        if n_workers is not None:
            n_workers = check_positive_int(n_workers, "n_workers")
        batch_size = check_positive_int(batch_size, "batch_size")

        if not 0.0 < conf_level < 1.0:
            raise ValidationError(
                f"conf_level must be in (0, 1), got {conf_level}"
            )

        return cls(
            samples=samples,
            trials=trials,
            n_workers=n_workers,
            batch_size=batch_size,
            seed=seed,
            conf_level=float(conf_level),
        )
