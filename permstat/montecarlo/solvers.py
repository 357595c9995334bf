"""
Solver dispatch for permutation testing.

permutation_test() builds a PermutationDesign, picks a backend and wraps
the Result in a PermutationSolution. run_permutation_test() is the same
operation with control/treatment naming.
"""

from __future__ import annotations

from typing import Literal

from numpy.typing import ArrayLike

from permstat.core.backends.device import detect_gpu
from permstat.core.exceptions import ValidationError
from permstat.montecarlo.backends.cpu import CPUPermutationBackend
from permstat.montecarlo.design import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_TRIALS,
    PermutationDesign,
)
from permstat.montecarlo.solution import PermutationSolution


BackendChoice = Literal['cpu', 'gpu', 'auto']


def _get_backend(backend: str = 'cpu'):
    """
    Select a permutation backend.

    'auto' uses the GPU when torch reports CUDA or MPS, else the CPU.
    """
    if backend == 'cpu':
        return CPUPermutationBackend()
    if backend == 'auto':
        device = detect_gpu()
        if device is None:
            return CPUPermutationBackend()
        from permstat.montecarlo.backends.gpu import GPUPermutationBackend
        return GPUPermutationBackend(device=device)
    if backend == 'gpu':
        from permstat.montecarlo.backends.gpu import GPUPermutationBackend
        return GPUPermutationBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu', 'gpu' or 'auto'."
    )


def permutation_test(
    x: ArrayLike | PermutationDesign,
    y: ArrayLike | None = None,
    R: int = DEFAULT_TRIALS,
    *,
    n_workers: int | None = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    seed: int | None = None,
    conf_level: float = 0.95,
    backend: BackendChoice = 'cpu',
) -> PermutationSolution:
    """
    Two-sided permutation test of a difference in means.

    The statistic is mean(y) - mean(x). A trial counts as extreme when
    |statistic| >= |observed|. The p-value is (count + 1) / (R + 1).

    Parameters
    ----------
    x : array-like or PermutationDesign
        Control sample, or a prebuilt design (remaining arguments except
        backend are then ignored).
    y : array-like
        Treatment sample.
    R : int
        Number of permutation trials. Default one million.
    n_workers : int or None
        Parallel workers. None uses every available CPU.
    batch_size : int
        Trials per vectorized batch inside a worker.
    seed : int or None
        Root seed for the per-worker streams. None (default) draws OS
        entropy. A fixed seed reproduces a run only for the same
        n_workers and backend.
    conf_level : float
        Confidence level of the Monte Carlo interval.
    backend : str
        'cpu' (default), 'gpu', or 'auto'.

    Returns
    -------
    PermutationSolution
    """
    if isinstance(x, PermutationDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y (treatment sample) is required")
        design = PermutationDesign.for_permutation_test(
            x, y, R,
            n_workers=n_workers,
            batch_size=batch_size,
            seed=seed,
            conf_level=conf_level,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return PermutationSolution(_result=result, _design=design)


def run_permutation_test(
    control: ArrayLike,
    treatment: ArrayLike,
    trials: int = DEFAULT_TRIALS,
    **kwargs,
) -> PermutationSolution:
    """
    Estimate the two-sided p-value that control and treatment share a
    distribution, using mean(treatment) - mean(control).

    Keyword arguments are those of permutation_test().
    """
    return permutation_test(control, treatment, trials, **kwargs)
