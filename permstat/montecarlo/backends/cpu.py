"""
CPU backend for the mean-difference permutation test.

Trials are split across workers with joblib. Each worker owns a Generator
spawned from the run's root SeedSequence and a local extreme count; the
counts are summed once all workers return. Inside a worker, trials are
drawn in vectorized batches of index permutations.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from joblib import Parallel, delayed
from numpy.random import SeedSequence
from numpy.typing import NDArray

from permstat.core.backends.device import cpu_worker_count
from permstat.core.compute.timing import Timer
from permstat.core.result import Result
from permstat.montecarlo._common import (
    PermutationParams,
    build_params,
    extreme_threshold,
)
from permstat.montecarlo._rng import PermutationGenerator, spawn_seed_sequences
from permstat.montecarlo._statistic import group_means, mean_difference_batch
from permstat.montecarlo.design import PermutationDesign


def split_trials(trials: int, n_workers: int) -> list[int]:
    """Per-worker trial shares, differing by at most one, summing to trials."""
    base, extra = divmod(trials, n_workers)
    return [base + 1 if i < extra else base for i in range(n_workers)]


def count_extreme(
    pooled: NDArray[np.floating[Any]],
    n_control: int,
    threshold: float,
    n_trials: int,
    batch_size: int,
    seed_seq: SeedSequence,
) -> int:
    """
    Run one worker's share of trials and return its local extreme count.

    Args:
        pooled: Read-only pooled sample.
        n_control: Control group size.
        threshold: Minimum |statistic| counted as extreme.
        n_trials: Trials assigned to this worker.
        batch_size: Requested trials per batch (capped by memory).
        seed_seq: This worker's child seed sequence.
    """
    gen = PermutationGenerator(pooled.shape[0], np.random.default_rng(seed_seq))
    rows = gen.batch_rows(batch_size)

    count = 0
    remaining = n_trials
    while remaining > 0:
        size = min(rows, remaining)
        outcomes = mean_difference_batch(pooled, gen.batch(size), n_control)
        count += int(np.count_nonzero(np.abs(outcomes) >= threshold))
        remaining -= size
    return count


class CPUPermutationBackend:
    """
    CPU backend for permutation testing.

    Fans trials out to joblib thread workers. numpy releases the GIL in
    its gather and reduction kernels, and threads share the read-only
    pooled array without copying it.

    P-value uses the add-one correction: (count + 1) / (trials + 1).
    """

    @property
    def name(self) -> str:
        return 'cpu_permutation'

    def solve(self, design: PermutationDesign) -> Result[PermutationParams]:
        """Run the permutation test and return Result[PermutationParams]."""
        timer = Timer()
        timer.start()

        samples = design.samples
        pooled = samples.pooled
        n_control = samples.n_control
        trials = design.trials
        warnings_list: list[str] = []

        n_workers = design.n_workers or cpu_worker_count()
        if n_workers > trials:
            if design.n_workers is not None:
                msg = (
                    f"n_workers={n_workers} exceeds trials={trials}; "
                    f"using {trials} workers"
                )
                warnings.warn(msg, RuntimeWarning, stacklevel=2)
                warnings_list.append(msg)
            n_workers = trials

        # Observed statistic on the identity labeling
        with timer.section('observed_stat'):
            mean_control, mean_treatment = group_means(pooled, n_control)
            observed = mean_treatment - mean_control
            threshold = extreme_threshold(observed, pooled)

        with timer.section('permutation_trials'):
            shares = split_trials(trials, n_workers)
            seed_seqs = spawn_seed_sequences(n_workers, design.seed)
            worker_counts = Parallel(n_jobs=n_workers, prefer="threads")(
                delayed(count_extreme)(
                    pooled, n_control, threshold, share,
                    design.batch_size, seed_seq,
                )
                for share, seed_seq in zip(shares, seed_seqs)
            )
            extreme_count = int(sum(worker_counts))

        with timer.section('p_value'):
            params = build_params(
                observed, mean_control, mean_treatment,
                extreme_count, trials, design.conf_level,
            )

        timer.stop()

        return Result(
            params=params,
            info={
                'n_control': n_control,
                'n_treatment': samples.n_treatment,
                'n_workers': n_workers,
                'batch_size': design.batch_size,
                'worker_counts': tuple(worker_counts),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
