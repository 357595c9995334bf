"""
GPU backend for the mean-difference permutation test.

Mean difference is a batched operation, so the GPU evaluates whole
batches of relabelings at once: random keys are drawn per row, argsort
turns them into uniform permutations, and a gather plus two row sums
give every trial's statistic. The device is the single worker; its
torch.Generator is seeded from a spawned SeedSequence child.

Requires PyTorch with CUDA or MPS.
"""

from __future__ import annotations

import numpy as np

from permstat.core.compute.timing import Timer
from permstat.core.exceptions import BackendUnavailableError
from permstat.core.result import Result
from permstat.montecarlo._common import (
    PermutationParams,
    build_params,
    extreme_threshold,
)
from permstat.montecarlo._rng import MAX_BATCH_ELEMENTS, spawn_seed_sequences
from permstat.montecarlo._statistic import group_means
from permstat.montecarlo.design import PermutationDesign


class GPUPermutationBackend:
    """
    GPU backend for permutation testing.

    CUDA runs in float64 and matches the CPU tie rule exactly. MPS runs
    in float32, with the tie slack widened to float32 epsilon.

    Args:
        device: 'cuda', 'mps', or 'auto'
    """

    def __init__(self, device: str = 'auto'):
        try:
            import torch
        except ImportError as e:
            raise BackendUnavailableError(
                "GPU backend requires PyTorch (pip install permstat[gpu])",
                backend='gpu',
            ) from e

        self._torch = torch

        if device == 'auto':
            if torch.cuda.is_available():
                self._device = 'cuda'
            elif hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
                self._device = 'mps'
            else:
                raise BackendUnavailableError(
                    "No GPU available (need CUDA or MPS)", backend='gpu',
                )
        else:
            self._device = device

        self._dtype = torch.float32 if self._device == 'mps' else torch.float64

    @property
    def name(self) -> str:
        return f'gpu_{self._device}_permutation'

    def solve(self, design: PermutationDesign) -> Result[PermutationParams]:
        """Run all trials on the device and return Result[PermutationParams]."""
        torch = self._torch
        sync = torch.cuda.synchronize if self._device == 'cuda' else None
        timer = Timer(sync=sync)
        timer.start()

        samples = design.samples
        pooled = samples.pooled
        n = samples.n_pooled
        n_control = samples.n_control
        n_treatment = samples.n_treatment
        trials = design.trials
        eps = float(np.finfo(np.float32 if self._dtype == torch.float32 else np.float64).eps)

        # Observed statistic stays on the host in float64
        with timer.section('observed_stat'):
            mean_control, mean_treatment = group_means(pooled, n_control)
            observed = mean_treatment - mean_control
            threshold = extreme_threshold(observed, pooled, eps=eps)

        with timer.section('permutation_trials'):
            (seed_seq,) = spawn_seed_sequences(1, design.seed)
            gen = torch.Generator(device=self._device)
            gen.manual_seed(int(seed_seq.generate_state(1, np.uint64)[0]) >> 1)

            pooled_t = torch.as_tensor(pooled, dtype=self._dtype, device=self._device)
            rows = max(1, min(design.batch_size, MAX_BATCH_ELEMENTS // n))

            extreme_count = 0
            remaining = trials
            while remaining > 0:
                size = min(rows, remaining)
                keys = torch.rand(
                    (size, n), generator=gen,
                    dtype=self._dtype, device=self._device,
                )
                relabeled = pooled_t[keys.argsort(dim=1)]
                control_sums = relabeled[:, :n_control].sum(dim=1)
                treatment_sums = relabeled[:, n_control:].sum(dim=1)
                outcomes = treatment_sums / n_treatment - control_sums / n_control
                extreme_count += int((outcomes.abs() >= threshold).sum().item())
                remaining -= size

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
                'n_treatment': n_treatment,
                'n_workers': 1,
                'batch_size': design.batch_size,
                'device': self._device,
                'dtype': str(self._dtype),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
