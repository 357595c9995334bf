"""
Tests for the GPU permutation backend.

The GPU draws its own random stream, so results are compared with the
CPU backend statistically rather than exactly.

Skipped if no GPU (CUDA or MPS) is available.
"""

import numpy as np
import pytest

from permstat.montecarlo import run_permutation_test


class TestGPUPermutation:

    def test_observed_exact(self, gpu_available, mouse_data):
        control, treatment = mouse_data
        result = run_permutation_test(
            control, treatment, trials=1_000, seed=1, backend='gpu',
        )
        assert result.observed_statistic == pytest.approx(30.63492063492064, rel=1e-12)
        assert gpu_available in result.backend_name

    def test_matches_cpu_statistically(self, gpu_available, mouse_data):
        control, treatment = mouse_data
        trials = 200_000
        gpu = run_permutation_test(control, treatment, trials, seed=2, backend='gpu')
        cpu = run_permutation_test(control, treatment, trials, seed=2, backend='cpu')

        p = (gpu.p_value + cpu.p_value) / 2
        se = np.sqrt(p * (1 - p) / trials)
        assert abs(gpu.p_value - cpu.p_value) < 6 * np.sqrt(2) * se

    def test_ties_count(self, gpu_available):
        result = run_permutation_test([1.0], [2.0], trials=500, seed=3, backend='gpu')
        assert result.p_value == 1.0

    def test_seed_reproducible(self, gpu_available, mouse_data):
        control, treatment = mouse_data
        r1 = run_permutation_test(control, treatment, 10_000, seed=4, backend='gpu')
        r2 = run_permutation_test(control, treatment, 10_000, seed=4, backend='gpu')
        assert r1.extreme_count == r2.extreme_count

    def test_auto_selects_gpu(self, gpu_available):
        result = run_permutation_test([1.0, 2.0], [3.0], trials=10, backend='auto')
        assert result.backend_name.startswith('gpu_')
