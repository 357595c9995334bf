"""
Tests for the mean-difference statistic and the tie threshold.
"""

import numpy as np
import pytest

from permstat.montecarlo._common import extreme_threshold
from permstat.montecarlo._statistic import (
    group_means,
    mean_difference,
    mean_difference_batch,
)


class TestScalarStatistic:

    def test_group_means(self):
        values = np.array([1.0, 2.0, 3.0, 10.0, 20.0])
        assert group_means(values, 3) == (2.0, 15.0)

    def test_mean_difference(self):
        values = np.array([1.0, 2.0, 3.0, 10.0, 20.0])
        assert mean_difference(values, 3) == 13.0

    def test_one_element_groups(self):
        assert mean_difference(np.array([1.0, 2.0]), 1) == 1.0

    def test_does_not_modify_input(self):
        values = np.array([4.0, 1.0, 3.0])
        mean_difference(values, 1)
        np.testing.assert_array_equal(values, [4.0, 1.0, 3.0])


class TestBatchStatistic:

    def test_matches_scalar_per_row(self, rng):
        pooled = rng.normal(50, 20, 16)
        perms = np.array([rng.permutation(16) for _ in range(200)])

        batch = mean_difference_batch(pooled, perms, 9)
        expected = [mean_difference(pooled[p], 9) for p in perms]

        np.testing.assert_allclose(batch, expected, rtol=1e-12, atol=1e-12)

    def test_shape(self):
        perms = np.tile(np.arange(5), (7, 1))
        assert mean_difference_batch(np.arange(5.0), perms, 2).shape == (7,)


class TestExtremeThreshold:

    def test_zero_observed_counts_everything(self):
        assert extreme_threshold(0.0, np.array([1.0, 2.0])) < 0.0

    def test_slack_scales_with_data(self):
        small = abs(30.0) - extreme_threshold(30.0, np.array([1.0, 2.0]))
        large = abs(30.0) - extreme_threshold(30.0, np.array([1e6, 2.0]))
        assert large > small > 0.0

    def test_within_group_reorderings_meet_threshold(self, rng):
        """Relabelings that keep the observed groups always count as extreme."""
        control = rng.uniform(0, 1, 40) * 0.1
        treatment = rng.uniform(0, 1, 25) * 0.3
        pooled = np.concatenate([control, treatment])
        observed = mean_difference(pooled, 40)

        perms = np.array([
            np.concatenate([rng.permutation(40), 40 + rng.permutation(25)])
            for _ in range(500)
        ])
        outcomes = mean_difference_batch(pooled, perms, 40)

        assert np.all(np.abs(outcomes) >= extreme_threshold(observed, pooled))

    def test_custom_eps(self):
        pooled = np.array([10.0])
        assert extreme_threshold(5.0, pooled, eps=0.001) == pytest.approx(4.92)

    def test_large_offset_keeps_small_effect_positive(self):
        pooled = np.concatenate([np.full(5, 1e9), np.full(5, 1e9) + 0.0005])
        observed = mean_difference(pooled, 5)
        threshold = extreme_threshold(observed, pooled)
        assert 0.0 < threshold < abs(observed)
        # Swapping one value each way gives |stat| ~ 0.0003, not extreme
        assert threshold > 0.0004

    def test_large_offset_mirror_labeling_counts(self):
        pooled = np.concatenate([np.full(5, 1e9), np.full(5, 1e9) + 0.0005])
        observed = mean_difference(pooled, 5)
        mirror = np.concatenate([np.arange(5, 10), np.arange(5)])[None, :]
        outcome = mean_difference_batch(pooled, mirror, 5)
        assert abs(outcome[0]) >= extreme_threshold(observed, pooled)
