"""
Mean-difference statistic for a labeling of the pooled sample.

A labeling is an ordering of the pooled values whose first n_control
entries form the control group and whose remainder forms the treatment
group. The statistic is mean(treatment) - mean(control).

All functions here are pure: they read their inputs and allocate their
outputs, so any number of workers may call them concurrently.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def group_means(
    values: NDArray[np.floating[Any]],
    n_control: int,
) -> tuple[float, float]:
    """
    Arithmetic means of the two groups of a labeling.

    Args:
        values: Pooled values in labeling order, shape (n,).
        n_control: Size of the leading control group, 1 <= n_control < n.

    Returns:
        (mean_control, mean_treatment)
    """
    n_treatment = values.shape[0] - n_control
    mean_control = float(np.sum(values[:n_control])) / n_control
    mean_treatment = float(np.sum(values[n_control:])) / n_treatment
    return mean_control, mean_treatment


def mean_difference(values: NDArray[np.floating[Any]], n_control: int) -> float:
    """mean(values[n_control:]) - mean(values[:n_control])."""
    mean_control, mean_treatment = group_means(values, n_control)
    return mean_treatment - mean_control


def mean_difference_batch(
    pooled: NDArray[np.floating[Any]],
    perms: NDArray[np.intp],
    n_control: int,
) -> NDArray[np.floating[Any]]:
    """
    Mean difference for a batch of index permutations.

    Row b of ``perms`` is one trial's labeling: ``pooled[perms[b]]`` is the
    relabeled sample, its first n_control entries the control group.

    Args:
        pooled: Pooled sample, shape (n,).
        perms: Index permutations, shape (B, n).
        n_control: Control group size.

    Returns:
        Statistic per trial, shape (B,).
    """
    n_treatment = pooled.shape[0] - n_control
    relabeled = pooled[perms]
    control_sums = relabeled[:, :n_control].sum(axis=1)
    treatment_sums = relabeled[:, n_control:].sum(axis=1)
    return treatment_sums / n_treatment - control_sums / n_control
