"""
Common data structures for permutation testing.

PermutationParams is the parameter payload wrapped by Result[P] and
exposed through PermutationSolution. extreme_threshold is shared by the
CPU and GPU engines so both count ties the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from permstat.montecarlo._pvalue import (
    estimate_p_value,
    monte_carlo_se,
    p_value_conf_int,
)

# Tie slack in units of n_pooled * eps * max(1, max|pooled|), a bound on the
# rounding error of the two group sums. A relabeling that reproduces the
# observed groups must count as extreme whatever its summation order.
TIE_ULPS = 8


@dataclass(frozen=True)
class PermutationParams:
    """
    Parameter payload for permutation test results.

    - observed_stat: mean(treatment) - mean(control) on the real labeling
    - extreme_count: trials with |stat| >= |observed_stat|
    - p_value: (extreme_count + 1) / (trials + 1)
    - p_value_se: binomial Monte Carlo standard error of p_value
    - conf_int: Clopper-Pearson interval for the exact permutation p-value
    """
    observed_stat: float
    mean_control: float
    mean_treatment: float
    extreme_count: int
    p_value: float
    trials: int
    p_value_se: float
    conf_int: tuple[float, float]
    conf_level: float


def extreme_threshold(
    observed: float,
    pooled: NDArray[np.floating[Any]],
    eps: float = float(np.finfo(np.float64).eps),
) -> float:
    """
    Smallest |trial statistic| that counts as at least as extreme.

    The slack tracks the rounding error of summing n_pooled values of the
    pooled magnitude, so a large common offset does not swamp a small
    observed difference. When observed is 0 the threshold is negative and
    every trial counts.

    Args:
        observed: Observed statistic.
        pooled: Pooled sample the trials are drawn from.
        eps: Machine epsilon of the dtype the trial sums run in.
    """
    scale = max(1.0, float(np.max(np.abs(pooled))))
    return abs(observed) - TIE_ULPS * pooled.shape[0] * eps * scale


def build_params(
    observed: float,
    mean_control: float,
    mean_treatment: float,
    extreme_count: int,
    trials: int,
    conf_level: float,
) -> PermutationParams:
    """Assemble the payload from the merged extreme count."""
    p_value = estimate_p_value(extreme_count, trials)
    return PermutationParams(
        observed_stat=observed,
        mean_control=mean_control,
        mean_treatment=mean_treatment,
        extreme_count=extreme_count,
        p_value=p_value,
        trials=trials,
        p_value_se=monte_carlo_se(p_value, trials),
        conf_int=p_value_conf_int(extreme_count, trials, conf_level),
        conf_level=conf_level,
    )
