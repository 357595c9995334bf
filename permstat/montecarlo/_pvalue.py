"""
P-value estimation from a permutation extreme count.

Convention: add-one (Phipson-Smyth) smoothing,

    p = (count + 1) / (trials + 1)

which counts the observed labeling as one of the draws. The estimate is
never 0 and lies in (0, 1]. The unsmoothed ratio count / trials is used
only for the Monte Carlo confidence interval, where it is the binomial
proportion actually being estimated.
"""

from __future__ import annotations

import math

from scipy import stats

from permstat.core.exceptions import ValidationError

# Evidence thresholds, ascending. First match wins.
_EVIDENCE_LEVELS = (
    (0.01, "very strong evidence against null hypothesis"),
    (0.025, "strong evidence against null hypothesis"),
    (0.05, "reasonably strong evidence against null hypothesis"),
    (0.10, "borderline evidence against null hypothesis"),
)
_NO_EVIDENCE = "no evidence against null hypothesis"


def _check_count(extreme_count: int, trials: int) -> None:
    if trials < 1:
        raise ValidationError(f"trials must be >= 1, got {trials}")
    if not 0 <= extreme_count <= trials:
        raise ValidationError(
            f"extreme_count must be in [0, {trials}], got {extreme_count}"
        )


def estimate_p_value(extreme_count: int, trials: int) -> float:
    """
    Smoothed permutation p-value, (count + 1) / (trials + 1).

    Raises:
        ValidationError: If trials < 1 or count is outside [0, trials].
    """
    _check_count(extreme_count, trials)
    return (extreme_count + 1) / (trials + 1)


def monte_carlo_se(p_value: float, trials: int) -> float:
    """Binomial standard error sqrt(p (1 - p) / trials) of a p-value estimate."""
    return math.sqrt(p_value * (1.0 - p_value) / trials)


def p_value_conf_int(
    extreme_count: int,
    trials: int,
    conf_level: float = 0.95,
) -> tuple[float, float]:
    """
    Clopper-Pearson interval for the exact permutation p-value.

    Treats each trial as a Bernoulli draw with success probability equal to
    the true permutation p-value, so count ~ Binomial(trials, p).

    Returns:
        (lower, upper), both in [0, 1].
    """
    _check_count(extreme_count, trials)
    alpha = 1.0 - conf_level
    if extreme_count == 0:
        lower = 0.0
    else:
        lower = float(stats.beta.ppf(alpha / 2, extreme_count, trials - extreme_count + 1))
    if extreme_count == trials:
        upper = 1.0
    else:
        upper = float(stats.beta.ppf(1 - alpha / 2, extreme_count + 1, trials - extreme_count))
    return lower, upper


def evidence_label(p_value: float) -> str:
    """Conventional wording for the strength of evidence against the null."""
    for threshold, label in _EVIDENCE_LEVELS:
        if p_value < threshold:
            return label
    return _NO_EVIDENCE
