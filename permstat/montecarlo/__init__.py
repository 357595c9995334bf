"""
PermStat Monte Carlo methods.

Two-sample permutation testing of a difference in means with CPU and
GPU backends.

Usage:
    from permstat.montecarlo import run_permutation_test

    result = run_permutation_test(control, treatment, trials=1_000_000)
    result.observed_statistic, result.p_value
"""

from permstat.montecarlo.design import PermutationDesign, SampleSet
from permstat.montecarlo.solution import PermutationSolution
from permstat.montecarlo.solvers import permutation_test, run_permutation_test

__all__ = [
    "PermutationDesign",
    "PermutationSolution",
    "SampleSet",
    "permutation_test",
    "run_permutation_test",
]
