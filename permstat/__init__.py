"""
PermStat: parallel permutation testing for Python.

Estimates the two-sided p-value that a control and a treatment sample
come from the same distribution, using the difference of means as the
test statistic and random relabeling of the pooled data.

Submodules:
    montecarlo: Permutation test design, engines and results
    core: Exceptions, validation, result envelope, sample loading
"""

__version__ = "0.1.0"

from permstat import montecarlo
from permstat.montecarlo import run_permutation_test, permutation_test

__all__ = [
    "__version__",
    "montecarlo",
    "permutation_test",
    "run_permutation_test",
]
