"""
Shared compute infrastructure for PermStat.

Timing utilities shared by the CPU and GPU permutation backends.

IMPORTANT: This is NOT where method backends live. Those go in
montecarlo/backends/.
"""

from permstat.core.compute.timing import Timer

__all__ = [
    "Timer",
]
