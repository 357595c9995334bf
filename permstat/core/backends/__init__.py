"""
Shared backend infrastructure for PermStat.

Hardware detection used by the solvers to pick an engine and size the
CPU worker pool.

Submodules:
    device: CPU worker count and GPU detection
"""

from permstat.core.backends.device import cpu_worker_count, detect_gpu

__all__ = [
    "cpu_worker_count",
    "detect_gpu",
]
