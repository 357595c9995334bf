"""
Hardware detection for engine selection.

Answers two questions the solvers need: how many CPU workers to fan out
to, and whether a torch GPU device (CUDA or MPS) is usable.
"""

import os
from typing import Literal


def cpu_worker_count() -> int:
    """
    Number of CPU workers available to this process.

    Uses the scheduler affinity mask where the platform exposes one,
    so containers pinned to a subset of cores are respected.
    """
    try:
        return max(1, len(os.sched_getaffinity(0)))
    except AttributeError:
        return max(1, os.cpu_count() or 1)


def detect_gpu() -> Literal['cuda', 'mps'] | None:
    """
    Detect available GPU, if any.

    Returns:
        'cuda' or 'mps' for the best available device, None otherwise.

    Priority: CUDA > MPS (Apple Silicon)

    Note:
        torch is imported lazily so the CPU path never pays for it.
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        return 'cuda'
    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return 'mps'
    return None
