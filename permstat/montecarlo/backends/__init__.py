"""
Permutation test backends.

cpu: joblib worker fan-out over vectorized numpy batches (default).
gpu: batched torch kernels on CUDA or MPS. Imported lazily by the solver.
"""

from permstat.montecarlo.backends.cpu import CPUPermutationBackend

__all__ = ["CPUPermutationBackend"]
