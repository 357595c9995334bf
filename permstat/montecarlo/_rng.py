"""
Random permutation streams for parallel workers.

Every worker gets its own numpy Generator, seeded from a child of one
root SeedSequence. SeedSequence.spawn hashes the spawn key into the child
state, so sibling streams are statistically independent even when the
root seed is a small integer. Workers never share a Generator.
"""

from __future__ import annotations

import numpy as np
from numpy.random import SeedSequence
from numpy.typing import NDArray

# Upper bound on index entries materialized per batch (8 bytes each).
MAX_BATCH_ELEMENTS = 1 << 22


def spawn_seed_sequences(n_streams: int, seed: int | None = None) -> list[SeedSequence]:
    """
    Independent child seed sequences for n_streams workers.

    Args:
        n_streams: Number of children to spawn.
        seed: Root entropy. None pulls fresh entropy from the OS.
    """
    return SeedSequence(seed).spawn(n_streams)


def spawn_generators(n_streams: int, seed: int | None = None) -> list[np.random.Generator]:
    """One PCG64 Generator per worker, each from its own child sequence."""
    return [np.random.default_rng(ss) for ss in spawn_seed_sequences(n_streams, seed)]


class PermutationGenerator:
    """
    Uniform random permutations of ``range(n)``.

    Wraps one worker-owned Generator. numpy shuffles with Fisher-Yates, so
    each of the n! orderings is equally likely, and every call draws fresh
    permutations from the stream.

    Args:
        n: Length of the pooled sample.
        rng: Generator owned by the calling worker.
    """

    def __init__(self, n: int, rng: np.random.Generator):
        self._n = n
        self._rng = rng
        self._identity = np.arange(n)

    @property
    def n(self) -> int:
        return self._n

    def permutation(self) -> NDArray[np.intp]:
        """A single permutation, shape (n,)."""
        return self._rng.permutation(self._n)

    def batch(self, size: int) -> NDArray[np.intp]:
        """
        ``size`` independent permutations, shape (size, n).

        Each row is shuffled independently (Generator.permuted along axis 1).
        """
        rows = np.tile(self._identity, (size, 1))
        return self._rng.permuted(rows, axis=1, out=rows)

    def batch_rows(self, batch_size: int) -> int:
        """Rows per batch after capping memory at MAX_BATCH_ELEMENTS."""
        return max(1, min(batch_size, MAX_BATCH_ELEMENTS // self._n))
