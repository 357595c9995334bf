"""
Execution timing utilities.

Wall-clock timing for backend sections. GPU backends pass a device
synchronization hook so queued kernels are finished before a clock read.
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator


class Timer:
    """
    Accumulating section timer.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('observed_stat'):
            observed = mean_difference(pooled, n_control)

        with timer.section('permutation_trials'):
            count = engine.run(...)

        timer.stop()
        timer.result()
        # {'total_seconds': 0.41, 'observed_stat': 1e-05, 'permutation_trials': 0.40}
    """

    def __init__(self, sync: Callable[[], None] | None = None):
        """
        Args:
            sync: Optional zero-argument callable invoked before every clock
                  read (e.g. torch.cuda.synchronize).
        """
        self._sync_fn = sync
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def _sync(self) -> None:
        if self._sync_fn is not None:
            self._sync_fn()

    def start(self) -> None:
        """Start the overall timer."""
        self._sync()
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        self._sync()
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section. Repeated sections accumulate.

        Args:
            name: Section identifier (used as key in result dict)
        """
        self._sync()
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sync()
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - start
            )

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result
