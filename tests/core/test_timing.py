"""
Tests for the section Timer.
"""

import pytest

from permstat.core.compute.timing import Timer


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('trials'):
            pass
        with timer.section('trials'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'trials'}
        assert result['total_seconds'] >= 0.0

    def test_sync_hook_called(self):
        calls = []
        timer = Timer(sync=lambda: calls.append(1))
        timer.start()
        with timer.section('a'):
            pass
        timer.stop()
        assert len(calls) == 4

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
