"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def mouse_data():
    """Mouse survival times, Table 2.1 of Efron & Tibshirani (1993)."""
    control = np.array([52.0, 104.0, 146.0, 10.0, 51.0, 30.0, 40.0, 27.0, 46.0])
    treatment = np.array([94.0, 197.0, 16.0, 38.0, 99.0, 141.0, 23.0])
    return control, treatment


@pytest.fixture
def gpu_available():
    """Skip if no GPU is available."""
    try:
        import torch
        has_cuda = torch.cuda.is_available()
        has_mps = hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()
        if not (has_cuda or has_mps):
            pytest.skip("No GPU available")
        return 'cuda' if has_cuda else 'mps'
    except ImportError:
        pytest.skip("PyTorch not installed")
