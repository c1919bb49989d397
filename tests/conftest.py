# tests/conftest.py
"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Project root holds the flat modules
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def gray_image(rng):
    """8x16 single-channel uint8 image"""
    return rng.integers(0, 256, size=(8, 16), dtype=np.uint8)


@pytest.fixture
def color_image(rng):
    """16x8 BGR uint8 image"""
    return rng.integers(0, 256, size=(16, 8, 3), dtype=np.uint8)
