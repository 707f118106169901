"""
Shared fixtures for bootstrap tests.
"""

import numpy as np
import pytest


@pytest.fixture
def fifty_failures():
    """50 exact failure times from Weibull(2, 1000)."""
    return 1000.0 * np.random.default_rng(7).weibull(2.0, 50)
