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
def weibull_sample(rng):
    """200 uncensored failure times from Weibull(beta=2, eta=1000)."""
    return 1000.0 * rng.weibull(2.0, 200)


@pytest.fixture
def censored_sample(rng):
    """Weibull(1.8, 500) lifetimes, type-I censored at t=600."""
    life = 500.0 * rng.weibull(1.8, 80)
    censor_at = 600.0
    failures = life[life <= censor_at]
    suspensions = np.full(int(np.sum(life > censor_at)), censor_at)
    return failures, suspensions
