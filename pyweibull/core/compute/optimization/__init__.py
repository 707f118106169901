"""
Optimization utilities for PyWeibull.

Derivative-free minimization for low-dimensional objectives such as the
censored Weibull negative log-likelihood.
"""

from pyweibull.core.compute.optimization._nelder_mead import (
    SimplexResult,
    initial_simplex,
    nelder_mead,
)

__all__ = [
    "SimplexResult",
    "initial_simplex",
    "nelder_mead",
]
