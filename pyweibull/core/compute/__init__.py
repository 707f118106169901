"""
Shared compute infrastructure for PyWeibull.

This module provides timing utilities, convergence presets and the
general-purpose optimizer shared across the domain modules.

IMPORTANT: This is NOT where domain-specific code lives. Likelihoods,
resampling and cost models go in their own packages.

Submodules:
    timing: Execution timing utilities
    tolerances: Convergence presets and parameter floors
    optimization: Nelder-Mead simplex minimizer
"""

from pyweibull.core.compute.timing import Timer, timed
from pyweibull.core.compute.tolerances import (
    ConvergenceSettings,
    SIMPLEX_DEFAULT,
    WEIBULL_MLE,
    PARAM_FLOOR,
    INFEASIBLE_OBJECTIVE,
)
from pyweibull.core.compute.optimization import SimplexResult, nelder_mead

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ConvergenceSettings",
    "SIMPLEX_DEFAULT",
    "WEIBULL_MLE",
    "PARAM_FLOOR",
    "INFEASIBLE_OBJECTIVE",
    # Optimization
    "SimplexResult",
    "nelder_mead",
]
