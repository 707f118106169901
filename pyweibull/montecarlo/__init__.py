"""
PyWeibull Monte Carlo methods.

Provides case-resampling bootstrap confidence intervals for the censored
Weibull fit.

Usage:
    from pyweibull.montecarlo import bootstrap_ci

    result = bootstrap_ci(failures, suspensions, nboot=1000, conf=0.90, seed=42)
    if result is not None:
        print(result.beta_ci, result.eta_ci)
"""

from pyweibull.montecarlo.design import BootstrapDesign, MIN_OBSERVATIONS
from pyweibull.montecarlo.solution import BootstrapSolution
from pyweibull.montecarlo.solvers import bootstrap_ci

__all__ = [
    "bootstrap_ci",
    "BootstrapDesign",
    "BootstrapSolution",
    "MIN_OBSERVATIONS",
]
