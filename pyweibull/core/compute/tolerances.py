"""
Convergence presets and numerical floors.

Defines the stopping rules for the simplex optimizer and the constants that
keep the Weibull likelihood away from degenerate parameter values:
- SIMPLEX_DEFAULT: general-purpose Nelder-Mead defaults
- WEIBULL_MLE: tighter tolerance and lower cap used by the Weibull fitter

Used by the optimizer, the fitter, and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConvergenceSettings:
    """Stopping rule for an iterative minimizer."""
    tol: float
    max_iter: int
    name: str
    description: str


SIMPLEX_DEFAULT = ConvergenceSettings(
    tol=1e-6,
    max_iter=2000,
    name='simplex_default',
    description='Nelder-Mead defaults for an arbitrary objective',
)

WEIBULL_MLE = ConvergenceSettings(
    tol=1e-8,
    max_iter=1500,
    name='weibull_mle',
    description='Censored Weibull maximum likelihood',
)

# Shape and scale must stay strictly above this value. Estimates are
# clamped to it, never to zero.
PARAM_FLOOR = 1e-6

# Objective returned for parameters at or below PARAM_FLOOR. Finite so the
# simplex can still rank vertices against it.
INFEASIBLE_OBJECTIVE = 1e12


def select_settings(name: str) -> ConvergenceSettings:
    """Look up a preset by name."""
    presets = {s.name: s for s in (SIMPLEX_DEFAULT, WEIBULL_MLE)}
    try:
        return presets[name]
    except KeyError:
        raise ValueError(
            f"Unknown convergence preset {name!r}; "
            f"expected one of {sorted(presets)}"
        ) from None
