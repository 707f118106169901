"""
Closed-form two-parameter Weibull reliability functions.

    R(t) = exp(-(t/eta)^beta)                          survival
    F(t) = 1 - R(t)                                    cumulative failure
    f(t) = (beta/eta) (t/eta)^(beta-1) exp(-(t/eta)^beta)   density
    h(t) = (beta/eta) (t/eta)^(beta-1)                 hazard

All functions accept scalars or arrays for ``t`` and broadcast. Inputs are
not validated: these sit inside integration and likelihood loops. For
beta < 1 the density and hazard are singular at t = 0 and return +inf;
that value is propagated, never coerced to zero.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.special import gamma


def survival(t: ArrayLike, beta: float, eta: float) -> NDArray | float:
    """Survival probability R(t). R(0) = 1, non-increasing in t."""
    t = np.asarray(t, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        out = np.exp(-(t / eta) ** beta)
    return out if out.ndim else float(out)


def cdf(t: ArrayLike, beta: float, eta: float) -> NDArray | float:
    """Cumulative failure probability F(t) = 1 - R(t)."""
    t = np.asarray(t, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        out = -np.expm1(-(t / eta) ** beta)
    return out if out.ndim else float(out)


def density(t: ArrayLike, beta: float, eta: float) -> NDArray | float:
    """Probability density f(t)."""
    t = np.asarray(t, dtype=np.float64)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        z = t / eta
        out = (beta / eta) * z ** (beta - 1.0) * np.exp(-z ** beta)
    return out if out.ndim else float(out)


def hazard(t: ArrayLike, beta: float, eta: float) -> NDArray | float:
    """Hazard rate h(t).

    Increasing in t for beta > 1, constant (1/eta) for beta == 1,
    decreasing for beta < 1.
    """
    t = np.asarray(t, dtype=np.float64)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        out = (beta / eta) * (t / eta) ** (beta - 1.0)
    return out if out.ndim else float(out)


def percentile_life(p: ArrayLike, beta: float, eta: float) -> NDArray | float:
    """Age by which a fraction ``p`` of units has failed (B-life).

    t_p = eta * (-ln(1 - p))^(1/beta). ``p`` is a fraction, so B10 is
    ``percentile_life(0.10, ...)``.
    """
    p = np.asarray(p, dtype=np.float64)
    if np.any((p < 0) | (p >= 1)):
        raise ValueError(f"p must be in [0, 1), got {p}")
    out = eta * (-np.log1p(-p)) ** (1.0 / beta)
    return out if out.ndim else float(out)


def mean_life(beta: float, eta: float) -> float:
    """Mean time to failure, eta * Gamma(1 + 1/beta)."""
    return float(eta * gamma(1.0 + 1.0 / beta))
