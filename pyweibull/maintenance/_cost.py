"""
Age-replacement cost-rate functions.

For a unit replaced preventively at age t or correctively at failure,
the expected cycle length is int_0^t R(x) dx and

    CPM(t)  = C_pm R(t) / int_0^t R
    CCM(t)  = C_cm (1 - R(t)) / int_0^t R
    CPUT(t) = (C_pm R(t) + C_cm (1 - R(t))) / int_0^t R

t <= 0 is not a policy; every rate is +inf there.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyweibull.maintenance._integrate import DEFAULT_INTERVALS, integrate_survival
from pyweibull.weibull.functions import survival


def _rate(numerator: NDArray, t: NDArray, beta: float, eta: float, n: int):
    denom = integrate_survival(t, beta, eta, n)
    with np.errstate(divide="ignore", invalid="ignore"):
        out = np.where(t > 0, numerator / denom, np.inf)
    return out if out.ndim else float(out)


def cpm(
    t: ArrayLike,
    beta: float,
    eta: float,
    c_pm: float,
    *,
    n: int = DEFAULT_INTERVALS,
) -> NDArray | float:
    """Preventive-maintenance cost rate."""
    t = np.asarray(t, dtype=np.float64)
    r = survival(np.maximum(t, 0.0), beta, eta)
    return _rate(c_pm * r, t, beta, eta, n)


def ccm(
    t: ArrayLike,
    beta: float,
    eta: float,
    c_cm: float,
    *,
    n: int = DEFAULT_INTERVALS,
) -> NDArray | float:
    """Corrective-maintenance cost rate."""
    t = np.asarray(t, dtype=np.float64)
    r = survival(np.maximum(t, 0.0), beta, eta)
    return _rate(c_cm * (1.0 - r), t, beta, eta, n)


def cput(
    t: ArrayLike,
    beta: float,
    eta: float,
    c_pm: float,
    c_cm: float,
    *,
    n: int = DEFAULT_INTERVALS,
) -> NDArray | float:
    """Total expected cost per unit time."""
    t = np.asarray(t, dtype=np.float64)
    r = survival(np.maximum(t, 0.0), beta, eta)
    return _rate(c_pm * r + c_cm * (1.0 - r), t, beta, eta, n)
