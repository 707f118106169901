"""
Censored Weibull log-likelihood.

For exact failure times t_i and right-censored times s_j:

    ll = sum_i [ log(beta/eta) + (beta-1) log(t_i/eta) - (t_i/eta)^beta ]
       + sum_j [ -(s_j/eta)^beta ]

The fitter minimizes -ll. Parameters at or below PARAM_FLOOR, and any
evaluation that overflows to a non-finite value, return the finite
INFEASIBLE_OBJECTIVE so an unconstrained simplex can still rank them.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pyweibull.core.compute.tolerances import INFEASIBLE_OBJECTIVE, PARAM_FLOOR


def is_feasible(beta: float, eta: float) -> bool:
    """True when both parameters are strictly above PARAM_FLOOR."""
    return beta > PARAM_FLOOR and eta > PARAM_FLOOR


def neg_log_likelihood(
    beta: float,
    eta: float,
    failures: NDArray,
    suspensions: NDArray,
) -> float:
    """Negative censored log-likelihood of (beta, eta).

    Returns INFEASIBLE_OBJECTIVE instead of raising for infeasible or
    numerically unusable parameters. NaN parameters count as infeasible.
    """
    if not is_feasible(beta, eta):
        return INFEASIBLE_OBJECTIVE

    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        zf = failures / eta
        ll = (
            len(failures) * math.log(beta / eta)
            + (beta - 1.0) * np.sum(np.log(zf))
            - np.sum(zf ** beta)
            - np.sum((suspensions / eta) ** beta)
        )

    if not np.isfinite(ll):
        return INFEASIBLE_OBJECTIVE
    return float(-ll)


def make_objective(
    failures: NDArray,
    suspensions: NDArray,
) -> Callable[[NDArray], float]:
    """Close the likelihood over a dataset for a vector optimizer.

    The returned callable takes ``x = [beta, eta]``.
    """
    def objective(x: NDArray) -> float:
        return neg_log_likelihood(x[0], x[1], failures, suspensions)

    return objective
