"""
Parameter payloads for Weibull estimation results.

Each dataclass is a frozen payload carried inside a Result[P] envelope,
except WeibullParams, which is the plain (shape, scale) value object shared
by the fitter, the bootstrap and the cost model.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pyweibull.core.compute.tolerances import INFEASIBLE_OBJECTIVE


@dataclass(frozen=True)
class WeibullParams:
    """Two-parameter Weibull (shape, scale) pair."""

    beta: float                  # shape
    eta: float                   # scale (characteristic life)

    def as_array(self) -> NDArray:
        return np.array([self.beta, self.eta], dtype=np.float64)

    @property
    def is_finite(self) -> bool:
        return bool(np.isfinite(self.beta) and np.isfinite(self.eta))


@dataclass(frozen=True)
class FitParams:
    """Censored maximum-likelihood fit.

    ``objective`` is the negative log-likelihood at the returned point,
    which is a local optimum only.
    """

    params: WeibullParams
    objective: float             # negative log-likelihood at params
    initial: WeibullParams       # starting point handed to the optimizer
    initial_objective: float
    n_iter: int
    n_eval: int
    converged: bool              # False at the iteration cap or when infeasible
    spread: float                # std of simplex objectives at termination
    n_failures: int
    n_suspensions: int

    @property
    def feasible(self) -> bool:
        """False when the likelihood was never finite, e.g. a failure at t=0."""
        return self.objective < INFEASIBLE_OBJECTIVE
