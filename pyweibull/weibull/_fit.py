"""
Censored Weibull maximum-likelihood estimation.

Nelder-Mead on the negative log-likelihood from a heuristic start:
beta0 = 1.5 and eta0 = mean of the failure times (FALLBACK_SCALE when
there are no failures). The returned shape and scale are clamped to
PARAM_FLOOR.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pyweibull.core.compute.optimization import nelder_mead
from pyweibull.core.compute.tolerances import PARAM_FLOOR, WEIBULL_MLE
from pyweibull.weibull._common import FitParams, WeibullParams
from pyweibull.weibull._likelihood import make_objective

INITIAL_SHAPE = 1.5

# Scale guess for suspension-only data, which carries no information
# about where failures happen.
FALLBACK_SCALE = 1000.0


def initial_guess(failures: NDArray) -> WeibullParams:
    """Starting point for the simplex."""
    eta0 = float(np.mean(failures)) if len(failures) > 0 else FALLBACK_SCALE
    if eta0 <= PARAM_FLOOR:
        # All failures at t=0; start somewhere the likelihood is defined
        eta0 = FALLBACK_SCALE
    return WeibullParams(beta=INITIAL_SHAPE, eta=eta0)


def weibull_mle(
    failures: NDArray,
    suspensions: NDArray,
    *,
    tol: float = WEIBULL_MLE.tol,
    max_iter: int = WEIBULL_MLE.max_iter,
    start: WeibullParams | None = None,
) -> FitParams:
    """Fit (beta, eta) to failure and suspension times.

    Parameters
    ----------
    failures, suspensions : NDArray
        1D float arrays. Together they must hold at least one observation.
    tol, max_iter : float, int
        Simplex stopping rule.
    start : WeibullParams or None
        Override the heuristic starting point.

    Returns
    -------
    FitParams
    """
    objective = make_objective(failures, suspensions)
    x0 = start if start is not None else initial_guess(failures)

    simplex = nelder_mead(objective, x0.as_array(), tol=tol, max_iter=max_iter)

    beta, eta = np.maximum(simplex.x, PARAM_FLOOR)
    params = WeibullParams(beta=float(beta), eta=float(eta))

    return FitParams(
        params=params,
        objective=objective(params.as_array()),
        initial=x0,
        initial_objective=objective(x0.as_array()),
        n_iter=simplex.n_iter,
        n_eval=simplex.n_eval,
        converged=simplex.converged,
        spread=simplex.spread,
        n_failures=len(failures),
        n_suspensions=len(suspensions),
    )
