"""
Public API for Weibull life-data estimation.

    fit(failures, suspensions) -> WeibullSolution

Validates inputs, creates a WeibullDesign, runs the censored MLE and
wraps the Result in a Solution.
"""

from __future__ import annotations

import warnings

from pyweibull.core.compute.timing import Timer
from pyweibull.core.compute.tolerances import WEIBULL_MLE
from pyweibull.core.exceptions import ValidationError
from pyweibull.core.result import Result
from pyweibull.core.validation import check_positive, check_positive_int
from pyweibull.weibull._common import WeibullParams
from pyweibull.weibull._fit import weibull_mle
from pyweibull.weibull.design import WeibullDesign
from pyweibull.weibull.solution import WeibullSolution


def fit(
    failures_or_design,
    suspensions=None,
    *,
    tol: float = WEIBULL_MLE.tol,
    max_iter: int = WEIBULL_MLE.max_iter,
    start: tuple[float, float] | None = None,
) -> WeibullSolution:
    """Maximum-likelihood Weibull fit to right-censored life data.

    Accepts EITHER:
        1. A WeibullDesign (``suspensions`` must then be None)
        2. Failure times and optional suspension times (array-likes)

    Parameters
    ----------
    failures_or_design : array-like or WeibullDesign
        Exact failure times, or a prepared design.
    suspensions : array-like or None
        Right-censored times.
    tol : float
        Simplex tolerance on the spread of vertex objectives (default 1e-8).
    max_iter : int
        Simplex iteration cap (default 1500).
    start : (beta, eta) or None
        Starting point. Default is beta=1.5, eta=mean(failures).

    Returns
    -------
    WeibullSolution

    Raises
    ------
    ValidationError
        If there are no observations or the settings are invalid.

    Examples
    --------
    >>> sol = fit([100, 150, 80], [200])
    >>> sol.beta, sol.eta
    """
    if isinstance(failures_or_design, WeibullDesign):
        if suspensions is not None:
            raise ValidationError(
                "suspensions must be None when a WeibullDesign is given"
            )
        design = failures_or_design
    else:
        design = WeibullDesign.for_fit(failures_or_design, suspensions)

    if design.n_observations == 0:
        raise ValidationError("fit: requires at least 1 observation, got 0")
    check_positive(tol, "tol")
    check_positive_int(max_iter, "max_iter")

    start_params = None
    if start is not None:
        start_params = WeibullParams(beta=float(start[0]), eta=float(start[1]))

    timer = Timer()
    timer.start()

    with timer.section('optimization'):
        params = weibull_mle(
            design.failures, design.suspensions,
            tol=tol, max_iter=max_iter, start=start_params,
        )

    timer.stop()

    warnings_list = []
    if not params.feasible:
        msg = (
            "Log-likelihood is not finite at any point tried; estimates are "
            "the starting guess (a failure time of 0 makes log(t/eta) infinite)"
        )
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
    elif not params.converged:
        msg = (
            f"Nelder-Mead did not converge in {max_iter} iterations "
            f"(objective spread {params.spread:.3g} > tol {tol:g})"
        )
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
    if design.n_failures == 0:
        warnings_list.append(
            "No failures: scale estimate is driven by suspensions only"
        )

    result = Result(
        params=params,
        info={
            'method': 'nelder-mead',
            'converged': params.converged,
            'feasible': params.feasible,
            'n_iter': params.n_iter,
            'n_eval': params.n_eval,
            'tol': tol,
            'max_iter': max_iter,
        },
        timing=timer.result(),
        backend_name='cpu_nelder_mead',
        warnings=tuple(warnings_list),
    )

    return WeibullSolution(_result=result, _design=design)
