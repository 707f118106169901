"""
Public API for bootstrap confidence intervals.

    bootstrap_ci(failures, suspensions, nboot, conf) -> BootstrapSolution | None
"""

from __future__ import annotations

from typing import Callable

from pyweibull.core.cancellation import CancellationToken
from pyweibull.core.compute.tolerances import WEIBULL_MLE
from pyweibull.core.exceptions import ValidationError
from pyweibull.montecarlo.backends.cpu import CPUBootstrapBackend
from pyweibull.montecarlo.design import (
    DEFAULT_CONF,
    DEFAULT_NBOOT,
    DEFAULT_YIELD_EVERY,
    MIN_OBSERVATIONS,
    BootstrapDesign,
)
from pyweibull.montecarlo.solution import BootstrapSolution
from pyweibull.weibull.design import WeibullDesign


def bootstrap_ci(
    failures_or_design,
    suspensions=None,
    nboot: int = DEFAULT_NBOOT,
    conf: float = DEFAULT_CONF,
    *,
    seed=None,
    tol: float = WEIBULL_MLE.tol,
    max_iter: int = WEIBULL_MLE.max_iter,
    cancel: CancellationToken | None = None,
    progress: Callable[[int, int], None] | None = None,
    yield_every: int = DEFAULT_YIELD_EVERY,
) -> BootstrapSolution | None:
    """
    Percentile bootstrap confidence intervals for Weibull shape and scale.

    Resamples the pooled observations with replacement ``nboot`` times,
    refits each replicate, drops replicates with non-finite estimates and
    takes marginal percentiles.

    Args:
        failures_or_design: Failure times, or a WeibullDesign.
        suspensions: Suspension times (None with a WeibullDesign).
        nboot: Number of replicates. Must be >= 1.
        conf: Confidence level in (0, 1), e.g. 0.90.
        seed: None, an int, or a numpy Generator. Same seed, same result.
        tol, max_iter: Replicate fit settings.
        cancel: Optional token checked before each replicate.
        progress: Optional callback progress(done, nboot).
        yield_every: Replicates between progress callbacks.

    Returns:
        BootstrapSolution, or None when fewer than 3 observations are
        available. None is not a zero-width interval.

    Examples:
        >>> sol = bootstrap_ci(failures, suspensions, nboot=500, conf=0.9, seed=1)
        >>> sol.eta_ci
    """
    if isinstance(failures_or_design, WeibullDesign):
        if suspensions is not None:
            raise ValidationError(
                "suspensions must be None when a WeibullDesign is given"
            )
        data = failures_or_design
    else:
        data = WeibullDesign.for_fit(failures_or_design, suspensions)

    design = BootstrapDesign.for_bootstrap(
        data, nboot, conf,
        seed=seed,
        tol=tol,
        max_iter=max_iter,
        cancel=cancel,
        progress=progress,
        yield_every=yield_every,
    )

    if data.n_observations < MIN_OBSERVATIONS:
        return None

    result = CPUBootstrapBackend().solve(design)
    return BootstrapSolution(_result=result, _design=design)
