"""
Common data structures for Monte Carlo methods.

BootParams is the parameter payload wrapped by Result[P] and exposed
through BootstrapSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyweibull.weibull._common import WeibullParams


@dataclass(frozen=True)
class BootParams:
    """
    Parameter payload for a Weibull bootstrap.

    - t0: (beta, eta) fitted on the original data
    - t: finite replicate fits, shape (m, 2), in replicate order
    - beta_ci / eta_ci: marginal percentile intervals
    """
    t0: WeibullParams
    t: NDArray[np.floating[Any]]               # shape (m, 2): beta, eta
    nboot: int                                  # replicates requested
    n_completed: int                            # replicates run (< nboot if cancelled)
    n_discarded: int                            # replicates with non-finite estimates
    conf: float
    beta_ci: tuple[float, float]
    eta_ci: tuple[float, float]
    cancelled: bool
