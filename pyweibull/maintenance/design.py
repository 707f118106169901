"""
CostDesign: validated inputs for a PM-interval cost evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyweibull.core.validation import (
    check_non_negative_scalar,
    check_positive,
    check_positive_int,
)
from pyweibull.maintenance._integrate import DEFAULT_INTERVALS

DEFAULT_POINTS = 300

# Grid horizon as a multiple of eta; R(3 eta) is negligible for beta >= 1.
HORIZON_FACTOR = 3.0


@dataclass(frozen=True)
class CostDesign:
    """
    Frozen design for a cost-rate grid search.

    Attributes:
        beta, eta: Weibull shape and scale.
        c_pm: Cost of one preventive replacement.
        c_cm: Cost of one corrective replacement.
        grid: Candidate PM intervals, strictly positive, increasing.
        n_intervals: Trapezoid subintervals for the survival integral.
    """
    beta: float
    eta: float
    c_pm: float
    c_cm: float
    grid: NDArray
    n_intervals: int

    @classmethod
    def for_costs(
        cls,
        beta: float,
        eta: float,
        c_pm: float,
        c_cm: float,
        *,
        horizon: float | None = None,
        n_points: int = DEFAULT_POINTS,
        n_intervals: int = DEFAULT_INTERVALS,
    ) -> CostDesign:
        """
        Create a cost design with validation.

        The grid has ``n_points`` equally spaced values on
        (0, horizon], starting at horizon / n_points. Default horizon is
        HORIZON_FACTOR * eta.

        Raises:
            ValidationError: If inputs are invalid.
        """
        check_positive(beta, "beta")
        check_positive(eta, "eta")
        check_non_negative_scalar(c_pm, "c_pm")
        check_non_negative_scalar(c_cm, "c_cm")
        check_positive_int(n_points, "n_points")
        check_positive_int(n_intervals, "n_intervals")
        if horizon is None:
            horizon = HORIZON_FACTOR * eta
        check_positive(horizon, "horizon")

        grid = np.linspace(horizon / n_points, horizon, n_points)

        return cls(
            beta=float(beta),
            eta=float(eta),
            c_pm=float(c_pm),
            c_cm=float(c_cm),
            grid=grid,
            n_intervals=int(n_intervals),
        )

    @property
    def n_observations(self) -> int:
        return len(self.grid)

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n_points': len(self.grid),
            'horizon': float(self.grid[-1]),
            'n_intervals': self.n_intervals,
        }
