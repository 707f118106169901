"""
Solution wrapper for Weibull fits.

WeibullSolution wraps a Result[FitParams] and exposes the estimate, the
convergence diagnostics and the fitted reliability curves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyweibull.core.exceptions import ConvergenceError
from pyweibull.core.result import Result
from pyweibull.weibull import functions
from pyweibull.weibull._common import FitParams, WeibullParams

if TYPE_CHECKING:
    from pyweibull.weibull.design import WeibullDesign

# Default plotting horizon as a multiple of eta
CURVE_HORIZON = 3.0
CURVE_POINTS = 200


@dataclass
class WeibullSolution:
    """
    User-facing Weibull fit.

    ``params`` and ``objective`` together are the fit result: the clamped
    (beta, eta) estimate and its negative log-likelihood.
    """
    _result: Result[FitParams]
    _design: 'WeibullDesign'

    # --- Estimate ---

    @property
    def params(self) -> WeibullParams:
        return self._result.params.params

    @property
    def beta(self) -> float:
        """Shape estimate."""
        return self.params.beta

    @property
    def eta(self) -> float:
        """Scale estimate (characteristic life)."""
        return self.params.eta

    @property
    def objective(self) -> float:
        """Negative log-likelihood at the estimate."""
        return self._result.params.objective

    @property
    def log_likelihood(self) -> float:
        return -self.objective

    # --- Optimizer diagnostics ---

    @property
    def converged(self) -> bool:
        """False if the iteration cap stopped the search or the fit is infeasible."""
        return self._result.params.converged

    @property
    def feasible(self) -> bool:
        """False when the likelihood was not finite anywhere the simplex looked."""
        return self._result.params.feasible

    @property
    def n_iter(self) -> int:
        return self._result.params.n_iter

    @property
    def initial(self) -> WeibullParams:
        return self._result.params.initial

    @property
    def initial_objective(self) -> float:
        return self._result.params.initial_objective

    def raise_if_not_converged(self) -> None:
        """Raise ConvergenceError when the fit did not converge."""
        if not self.converged:
            p = self._result.params
            raise ConvergenceError(
                f"Weibull fit stopped after {p.n_iter} iterations "
                f"without converging",
                iterations=p.n_iter,
                final_spread=p.spread,
                reason='max_iterations' if p.feasible else 'infeasible',
                threshold=self._result.info.get('tol'),
            )

    # --- Data ---

    @property
    def design(self) -> 'WeibullDesign':
        return self._design

    @property
    def n_failures(self) -> int:
        return self._result.params.n_failures

    @property
    def n_suspensions(self) -> int:
        return self._result.params.n_suspensions

    # --- Derived quantities ---

    def survival(self, t: ArrayLike):
        return functions.survival(t, self.beta, self.eta)

    def density(self, t: ArrayLike):
        return functions.density(t, self.beta, self.eta)

    def hazard(self, t: ArrayLike):
        return functions.hazard(t, self.beta, self.eta)

    def percentile_life(self, p: ArrayLike):
        """B-life: age by which fraction ``p`` has failed."""
        return functions.percentile_life(p, self.beta, self.eta)

    @property
    def mean_life(self) -> float:
        """Mean time to failure."""
        return functions.mean_life(self.beta, self.eta)

    def curves(self, t: ArrayLike | None = None) -> dict[str, NDArray]:
        """R(t), f(t), h(t) on a time grid, for plotting collaborators.

        Default grid: CURVE_POINTS points on [0, CURVE_HORIZON * eta].
        """
        if t is None:
            t = np.linspace(0.0, CURVE_HORIZON * self.eta, CURVE_POINTS)
        t = np.atleast_1d(np.asarray(t, dtype=np.float64))
        return {
            't': t,
            'survival': functions.survival(t, self.beta, self.eta),
            'density': functions.density(t, self.beta, self.eta),
            'hazard': functions.hazard(t, self.beta, self.eta),
        }

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self) -> str:
        """Plain-text fit report."""
        lines = [
            "\nWEIBULL MAXIMUM LIKELIHOOD FIT (right-censored)",
            "",
            f"  n={self.n_failures + self.n_suspensions}, "
            f"failures={self.n_failures}, suspensions={self.n_suspensions}",
            "",
            f"  {'shape (beta)':<16s} {self.beta:14.6g}",
            f"  {'scale (eta)':<16s} {self.eta:14.6g}",
            f"  {'log-likelihood':<16s} {self.log_likelihood:14.6g}",
            f"  {'MTTF':<16s} {self.mean_life:14.6g}",
            f"  {'B10 life':<16s} {self.percentile_life(0.10):14.6g}",
            "",
            f"  converged: {self.converged} ({self.n_iter} iterations)",
        ]
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"WeibullSolution(beta={self.beta:.4g}, eta={self.eta:.4g}, "
            f"converged={self.converged})"
        )
