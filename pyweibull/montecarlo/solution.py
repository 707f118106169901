"""
Solution wrapper for bootstrap results.

BootstrapSolution wraps Result[BootParams] and provides convenient
accessors and a plain-text summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyweibull.core.result import Result
from pyweibull.montecarlo._common import BootParams
from pyweibull.weibull._common import WeibullParams

if TYPE_CHECKING:
    from pyweibull.montecarlo.design import BootstrapDesign


@dataclass
class BootstrapSolution:
    """
    User-facing bootstrap results.

    ``beta_ci`` and ``eta_ci`` are marginal percentile intervals;
    ``raw_samples`` holds every finite replicate fit in replicate order.
    """
    _result: Result[BootParams]
    _design: 'BootstrapDesign'

    # --- Intervals ---

    @property
    def beta_ci(self) -> tuple[float, float]:
        return self._result.params.beta_ci

    @property
    def eta_ci(self) -> tuple[float, float]:
        return self._result.params.eta_ci

    @property
    def conf(self) -> float:
        return self._result.params.conf

    # --- Replicates ---

    @property
    def t0(self) -> WeibullParams:
        """Fit on the original data."""
        return self._result.params.t0

    @property
    def t(self) -> NDArray[np.floating[Any]]:
        """Finite replicate estimates, shape (m, 2): beta, eta."""
        return self._result.params.t

    @property
    def raw_samples(self) -> tuple[WeibullParams, ...]:
        return tuple(WeibullParams(float(b), float(e)) for b, e in self.t)

    @property
    def nboot(self) -> int:
        """Replicates requested."""
        return self._result.params.nboot

    @property
    def n_completed(self) -> int:
        return self._result.params.n_completed

    @property
    def n_discarded(self) -> int:
        return self._result.params.n_discarded

    @property
    def cancelled(self) -> bool:
        return self._result.params.cancelled

    @property
    def bias(self) -> NDArray[np.floating[Any]]:
        """mean(t) - t0 for (beta, eta)."""
        if len(self.t) == 0:
            return np.full(2, np.nan)
        return np.mean(self.t, axis=0) - self.t0.as_array()

    @property
    def se(self) -> NDArray[np.floating[Any]]:
        """Replicate standard deviation for (beta, eta)."""
        if len(self.t) < 2:
            return np.full(2, np.nan)
        return np.std(self.t, axis=0, ddof=1)

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
        """
        Plain-text bootstrap report.

        Produces:
            WEIBULL CASE-RESAMPLING BOOTSTRAP

            Replicates: 1000 requested, 1000 completed, 0 discarded

                     original         bias    std. error       90% low      90% high
            beta      2.01234      0.01234       0.20000       1.70000       2.40000
            eta     998.12345     -1.00000      30.00000     950.00000    1050.00000
        """
        conf_pct = f"{self.conf * 100:g}%"
        lines = [
            "\nWEIBULL CASE-RESAMPLING BOOTSTRAP\n",
            f"Replicates: {self.nboot} requested, {self.n_completed} completed, "
            f"{self.n_discarded} discarded",
            "",
            f"{'':>6s} {'original':>12s} {'bias':>12s} {'std. error':>12s} "
            f"{conf_pct + ' low':>12s} {conf_pct + ' high':>12s}",
        ]
        bias, se = self.bias, self.se
        rows = (
            ("beta", self.t0.beta, self.beta_ci),
            ("eta", self.t0.eta, self.eta_ci),
        )
        for j, (label, original, ci) in enumerate(rows):
            lines.append(
                f"{label:>6s} {original:12.5f} {bias[j]:12.5f} {se[j]:12.5f} "
                f"{ci[0]:12.5f} {ci[1]:12.5f}"
            )
        lines.append("")
        lines.append("Intervals are marginal; they are not a joint region.")
        for w in self.warnings:
            lines.append(f"warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BootstrapSolution(nboot={self.nboot}, conf={self.conf}, "
            f"beta_ci={self.beta_ci}, eta_ci={self.eta_ci})"
        )
