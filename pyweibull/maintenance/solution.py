"""
Solution wrapper for maintenance cost grids.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyweibull.core.result import Result
from pyweibull.maintenance._common import CostParams, CostPoint

if TYPE_CHECKING:
    from pyweibull.maintenance.design import CostDesign

CSV_HEADER = "t,CPUT,CPM,CCM"


@dataclass
class CostSolution:
    """
    User-facing cost-rate grid and its grid-search optimum.
    """
    _result: Result[CostParams]
    _design: 'CostDesign'

    @property
    def t(self) -> NDArray[np.floating[Any]]:
        return self._result.params.t

    @property
    def cpm(self) -> NDArray[np.floating[Any]]:
        return self._result.params.cpm

    @property
    def ccm(self) -> NDArray[np.floating[Any]]:
        return self._result.params.ccm

    @property
    def cput(self) -> NDArray[np.floating[Any]]:
        return self._result.params.cput

    @property
    def points(self) -> tuple[CostPoint, ...]:
        return tuple(
            CostPoint(float(t), float(pm), float(cm), float(tot))
            for t, pm, cm, tot in zip(self.t, self.cpm, self.ccm, self.cput)
        )

    @property
    def optimal(self) -> CostPoint:
        """Grid point with the lowest total cost rate (first one on ties)."""
        i = self._result.params.optimal_index
        return CostPoint(
            float(self.t[i]), float(self.cpm[i]),
            float(self.ccm[i]), float(self.cput[i]),
        )

    @property
    def optimal_interval(self) -> float:
        return self.optimal.t

    @property
    def at_horizon(self) -> bool:
        """True when the optimum is the last grid point.

        For beta <= 1 preventive replacement never pays off and the total
        cost rate keeps falling toward the horizon.
        """
        return self._result.params.optimal_index == len(self.t) - 1

    def to_csv(self) -> str:
        """Cost grid as text: header ``t,CPUT,CPM,CCM`` then one row per point."""
        lines = [CSV_HEADER]
        for t, tot, pm, cm in zip(self.t, self.cput, self.cpm, self.ccm):
            lines.append(f"{t:.10g},{tot:.10g},{pm:.10g},{cm:.10g}")
        return "\n".join(lines) + "\n"

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

    def summary(self) -> str:
        p = self._result.params
        opt = self.optimal
        lines = [
            "\nAGE-REPLACEMENT COST OPTIMISATION",
            "",
            f"  Weibull beta={p.beta:.6g}, eta={p.eta:.6g}",
            f"  C_pm={p.c_pm:g}, C_cm={p.c_cm:g}",
            f"  grid: {len(self.t)} points on ({self.t[0]:.6g}, {self.t[-1]:.6g}]",
            "",
            f"  optimal PM interval  {opt.t:.6g}",
            f"  total cost rate      {opt.total_rate:.6g}",
            f"  preventive share     {opt.pm_rate:.6g}",
            f"  corrective share     {opt.cm_rate:.6g}",
        ]
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"CostSolution(n_points={len(self.t)}, "
            f"optimal_interval={self.optimal_interval:.4g})"
        )
