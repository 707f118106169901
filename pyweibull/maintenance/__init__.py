"""
Preventive-maintenance cost model.

Public API:
    cost_grid(beta, eta, c_pm, c_cm) -> CostSolution
    cpm / ccm / cput(t, beta, eta, ...) -> cost rates
    integrate_survival(t, beta, eta, n) -> int_0^t R(x) dx
"""

from pyweibull.maintenance._common import CostParams, CostPoint
from pyweibull.maintenance._cost import ccm, cpm, cput
from pyweibull.maintenance._integrate import integrate_survival
from pyweibull.maintenance.design import CostDesign
from pyweibull.maintenance.solution import CostSolution
from pyweibull.maintenance.solvers import cost_grid

__all__ = [
    "cost_grid",
    "CostSolution",
    "CostDesign",
    "CostPoint",
    "CostParams",
    "cpm",
    "ccm",
    "cput",
    "integrate_survival",
]
