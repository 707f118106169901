"""
Public API for preventive-maintenance cost optimisation.

    cost_grid(beta, eta, c_pm, c_cm) -> CostSolution
"""

from __future__ import annotations

import numpy as np

from pyweibull.core.compute.timing import Timer
from pyweibull.core.result import Result
from pyweibull.maintenance._common import CostParams
from pyweibull.maintenance._cost import ccm, cpm, cput
from pyweibull.maintenance._integrate import DEFAULT_INTERVALS
from pyweibull.maintenance.design import DEFAULT_POINTS, CostDesign
from pyweibull.maintenance.solution import CostSolution


def cost_grid(
    beta: float,
    eta: float,
    c_pm: float,
    c_cm: float,
    *,
    horizon: float | None = None,
    n_points: int = DEFAULT_POINTS,
    n_intervals: int = DEFAULT_INTERVALS,
) -> CostSolution:
    """
    Evaluate PM, CM and total cost rates on a grid and pick the optimum.

    The optimum is the first grid point with the minimum total cost rate;
    its resolution is the grid spacing.

    Args:
        beta, eta: Weibull shape and scale (e.g. from ``fit``).
        c_pm: Preventive replacement cost.
        c_cm: Corrective (failure) replacement cost.
        horizon: Largest candidate interval (default 3 * eta).
        n_points: Grid size.
        n_intervals: Trapezoid subintervals for each survival integral.

    Returns:
        CostSolution
    """
    design = CostDesign.for_costs(
        beta, eta, c_pm, c_cm,
        horizon=horizon, n_points=n_points, n_intervals=n_intervals,
    )

    timer = Timer()
    timer.start()

    with timer.section('cost_rates'):
        t = design.grid
        n = design.n_intervals
        pm = cpm(t, design.beta, design.eta, design.c_pm, n=n)
        cm = ccm(t, design.beta, design.eta, design.c_cm, n=n)
        total = cput(t, design.beta, design.eta, design.c_pm, design.c_cm, n=n)

    with timer.section('grid_search'):
        optimal_index = int(np.argmin(total))

    timer.stop()

    warnings_list = []
    if optimal_index == len(t) - 1:
        warnings_list.append(
            "Cost minimum is at the grid horizon; preventive replacement "
            "may not pay off (beta <= 1 or C_pm >= C_cm)"
        )

    params = CostParams(
        t=t,
        cpm=pm,
        ccm=cm,
        cput=total,
        optimal_index=optimal_index,
        beta=design.beta,
        eta=design.eta,
        c_pm=design.c_pm,
        c_cm=design.c_cm,
    )

    result = Result(
        params=params,
        info={
            'method': 'grid_search',
            **design.metadata,
        },
        timing=timer.result(),
        backend_name='cpu_trapezoid',
        warnings=tuple(warnings_list),
    )

    return CostSolution(_result=result, _design=design)
