"""
CPU backend for the Weibull bootstrap.

CPUBootstrapBackend: ordinary case resampling of pooled failures and
suspensions, one censored MLE per replicate, marginal percentile CIs.
"""

from __future__ import annotations

import numpy as np

from pyweibull.core.compute.timing import Timer
from pyweibull.core.result import Result
from pyweibull.montecarlo._ci import percentile_interval
from pyweibull.montecarlo._common import BootParams
from pyweibull.montecarlo.design import BootstrapDesign
from pyweibull.weibull._fit import weibull_mle


class CPUBootstrapBackend:
    """
    Sequential CPU backend for bootstrap resampling.

    Replicates share no state beyond the design's random generator, and
    the cancellation token is checked before each one.
    """

    @property
    def name(self) -> str:
        return 'cpu_bootstrap'

    def solve(self, design: BootstrapDesign) -> Result[BootParams]:
        """Run the bootstrap and return Result[BootParams]."""
        timer = Timer()
        timer.start()

        data = design.data
        time = data.time
        censored = data.censored
        n = len(time)

        with timer.section('t0_computation'):
            fit0 = weibull_mle(
                data.failures, data.suspensions,
                tol=design.tol, max_iter=design.max_iter,
            )
            t0 = fit0.params

        replicates: list[tuple[float, float]] = []
        n_completed = 0
        n_no_failures = 0
        n_infeasible = 0
        n_non_finite = 0
        n_not_converged = 0
        cancelled = False

        with timer.section('bootstrap_replicates'):
            for _ in range(design.nboot):
                if design.cancel is not None and design.cancel.cancelled:
                    cancelled = True
                    break

                indices = design.rng.integers(0, n, size=n)
                t_b = time[indices]
                c_b = censored[indices]
                n_completed += 1

                if c_b.all():
                    # Suspensions alone have no likelihood maximum
                    n_no_failures += 1
                else:
                    fit_b = weibull_mle(
                        t_b[~c_b], t_b[c_b],
                        tol=design.tol, max_iter=design.max_iter,
                    )
                    if not fit_b.feasible:
                        n_infeasible += 1
                    elif not fit_b.params.is_finite:
                        n_non_finite += 1
                    else:
                        replicates.append((fit_b.params.beta, fit_b.params.eta))
                        if not fit_b.converged:
                            n_not_converged += 1

                if (design.progress is not None
                        and n_completed % design.yield_every == 0):
                    design.progress(n_completed, design.nboot)

            if (design.progress is not None
                    and n_completed % design.yield_every != 0):
                design.progress(n_completed, design.nboot)

        n_discarded = n_no_failures + n_infeasible + n_non_finite

        with timer.section('percentile_ci'):
            t = np.array(replicates, dtype=np.float64).reshape(-1, 2)
            beta_ci = percentile_interval(t[:, 0], design.conf)
            eta_ci = percentile_interval(t[:, 1], design.conf)

        timer.stop()

        warnings_list: list[str] = []
        if cancelled:
            warnings_list.append(
                f"Bootstrap cancelled after {n_completed} of "
                f"{design.nboot} replicates"
            )
        if not fit0.feasible:
            warnings_list.append(
                "Full-data fit is infeasible; t0 is the starting guess"
            )
        if n_discarded:
            warnings_list.append(
                f"{n_discarded} replicates discarded ({n_no_failures} without "
                f"failures, {n_infeasible} infeasible, {n_non_finite} non-finite)"
            )
        if len(replicates) == 0:
            warnings_list.append("No usable replicates; intervals are NaN")

        params = BootParams(
            t0=t0,
            t=t,
            nboot=design.nboot,
            n_completed=n_completed,
            n_discarded=n_discarded,
            conf=design.conf,
            beta_ci=beta_ci,
            eta_ci=eta_ci,
            cancelled=cancelled,
        )

        return Result(
            params=params,
            info={
                'method': 'percentile',
                'n': n,
                'n_failures': data.n_failures,
                'n_suspensions': data.n_suspensions,
                'n_not_converged': n_not_converged,
                'n_no_failures': n_no_failures,
                'n_infeasible': n_infeasible,
                'n_non_finite': n_non_finite,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
