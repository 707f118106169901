"""
Nelder-Mead downhill simplex minimizer.

Derivative-free local search over an n-dimensional real vector. Each
iteration replaces the worst vertex by reflection, expansion or
contraction through the centroid of the others, or shrinks the whole
simplex toward the best vertex.

Coefficients: reflection alpha=1, expansion gamma=2, contraction rho=0.5,
shrink sigma=0.5.

Termination: population standard deviation of the n+1 vertex objective
values below ``tol``, or ``max_iter`` iterations. The best vertex is
returned either way; ``converged`` says which rule fired.
A simplex that is flat because every vertex returns INFEASIBLE_OBJECTIVE
stops at once with ``converged=False``.

References:
    Nelder, J. A., & Mead, R. (1965). A simplex method for function
        minimization. The Computer Journal, 7(4), 308-313.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyweibull.core.compute.tolerances import INFEASIBLE_OBJECTIVE, SIMPLEX_DEFAULT

ALPHA = 1.0
GAMMA = 2.0
RHO = 0.5
SIGMA = 0.5

# Initial simplex: each axis is perturbed by this fraction of the start
# coordinate, but never by less than MIN_STEP.
REL_STEP = 0.1
MIN_STEP = 0.1


@dataclass(frozen=True)
class SimplexResult:
    """Outcome of a Nelder-Mead run."""

    x: NDArray[np.floating[Any]]   # best vertex
    fun: float                      # objective at x
    n_iter: int                     # iterations performed
    n_eval: int                     # objective evaluations
    converged: bool                 # False at max_iter or on an all-infeasible simplex
    spread: float                   # std of vertex objectives at termination


def initial_simplex(x0: NDArray) -> NDArray:
    """Build the n+1 starting vertices around x0.

    Vertex 0 is x0 itself; vertex i+1 moves coordinate i by
    ``max(REL_STEP * |x0[i]|, MIN_STEP)``, so a zero coordinate still
    yields a non-degenerate simplex.
    """
    n = len(x0)
    simplex = np.tile(x0, (n + 1, 1))
    for i in range(n):
        simplex[i + 1, i] += max(REL_STEP * abs(x0[i]), MIN_STEP)
    return simplex


def nelder_mead(
    objective: Callable[[NDArray], float],
    x0: ArrayLike,
    *,
    tol: float = SIMPLEX_DEFAULT.tol,
    max_iter: int = SIMPLEX_DEFAULT.max_iter,
) -> SimplexResult:
    """Minimize ``objective`` starting from ``x0``.

    Parameters
    ----------
    objective : callable
        Maps a 1D float array of length n to a scalar. Must not raise for
        any finite input; return a large finite value for infeasible points.
    x0 : array-like
        Starting point, shape (n,).
    tol : float
        Stop when the population std of the vertex objective values
        falls below this.
    max_iter : int
        Iteration cap.

    Returns
    -------
    SimplexResult
    """
    x0 = np.asarray(x0, dtype=np.float64).ravel()
    if x0.size == 0:
        raise ValueError("x0 must have at least one coordinate")
    if tol <= 0:
        raise ValueError(f"tol must be positive, got {tol}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be >= 1, got {max_iter}")

    n_eval = 0

    def f(x: NDArray) -> float:
        nonlocal n_eval
        n_eval += 1
        return float(objective(x))

    simplex = initial_simplex(x0)
    values = np.array([f(v) for v in simplex])

    converged = False
    n_iter = 0
    while n_iter < max_iter:
        order = np.argsort(values, kind="stable")
        simplex = simplex[order]
        values = values[order]

        if np.std(values) < tol:
            # A flat simplex sitting on the sentinel has found nothing
            converged = bool(values[0] < INFEASIBLE_OBJECTIVE)
            break
        n_iter += 1

        best, second_worst, worst = values[0], values[-2], values[-1]
        centroid = simplex[:-1].mean(axis=0)

        x_r = centroid + ALPHA * (centroid - simplex[-1])
        f_r = f(x_r)

        if f_r < best:
            x_e = centroid + GAMMA * (x_r - centroid)
            f_e = f(x_e)
            if f_e < f_r:
                simplex[-1], values[-1] = x_e, f_e
            else:
                simplex[-1], values[-1] = x_r, f_r
            continue

        if f_r < second_worst:
            simplex[-1], values[-1] = x_r, f_r
            continue

        x_c = centroid + RHO * (simplex[-1] - centroid)
        f_c = f(x_c)
        if f_c < worst:
            simplex[-1], values[-1] = x_c, f_c
            continue

        # Shrink toward the best vertex
        simplex[1:] = simplex[0] + SIGMA * (simplex[1:] - simplex[0])
        values[1:] = [f(v) for v in simplex[1:]]

    order = np.argsort(values, kind="stable")
    simplex = simplex[order]
    values = values[order]

    return SimplexResult(
        x=simplex[0].copy(),
        fun=float(values[0]),
        n_iter=n_iter,
        n_eval=n_eval,
        converged=converged,
        spread=float(np.std(values)),
    )
