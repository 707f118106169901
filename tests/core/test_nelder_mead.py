"""
Tests for the Nelder-Mead simplex minimizer.

Validates:
    - Convergence on smooth test functions of several dimensions
    - Non-degenerate initial simplex, including zero start coordinates
    - Iteration cap reported through converged=False
    - Agreement with scipy.optimize.minimize(method='Nelder-Mead')
    - Finite sentinel objectives are handled without special-casing
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.optimize import minimize

from pyweibull.core.compute.optimization import (
    SimplexResult,
    initial_simplex,
    nelder_mead,
)
from pyweibull.core.compute.tolerances import INFEASIBLE_OBJECTIVE


def rosenbrock(x):
    return (1.0 - x[0]) ** 2 + 100.0 * (x[1] - x[0] ** 2) ** 2


def shifted_quadratic(x):
    return float(np.sum((x - np.array([1.0, -2.0, 3.0])) ** 2))


class TestInitialSimplex:

    def test_shape(self):
        s = initial_simplex(np.array([1.5, 110.0]))
        assert s.shape == (3, 2)
        assert_allclose(s[0], [1.5, 110.0])

    def test_relative_step(self):
        s = initial_simplex(np.array([1.5, 110.0]))
        assert_allclose(s[1], [1.65, 110.0])
        assert_allclose(s[2], [1.5, 121.0])

    def test_zero_coordinate_not_degenerate(self):
        s = initial_simplex(np.array([0.0, 0.0, 0.0]))
        edges = s[1:] - s[0]
        assert abs(np.linalg.det(edges)) > 0
        assert_allclose(np.diag(edges), 0.1)

    def test_small_coordinate_uses_minimum_step(self):
        s = initial_simplex(np.array([0.5]))
        assert_allclose(s[1], [0.6])


class TestConvergence:

    def test_quadratic_3d(self):
        res = nelder_mead(shifted_quadratic, np.zeros(3), tol=1e-14, max_iter=5000)
        assert isinstance(res, SimplexResult)
        assert res.converged
        assert_allclose(res.x, [1.0, -2.0, 3.0], atol=1e-3)
        assert res.fun < 1e-6

    def test_rosenbrock(self):
        res = nelder_mead(rosenbrock, [-1.2, 1.0], tol=1e-14, max_iter=5000)
        assert res.converged
        assert_allclose(res.x, [1.0, 1.0], atol=1e-2)

    def test_one_dimensional(self):
        res = nelder_mead(lambda x: (x[0] - 4.0) ** 2, [0.0], tol=1e-12)
        assert_allclose(res.x, [4.0], atol=1e-4)

    def test_fun_matches_best_vertex(self):
        res = nelder_mead(rosenbrock, [-1.2, 1.0])
        assert res.fun == pytest.approx(rosenbrock(res.x))

    def test_counts(self):
        res = nelder_mead(shifted_quadratic, np.zeros(3), tol=1e-10)
        assert res.n_iter > 0
        # Every iteration evaluates at least one point, plus the start simplex
        assert res.n_eval >= res.n_iter + 4
        assert res.spread < 1e-10

    def test_matches_scipy(self):
        ours = nelder_mead(rosenbrock, [-1.2, 1.0], tol=1e-14, max_iter=5000)
        ref = minimize(
            rosenbrock, [-1.2, 1.0], method="Nelder-Mead",
            options={"xatol": 1e-10, "fatol": 1e-14, "maxiter": 5000},
        )
        assert_allclose(ours.x, ref.x, atol=1e-2)


class TestTermination:

    def test_iteration_cap(self):
        res = nelder_mead(rosenbrock, [-1.2, 1.0], tol=1e-14, max_iter=3)
        assert not res.converged
        assert res.n_iter == 3

    def test_already_flat(self):
        res = nelder_mead(lambda x: 7.0, [1.0, 2.0])
        assert res.converged
        assert res.n_iter == 0
        assert res.fun == 7.0

    @pytest.mark.parametrize("kwargs", [{"tol": 0.0}, {"max_iter": 0}])
    def test_invalid_settings(self, kwargs):
        with pytest.raises(ValueError):
            nelder_mead(rosenbrock, [0.0, 0.0], **kwargs)

    def test_empty_start(self):
        with pytest.raises(ValueError, match="x0"):
            nelder_mead(rosenbrock, [])


class TestSentinelObjective:

    def test_infeasible_region_avoided(self):
        def objective(x):
            if x[0] <= 0:
                return 1e12
            return (np.log(x[0]) - 1.0) ** 2

        res = nelder_mead(objective, [0.05], tol=1e-14)
        assert res.x[0] > 0
        assert_allclose(res.x[0], np.e, rtol=1e-3)

    def test_all_infeasible_not_converged(self):
        res = nelder_mead(lambda x: INFEASIBLE_OBJECTIVE, [1.5, 82.5])
        assert not res.converged
        assert res.n_iter == 0
        assert res.fun == INFEASIBLE_OBJECTIVE
