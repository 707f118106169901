"""
Tests for closed-form Weibull reliability functions.

Reference values from scipy.stats.weibull_min(c=beta, scale=eta).
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from pyweibull.weibull.functions import (
    cdf,
    density,
    hazard,
    mean_life,
    percentile_life,
    survival,
)

PARAMS = [(0.7, 50.0), (1.0, 200.0), (2.0, 1000.0), (3.5, 7.0)]


class TestSurvival:

    @pytest.mark.parametrize("beta,eta", PARAMS)
    def test_r_at_zero_is_one(self, beta, eta):
        assert survival(0.0, beta, eta) == 1.0

    @pytest.mark.parametrize("beta,eta", PARAMS)
    def test_non_increasing(self, beta, eta):
        t = np.linspace(0.0, 5.0 * eta, 500)
        r = survival(t, beta, eta)
        assert np.all(np.diff(r) <= 0)

    @pytest.mark.parametrize("beta,eta", PARAMS)
    def test_tends_to_zero(self, beta, eta):
        assert survival(1e4 * eta, beta, eta) < 1e-12

    @pytest.mark.parametrize("beta,eta", PARAMS)
    def test_matches_scipy(self, beta, eta):
        t = np.linspace(0.0, 3.0 * eta, 50)
        assert_allclose(survival(t, beta, eta),
                        stats.weibull_min.sf(t, beta, scale=eta), rtol=1e-12)

    def test_characteristic_life(self):
        # 63.2% failed at t = eta, for any shape
        for beta in (0.5, 1.0, 4.0):
            assert survival(300.0, beta, 300.0) == pytest.approx(np.exp(-1.0))

    def test_scalar_in_scalar_out(self):
        assert isinstance(survival(10.0, 2.0, 100.0), float)
        assert isinstance(survival([10.0], 2.0, 100.0), np.ndarray)

    @pytest.mark.parametrize("beta,eta", PARAMS)
    def test_cdf_complements_survival(self, beta, eta):
        t = np.linspace(0.0, 3.0 * eta, 50)
        assert_allclose(cdf(t, beta, eta) + survival(t, beta, eta), 1.0)


class TestDensity:

    @pytest.mark.parametrize("beta,eta", PARAMS)
    def test_matches_scipy(self, beta, eta):
        t = np.linspace(0.01 * eta, 3.0 * eta, 50)
        assert_allclose(density(t, beta, eta),
                        stats.weibull_min.pdf(t, beta, scale=eta), rtol=1e-10)

    def test_singular_at_zero_for_small_shape(self):
        assert density(0.0, 0.5, 100.0) == np.inf

    def test_zero_at_origin_for_large_shape(self):
        assert density(0.0, 2.0, 100.0) == 0.0


class TestHazard:

    def test_increasing_for_shape_above_one(self):
        h = hazard([10.0, 100.0, 1000.0], 2.0, 500.0)
        assert h[0] < h[1] < h[2]

    def test_constant_for_shape_one(self):
        h = hazard([1.0, 10.0, 1000.0], 1.0, 250.0)
        assert_allclose(h, 1.0 / 250.0)

    def test_decreasing_for_shape_below_one(self):
        h = hazard([10.0, 100.0, 1000.0], 0.6, 500.0)
        assert h[0] > h[1] > h[2]

    def test_is_density_over_survival(self):
        t = np.linspace(1.0, 2000.0, 40)
        assert_allclose(hazard(t, 2.3, 700.0),
                        density(t, 2.3, 700.0) / survival(t, 2.3, 700.0),
                        rtol=1e-10)

    def test_infinite_at_zero_for_small_shape(self):
        # +inf is propagated, not coerced to zero
        assert hazard(0.0, 0.8, 100.0) == np.inf


class TestLifeMetrics:

    @pytest.mark.parametrize("beta,eta", PARAMS)
    def test_percentile_matches_scipy(self, beta, eta):
        p = np.array([0.01, 0.1, 0.5, 0.9])
        assert_allclose(percentile_life(p, beta, eta),
                        stats.weibull_min.ppf(p, beta, scale=eta), rtol=1e-10)

    def test_percentile_zero(self):
        assert percentile_life(0.0, 2.0, 100.0) == 0.0

    def test_percentile_out_of_range(self):
        with pytest.raises(ValueError):
            percentile_life(1.0, 2.0, 100.0)

    @pytest.mark.parametrize("beta,eta", PARAMS)
    def test_mean_life_matches_scipy(self, beta, eta):
        assert mean_life(beta, eta) == pytest.approx(
            stats.weibull_min.mean(beta, scale=eta), rel=1e-12)

    def test_exponential_mean(self):
        assert mean_life(1.0, 250.0) == pytest.approx(250.0)
