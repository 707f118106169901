"""
Tests for the Result envelope, Timer, cancellation token and protocols.
"""

import dataclasses

import pytest

from pyweibull.core import Backend, CancellationToken, DataSource, Result
from pyweibull.core.compute.timing import Timer, timed
from pyweibull.core.compute.tolerances import (
    SIMPLEX_DEFAULT,
    WEIBULL_MLE,
    select_settings,
)
from pyweibull.maintenance.design import CostDesign
from pyweibull.montecarlo.backends.cpu import CPUBootstrapBackend
from pyweibull.montecarlo.design import BootstrapDesign
from pyweibull.weibull.design import WeibullDesign


class TestResult:

    def test_frozen(self):
        r = Result(params=1, info={}, timing=None, backend_name="cpu_test")
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.params = 2

    def test_default_warnings_empty(self):
        r = Result(params=1, info={}, timing=None, backend_name="cpu_test")
        assert r.warnings == ()

    def test_has_warning(self):
        r = Result(
            params=1, info={}, timing=None, backend_name="cpu_test",
            warnings=("Nelder-Mead did not converge in 5 iterations",),
        )
        assert r.has_warning("did not converge")
        assert not r.has_warning("cancelled")


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("a"):
            pass
        with timer.section("a"):
            pass
        timer.stop()
        result = timer.result()
        assert "total_seconds" in result
        assert result["a"] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert timer.result()["total_seconds"] >= 0.0


class TestTolerances:

    def test_presets(self):
        assert SIMPLEX_DEFAULT.tol == 1e-6
        assert SIMPLEX_DEFAULT.max_iter == 2000
        assert WEIBULL_MLE.tol == 1e-8
        assert WEIBULL_MLE.max_iter == 1500

    def test_select_settings(self):
        assert select_settings("weibull_mle") is WEIBULL_MLE
        with pytest.raises(ValueError, match="Unknown convergence preset"):
            select_settings("bfgs")


class TestCancellationToken:

    def test_initially_not_cancelled(self):
        token = CancellationToken()
        assert not token.cancelled

    def test_cancel(self):
        token = CancellationToken()
        token.cancel()
        assert token.cancelled
        assert "cancelled=True" in repr(token)


class TestProtocols:

    def test_designs_are_data_sources(self):
        data = WeibullDesign.for_fit([1.0, 2.0, 3.0])
        assert isinstance(data, DataSource)
        assert isinstance(BootstrapDesign.for_bootstrap(data, 10), DataSource)
        assert isinstance(CostDesign.for_costs(2.0, 100.0, 1.0, 10.0), DataSource)

    def test_bootstrap_backend_is_backend(self):
        assert isinstance(CPUBootstrapBackend(), Backend)
