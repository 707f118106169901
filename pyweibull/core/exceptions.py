"""
Errors raised by PyWeibull.

Only caller mistakes are raised. Degenerate numerical outcomes (infeasible
parameters, too few observations for a bootstrap, non-finite replicates)
are reported through sentinel values, None results, or Result.warnings.

    PyWeibullError
    ├── ValidationError
    │   └── DimensionError
    └── NumericalError
        └── ConvergenceError
"""


class PyWeibullError(Exception):
    """Root of every error this package raises."""


class ValidationError(PyWeibullError):
    """Bad input: empty data, negative times, conf outside (0, 1), ..."""


class DimensionError(ValidationError):
    """Wrong array rank, or parallel arrays of different length."""


class NumericalError(PyWeibullError):
    """A computation could not produce a usable number."""


class ConvergenceError(NumericalError):
    """
    The simplex stopped at its iteration cap.

    Fits report non-convergence through a flag and a RuntimeWarning; this
    is raised only on request, by ``WeibullSolution.raise_if_not_converged()``.

    Attributes:
        iterations: Simplex iterations performed
        final_spread: Std of vertex objectives when the search stopped
        reason: e.g. 'max_iterations'
        threshold: Tolerance that was not reached
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_spread: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_spread = final_spread
        self.reason = reason
        self.threshold = threshold
