"""
Shared plumbing for the weibull, montecarlo and maintenance packages.

    Result[P]           frozen envelope returned by every backend
    DataSource/Backend  structural interfaces for designs and solvers
    CancellationToken   cooperative stop flag for long bootstrap runs
    exceptions          PyWeibullError and its subclasses
    compute             Timer, convergence presets, Nelder-Mead
"""

from pyweibull.core.protocols import DataSource, Backend
from pyweibull.core.result import Result
from pyweibull.core.cancellation import CancellationToken
from pyweibull.core.exceptions import (
    PyWeibullError,
    ValidationError,
    DimensionError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "DataSource",
    "Backend",
    # Result
    "Result",
    # Cancellation
    "CancellationToken",
    # Exceptions
    "PyWeibullError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "ConvergenceError",
]
