"""
Result envelope shared by the fit, bootstrap and cost computations.

Every public solver builds a Result[P] around its own frozen payload P
(FitParams, BootParams, CostParams) and hands it to a Solution wrapper.
Non-fatal conditions travel in ``warnings``; bookkeeping such as
iteration counts or discarded replicates goes in ``info``.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen output of one computation.

    Attributes:
        params: Domain payload, e.g. FitParams for a Weibull fit
        info: Method, convergence and counting metadata
        timing: Timer.result() of the run, or None
        backend_name: e.g. 'cpu_nelder_mead', 'cpu_bootstrap'
        warnings: Human-readable non-fatal conditions

        >>> Result(params=fit_params,
        ...        info={'method': 'nelder_mead', 'converged': True},
        ...        timing=None, backend_name='cpu_nelder_mead')
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        return any(substring in w for w in self.warnings)
