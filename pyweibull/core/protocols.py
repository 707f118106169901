"""
Structural interfaces for designs and backends.

WeibullDesign, BootstrapDesign and CostDesign satisfy DataSource;
CPUBootstrapBackend satisfies Backend. Protocols are runtime-checkable so
tests can assert conformance with isinstance.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')
D = TypeVar('D')


@runtime_checkable
class DataSource(Protocol):
    """A validated input container.

    ``n_observations`` counts units of work: observations for a fit or a
    bootstrap, grid points for a cost design. ``metadata`` is merged into
    result ``info``, e.g. ``{'n': 40, 'nboot': 1000, 'conf': 0.9}``.
    """

    @property
    def n_observations(self) -> int: ...

    @property
    def metadata(self) -> dict[str, Any]: ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """Stateless solver: ``solve(design) -> Result[P]``.

    ``name`` follows '{device}_{algorithm}', e.g. 'cpu_bootstrap'.
    """

    @property
    def name(self) -> str: ...

    def solve(self, design: D) -> 'Result[P]': ...
