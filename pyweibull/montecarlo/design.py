"""
Design class for the Weibull bootstrap.

BootstrapDesign encapsulates all inputs needed by a backend to resample
and refit. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from pyweibull.core.cancellation import CancellationToken
from pyweibull.core.compute.tolerances import WEIBULL_MLE
from pyweibull.core.validation import (
    check_open_unit_interval,
    check_positive,
    check_positive_int,
)
from pyweibull.weibull.design import WeibullDesign

# Fewer pooled observations than this gives no bootstrap result.
MIN_OBSERVATIONS = 3

DEFAULT_NBOOT = 1000
DEFAULT_CONF = 0.90
DEFAULT_YIELD_EVERY = 50


@dataclass(frozen=True)
class BootstrapDesign:
    """
    Frozen design for case-resampling bootstrap of a censored Weibull fit.

    Attributes:
        data: Life data to resample (failures and suspensions pooled).
        nboot: Number of bootstrap replicates.
        conf: Confidence level of the percentile intervals.
        rng: Random source for resampling draws.
        tol: Simplex tolerance for each replicate fit.
        max_iter: Simplex iteration cap for each replicate fit.
        cancel: Checked before every replicate; None disables cancellation.
        progress: Called as progress(done, nboot) every ``yield_every``
            replicates and once at the end.
        yield_every: Replicates between progress callbacks.
    """
    data: WeibullDesign
    nboot: int
    conf: float
    rng: np.random.Generator
    tol: float
    max_iter: int
    cancel: CancellationToken | None
    progress: Callable[[int, int], None] | None
    yield_every: int

    @classmethod
    def for_bootstrap(
        cls,
        data: WeibullDesign,
        nboot: int = DEFAULT_NBOOT,
        conf: float = DEFAULT_CONF,
        *,
        seed=None,
        tol: float = WEIBULL_MLE.tol,
        max_iter: int = WEIBULL_MLE.max_iter,
        cancel: CancellationToken | None = None,
        progress: Callable[[int, int], None] | None = None,
        yield_every: int = DEFAULT_YIELD_EVERY,
    ) -> BootstrapDesign:
        """
        Create a bootstrap design with validation.

        Args:
            data: WeibullDesign to resample.
            nboot: Number of replicates. Must be >= 1.
            conf: Confidence level in (0, 1).
            seed: None, an int, or a numpy Generator.
            tol, max_iter: Replicate fit settings.
            cancel: Optional cancellation token.
            progress: Optional progress callback.
            yield_every: Progress callback period. Must be >= 1.

        Returns:
            Validated BootstrapDesign.

        Raises:
            ValidationError: If inputs are invalid.
        """
        check_positive_int(nboot, "nboot")
        check_open_unit_interval(conf, "conf")
        check_positive(tol, "tol")
        check_positive_int(max_iter, "max_iter")
        check_positive_int(yield_every, "yield_every")

        return cls(
            data=data,
            nboot=int(nboot),
            conf=float(conf),
            rng=np.random.default_rng(seed),
            tol=tol,
            max_iter=int(max_iter),
            cancel=cancel,
            progress=progress,
            yield_every=int(yield_every),
        )

    @property
    def n_observations(self) -> int:
        return self.data.n_observations

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n': self.n_observations,
            'nboot': self.nboot,
            'conf': self.conf,
        }
