"""
Parameter payloads for maintenance cost results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class CostPoint:
    """Cost rates at one candidate PM interval. Rates are >= 0 or +inf."""

    t: float
    pm_rate: float
    cm_rate: float
    total_rate: float


@dataclass(frozen=True)
class CostParams:
    """Cost rates over a grid of candidate intervals."""

    t: NDArray[np.floating[Any]]               # shape (k,)
    cpm: NDArray[np.floating[Any]]             # shape (k,)
    ccm: NDArray[np.floating[Any]]             # shape (k,)
    cput: NDArray[np.floating[Any]]            # shape (k,)
    optimal_index: int                          # first grid minimum of cput
    beta: float
    eta: float
    c_pm: float
    c_cm: float
