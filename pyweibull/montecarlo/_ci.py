"""
Percentile bootstrap confidence intervals.

Each parameter is sorted on its own, so the beta and eta intervals are
marginal. The bounds of the two intervals do not come from matched
replicates and must not be read as a joint confidence region.

Index rule for m sorted values and alpha = 1 - conf:
    low  = sorted[floor(alpha/2 * m)]
    high = sorted[ceil((1 - alpha/2) * m)]
both clamped to [0, m - 1]. Products within INDEX_EPS of an integer are
treated as that integer, so conf=0.90 with m=100 selects indices 5 and 95
even though 1 - 0.90 is not exactly 0.1 in binary floating point.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

INDEX_EPS = 1e-9


def percentile_indices(m: int, conf: float) -> tuple[int, int]:
    """Low and high indices into a sorted sample of size m."""
    alpha = 1.0 - conf
    lo = math.floor(alpha / 2.0 * m + INDEX_EPS)
    hi = math.ceil((1.0 - alpha / 2.0) * m - INDEX_EPS)
    return min(max(lo, 0), m - 1), min(max(hi, 0), m - 1)


def percentile_interval(values: NDArray, conf: float) -> tuple[float, float]:
    """Percentile interval of a 1D sample. Empty input gives (nan, nan)."""
    m = len(values)
    if m == 0:
        return (float("nan"), float("nan"))
    ordered = np.sort(values)
    lo, hi = percentile_indices(m, conf)
    return (float(ordered[lo]), float(ordered[hi]))
