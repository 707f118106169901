"""
Tests for percentile interval index selection.
"""

import numpy as np
import pytest

from pyweibull.montecarlo._ci import percentile_indices, percentile_interval


class TestPercentileIndices:

    def test_ninety_percent_of_hundred(self):
        assert percentile_indices(100, 0.90) == (5, 95)

    def test_ninety_five_percent_of_thousand(self):
        assert percentile_indices(1000, 0.95) == (25, 975)

    def test_floor_low_ceil_high(self):
        # 0.05 * 30 = 1.5 -> 1 ; 0.95 * 30 = 28.5 -> 29
        assert percentile_indices(30, 0.90) == (1, 29)

    def test_clamped_to_bounds(self):
        assert percentile_indices(1, 0.90) == (0, 0)
        assert percentile_indices(10, 0.99) == (0, 9)


class TestPercentileInterval:

    def test_unsorted_input(self):
        values = np.random.default_rng(0).permutation(np.arange(100.0))
        assert percentile_interval(values, 0.90) == (5.0, 95.0)

    def test_empty(self):
        lo, hi = percentile_interval(np.array([]), 0.9)
        assert np.isnan(lo) and np.isnan(hi)

    def test_ordered(self):
        values = np.random.default_rng(1).normal(size=37)
        lo, hi = percentile_interval(values, 0.8)
        assert lo <= hi
