"""
Tests for line-oriented life-data parsing and WeibullDesign construction.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pyweibull.core.exceptions import DimensionError, ValidationError
from pyweibull.weibull import (
    Observation,
    WeibullDesign,
    format_records,
    parse_records,
)


class TestParseRecords:

    def test_basic_scenario(self):
        parsed = parse_records("100,F\n150,F\n200,S\n80,F")
        assert_allclose(parsed.design.failures, [100.0, 150.0, 80.0])
        assert_allclose(parsed.design.suspensions, [200.0])
        assert parsed.n_dropped == 0
        assert parsed.n_lines == 4

    def test_code_case_insensitive_and_whitespace(self):
        parsed = parse_records(" 100 , f \n200,s\r\n300,F")
        assert_allclose(parsed.design.failures, [100.0, 300.0])
        assert_allclose(parsed.design.suspensions, [200.0])

    def test_extra_fields_ignored(self):
        parsed = parse_records("100,F,pump-3,2024-01-02\n50,S,pump-4")
        assert_allclose(parsed.design.failures, [100.0])
        assert_allclose(parsed.design.suspensions, [50.0])

    def test_blank_lines_not_counted(self):
        parsed = parse_records("\n100,F\n\n   \n200,S\n")
        assert parsed.n_lines == 2
        assert parsed.n_dropped == 0

    def test_malformed_lines_dropped_silently(self):
        text = "\n".join([
            "100,F",       # 1 ok
            "abc,F",       # 2 bad time
            "150",         # 3 one field
            "150;F",       # 4 one field
            "-5,F",        # 5 negative
            "nan,S",       # 6 not finite
            "120,X",       # 7 unknown code
            "1e3,S",       # 8 ok
        ])
        parsed = parse_records(text)
        assert_allclose(parsed.design.failures, [100.0])
        assert_allclose(parsed.design.suspensions, [1000.0])
        assert parsed.dropped_lines == (2, 3, 4, 5, 6, 7)
        assert parsed.n_dropped == 6

    def test_empty_text(self):
        parsed = parse_records("")
        assert parsed.design.n_observations == 0
        assert parsed.n_lines == 0

    def test_from_records_classmethod(self):
        design = WeibullDesign.from_records("10,F\n20,S\nbad")
        assert design.n_failures == 1
        assert design.n_suspensions == 1

    def test_format_round_trip(self):
        design = WeibullDesign.for_fit([100.0, 80.5], [200.0])
        again = parse_records(format_records(design)).design
        assert_allclose(again.failures, design.failures)
        assert_allclose(again.suspensions, design.suspensions)


class TestWeibullDesign:

    def test_for_fit_without_suspensions(self):
        design = WeibullDesign.for_fit([1.0, 2.0])
        assert design.n_failures == 2
        assert design.n_suspensions == 0
        assert design.n_observations == 2

    def test_scalar_failure(self):
        design = WeibullDesign.for_fit(5.0)
        assert_allclose(design.failures, [5.0])

    def test_pooled_arrays(self):
        design = WeibullDesign.for_fit([1.0, 2.0], [3.0])
        assert_allclose(design.time, [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(design.censored, [False, False, True])

    def test_from_arrays(self):
        design = WeibullDesign.from_arrays([5.0, 6.0, 7.0], [0, 1, 0])
        assert_allclose(design.failures, [5.0, 7.0])
        assert_allclose(design.suspensions, [6.0])

    def test_from_arrays_length_mismatch(self):
        with pytest.raises(DimensionError):
            WeibullDesign.from_arrays([5.0, 6.0], [0, 1, 0])

    def test_observations_round_trip(self):
        obs = [Observation(10.0), Observation(20.0, censored=True)]
        design = WeibullDesign.from_observations(obs)
        assert design.observations == tuple(obs)

    def test_metadata(self):
        design = WeibullDesign.for_fit([1.0], [2.0, 3.0])
        assert design.metadata == {'n': 3, 'n_failures': 1, 'n_suspensions': 2}

    def test_negative_time_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            WeibullDesign.for_fit([1.0, -2.0])

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            WeibullDesign.for_fit([1.0], [np.inf])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            WeibullDesign.for_fit([[1.0, 2.0], [3.0, 4.0]])

    def test_copies_input(self):
        data = np.array([1.0, 2.0])
        design = WeibullDesign.for_fit(data)
        data[0] = 99.0
        assert design.failures[0] == 1.0
