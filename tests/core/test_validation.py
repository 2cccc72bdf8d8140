"""
Tests for input validation utilities.
"""

import numpy as np
import pytest

from pystatbook.core.exceptions import DimensionError, ValidationError
from pystatbook.core.validation import (
    check_array,
    check_consistent_length,
    check_groups,
    check_min_samples,
    check_positive_int,
    check_probability,
    check_sample,
    check_seed,
)


class TestCheckArray:

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_bool_converted(self):
        assert check_array([True, False], "x").dtype == np.float64

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array(["a", "b"], "x")

    def test_returns_copy(self):
        original = np.array([1.0, 2.0])
        result = check_array(original, "x")
        result[0] = 99.0
        assert original[0] == 1.0


class TestCheckSample:

    def test_scalar_becomes_length_one(self):
        assert check_sample(3.0, "x").shape == (1,)

    def test_empty_allowed(self):
        assert check_sample([], "x").size == 0

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            check_sample([[1, 2], [3, 4]], "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_sample([1.0, np.nan], "x")


class TestCheckConsistentLength:

    def test_match(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("a", "b"))

    def test_mismatch(self):
        with pytest.raises(DimensionError, match="a=3, b=4"):
            check_consistent_length(np.zeros(3), np.ones(4), names=("a", "b"))


class TestCheckGroups:

    def test_converts_each_group(self):
        groups = check_groups([[1, 2], [3, 4, 5]], "groups")
        assert [g.size for g in groups] == [2, 3]

    def test_2d_array_rows_are_groups(self):
        groups = check_groups(np.arange(6.0).reshape(2, 3), "groups")
        assert len(groups) == 2

    def test_too_few_groups(self):
        with pytest.raises(ValidationError, match="at least 2 groups"):
            check_groups([[1, 2, 3]], "groups", min_groups=2)

    def test_empty_group(self):
        with pytest.raises(ValidationError, match=r"\[1\]"):
            check_groups([[1.0], []], "groups")


class TestScalars:

    def test_min_samples(self):
        with pytest.raises(ValidationError, match="at least 3"):
            check_min_samples(np.zeros(2), 3, "x")

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.1, 1.5])
    def test_probability_open_interval(self, value):
        with pytest.raises(ValidationError):
            check_probability(value, "alpha")

    def test_probability_closed_interval(self):
        assert check_probability(1.0, "p", open_interval=False) == 1.0

    def test_positive_int(self):
        assert check_positive_int(np.int64(5), "n") == 5
        with pytest.raises(ValidationError):
            check_positive_int(0, "n")
        with pytest.raises(ValidationError):
            check_positive_int(2.5, "n")

    def test_seed(self):
        assert check_seed(12) == 12
        with pytest.raises(ValidationError):
            check_seed(True)
        with pytest.raises(ValidationError):
            check_seed("42")
