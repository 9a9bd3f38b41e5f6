"""
Tests for moment statistics, cross-checked against SciPy.
"""

import math

import numpy as np
import pytest
from scipy import stats

from pyunivariate.buffer import TypedBuffer
from pyunivariate.core.dtypes import blank_value
from pyunivariate.moments import count, mean, mean_std, number, std, sum as usum


class TestNumber:

    def test_counts_non_blank(self, int_etype):
        blank = blank_value(int_etype)
        data = np.array([1, blank, 2, blank, 3], dtype=int_etype.dtype)
        assert number(data) == 3
        assert number(data).dtype == np.uint64

    def test_count_alias(self):
        assert count is number

    def test_nan_not_counted(self):
        assert number(np.array([np.nan, 1.0])) == 1

    def test_empty(self):
        assert number(np.array([], dtype=np.int16)) == 0


class TestAgainstScipy:
    """Population moments match scipy.stats (ddof=0)."""

    def test_mean_std(self, rng):
        data = rng.normal(5.0, 2.0, size=1000)
        np.testing.assert_allclose(mean(data), np.mean(data), rtol=1e-12)
        np.testing.assert_allclose(std(data), np.std(data, ddof=0), rtol=1e-10)

    def test_matches_describe(self, rng):
        data = rng.exponential(3.0, size=500)
        ref = stats.describe(data, ddof=0)
        np.testing.assert_allclose(mean(data), ref.mean, rtol=1e-12)
        np.testing.assert_allclose(std(data) ** 2, ref.variance, rtol=1e-10)

    def test_matches_tstd_scaled(self, rng):
        data = rng.uniform(-1, 1, size=200)
        n = data.shape[0]
        expected = stats.tstd(data) * math.sqrt((n - 1) / n)
        np.testing.assert_allclose(std(data), expected, rtol=1e-10)


class TestMoments:

    def test_sum_over_count_is_mean(self, small_sample):
        assert usum(small_sample) / number(small_sample) == pytest.approx(mean(small_sample))

    def test_integer_input_accumulates_in_float64(self):
        data = np.array([250, 250, 250], dtype=np.uint8)
        assert usum(data) == 750.0
        assert usum(data).dtype == np.float64

    def test_blanks_excluded(self):
        data = np.array([1.0, np.nan, 3.0])
        assert mean(data) == 2.0
        assert std(data) == 1.0

    def test_constant_data_zero_std(self):
        assert std(np.full(1000, 2.0)) == 0.0

    def test_mean_std_one_pass(self, rng):
        data = rng.standard_normal(100).astype(np.float32)
        both = mean_std(data)
        assert both.dtype == np.float64
        assert both.shape == (2,)
        np.testing.assert_allclose(both, [mean(data), std(data)])

    def test_tile(self):
        parent = TypedBuffer.from_array(np.array([1.0, 100.0, 3.0, 100.0]))
        tile = TypedBuffer.tile(parent, 0, 4, 2)
        assert mean(tile) == 2.0

    def test_all_blank_is_nan(self, etype):
        data = np.full(4, blank_value(etype), dtype=etype.dtype)
        assert math.isnan(usum(data))
        assert math.isnan(mean(data))
        assert math.isnan(std(data))
        assert np.all(np.isnan(mean_std(data)))
