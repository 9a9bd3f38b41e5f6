"""
Tests for the mirror-symmetry mode estimator.

Validates:
    - A distribution mirrored about a known center gives that center
      with symmetricity above the acceptance threshold
    - Undetermined results (all blank, poor symmetry) are four NaNs
    - Parameter validation, warnings, timing and result metadata
"""

import math
import warnings
from dataclasses import replace

import numpy as np
import pytest

from pyunivariate.buffer import TypedBuffer
from pyunivariate.core.defaults import DEFAULT_MODE_TUNING
from pyunivariate.core.exceptions import InvalidParameterError
from pyunivariate.mode import ModeSolution, mode
from pyunivariate.order import quantile_index


# ═══════════════════════════════════════════════════════════════════════
# Symmetric distributions
# ═══════════════════════════════════════════════════════════════════════


class TestSymmetric:

    def test_finds_center(self, symmetric_sample):
        sol = mode(symmetric_sample)
        assert isinstance(sol, ModeSolution)
        assert sol.determined
        assert sol.value == pytest.approx(10.0, abs=0.1)
        assert sol.quantile == pytest.approx(0.5, abs=0.02)

    def test_symmetricity_of_exact_mirror(self, symmetric_sample):
        sol = mode(symmetric_sample)
        a = np.sort(symmetric_sample)
        m = sol.info['index']
        top = min(2 * m, a.shape[0] - 1)
        low = quantile_index(2 * m + 1, DEFAULT_MODE_TUNING.sym_low_quantile)
        # The mirror never diverges, so the boundary is the far end
        assert sol.boundary == a[top]
        expected = (a[top] - a[m]) / (a[m] - a[low])
        assert sol.symmetricity == pytest.approx(expected)
        assert sol.symmetricity > DEFAULT_MODE_TUNING.good_symmetricity

    def test_as_array(self, symmetric_sample):
        arr = mode(symmetric_sample).as_array()
        assert arr.dtype == np.float64
        assert arr.shape == (4,)
        assert not np.any(np.isnan(arr))

    def test_blanks_do_not_matter(self, symmetric_sample):
        with_blanks = np.concatenate([symmetric_sample, np.full(100, np.nan)])
        np.testing.assert_array_equal(
            mode(with_blanks).as_array(), mode(symmetric_sample).as_array()
        )

    def test_input_untouched(self, symmetric_sample):
        before = symmetric_sample.copy()
        mode(symmetric_sample)
        np.testing.assert_array_equal(symmetric_sample, before)

    def test_inplace_sorts_buffer(self, symmetric_sample):
        buf = TypedBuffer.from_array(symmetric_sample.copy())
        mode(buf, inplace=True)
        assert np.all(np.diff(buf.values) >= 0)

    def test_integer_data(self, rng):
        offsets = np.round(np.abs(rng.normal(0, 400, size=5000))).astype(np.int32)
        data = np.concatenate([1000 - offsets, [1000], 1000 + offsets])
        sol = mode(data)
        assert sol.determined
        assert sol.value == pytest.approx(1000, abs=25)


# ═══════════════════════════════════════════════════════════════════════
# Undetermined results
# ═══════════════════════════════════════════════════════════════════════


class TestUndetermined:

    def test_all_blank(self):
        sol = mode(np.full(10, np.nan))
        assert not sol.determined
        assert np.all(np.isnan(sol.as_array()))
        assert sol.info['size'] == 0
        assert any("no usable" in w for w in sol.warnings)

    def test_empty(self):
        assert np.all(np.isnan(mode(np.array([], dtype=np.uint16)).as_array()))

    def test_single_element(self):
        assert np.all(np.isnan(mode(np.array([3.0])).as_array()))

    def test_strict_threshold_rejects(self, symmetric_sample):
        strict = replace(DEFAULT_MODE_TUNING, good_symmetricity=10.0)
        sol = mode(symmetric_sample, tuning=strict)
        assert not sol.determined
        assert np.all(np.isnan(sol.as_array()))
        assert "symmetricity" in sol.warnings[0]
        assert "undetermined" in sol.summary()

    def test_warn_flag(self):
        with pytest.warns(RuntimeWarning, match="no usable"):
            mode(np.full(3, np.nan), warn=True)

    def test_silent_by_default(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            mode(np.full(3, np.nan))


# ═══════════════════════════════════════════════════════════════════════
# Parameters and metadata
# ═══════════════════════════════════════════════════════════════════════


class TestParameters:

    @pytest.mark.parametrize("mirrordist", [0.0, -1.5])
    def test_mirrordist_must_be_positive(self, mirrordist):
        with pytest.raises(InvalidParameterError, match="mirrordist"):
            mode(np.arange(10.0), mirrordist)

    def test_metadata(self, symmetric_sample):
        sol = mode(symmetric_sample)
        assert sol.backend_name == 'cpu_mode'
        assert {'normalize', 'search', 'symmetricity'} <= set(sol.timing)
        assert sol.info['size'] == symmetric_sample.shape[0]
        low, high = sol.info['search_interval']
        assert low <= sol.info['index'] <= high
        assert sol.info['probes'] > 0

    def test_summary_and_repr(self, symmetric_sample):
        sol = mode(symmetric_sample)
        assert "mode:" in sol.summary()
        assert repr(sol).startswith("ModeSolution(value=")
