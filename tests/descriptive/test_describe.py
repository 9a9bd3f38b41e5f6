"""
Tests for describe(): name-selected univariate statistics.

Validates:
    - Every operation against a direct computation
    - Selection by name, request order and repeats
    - All-blank data gives NaN with warnings instead of raising
    - Solution accessors, summary and repr
"""

import math

import numpy as np
import pytest

from pyunivariate import describe
from pyunivariate.core.defaults import DEFAULT_MODE_TUNING
from pyunivariate.core.exceptions import InvalidParameterError
from pyunivariate.descriptive import OPERATIONS, UnivariateSolution
from pyunivariate.mode import mode
from pyunivariate.sigclip import sigma_clip


# ═══════════════════════════════════════════════════════════════════════
# All operations
# ═══════════════════════════════════════════════════════════════════════


class TestAllOperations:

    def test_default_computes_everything(self, outlier_sample):
        sol = describe(outlier_sample)
        assert isinstance(sol, UnivariateSolution)
        assert sol.requested == OPERATIONS
        assert list(sol.values()) == list(OPERATIONS)

    def test_moments_and_extremes(self, outlier_sample):
        sol = describe(outlier_sample)
        assert sol.number == 10
        assert sol.minimum == 1.0
        assert sol.maximum == 100.0
        assert sol.sum == 145.0
        assert sol.mean == pytest.approx(14.5)
        assert sol.std == pytest.approx(np.std(outlier_sample))

    def test_order_statistics(self, outlier_sample):
        sol = describe(outlier_sample, ['median', 'quantile'], quantile=0.9)
        assert sol.median == 5.5
        assert sol.quantile == 9.0
        assert sol.quantile_fraction == 0.9

    def test_sigclip_matches_direct_call(self, outlier_sample):
        sol = describe(outlier_sample, sigclip_multip=3.0, sigclip_param=3)
        direct = sigma_clip(outlier_sample, 3.0, 3)
        assert sol.sigclip_number == direct.number == 9
        assert sol.sigclip_median == direct.median
        assert sol.sigclip_mean == direct.mean
        assert sol.sigclip_std == direct.std

    def test_mode(self, symmetric_sample):
        sol = describe(symmetric_sample, 'mode')
        assert sol.mode == pytest.approx(10.0, abs=0.1)
        assert sol.mode_symmetricity == mode(symmetric_sample).symmetricity
        assert sol.mode_symmetricity > DEFAULT_MODE_TUNING.good_symmetricity

    def test_integer_input(self):
        sol = describe(np.array([4, 1, 3, 2], dtype=np.int16), ['median', 'sum'])
        # Integer median truncates
        assert sol.median == 2.0
        assert sol.sum == 10.0

    def test_blanks_ignored(self, outlier_sample):
        with_blanks = np.concatenate([outlier_sample, [np.nan]])
        a = describe(with_blanks, ['number', 'mean', 'median', 'sigclip-std'])
        b = describe(outlier_sample, ['number', 'mean', 'median', 'sigclip-std'])
        assert a.values() == b.values()

    def test_input_untouched(self, outlier_sample):
        data = outlier_sample[::-1].copy()
        data[2] = np.nan
        before = data.copy()
        describe(data)
        np.testing.assert_array_equal(data, before)


# ═══════════════════════════════════════════════════════════════════════
# Selection by name
# ═══════════════════════════════════════════════════════════════════════


class TestSelection:

    def test_single_name(self, outlier_sample):
        sol = describe(outlier_sample, 'mean')
        assert sol.requested == ('mean',)
        assert sol.median is None

    def test_request_order_kept(self, outlier_sample):
        sol = describe(outlier_sample, ['sigclip-std', 'number', 'minimum'])
        assert list(sol.values()) == ['sigclip-std', 'number', 'minimum']

    def test_repeats_dropped(self, outlier_sample):
        sol = describe(outlier_sample, ['mean', 'std', 'mean'])
        assert sol.requested == ('mean', 'std')

    def test_unknown_name(self, outlier_sample):
        with pytest.raises(InvalidParameterError, match="unknown operation"):
            describe(outlier_sample, ['mean', 'variance'])

    def test_getitem(self, outlier_sample):
        sol = describe(outlier_sample, ['sigclip-number', 'maximum'])
        assert sol['sigclip-number'] == 9
        assert sol['maximum'] == 100.0

    def test_getitem_not_computed(self, outlier_sample):
        sol = describe(outlier_sample, 'mean')
        with pytest.raises(KeyError):
            sol['median']
        with pytest.raises(KeyError):
            sol['variance']

    def test_sorted_work_skipped(self, outlier_sample):
        sol = describe(outlier_sample, ['number', 'mean'])
        assert 'normalize' not in sol.timing
        assert 'moments' in sol.timing


# ═══════════════════════════════════════════════════════════════════════
# Validation and empty data
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    @pytest.mark.parametrize("kwargs", [
        {'quantile': 1.5},
        {'quantile': -0.1},
        {'mirrordist': 0.0},
        {'sigclip_multip': -1.0},
        {'sigclip_param': 0.0},
    ])
    def test_bad_parameters(self, outlier_sample, kwargs):
        with pytest.raises(InvalidParameterError):
            describe(outlier_sample, **kwargs)

    def test_all_blank(self):
        sol = describe(np.full(4, np.nan))
        assert sol.number == 0
        for name in OPERATIONS:
            if name != 'number':
                assert math.isnan(sol[name]), name
        assert any('median/quantile' in w for w in sol.warnings)
        assert any(w.startswith('mode:') for w in sol.warnings)
        assert any(w.startswith('sigma_clip:') for w in sol.warnings)


# ═══════════════════════════════════════════════════════════════════════
# Presentation
# ═══════════════════════════════════════════════════════════════════════


class TestPresentation:

    def test_summary(self, outlier_sample):
        text = describe(outlier_sample, ['number', 'mean', 'sigclip-number']).summary()
        lines = text.splitlines()
        assert lines[0] == "Univariate statistics (n=10)"
        assert lines[1].split() == ['number', '10']
        assert lines[2].split() == ['mean', '14.5']
        assert lines[3].split() == ['sigclip-number', '9']

    def test_summary_notes(self):
        text = describe(np.full(2, np.nan), 'median').summary()
        assert "nan" in text
        assert "note: median/quantile" in text

    def test_repr(self, outlier_sample):
        r = repr(describe(outlier_sample, ['mean', 'std']))
        assert r == "UnivariateSolution(n=10, computed=[mean, std])"

    def test_metadata(self, outlier_sample):
        sol = describe(outlier_sample, 'mean', quantile=0.25)
        assert sol.backend_name == 'cpu_univariate'
        assert sol.info['size'] == 10
        assert sol.info['element_type'] == 'float64'
        assert sol.info['quantile'] == 0.25
