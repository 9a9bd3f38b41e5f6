"""
Tests for element types and blank markers.
"""

import numpy as np
import pytest

from pyunivariate.core.dtypes import (
    ElementType,
    blank_value,
    element_type_of,
    is_blank,
    is_blank_scalar,
    type_max,
    type_min,
)
from pyunivariate.core.exceptions import UnsupportedElementTypeError


class TestElementTypeOf:

    def test_every_type_round_trips(self, etype):
        assert element_type_of(etype.dtype) is etype

    def test_accepts_scalar_types(self):
        assert element_type_of(np.int16) is ElementType.INT16

    def test_big_endian_maps_to_native_kind(self):
        assert element_type_of(np.dtype('>f8')) is ElementType.FLOAT64

    @pytest.mark.parametrize("dtype", [np.bool_, np.complex128, np.float16, object])
    def test_unsupported(self, dtype):
        with pytest.raises(UnsupportedElementTypeError) as info:
            element_type_of(dtype)
        assert info.value.dtype is not None


class TestBlankValues:

    @pytest.mark.parametrize("etype, expected", [
        (ElementType.UINT8, 255),
        (ElementType.UINT64, np.iinfo(np.uint64).max),
        (ElementType.INT8, -128),
        (ElementType.INT32, np.iinfo(np.int32).min),
    ])
    def test_integer_sentinels(self, etype, expected):
        blank = blank_value(etype)
        assert blank == expected
        assert blank.dtype == etype.dtype

    def test_float_blank_is_nan(self):
        assert np.isnan(blank_value(ElementType.FLOAT32))

    def test_is_blank_integer(self):
        values = np.array([1, 255, 3], dtype=np.uint8)
        np.testing.assert_array_equal(
            is_blank(values, ElementType.UINT8), [False, True, False]
        )

    def test_is_blank_float(self):
        values = np.array([1.0, np.nan, -np.inf])
        np.testing.assert_array_equal(
            is_blank(values, ElementType.FLOAT64), [False, True, False]
        )

    def test_scalar(self):
        assert is_blank_scalar(-128, ElementType.INT8)
        assert not is_blank_scalar(0, ElementType.INT8)

    def test_limits(self):
        assert type_min(ElementType.INT16) == -32768
        assert type_max(ElementType.UINT16) == 65535
        assert type_max(ElementType.FLOAT32) == np.finfo(np.float32).max


class TestElementTypeProperties:

    def test_floating_flags(self):
        assert ElementType.FLOAT32.is_floating
        assert not ElementType.INT64.is_floating
        assert ElementType.UINT8.is_integer

    def test_scalar_conversion(self, etype):
        assert etype.scalar(3).dtype == etype.dtype
