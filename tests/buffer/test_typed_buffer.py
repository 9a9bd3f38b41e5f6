"""
Tests for TypedBuffer construction, tiles and blank handling.
"""

import numpy as np
import pytest

from pyunivariate.buffer import SortStatus, TypedBuffer, ensure_buffer
from pyunivariate.core.dtypes import ElementType, blank_value
from pyunivariate.core.exceptions import (
    DimensionError,
    InvalidParameterError,
    UnsupportedElementTypeError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestFromArray:

    def test_wraps_without_copy(self):
        arr = np.arange(5, dtype=np.int32)
        buf = TypedBuffer.from_array(arr)
        assert buf.values.base is arr or buf.values is arr
        assert buf.element_type is ElementType.INT32
        assert buf.size == len(buf) == 5
        assert buf.sort_status is SortStatus.NOT

    def test_copy_flag(self):
        arr = np.arange(5, dtype=np.int32)
        buf = TypedBuffer.from_array(arr, copy=True)
        buf.values[0] = 99
        assert arr[0] == 0

    def test_list_input(self):
        buf = TypedBuffer.from_array([1.5, 2.5])
        assert buf.element_type is ElementType.FLOAT64

    def test_scalar_becomes_one_element(self):
        buf = TypedBuffer.from_array(np.float32(3.0))
        assert buf.size == 1
        assert buf.element_type is ElementType.FLOAT32

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="1D"):
            TypedBuffer.from_array(np.zeros((2, 2)))

    def test_rejects_bool(self):
        with pytest.raises(UnsupportedElementTypeError):
            TypedBuffer.from_array(np.array([True, False]))

    def test_object_with_to_numpy(self):
        class Column:
            def to_numpy(self):
                return np.array([3, 1, 2], dtype=np.uint16)

        buf = TypedBuffer.from_array(Column())
        assert buf.element_type is ElementType.UINT16
        np.testing.assert_array_equal(buf.values, [3, 1, 2])

    def test_has_blank_scanned(self, int_etype):
        data = np.array([1, 2, blank_value(int_etype)], dtype=int_etype.dtype)
        assert TypedBuffer.from_array(data).has_blank
        assert not TypedBuffer.from_array(data[:2]).has_blank

    def test_float_always_may_have_blanks(self):
        buf = TypedBuffer.from_array(np.array([1.0]), has_blank=False)
        assert buf.has_blank

    def test_ensure_buffer_passthrough(self):
        buf = TypedBuffer.from_array([1, 2])
        assert ensure_buffer(buf) is buf


# ═══════════════════════════════════════════════════════════════════════
# Blanks and compaction
# ═══════════════════════════════════════════════════════════════════════


class TestBlanks:

    def test_usable_skips_integer_sentinel(self):
        buf = TypedBuffer.from_array(np.array([5, 255, 7], dtype=np.uint8))
        np.testing.assert_array_equal(buf.usable(), [5, 7])

    def test_usable_skips_nan(self):
        buf = TypedBuffer.from_array(np.array([np.nan, 1.0, np.nan]))
        np.testing.assert_array_equal(buf.usable(), [1.0])

    def test_compact_shrinks_size_in_place(self):
        arr = np.array([1, -128, 3, -128], dtype=np.int8)
        buf = TypedBuffer.from_array(arr)
        buf.compact(~buf.blank_mask())
        assert buf.size == 2
        np.testing.assert_array_equal(buf.values, [1, 3])
        # same storage
        np.testing.assert_array_equal(arr[:2], [1, 3])


# ═══════════════════════════════════════════════════════════════════════
# Tiles
# ═══════════════════════════════════════════════════════════════════════


class TestTiles:

    def test_tile_is_strided_view(self):
        parent = TypedBuffer.from_array(np.arange(10, dtype=np.int64))
        tile = TypedBuffer.tile(parent, 1, 9, 2)
        assert tile.is_tile
        assert tile.block is parent
        np.testing.assert_array_equal(tile.values, [1, 3, 5, 7])

    def test_contiguous_detaches(self):
        parent = TypedBuffer.from_array(np.arange(10, dtype=np.int64))
        copy = TypedBuffer.tile(parent, 0, 4).contiguous()
        assert not copy.is_tile
        copy.values[0] = 42
        assert parent.values[0] == 0

    def test_cannot_compact_tile(self):
        parent = TypedBuffer.from_array(np.arange(4, dtype=np.int64))
        tile = TypedBuffer.tile(parent, 0, 4)
        with pytest.raises(InvalidParameterError, match="tile"):
            tile.compact(np.ones(4, dtype=bool))

    def test_bad_step(self):
        parent = TypedBuffer.from_array(np.arange(4, dtype=np.int64))
        with pytest.raises(InvalidParameterError, match="step"):
            TypedBuffer.tile(parent, 0, 4, 0)

    def test_repr_mentions_tile(self):
        parent = TypedBuffer.from_array(np.arange(4, dtype=np.int64))
        assert "tile" in repr(TypedBuffer.tile(parent, 0, 2))
        assert "tile" not in repr(parent)
