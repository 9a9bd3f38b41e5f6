"""
Element types supported by PyUnivariate.

This module is the SINGLE SOURCE OF TRUTH for element kinds and their
blank (no-data) markers. Import from here, never hard-code a sentinel.

Blank convention:
    - unsigned integers: the largest value of the type
    - signed integers:   the smallest value of the type
    - floating point:    NaN

Algorithms are written once against ``is_blank()``; the per-type
difference (sentinel equality vs. NaN test) lives only here.

Usage:
    from pyunivariate.core.dtypes import ElementType, element_type_of, is_blank

    etype = element_type_of(arr.dtype)
    usable = arr[~is_blank(arr, etype)]
"""

from __future__ import annotations

from enum import Enum
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyunivariate.core.exceptions import UnsupportedElementTypeError


class ElementType(Enum):
    """The ten primitive element kinds the engine has code paths for."""
    UINT8 = 'uint8'
    INT8 = 'int8'
    UINT16 = 'uint16'
    INT16 = 'int16'
    UINT32 = 'uint32'
    INT32 = 'int32'
    UINT64 = 'uint64'
    INT64 = 'int64'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'

    @property
    def dtype(self) -> np.dtype:
        """NumPy dtype of this element type."""
        return np.dtype(self.value)

    @property
    def is_floating(self) -> bool:
        return self in (ElementType.FLOAT32, ElementType.FLOAT64)

    @property
    def is_integer(self) -> bool:
        return not self.is_floating

    def scalar(self, value: Any) -> np.generic:
        """Convert ``value`` to a NumPy scalar of this type."""
        return self.dtype.type(value)


_BY_DTYPE: dict[np.dtype, ElementType] = {e.dtype: e for e in ElementType}


def element_type_of(dtype: np.dtype | type) -> ElementType:
    """
    Map a NumPy dtype to its ElementType.

    Raises:
        UnsupportedElementTypeError: For any dtype outside the ten kinds
    """
    try:
        key = np.dtype(dtype)
    except TypeError as e:
        raise UnsupportedElementTypeError(
            f"not a NumPy dtype: {dtype!r}", dtype=str(dtype)
        ) from e

    # Normalise byte order so big-endian input maps to the same kind
    if key.byteorder not in ('=', '|'):
        key = key.newbyteorder('=')

    etype = _BY_DTYPE.get(key)
    if etype is None:
        supported = ", ".join(e.value for e in ElementType)
        raise UnsupportedElementTypeError(
            f"element type {key} is not supported. Supported: {supported}",
            dtype=str(key),
        )
    return etype


def type_min(etype: ElementType) -> np.generic:
    """Smallest finite value of the type."""
    if etype.is_floating:
        return etype.scalar(np.finfo(etype.dtype).min)
    return etype.scalar(np.iinfo(etype.dtype).min)


def type_max(etype: ElementType) -> np.generic:
    """Largest finite value of the type."""
    if etype.is_floating:
        return etype.scalar(np.finfo(etype.dtype).max)
    return etype.scalar(np.iinfo(etype.dtype).max)


def blank_value(etype: ElementType) -> np.generic:
    """The blank marker of ``etype`` as a NumPy scalar."""
    if etype.is_floating:
        return etype.scalar(np.nan)
    if etype.value.startswith('u'):
        return type_max(etype)
    return type_min(etype)


def is_blank(values: NDArray[Any], etype: ElementType) -> NDArray[np.bool_]:
    """
    Boolean mask of blank elements.

    Floating types test for NaN; integer types test equality with the
    reserved sentinel.
    """
    if etype.is_floating:
        return np.isnan(values)
    return values == blank_value(etype)


def is_blank_scalar(value: Any, etype: ElementType) -> bool:
    """Scalar version of ``is_blank``."""
    return bool(is_blank(np.asarray(value, dtype=etype.dtype), etype))


__all__ = [
    'ElementType',
    'element_type_of',
    'type_min',
    'type_max',
    'blank_value',
    'is_blank',
    'is_blank_scalar',
]
