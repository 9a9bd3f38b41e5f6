"""
Order statistics: minimum, maximum, median and quantiles.

Single-value results are NumPy scalars in the input's element type
(``quantile_function`` and ``quantile_function_index`` excepted), so a
uint8 buffer has a uint8 median.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyunivariate.buffer.design import TypedBuffer, ensure_buffer
from pyunivariate.buffer.normalize import no_blank_sorted
from pyunivariate.core.dtypes import ElementType, blank_value, element_type_of
from pyunivariate.core.exceptions import EmptyOrAllBlankError, TypeMismatchError
from pyunivariate.core.validation import check_fraction, check_size


def minimum(data: Any) -> np.generic:
    """
    Smallest non-blank value, in the input's type.

    Tiles are read in place. Returns the type's blank value when there
    are no usable elements.
    """
    buffer = ensure_buffer(data)
    usable = buffer.usable()
    if usable.shape[0] == 0:
        return blank_value(buffer.element_type)
    return buffer.element_type.scalar(usable.min())


def maximum(data: Any) -> np.generic:
    """Largest non-blank value, in the input's type. See ``minimum``."""
    buffer = ensure_buffer(data)
    usable = buffer.usable()
    if usable.shape[0] == 0:
        return blank_value(buffer.element_type)
    return buffer.element_type.scalar(usable.max())


def median_of_sorted(values: NDArray[Any], etype: ElementType) -> np.generic:
    """
    Median of a sorted, blank-free array (either direction).

    For an even count the two central elements are averaged in the
    element type: integer types truncate toward zero.
    """
    n = values.shape[0]
    if n % 2:
        return etype.scalar(values[n // 2])

    lo, hi = values[n // 2 - 1], values[n // 2]
    if etype.is_floating:
        return etype.scalar((lo + hi) / etype.scalar(2))

    # Python ints: no overflow, C-style truncation
    total = int(lo) + int(hi)
    half = total // 2 if total >= 0 else -((-total) // 2)
    return etype.scalar(half)


def median(data: Any, inplace: bool = False) -> np.generic:
    """
    Median of the non-blank elements, in the input's type.

    Parameters
    ----------
    data : TypedBuffer or array-like
    inplace : bool
        Let a TypedBuffer input be left blank-free and sorted.

    Raises
    ------
    EmptyOrAllBlankError
        If there are no usable elements.
    """
    nbs = no_blank_sorted(data, inplace)
    if nbs.size == 0:
        raise EmptyOrAllBlankError(
            "median: no usable (non-blank) elements", operation='median'
        )
    return median_of_sorted(nbs.values, nbs.buffer.element_type)


def quantile_index(size: int, quantile: float) -> int:
    """
    Zero-based index of ``quantile`` in a sorted array of ``size`` elements.

    The position ``(size - 1) * quantile`` rounds up only when its
    fractional part is strictly greater than 0.5.

    Raises
    ------
    InvalidParameterError
        If quantile is outside [0, 1] or size is not positive.
    """
    quantile = check_fraction(quantile, 'quantile')
    size = check_size(size, 'size')

    findex = (size - 1) * quantile
    index = int(findex)
    if findex - index > 0.5:
        return index + 1
    return index


def quantile(data: Any, quantile: float, inplace: bool = False) -> np.generic:
    """
    Element at the given quantile of the non-blank elements.

    Raises
    ------
    InvalidParameterError
        If quantile is outside [0, 1].
    EmptyOrAllBlankError
        If there are no usable elements.
    """
    check_fraction(quantile, 'quantile')
    nbs = no_blank_sorted(data, inplace)
    if nbs.size == 0:
        raise EmptyOrAllBlankError(
            "quantile: no usable (non-blank) elements", operation='quantile'
        )
    index = quantile_index(nbs.size, quantile)
    return nbs.buffer.element_type.scalar(nbs.values[index])


def _check_value_type(value: Any, etype: ElementType) -> Any:
    """Typed values must match the distribution; plain numbers pass."""
    if isinstance(value, TypedBuffer):
        vtype = value.element_type
        if value.size != 1:
            raise TypeMismatchError(
                f"value: expected a single element, got {value.size}",
                expected=etype.value,
                actual=vtype.value,
            )
        value = value.values[0]
    elif isinstance(value, (np.generic, np.ndarray)):
        vtype = element_type_of(value.dtype)
        array = np.asarray(value).reshape(-1)
        if array.shape[0] != 1:
            raise TypeMismatchError(
                f"value: expected a single element, got {array.shape[0]}",
                expected=etype.value,
                actual=vtype.value,
            )
        value = array[0]
    else:
        return value

    if vtype is not etype:
        raise TypeMismatchError(
            f"value: type {vtype.value} does not match the distribution's "
            f"type {etype.value}",
            expected=etype.value,
            actual=vtype.value,
        )
    return value


def nearest_index(values: NDArray[Any], value: Any) -> int | None:
    """
    Index of the element nearest ``value`` in a sorted array.

    The direction is taken from the first two elements. Scanning starts
    at the second element for the first element beyond ``value``; that
    element or its predecessor (whichever is strictly closer, the later
    one on ties) is returned. None means ``value`` lies beyond the last
    element. A value before the first element maps to index 0.
    """
    n = values.shape[0]
    if n == 0:
        return None
    if n == 1:
        return 0 if values[0] == value else None

    # Python scalars: unsigned differences must not wrap
    v = value.item() if isinstance(value, np.generic) else value

    if values[0] <= values[1]:
        i = max(int(np.searchsorted(values, v, side='right')), 1)
        if i == n:
            return n - 1 if values[n - 1] == v else None
        before, after = values[i - 1].item(), values[i].item()
        return i - 1 if v - before < after - v else i

    k = int(np.searchsorted(values[::-1], v, side='left'))
    i = max(n - k, 1)
    if i == n:
        return n - 1 if values[n - 1] == v else None
    before, after = values[i - 1].item(), values[i].item()
    return i - 1 if before - v < v - after else i


def quantile_function_index(
    data: Any,
    value: Any,
    inplace: bool = False,
) -> int | None:
    """
    Index of the non-blank element nearest ``value`` after sorting.

    Parameters
    ----------
    data : TypedBuffer or array-like
    value : scalar
        NumPy scalars and one-element TypedBuffers must share the
        distribution's element type; plain Python numbers are accepted.
    inplace : bool

    Returns
    -------
    int or None
        None when ``value`` lies beyond the largest element.

    Raises
    ------
    TypeMismatchError
        If a typed value does not match the distribution's type.
    """
    buffer = ensure_buffer(data)
    value = _check_value_type(value, buffer.element_type)
    nbs = no_blank_sorted(buffer, inplace and buffer is data)
    return nearest_index(nbs.values, value)


def quantile_function(data: Any, value: Any, inplace: bool = False) -> np.float64:
    """
    Quantile (fraction in [0, 1]) of ``value`` in the distribution.

    The index from ``quantile_function_index`` divided by ``size - 1``
    of the blank-free distribution; NaN when not found. A one-element
    distribution matching ``value`` gives 0.0.
    """
    buffer = ensure_buffer(data)
    value = _check_value_type(value, buffer.element_type)
    nbs = no_blank_sorted(buffer, inplace and buffer is data)
    index = nearest_index(nbs.values, value)
    if index is None:
        return np.float64(np.nan)
    if nbs.size == 1:
        return np.float64(0.0)
    return np.float64(index / (nbs.size - 1))
