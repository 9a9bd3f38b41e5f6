"""
Moment statistics: count, sum, mean and standard deviation.

A single blank-aware pass over the buffer (tiles are read in place, no
sorting). Sums are accumulated in float64 whatever the element type.
Undefined results (no usable elements) are NaN rather than errors.
"""

from __future__ import annotations

from typing import Any
import math
import numpy as np
from numpy.typing import NDArray

from pyunivariate.buffer.design import ensure_buffer


def accumulate(values: NDArray[Any]) -> tuple[int, float, float]:
    """
    Count, sum and sum of squares of a blank-free array, in float64.

    Returns:
        (n, s, s2)
    """
    as_float = values.astype(np.float64, copy=False)
    return (
        int(as_float.shape[0]),
        float(np.sum(as_float)),
        float(np.dot(as_float, as_float)),
    )


def std_from_sums(n: int, s: float, s2: float) -> float:
    """
    Population standard deviation sqrt((s2 - s*s/n) / n).

    Cancellation can leave the numerator a hair below zero for constant
    data; that is read as zero spread.
    """
    if n == 0:
        return math.nan
    return math.sqrt(max((s2 - s * s / n) / n, 0.0))


def number(data: Any) -> np.uint64:
    """Number of non-blank elements."""
    buffer = ensure_buffer(data)
    if not buffer.has_blank:
        return np.uint64(buffer.size)
    return np.uint64(buffer.size - int(np.count_nonzero(buffer.blank_mask())))


count = number


def sum(data: Any) -> np.float64:
    """Sum of non-blank elements in float64; NaN if there are none."""
    n, s, _ = accumulate(ensure_buffer(data).usable())
    return np.float64(s if n else np.nan)


def mean(data: Any) -> np.float64:
    """Mean of non-blank elements in float64; NaN if there are none."""
    n, s, _ = accumulate(ensure_buffer(data).usable())
    return np.float64(s / n if n else np.nan)


def std(data: Any) -> np.float64:
    """
    Population standard deviation of non-blank elements.

    Divides by n, not n - 1. NaN if there are no usable elements.
    """
    n, s, s2 = accumulate(ensure_buffer(data).usable())
    return np.float64(std_from_sums(n, s, s2))


def mean_std(data: Any) -> NDArray[np.float64]:
    """
    Mean and standard deviation from one pass.

    Returns:
        float64 array ``[mean, std]`` (both NaN if there are no usable
        elements)
    """
    n, s, s2 = accumulate(ensure_buffer(data).usable())
    if n == 0:
        return np.array([np.nan, np.nan], dtype=np.float64)
    return np.array([s / n, std_from_sums(n, s, s2)], dtype=np.float64)
