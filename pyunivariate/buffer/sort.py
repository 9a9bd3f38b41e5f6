"""
Sort-status detection and in-place sorting.

These functions are blank-ignorant: call ``remove_blanks`` (or use
``no_blank_sorted``) first when the buffer may contain blanks.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pyunivariate.buffer.design import SortStatus, TypedBuffer, ensure_buffer


def is_sorted(data: Any) -> SortStatus:
    """
    Classify the ordering of a buffer with one forward scan.

    The direction is taken from the first adjacent pair (equal counts as
    increasing) and must then hold for every following pair. A buffer of
    zero or one element is sorted-increasing.

    The cached ``sort_status`` is neither read nor written.
    """
    values = ensure_buffer(data).values
    if values.shape[0] <= 1:
        return SortStatus.INCREASING

    if values[1] >= values[0]:
        if np.all(values[1:] >= values[:-1]):
            return SortStatus.INCREASING
    elif np.all(values[1:] <= values[:-1]):
        return SortStatus.DECREASING
    return SortStatus.NOT


def sort_increasing(buffer: TypedBuffer) -> None:
    """Sort the live elements of ``buffer`` in place, increasing."""
    buffer.values.sort(kind='quicksort')
    buffer.sort_status = SortStatus.INCREASING


def sort_decreasing(buffer: TypedBuffer) -> None:
    """Sort the live elements of ``buffer`` in place, decreasing."""
    values = buffer.values
    values.sort(kind='quicksort')
    values[:] = values[::-1].copy()
    buffer.sort_status = SortStatus.DECREASING


def reverse(buffer: TypedBuffer) -> None:
    """Reverse the live elements in place, flipping the cached status."""
    values = buffer.values
    values[:] = values[::-1].copy()
    if buffer.sort_status is SortStatus.INCREASING:
        buffer.sort_status = SortStatus.DECREASING
    elif buffer.sort_status is SortStatus.DECREASING:
        buffer.sort_status = SortStatus.INCREASING
