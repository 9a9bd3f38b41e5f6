"""
Typed buffers and the blank-and-sort normalizer.

Public API:
    TypedBuffer       - tagged 1-D numeric array (optionally a tile)
    SortStatus        - NOT / INCREASING / DECREASING
    ensure_buffer     - wrap array-likes without copying
    is_sorted         - classify ordering with one scan
    sort_increasing   - in-place sort
    sort_decreasing   - in-place sort
    remove_blanks     - drop blank elements (copy or in place)
    no_blank_sorted   - contiguous, blank-free, sorted view
"""

from pyunivariate.buffer.design import SortStatus, TypedBuffer, ensure_buffer
from pyunivariate.buffer.sort import is_sorted, sort_increasing, sort_decreasing
from pyunivariate.buffer.normalize import Normalized, remove_blanks, no_blank_sorted

__all__ = [
    "TypedBuffer",
    "SortStatus",
    "ensure_buffer",
    "is_sorted",
    "sort_increasing",
    "sort_decreasing",
    "Normalized",
    "remove_blanks",
    "no_blank_sorted",
]
