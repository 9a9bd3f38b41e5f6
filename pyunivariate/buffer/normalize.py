"""
Blank-and-sort normalizer.

Every order statistic, the mode estimator and sigma-clipping work on a
contiguous, blank-free, sorted buffer. ``no_blank_sorted`` produces one
while copying as little as possible:

    tile              -> materialized copy (which may then be mutated)
    blanks present    -> removed into a copy, or compacted in place
    unsorted          -> sorted increasing (copy first unless in place)
    sorted decreasing -> reversed when an increasing order is required

The result says whether it is a fresh allocation (``owned``) or the
caller's own buffer handed back (borrowed), so ownership is never
ambiguous.

Array-like inputs (anything that is not already a TypedBuffer) are never
mutated: ``inplace`` only applies to TypedBuffer inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyunivariate.buffer.design import SortStatus, TypedBuffer, ensure_buffer
from pyunivariate.buffer.sort import is_sorted, reverse, sort_increasing


@dataclass(frozen=True)
class Normalized:
    """
    A blank-free, sorted buffer plus its ownership tag.

    Attributes:
        buffer: The normalized buffer
        owned: True if freshly allocated; False if it is the caller's
            buffer (either untouched because it was already normalized,
            or modified in place because the caller allowed it)
        status: Verified order, INCREASING or DECREASING
    """
    buffer: TypedBuffer
    owned: bool
    status: SortStatus

    @property
    def values(self) -> NDArray[Any]:
        return self.buffer.values

    @property
    def size(self) -> int:
        return self.buffer.size

    @property
    def increasing(self) -> bool:
        return self.status is SortStatus.INCREASING


def _resolve(data: Any, inplace: bool) -> tuple[TypedBuffer, bool]:
    buffer = ensure_buffer(data)
    return buffer, inplace and buffer is data


def _without_blanks(buffer: TypedBuffer, mask: NDArray[np.bool_]) -> TypedBuffer:
    return TypedBuffer(
        buffer.values[~mask].copy(), buffer.element_type, has_blank=False
    )


def remove_blanks(data: Any, inplace: bool = False) -> TypedBuffer:
    """
    Remove blank elements.

    With ``inplace`` (TypedBuffer input only) the survivors are compacted
    in the caller's storage and its size shrinks; otherwise a new buffer
    is returned and the input is untouched. Order is preserved.
    """
    buffer, inplace = _resolve(data, inplace)
    if buffer.is_tile:
        buffer, inplace = buffer.contiguous(), True

    mask = buffer.blank_mask()
    if not inplace:
        return _without_blanks(buffer, mask)

    if mask.any():
        buffer.compact(~mask)
    buffer.has_blank = False
    return buffer


def no_blank_sorted(
    data: Any,
    inplace: bool = False,
    *,
    increasing: bool = True,
) -> Normalized:
    """
    Return a contiguous, blank-free, sorted version of ``data``.

    Parameters
    ----------
    data : TypedBuffer or array-like
        Input; may be a tile and may contain blanks.
    inplace : bool
        Allow blank removal and sorting to rewrite the caller's buffer.
        Ignored for array-like input, which is never mutated.
    increasing : bool
        Require increasing order. When False, a buffer that is already
        sorted decreasing is accepted as-is.

    Returns
    -------
    Normalized
    """
    buffer, inplace = _resolve(data, inplace)

    if buffer.is_tile:
        # The copy is ours, so it may be mutated freely from here on
        work, inplace = buffer.contiguous(), True
    else:
        work = buffer

    mask = work.blank_mask()
    if mask.any():
        if inplace:
            work.compact(~mask)
        else:
            work = _without_blanks(work, mask)
    if inplace:
        work.has_blank = False

    mutable = inplace or work is not buffer
    status = is_sorted(work)

    if status is SortStatus.NOT or (increasing and status is SortStatus.DECREASING):
        if not mutable:
            work = work.copy()
        if status is SortStatus.NOT:
            sort_increasing(work)
        else:
            work.sort_status = status
            reverse(work)
        status = SortStatus.INCREASING
    elif mutable:
        work.sort_status = status

    return Normalized(buffer=work, owned=work is not buffer, status=status)
