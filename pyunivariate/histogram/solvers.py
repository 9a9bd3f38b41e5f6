"""
Histograms and cumulative frequency plots (CFPs) over regular bins.

Raw histograms and CFPs are uint64 counts. Normalized (sum to 1) and
max-one (peak at 1) variants are float32.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyunivariate.buffer.design import ensure_buffer
from pyunivariate.core.compute.tolerances import FLOAT32
from pyunivariate.core.exceptions import InvalidParameterError
from pyunivariate.core.validation import check_exclusive_flags
from pyunivariate.histogram.bins import BinSet


def _require_regular(bins: BinSet, operation: str) -> None:
    if bins is None:
        raise InvalidParameterError(f"{operation}: bins must be given", parameter='bins')
    if not bins.regular:
        raise InvalidParameterError(
            f"{operation}: only regular bins are supported",
            parameter='bins',
        )


def histogram(
    data: Any,
    bins: BinSet,
    normalize: bool = False,
    max_one: bool = False,
) -> NDArray[Any]:
    """
    Number of elements in each bin.

    An element with value ``v`` in ``[bins.min, bins.max)`` falls in bin
    ``floor((v - bins.min) / bins.width)``. Blank elements and elements
    outside the bins are not counted.

    Parameters
    ----------
    data : TypedBuffer or array-like
    bins : BinSet
        Regular bins.
    normalize : bool
        Divide by the total count (float32, sums to 1).
    max_one : bool
        Divide by the largest bin count (float32, peaks at 1).

    Returns
    -------
    ndarray
        uint64 counts, or float32 when normalize or max_one is set.

    Raises
    ------
    InvalidParameterError
        If bins are irregular, or normalize and max_one are both set.
    """
    _require_regular(bins, 'histogram')
    check_exclusive_flags(normalize=normalize, max_one=max_one)

    num_bins = bins.num_bins
    low, high = bins.min, bins.max
    values = ensure_buffer(data).usable().astype(np.float64, copy=False)

    inside = values[(values >= low) & (values < high)]
    index = np.floor((inside - low) / bins.width).astype(np.intp)
    # Rounding can put a value just under `high` one past the last bin
    np.clip(index, 0, num_bins - 1, out=index)
    counts = np.bincount(index, minlength=num_bins).astype(np.uint64)

    if normalize:
        hist = counts.astype(np.float32)
        total = hist.sum()
        return hist / total if total else hist
    if max_one:
        hist = counts.astype(np.float32)
        peak = hist.max()
        return hist / peak if peak else hist
    return counts


def _is_normalized(hist: NDArray[Any]) -> bool:
    return bool(
        np.issubdtype(hist.dtype, np.floating)
        and FLOAT32.isclose(float(np.sum(hist, dtype=np.float64)), 1.0)
    )


def cfp(
    data: Any,
    bins: BinSet,
    normalize: bool = False,
    histogram_values: NDArray[Any] | None = None,
) -> NDArray[Any]:
    """
    Cumulative frequency plot: running sum of the histogram, bin 0 up to
    and including each bin.

    A histogram already computed over ``bins`` (``histogram_values`` or
    ``bins.histogram``) is reused only when it is normalized; a raw or
    max-one histogram is ignored and counts are recomputed. A normalized
    histogram gives a normalized CFP whatever ``normalize`` says.

    Returns
    -------
    ndarray
        uint64 running counts, or float32 fractions (last bin 1.0) when
        normalized.
    """
    _require_regular(bins, 'cfp')

    hist = histogram_values if histogram_values is not None else bins.histogram
    if hist is None or not _is_normalized(hist):
        hist = histogram(data, bins)

    if np.issubdtype(hist.dtype, np.floating):
        return np.cumsum(hist, dtype=np.float32)

    running = np.cumsum(hist, dtype=np.uint64)
    if not normalize:
        return running

    # Divide by the histogram total, not the last partial sum
    total = int(hist.sum())
    out = running.astype(np.float32)
    return out / np.float32(total) if total else out
