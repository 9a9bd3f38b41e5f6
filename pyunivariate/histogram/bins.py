"""
Regular bins over a value range.

A BinSet stores bin centers (float64) and the bin width. Bin edges are
derived from the centers: ``lower = centers - width/2``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import math
import numpy as np
from numpy.typing import NDArray

from pyunivariate.buffer.design import ensure_buffer
from pyunivariate.core.defaults import BIN_MAX_EPSILON
from pyunivariate.core.exceptions import EmptyOrAllBlankError, InvalidParameterError
from pyunivariate.core.validation import check_num_bins


@dataclass(frozen=True)
class BinSet:
    """
    Ordered bin centers.

    Attributes:
        centers: Bin centers, float64, shape (num_bins,)
        width: Bin width
        regular: Whether the bins are equally spaced. Histograms and CFPs
            only accept regular bins.
        histogram: A histogram already computed over these bins, which
            ``cfp`` may reuse
    """
    centers: NDArray[np.float64]
    width: float
    regular: bool = True
    histogram: NDArray[Any] | None = None

    @property
    def num_bins(self) -> int:
        return self.centers.shape[0]

    @property
    def lower(self) -> NDArray[np.float64]:
        """Lower edge of every bin."""
        return self.centers - self.width / 2

    @property
    def upper(self) -> NDArray[np.float64]:
        """Upper edge of every bin."""
        return self.centers + self.width / 2

    @property
    def min(self) -> float:
        return float(self.centers[0] - self.width / 2)

    @property
    def max(self) -> float:
        return float(self.centers[-1] + self.width / 2)

    def with_histogram(self, histogram: NDArray[Any]) -> BinSet:
        """Copy of these bins carrying ``histogram``."""
        if histogram.shape != self.centers.shape:
            raise InvalidParameterError(
                f"histogram: expected shape {self.centers.shape}, "
                f"got {histogram.shape}",
                parameter='histogram',
            )
        return BinSet(self.centers, self.width, self.regular, histogram)

    def __len__(self) -> int:
        return self.num_bins


def _is_unset(bound: Any) -> bool:
    return bound is None or math.isnan(float(bound))


def _data_extreme(data: Any, which: str) -> float:
    buffer = ensure_buffer(data)
    usable = buffer.usable()
    if usable.shape[0] == 0:
        raise EmptyOrAllBlankError(
            f"regular_bins: the {which} of the range must come from the data, "
            "but it has no usable (non-blank) elements",
            operation='regular_bins',
        )
    return float(usable.min() if which == 'minimum' else usable.max())


def _resolve_range(
    data: Any,
    range: Sequence[float] | NDArray[Any] | None,
) -> tuple[float, float, float | None]:
    """
    Range of the bins: both ends from the data, or an explicit pair in
    which either end may be None/NaN to take it from the data.

    The third value is the data maximum when the upper end came from the
    data, else None.
    """
    bounds = [] if range is None else list(range)

    if len(bounds) % 2:
        raise InvalidParameterError(
            "range: quantile-derived ranges (an odd number of values) "
            "are not implemented",
            parameter='range',
            value=range,
        )
    if len(bounds) not in (0, 2):
        raise InvalidParameterError(
            f"range: expected a (min, max) pair, got {len(bounds)} values",
            parameter='range',
            value=range,
        )

    low, high = bounds if bounds else (None, None)
    data_max = None
    if _is_unset(low):
        low = _data_extreme(data, 'minimum')
    if _is_unset(high):
        data_max = _data_extreme(data, 'maximum')
        # Nudged so the data maximum lands inside the last bin
        high = max(data_max + BIN_MAX_EPSILON, float(np.nextafter(data_max, np.inf)))
    return float(low), float(high), data_max


def _centers(low: float, high: float, num_bins: int) -> tuple[NDArray[np.float64], float]:
    width = (high - low) / num_bins
    return low + np.arange(num_bins, dtype=np.float64) * width + width / 2, width


def regular_bins(
    data: Any,
    range: Sequence[float] | NDArray[Any] | None = None,
    num_bins: int = 10,
    align_to: float = math.nan,
) -> BinSet:
    """
    Equally spaced bins over a value range.

    Parameters
    ----------
    data : TypedBuffer or array-like
        Used only for the ends of the range that are not given.
    range : (min, max) or None
        Explicit bin range; either end may be None or NaN.
    num_bins : int
        Number of bins (>= 1).
    align_to : float
        If not NaN, shift all bins so one bin starts exactly at this
        value. No shift is made when no bin straddles it.

    Returns
    -------
    BinSet

    Raises
    ------
    InvalidParameterError
        If num_bins < 1, or a quantile range (odd length) is given.
    EmptyOrAllBlankError
        If a range end must come from data with no usable elements.
    """
    num_bins = check_num_bins(num_bins)
    low, high, data_max = _resolve_range(data, range)
    centers, width = _centers(low, high, num_bins)

    if data_max is not None:
        # The rebuilt top edge can round back onto the data maximum
        step = max(BIN_MAX_EPSILON, abs(float(np.spacing(data_max))))
        while math.isfinite(data_max) and centers[-1] + width / 2 <= data_max:
            step *= 2
            centers, width = _centers(low, data_max + step, num_bins)

    if align_to is not None and not math.isnan(align_to):
        lower = centers - width / 2
        # First bin whose edges strictly straddle align_to
        inside = np.nonzero((lower[:-1] < align_to) & (lower[1:] > align_to))[0]
        if inside.shape[0]:
            centers = centers + (align_to - lower[inside[0]])

    return BinSet(centers=centers, width=width, regular=True)
