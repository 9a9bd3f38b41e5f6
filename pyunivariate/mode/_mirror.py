"""
Mirror-distribution comparisons used by the mode estimator.

For a candidate mode index ``m`` in a sorted array ``a``, the lower half
reflected about ``a[m]`` is the mirror distribution: its element ``m + i``
has value ``2*a[m] - a[m-i]``. For each sampled ``i`` the true upper half
is searched for the index ``m + j`` whose value is nearest. When the
distribution is symmetric about ``a[m]``, ``j`` stays close to ``i``.

All arrays here are float64 (integer inputs are converted once by the
caller), so the reflection cannot overflow.
"""

from __future__ import annotations

import sys
import math
import numpy as np
from numpy.typing import NDArray

from pyunivariate.core.exceptions import InvalidParameterError
from pyunivariate.order.solvers import quantile_index

# Objective value meaning "the mirror overtakes the data; look lower"
MIRROR_ABOVE = sys.maxsize


def nearest_upper_indices(
    a: NDArray[np.float64],
    m: int,
    targets: NDArray[np.float64],
) -> NDArray[np.intp]:
    """
    For each target value (all >= a[m]), offset ``j`` from ``m`` of the
    nearest element in ``a[m:]``. On a tie the earlier element wins.

    Targets beyond the last element give ``len(a) - m``.
    """
    upper = a[m:]
    j = np.searchsorted(upper, targets, side='right')
    found = j < upper.shape[0]
    jf = j[found]
    tf = targets[found]
    step_back = ~(upper[jf] - tf < tf - upper[jf - 1])
    j[found] = jf - step_back.astype(np.intp)
    return j


def error_budget(mirrordist: float, m: int) -> int:
    """Largest acceptable index difference: ``mirrordist * sqrt(m)``."""
    return int(mirrordist * math.sqrt(m))


def mirror_max_index_diff(
    a: NDArray[np.float64],
    m: int,
    mirrordist: float,
    numcheck: int,
    interval: int,
) -> int:
    """
    Maximum ``|i - j|`` between the mirror and the data about index ``m``.

    ``i`` runs over ``1, 1 + interval, ...`` below ``numcheck`` while the
    mirrored point exists on both sides. If any sample has the mirror
    ahead of the data by more than the error budget (``i > j + budget``)
    the result is ``MIRROR_ABOVE``.
    """
    n = a.shape[0]
    i = np.arange(1, numcheck, interval)
    i = i[(i <= m) & (m + i < n)]
    if i.shape[0] == 0:
        return 0

    j = nearest_upper_indices(a, m, 2 * a[m] - a[m - i])
    if np.any(i > j + error_budget(mirrordist, m)):
        return MIRROR_ABOVE
    return int(np.max(np.abs(i - j)))


def symmetricity(
    a: NDArray[np.float64],
    m: int,
    mirrordist: float,
    low_quantile: float,
) -> tuple[float, float]:
    """
    Symmetry score of the distribution about index ``m``.

    The boundary ``b`` is the first index after ``m`` (searching up to
    ``2m`` or the array end) where the mirror and data disagree by more
    than the error budget, or the end of that range if they never do.
    With ``af`` the value at ``low_quantile`` of the ``2m+1`` lowest
    elements, the score is ``(a[b] - a[m]) / (a[m] - af)``: about 1 for
    a symmetric distribution.

    Returns:
        (score, a[b]). A zero scale (``a[b] == af`` or ``a[m] == af``)
        scores 0.
    """
    n = a.shape[0]
    topi = min(2 * m, n - 1)
    mf = a[m]
    af = a[quantile_index(2 * m + 1, low_quantile)]

    bi = topi
    i = np.arange(1, topi - m)
    if i.shape[0]:
        j = nearest_upper_indices(a, m, 2 * mf - a[m - i])
        budget = error_budget(mirrordist, m)
        diverged = np.nonzero((i > j + budget) | (j > i + budget))[0]
        if diverged.shape[0]:
            bi = m + int(i[diverged[0]])

    bf = a[bi]
    if bf == af or mf == af:
        return 0.0, float(bf)
    return float((bf - mf) / (mf - af)), float(bf)


def make_mirror(sorted_values: NDArray, index: int) -> NDArray[np.float64]:
    """
    Mirror distribution about ``sorted_values[index]``.

    The first ``index + 1`` elements are copied; element ``index + i``
    (``i = 1 .. index``) is ``2*zf - sorted_values[index - i]`` with
    ``zf = sorted_values[index]``. The result (float64) has
    ``2*index + 1`` elements.

    Raises
    ------
    InvalidParameterError
        If index is negative or not below the number of elements.
    """
    a = np.asarray(sorted_values).astype(np.float64, copy=False)
    n = a.shape[0]
    if not 0 <= index < n:
        raise InvalidParameterError(
            f"index: must be less than the number of elements ({n}), got {index}",
            parameter='index',
            value=index,
        )

    zf = a[index]
    lower = a[:index + 1]
    return np.concatenate([lower, 2 * zf - lower[-2::-1]])
