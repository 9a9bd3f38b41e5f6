"""
Mode estimation by mirror symmetry.

The mode is taken as the index about which the distribution is most
symmetric: the lower half mirrored about the candidate best matches the
true upper half. A golden-section search over the [1%, 55%] quantile
interval finds that index, and the estimate is kept only if its
symmetricity passes the acceptance threshold.
"""

from __future__ import annotations

from typing import Any
import math
import warnings

import numpy as np

from pyunivariate.buffer.design import ensure_buffer
from pyunivariate.buffer.normalize import no_blank_sorted
from pyunivariate.core.compute.timing import Timer
from pyunivariate.core.defaults import (
    DEFAULT_MIRRORDIST,
    DEFAULT_MODE_TUNING,
    ModeTuning,
)
from pyunivariate.core.result import Result
from pyunivariate.core.validation import check_num_bins, check_positive
from pyunivariate.histogram.bins import regular_bins
from pyunivariate.histogram.solvers import cfp, histogram
from pyunivariate.mode._golden import SearchState, golden_section_search, initial_mid
from pyunivariate.mode._mirror import (
    MIRROR_ABOVE,
    make_mirror,
    mirror_max_index_diff,
    symmetricity,
)
from pyunivariate.mode.solution import MirrorPlots, ModeParams, ModeSolution
from pyunivariate.order.solvers import quantile_function_index, quantile_index


def mode(
    data: Any,
    mirrordist: float = DEFAULT_MIRRORDIST,
    inplace: bool = False,
    *,
    tuning: ModeTuning = DEFAULT_MODE_TUNING,
    warn: bool = False,
) -> ModeSolution:
    """
    Estimate the mode of a distribution.

    Parameters
    ----------
    data : TypedBuffer or array-like
        Need not be sorted; may contain blanks.
    mirrordist : float
        Error budget multiplier (> 0): the mirror and the data may differ
        by ``mirrordist * sqrt(m)`` indices around candidate ``m``.
    inplace : bool
        Let a TypedBuffer input be left blank-free and sorted.
    tuning : ModeTuning
        Search interval, golden ratio, tolerance, acceptance threshold.
    warn : bool
        Emit a RuntimeWarning when the mode cannot be determined.

    Returns
    -------
    ModeSolution
        ``as_array()`` gives ``[mode, quantile, symmetricity, boundary]``;
        all NaN when there are no usable elements or the symmetricity is
        at or below ``tuning.good_symmetricity``.

    Raises
    ------
    InvalidParameterError
        If mirrordist is not positive.
    """
    mirrordist = check_positive(mirrordist, 'mirrordist')

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []
    info: dict[str, Any] = {'mirrordist': mirrordist, 'tuning': tuning}

    with timer.section('normalize'):
        nbs = no_blank_sorted(data, inplace)
        n = nbs.size
        a = nbs.values.astype(np.float64, copy=False)
    info['size'] = n

    if n == 0:
        warnings_list.append("mode: no usable (non-blank) elements")
        params = ModeParams.undetermined()
    else:
        numcheck = n // 2
        interval = numcheck // tuning.max_checks if numcheck > tuning.max_checks else 1

        def objective(m: int) -> int:
            return mirror_max_index_diff(a, m, mirrordist, numcheck, interval)

        with timer.section('search'):
            low = quantile_index(n, tuning.min_quantile)
            high = quantile_index(n, tuning.max_quantile)
            mid = initial_mid(low, high, tuning.golden_ratio)
            state = SearchState(low=low, mid=mid, high=high, mid_diff=objective(mid))
            index = golden_section_search(
                objective,
                state,
                two_take_gr=tuning.two_take_gr,
                tolerance=tuning.tolerance,
                mirror_above=MIRROR_ABOVE,
            )
        info['index'] = index
        info['search_interval'] = (low, high)
        info['probes'] = state.probes

        with timer.section('symmetricity'):
            score, boundary = symmetricity(a, index, mirrordist, tuning.sym_low_quantile)
        info['symmetricity'] = score

        if score > tuning.good_symmetricity:
            params = ModeParams(
                value=float(a[index]),
                quantile=index / (n - 1) if n > 1 else math.nan,
                symmetricity=score,
                boundary=boundary,
            )
        else:
            warnings_list.append(
                f"mode: symmetricity {score:.4g} is not above "
                f"{tuning.good_symmetricity:g}; mode undetermined"
            )
            params = ModeParams.undetermined()

    timer.stop()

    if warn:
        for message in warnings_list:
            warnings.warn(message, RuntimeWarning, stacklevel=2)

    result = Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name='cpu_mode',
        warnings=tuple(warnings_list),
    )
    return ModeSolution(_result=result)


def mode_mirror_plots(
    data: Any,
    value: Any,
    num_bins: int,
    inplace: bool = False,
) -> MirrorPlots | None:
    """
    Histogram and CFP of the distribution mirrored about ``value``.

    The distribution is mirrored about its element nearest ``value``
    (see ``quantile_function_index``). Bins are aligned so one starts at
    that element.

    Returns
    -------
    MirrorPlots or None
        None when ``value`` lies outside the distribution (beyond the
        largest element, or nearest the smallest one).
    """
    num_bins = check_num_bins(num_bins)
    buffer = ensure_buffer(data)
    nbs = no_blank_sorted(buffer, inplace and buffer is data)

    index = quantile_function_index(nbs.buffer, value)
    if index is None or index == 0:
        return None

    mirror = make_mirror(nbs.values, index)
    mirror_value = float(mirror[index])

    bins = regular_bins(mirror, None, num_bins, align_to=mirror_value)
    hist = histogram(mirror, bins, max_one=True)
    return MirrorPlots(
        bins=bins.with_histogram(hist),
        histogram=hist,
        cfp=cfp(mirror, bins, normalize=True),
        mirror_value=mirror_value,
    )
