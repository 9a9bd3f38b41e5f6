"""
Iterative sigma-clipping.

The input is normalized once (blank-free and sorted; a decreasing order
is kept as is). Each round measures the median, mean and standard
deviation of the current window, then narrows the window to the
elements strictly inside ``median +/- multip * std``. Because the data
is sorted, narrowing only moves the two ends of the window inward.

``param`` selects the stopping rule:

    param >= 1  exactly ``param`` rounds (must be a whole number); the
                window left by the last round is reported
    param <  1  stop once the relative drop in std, ``(old - new) / new``,
                falls below ``param``; the statistics of the round before
                are reported. NaN if this never happens.
"""

from __future__ import annotations

from typing import Any
import logging
import math
import warnings

import numpy as np
from numpy.typing import NDArray

from pyunivariate.buffer.normalize import no_blank_sorted
from pyunivariate.core.compute.timing import Timer
from pyunivariate.core.defaults import DEFAULT_SIGCLIP_TUNING, SigmaClipTuning
from pyunivariate.core.dtypes import ElementType
from pyunivariate.core.result import Result
from pyunivariate.core.validation import check_positive, check_whole_number
from pyunivariate.moments.solvers import accumulate, std_from_sums
from pyunivariate.order.solvers import median_of_sorted
from pyunivariate.sigclip.solution import ClipRound, SigmaClipParams, SigmaClipSolution

logger = logging.getLogger(__name__)


def _clip_bounds(
    window: NDArray[Any],
    low: float,
    high: float,
    increasing: bool,
) -> tuple[int, int]:
    """First and one-past-last positions of elements strictly inside (low, high)."""
    n = window.shape[0]
    if increasing:
        first = int(np.searchsorted(window, low, side='right'))
        stop = int(np.searchsorted(window, high, side='left'))
        return first, stop

    rising = window[::-1]
    first = n - int(np.searchsorted(rising, high, side='left'))
    stop = n - int(np.searchsorted(rising, low, side='right'))
    return first, stop


def _measure(window: NDArray[Any], etype: ElementType, number: int) -> ClipRound:
    med = float(median_of_sorted(window, etype))
    n, s, s2 = accumulate(window)
    return ClipRound(
        round=number,
        number=n,
        median=med,
        mean=s / n,
        std=std_from_sums(n, s, s2),
    )


def sigma_clip(
    data: Any,
    multip: float = 3.0,
    param: float = 0.2,
    *,
    inplace: bool = False,
    quiet: bool = True,
    tuning: SigmaClipTuning = DEFAULT_SIGCLIP_TUNING,
    warn: bool = False,
) -> SigmaClipSolution:
    """
    Sigma-clip a distribution.

    Parameters
    ----------
    data : TypedBuffer or array-like
        Need not be sorted; may contain blanks.
    multip : float
        Multiple of the standard deviation defining the clip range (> 0).
    param : float
        Number of rounds when >= 1 (a whole number), otherwise the
        convergence tolerance (> 0).
    inplace : bool
        Let a TypedBuffer input be left blank-free and sorted.
    quiet : bool
        If False, log each round at INFO level.
    tuning : SigmaClipTuning
        Round limit in tolerance mode.
    warn : bool
        Emit a RuntimeWarning when the result is undefined.

    Returns
    -------
    SigmaClipSolution
        ``as_array()`` gives float32 ``[number, median, mean, std]``.

    Raises
    ------
    InvalidParameterError
        If multip or param is not positive, or param >= 1 is not whole.
    """
    multip = check_positive(multip, 'multip')
    param = check_positive(param, 'param')
    by_tolerance = param < 1.0
    max_rounds = tuning.max_converge if by_tolerance else check_whole_number(param, 'param')

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('normalize'):
        nbs = no_blank_sorted(data, inplace, increasing=False)
        values = nbs.values
        etype = nbs.buffer.element_type

    rounds: list[ClipRound] = []
    accepted: ClipRound | None = None
    converged = False
    completed = 0
    start, stop = 0, nbs.size

    with timer.section('clip'):
        while nbs.size and completed < max_rounds:
            window = values[start:stop]
            current = _measure(window, etype, completed + 1)
            rounds.append(current)
            if not quiet:
                logger.info(
                    "round %d: number=%d median=%g mean=%g std=%g",
                    current.round, current.number, current.median,
                    current.mean, current.std,
                )

            if by_tolerance and accepted is not None:
                # Zero spread cannot shrink further
                if current.std == 0 or (accepted.std - current.std) / current.std < param:
                    converged = True
                    break

            spread = multip * current.std
            first, last = _clip_bounds(
                window, current.median - spread, current.median + spread, nbs.increasing
            )
            if first < last:
                start, stop = start + first, start + last
            accepted = current
            completed += 1

        if not by_tolerance and accepted is not None:
            # Describe what the last round kept
            accepted = _measure(values[start:stop], etype, completed)
            converged = True

    timer.stop()

    if accepted is None or (by_tolerance and not converged):
        if nbs.size == 0:
            warnings_list.append("sigma_clip: no usable (non-blank) elements")
        else:
            warnings_list.append(
                f"sigma_clip: std did not converge to tolerance {param:g} "
                f"within {max_rounds} rounds"
            )
        number = median = mean = std = math.nan
    else:
        number = float(accepted.number)
        median, mean, std = accepted.median, accepted.mean, accepted.std

    if warn:
        for message in warnings_list:
            warnings.warn(message, RuntimeWarning, stacklevel=2)

    params = SigmaClipParams(
        number=number,
        median=median,
        mean=mean,
        std=std,
        iterations=completed,
        converged=converged,
        by_tolerance=by_tolerance,
        rounds=tuple(rounds),
    )
    result = Result(
        params=params,
        info={
            'multip': multip,
            'param': param,
            'max_rounds': max_rounds,
            'size': nbs.size,
            'sort_status': nbs.status.name,
        },
        timing=timer.result(),
        backend_name='cpu_sigclip',
        warnings=tuple(warnings_list),
    )
    return SigmaClipSolution(_result=result)
