"""
Solver dispatch for descriptive statistics.

describe() computes any set of statistics selected by name, the way a
command-line or table layer asks for them ("mean", "median",
"sigclip-std", ...).
"""

from __future__ import annotations

from typing import Any, Iterable

from pyunivariate.buffer.design import ensure_buffer
from pyunivariate.core.defaults import DEFAULT_MIRRORDIST
from pyunivariate.core.exceptions import InvalidParameterError
from pyunivariate.core.validation import check_fraction, check_positive
from pyunivariate.descriptive.backends.cpu import CPUUnivariateBackend
from pyunivariate.descriptive.solution import UnivariateSolution

OPERATIONS = (
    'number',
    'minimum',
    'maximum',
    'sum',
    'mean',
    'std',
    'median',
    'mode',
    'sigclip-number',
    'sigclip-median',
    'sigclip-mean',
    'sigclip-std',
    'quantile',
)


def _resolve_compute(compute: str | Iterable[str] | None) -> tuple[str, ...]:
    """Validate operation names, dropping repeats but keeping order."""
    if compute is None:
        return OPERATIONS
    names = (compute,) if isinstance(compute, str) else tuple(compute)

    unknown = [name for name in names if name not in OPERATIONS]
    if unknown:
        raise InvalidParameterError(
            f"compute: unknown operation(s) {', '.join(map(repr, unknown))}. "
            f"Valid: {', '.join(OPERATIONS)}",
            parameter='compute',
            value=unknown,
        )
    return tuple(dict.fromkeys(names))


def describe(
    data: Any,
    compute: str | Iterable[str] | None = None,
    *,
    quantile: float = 0.5,
    mirrordist: float = DEFAULT_MIRRORDIST,
    sigclip_multip: float = 3.0,
    sigclip_param: float = 0.2,
) -> UnivariateSolution:
    """
    Compute univariate statistics selected by name.

    Parameters
    ----------
    data : TypedBuffer or array-like
        One column of data; may contain blanks. Never modified.
    compute : str, iterable of str, or None
        Operation names from ``OPERATIONS``. None computes all of them.
    quantile : float
        Fraction in [0, 1] for the 'quantile' operation.
    mirrordist : float
        Error budget multiplier for 'mode'.
    sigclip_multip : float
        Clipping multiple of the standard deviation for 'sigclip-*'.
    sigclip_param : float
        Rounds (>= 1) or tolerance (< 1) for 'sigclip-*'.

    Returns
    -------
    UnivariateSolution
        Undefined statistics (e.g. the median of all-blank data) are NaN
        and noted in ``warnings``.

    Raises
    ------
    InvalidParameterError
        For an unknown operation name or an invalid parameter.
    """
    names = _resolve_compute(compute)
    check_fraction(quantile, 'quantile')
    check_positive(mirrordist, 'mirrordist')
    check_positive(sigclip_multip, 'sigclip_multip')
    check_positive(sigclip_param, 'sigclip_param')

    buffer = ensure_buffer(data)
    result = CPUUnivariateBackend().solve(
        buffer,
        compute=names,
        quantile=quantile,
        mirrordist=mirrordist,
        sigclip_multip=sigclip_multip,
        sigclip_param=sigclip_param,
    )
    return UnivariateSolution(_result=result)
