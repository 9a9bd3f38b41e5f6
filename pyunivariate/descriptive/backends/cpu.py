"""
CPU reference backend for name-selected univariate statistics.

Order statistics, the mode and sigma-clipping share one normalized copy
of the data; moments and extremes read the original buffer directly.
"""

from __future__ import annotations

from typing import Any
import math

from pyunivariate.buffer.design import TypedBuffer
from pyunivariate.buffer.normalize import no_blank_sorted
from pyunivariate.core.compute.timing import Timer
from pyunivariate.core.defaults import DEFAULT_MODE_TUNING, DEFAULT_SIGCLIP_TUNING
from pyunivariate.core.result import Result
from pyunivariate.descriptive.solution import UnivariateParams
from pyunivariate.mode.solvers import mode as mode_solver
from pyunivariate.moments import solvers as moments
from pyunivariate.order.solvers import median_of_sorted, quantile_index
from pyunivariate.sigclip.solvers import sigma_clip

SORTED_OPERATIONS = frozenset({
    'median', 'quantile', 'mode',
    'sigclip-number', 'sigclip-median', 'sigclip-mean', 'sigclip-std',
})


class CPUUnivariateBackend:
    """CPU reference backend for univariate statistics."""

    @property
    def name(self) -> str:
        return 'cpu_univariate'

    def solve(
        self,
        buffer: TypedBuffer,
        *,
        compute: tuple[str, ...],
        quantile: float = 0.5,
        mirrordist: float = 1.5,
        sigclip_multip: float = 3.0,
        sigclip_param: float = 0.2,
    ) -> Result[UnivariateParams]:
        """
        Compute the requested statistics.

        Parameters
        ----------
        buffer : TypedBuffer
        compute : tuple of str
            Operation names (validated by the caller).
        quantile : float
            Fraction for 'quantile'.
        mirrordist : float
            Error budget multiplier for 'mode'.
        sigclip_multip, sigclip_param : float
            Clipping multiple and rounds/tolerance for 'sigclip-*'.
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []
        requested = set(compute)
        out: dict[str, Any] = {}

        with timer.section('moments'):
            n, s, s2 = moments.accumulate(buffer.usable())
            if 'number' in requested:
                out['number'] = float(n)
            if 'sum' in requested:
                out['sum'] = s if n else math.nan
            if 'mean' in requested:
                out['mean'] = s / n if n else math.nan
            if 'std' in requested:
                out['std'] = moments.std_from_sums(n, s, s2)

        if requested & {'minimum', 'maximum'}:
            with timer.section('extremes'):
                usable = buffer.usable()
                if 'minimum' in requested:
                    out['minimum'] = float(usable.min()) if n else math.nan
                if 'maximum' in requested:
                    out['maximum'] = float(usable.max()) if n else math.nan

        if requested & SORTED_OPERATIONS:
            with timer.section('normalize'):
                nbs = no_blank_sorted(buffer)
                etype = nbs.buffer.element_type

            if requested & {'median', 'quantile'}:
                with timer.section('order'):
                    if nbs.size == 0:
                        warnings_list.append(
                            "median/quantile: no usable (non-blank) elements"
                        )
                    if 'median' in requested:
                        out['median'] = (
                            float(median_of_sorted(nbs.values, etype))
                            if nbs.size else math.nan
                        )
                    if 'quantile' in requested:
                        out['quantile'] = (
                            float(nbs.values[quantile_index(nbs.size, quantile)])
                            if nbs.size else math.nan
                        )
                        out['quantile_fraction'] = quantile

            if 'mode' in requested:
                with timer.section('mode'):
                    sol = mode_solver(nbs.buffer, mirrordist, tuning=DEFAULT_MODE_TUNING)
                    out['mode'] = sol.value
                    out['mode_quantile'] = sol.quantile
                    out['mode_symmetricity'] = sol.symmetricity
                    warnings_list.extend(sol.warnings)

            clip_ops = [op for op in compute if op.startswith('sigclip-')]
            if clip_ops:
                with timer.section('sigclip'):
                    sol = sigma_clip(
                        nbs.buffer,
                        sigclip_multip,
                        sigclip_param,
                        tuning=DEFAULT_SIGCLIP_TUNING,
                    )
                    for op in clip_ops:
                        out[op.replace('-', '_')] = getattr(sol, op.split('-', 1)[1])
                    warnings_list.extend(sol.warnings)

        timer.stop()

        params = UnivariateParams(requested=tuple(compute), **out)
        return Result(
            params=params,
            info={
                'size': buffer.size,
                'element_type': buffer.element_type.value,
                'quantile': quantile,
                'mirrordist': mirrordist,
                'sigclip_multip': sigclip_multip,
                'sigclip_param': sigclip_param,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
