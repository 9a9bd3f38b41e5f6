"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import math

from pyunivariate.core.result import Result

# Operation name -> UnivariateParams field
FIELD_OF = {
    'number': 'number',
    'minimum': 'minimum',
    'maximum': 'maximum',
    'sum': 'sum',
    'mean': 'mean',
    'std': 'std',
    'median': 'median',
    'mode': 'mode',
    'sigclip-number': 'sigclip_number',
    'sigclip-median': 'sigclip_median',
    'sigclip-mean': 'sigclip_mean',
    'sigclip-std': 'sigclip_std',
    'quantile': 'quantile',
}


@dataclass(frozen=True)
class UnivariateParams:
    """
    Parameter payload for describe().

    Every statistic is a float (None if not requested). Undefined values
    (no usable data, undetermined mode, unconverged clipping) are NaN.
    """
    requested: tuple[str, ...] = ()

    number: float | None = None
    minimum: float | None = None
    maximum: float | None = None
    sum: float | None = None
    mean: float | None = None
    std: float | None = None
    median: float | None = None

    mode: float | None = None
    mode_quantile: float | None = None
    mode_symmetricity: float | None = None

    sigclip_number: float | None = None
    sigclip_median: float | None = None
    sigclip_mean: float | None = None
    sigclip_std: float | None = None

    quantile: float | None = None
    quantile_fraction: float | None = None


@dataclass
class UnivariateSolution:
    """
    User-facing descriptive statistics of one column.

    Wraps Result[UnivariateParams]. Statistics are available as
    attributes (``sol.mean``) or by operation name (``sol['sigclip-std']``).
    """
    _result: Result[UnivariateParams]

    def __getitem__(self, name: str) -> float:
        if name not in FIELD_OF:
            raise KeyError(name)
        value = getattr(self._result.params, FIELD_OF[name])
        if value is None:
            raise KeyError(f"{name} was not computed")
        return value

    # --- Moments and extremes ---

    @property
    def number(self) -> float | None:
        """Number of non-blank elements."""
        return self._result.params.number

    @property
    def minimum(self) -> float | None:
        return self._result.params.minimum

    @property
    def maximum(self) -> float | None:
        return self._result.params.maximum

    @property
    def sum(self) -> float | None:
        return self._result.params.sum

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def std(self) -> float | None:
        """Population standard deviation (divides by n)."""
        return self._result.params.std

    # --- Order statistics ---

    @property
    def median(self) -> float | None:
        return self._result.params.median

    @property
    def quantile(self) -> float | None:
        """Element at ``quantile_fraction``."""
        return self._result.params.quantile

    @property
    def quantile_fraction(self) -> float | None:
        return self._result.params.quantile_fraction

    # --- Robust estimates ---

    @property
    def mode(self) -> float | None:
        """Mirror-symmetry mode (NaN if undetermined)."""
        return self._result.params.mode

    @property
    def mode_symmetricity(self) -> float | None:
        return self._result.params.mode_symmetricity

    @property
    def sigclip_number(self) -> float | None:
        return self._result.params.sigclip_number

    @property
    def sigclip_median(self) -> float | None:
        return self._result.params.sigclip_median

    @property
    def sigclip_mean(self) -> float | None:
        return self._result.params.sigclip_mean

    @property
    def sigclip_std(self) -> float | None:
        return self._result.params.sigclip_std

    # --- Metadata ---

    @property
    def requested(self) -> tuple[str, ...]:
        """Operation names, in the order they were requested."""
        return self._result.params.requested

    def values(self) -> dict[str, float]:
        """Operation name -> value, in request order."""
        return {name: self[name] for name in self.requested}

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """One line per requested statistic."""
        lines = [f"Univariate statistics (n={self.info.get('size', 0)})"]
        if not self.requested:
            return lines[0]

        width = max(len(name) for name in self.requested)
        for name in self.requested:
            value = self[name]
            if math.isnan(value):
                text = "nan"
            elif name in ('number', 'sigclip-number'):
                text = f"{int(value)}"
            else:
                text = f"{value:.6g}"
            lines.append(f"  {name.ljust(width)}  {text}")
        for w in self.warnings:
            lines.append(f"  note: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = ", ".join(self.requested) if self.requested else "none"
        return f"UnivariateSolution(n={self.info.get('size', 0)}, computed=[{computed}])"
