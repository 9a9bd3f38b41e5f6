"""
Mode estimator solution types.

Contains the parameter payload, the user-facing solution wrapper and the
mirror-plot bundle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import math
import numpy as np
from numpy.typing import NDArray

from pyunivariate.core.result import Result
from pyunivariate.histogram.bins import BinSet


@dataclass(frozen=True)
class ModeParams:
    """
    Parameter payload for the mode estimator.

    All four values are NaN when the mode could not be determined (no
    usable data, or a symmetricity at or below the acceptance threshold).
    """
    value: float
    quantile: float
    symmetricity: float
    boundary: float

    @classmethod
    def undetermined(cls) -> ModeParams:
        return cls(math.nan, math.nan, math.nan, math.nan)


@dataclass
class ModeSolution:
    """
    User-facing mode estimate.

    Wraps Result[ModeParams] and provides convenient accessors.
    """
    _result: Result[ModeParams]

    @property
    def value(self) -> float:
        """Estimated mode."""
        return self._result.params.value

    @property
    def quantile(self) -> float:
        """Position of the mode in the distribution, in [0, 1]."""
        return self._result.params.quantile

    @property
    def symmetricity(self) -> float:
        """About 1 for a symmetric distribution around the mode."""
        return self._result.params.symmetricity

    @property
    def boundary(self) -> float:
        """Value where the mirror and the data diverge."""
        return self._result.params.boundary

    @property
    def determined(self) -> bool:
        """False when the estimate was rejected (all values NaN)."""
        return not math.isnan(self._result.params.value)

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

    def as_array(self) -> NDArray[np.float64]:
        """``[mode, quantile, symmetricity, boundary]`` as float64."""
        p = self._result.params
        return np.array(
            [p.value, p.quantile, p.symmetricity, p.boundary], dtype=np.float64
        )

    def summary(self) -> str:
        lines = ["Mode estimate (mirror symmetry)"]
        if not self.determined:
            lines.append("  undetermined")
            for w in self.warnings:
                lines.append(f"  note: {w}")
            return "\n".join(lines)

        lines.append(f"  mode:          {self.value:.6g}")
        lines.append(f"  quantile:      {self.quantile:.6f}")
        lines.append(f"  symmetricity:  {self.symmetricity:.6f}")
        lines.append(f"  boundary:      {self.boundary:.6g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        if not self.determined:
            return "ModeSolution(undetermined)"
        return (
            f"ModeSolution(value={self.value:.6g}, quantile={self.quantile:.4f}, "
            f"symmetricity={self.symmetricity:.4f})"
        )


@dataclass(frozen=True)
class MirrorPlots:
    """
    Histogram and CFP of a mirror distribution, for visual inspection of a
    candidate mode.

    Attributes:
        bins: Regular bins with one bin starting at ``mirror_value``
        histogram: float32 histogram scaled to a peak of 1
        cfp: float32 normalized cumulative frequency plot
        mirror_value: Value the distribution was mirrored about
    """
    bins: BinSet
    histogram: NDArray[np.float32]
    cfp: NDArray[np.float32]
    mirror_value: float
