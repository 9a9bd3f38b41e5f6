"""
Sigma-clipping solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple
import math
import numpy as np
from numpy.typing import NDArray

from pyunivariate.core.result import Result


class ClipRound(NamedTuple):
    """Statistics of the window at the start of one clipping round."""
    round: int
    number: int
    median: float
    mean: float
    std: float


@dataclass(frozen=True)
class SigmaClipParams:
    """
    Parameter payload for sigma-clipping.

    ``number``, ``median``, ``mean`` and ``std`` describe the last
    accepted window; all four are NaN when clipping by tolerance did not
    converge or there was no usable data.
    """
    number: float
    median: float
    mean: float
    std: float
    iterations: int
    converged: bool
    by_tolerance: bool
    rounds: tuple[ClipRound, ...] = ()


@dataclass
class SigmaClipSolution:
    """
    User-facing sigma-clipping result.

    Wraps Result[SigmaClipParams] and provides convenient accessors.
    """
    _result: Result[SigmaClipParams]

    @property
    def number(self) -> float:
        """Number of elements in the final window (NaN if undefined)."""
        return self._result.params.number

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def std(self) -> float:
        return self._result.params.std

    @property
    def iterations(self) -> int:
        """Clipping rounds completed."""
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def rounds(self) -> tuple[ClipRound, ...]:
        """Per-round statistics, in order."""
        return self._result.params.rounds

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

    def as_array(self) -> NDArray[np.float32]:
        """``[number, median, mean, std]`` as float32."""
        p = self._result.params
        return np.array([p.number, p.median, p.mean, p.std], dtype=np.float32)

    def summary(self) -> str:
        """Round-by-round table followed by the final values."""
        lines = [f"{'round':<8} {'number':<10} {'median':<15} {'mean':<15} {'STD':<15}"]
        for r in self.rounds:
            lines.append(
                f"{r.round:<8} {r.number:<10} {r.median:<15g} {r.mean:<15g} {r.std:<15g}"
            )
        if math.isnan(self.number):
            lines.append("result: undefined (did not converge)")
        else:
            lines.append(
                f"result: number={int(self.number)}, median={self.median:g}, "
                f"mean={self.mean:g}, std={self.std:g}"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SigmaClipSolution(number={self.number:g}, median={self.median:g}, "
            f"mean={self.mean:g}, std={self.std:g}, iterations={self.iterations})"
        )
