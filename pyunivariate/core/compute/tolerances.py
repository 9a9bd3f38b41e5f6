"""
Tolerance tiers for numerical comparison.

Results computed in float32 (normalized histograms, sigma-clip output)
cannot be compared to exact values the way float64 or integer results
can. Each element type gets a tier:

- integers: exact
- float32:  single-precision relative error
- float64:  double-precision relative error

Used by the CFP's "is this histogram already normalized" check and by the
test suite.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pyunivariate.core.dtypes import ElementType, element_type_of


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def isclose(self, actual: float, expected: float) -> bool:
        """Whether ``actual`` matches ``expected`` within this tier."""
        return bool(np.isclose(actual, expected, rtol=self.rtol, atol=self.atol))


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer arithmetic, must match exactly',
)

FLOAT32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='float32',
    description='Single precision accumulation',
)

FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='Double precision accumulation',
)


def select_tolerance(dtype: ElementType | np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier for an element type or NumPy dtype."""
    etype = dtype if isinstance(dtype, ElementType) else element_type_of(dtype)
    if etype is ElementType.FLOAT32:
        return FLOAT32
    if etype is ElementType.FLOAT64:
        return FLOAT64
    return EXACT
