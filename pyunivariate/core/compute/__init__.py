"""
Shared compute infrastructure for PyUnivariate.

IMPORTANT: This is NOT where statistics live. Those go in their own
subpackages (order, moments, histogram, mode, sigclip). This module
contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Per-element-type comparison tolerances
"""

from pyunivariate.core.compute.timing import Timer
from pyunivariate.core.compute.tolerances import (
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    "Timer",
    "ToleranceTier",
    "select_tolerance",
]
