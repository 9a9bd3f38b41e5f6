"""
Moment statistics over blank-aware typed buffers.

Public API:
    number(x) / count(x)  - non-blank element count (uint64)
    sum(x)                - float64 sum
    mean(x)               - float64 mean
    std(x)                - population standard deviation
    mean_std(x)           - [mean, std] from one pass
"""

from pyunivariate.moments.solvers import (
    number,
    count,
    sum,
    mean,
    std,
    mean_std,
)

__all__ = [
    "number",
    "count",
    "sum",
    "mean",
    "std",
    "mean_std",
]
