"""
Order statistics over blank-aware typed buffers.

Public API:
    minimum(x), maximum(x)             - blank-aware extremes
    median(x)                          - middle element(s)
    quantile_index(size, q)            - index at a quantile
    quantile(x, q)                     - element at a quantile
    quantile_function_index(x, value)  - index nearest a value
    quantile_function(x, value)        - quantile of a value
"""

from pyunivariate.order.solvers import (
    minimum,
    maximum,
    median,
    quantile_index,
    quantile,
    quantile_function_index,
    quantile_function,
)

__all__ = [
    "minimum",
    "maximum",
    "median",
    "quantile_index",
    "quantile",
    "quantile_function_index",
    "quantile_function",
]
