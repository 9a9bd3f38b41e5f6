"""
Name-selected univariate statistics.

Provides describe() for callers that pick statistics by name, such as a
command-line or table layer.

Public API:
    describe(data, compute)  - any of OPERATIONS at once
    OPERATIONS               - valid operation names
"""

from pyunivariate.descriptive.solution import UnivariateParams, UnivariateSolution
from pyunivariate.descriptive.solvers import OPERATIONS, describe

__all__ = [
    "describe",
    "OPERATIONS",
    "UnivariateParams",
    "UnivariateSolution",
]
