"""
Regular bins, histograms and cumulative frequency plots.

Public API:
    BinSet                        - bin centers, width, optional histogram
    regular_bins(x, range, n)     - equally spaced bins, optional alignment
    histogram(x, bins)            - per-bin counts (or fractions)
    cfp(x, bins)                  - cumulative frequency plot
"""

from pyunivariate.histogram.bins import BinSet, regular_bins
from pyunivariate.histogram.solvers import histogram, cfp

__all__ = [
    "BinSet",
    "regular_bins",
    "histogram",
    "cfp",
]
