"""
PyUnivariate: robust statistics of one-dimensional, blank-aware data.

Every operation takes a TypedBuffer or any 1-D array-like of one of ten
numeric element types (8 to 64-bit signed and unsigned integers, float32,
float64). Blank (no-data) elements are skipped: NaN for floats, a
reserved sentinel for integers.

Submodules:
    buffer: Typed buffers and the blank-and-sort normalizer
    order: Minimum, maximum, median, quantiles
    moments: Count, sum, mean, standard deviation
    histogram: Regular bins, histograms, cumulative frequency plots
    mode: Mode estimation by mirror symmetry
    sigclip: Iterative sigma-clipping
    descriptive: Statistics selected by name
"""

__version__ = "0.1.0"

from pyunivariate import buffer
from pyunivariate import order
from pyunivariate import moments
from pyunivariate import histogram
from pyunivariate import mode
from pyunivariate import sigclip
from pyunivariate import descriptive

from pyunivariate.buffer import TypedBuffer
from pyunivariate.descriptive import describe

__all__ = [
    "__version__",
    "buffer",
    "order",
    "moments",
    "histogram",
    "mode",
    "sigclip",
    "descriptive",
    "TypedBuffer",
    "describe",
]
