"""
Iterative sigma-clipping of sorted, blank-free distributions.

Public API:
    sigma_clip(x, multip, param)  - clipped number, median, mean, std
    SigmaClipSolution, SigmaClipParams, ClipRound
"""

from pyunivariate.sigclip.solvers import sigma_clip
from pyunivariate.sigclip.solution import ClipRound, SigmaClipParams, SigmaClipSolution

__all__ = [
    "sigma_clip",
    "ClipRound",
    "SigmaClipParams",
    "SigmaClipSolution",
]
