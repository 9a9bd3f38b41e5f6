"""
Mode estimation by mirror symmetry.

Public API:
    mode(x, mirrordist)                    - mode, quantile, symmetricity
    mode_mirror_plots(x, value, num_bins)  - mirror histogram and CFP
    make_mirror(sorted, index)             - mirror distribution
    ModeSolution, ModeParams, MirrorPlots
"""

from pyunivariate.mode.solvers import mode, mode_mirror_plots
from pyunivariate.mode._mirror import make_mirror
from pyunivariate.mode.solution import ModeParams, ModeSolution, MirrorPlots

__all__ = [
    "mode",
    "mode_mirror_plots",
    "make_mirror",
    "ModeParams",
    "ModeSolution",
    "MirrorPlots",
]
