"""
Tuning constants for the mode estimator, sigma-clipping and binning.

These are empirical values inherited from long use on astronomical
images. They are grouped in frozen dataclasses so a caller can pass a
modified copy to a single call (``dataclasses.replace``) without any
global state changing.

Usage:
    from dataclasses import replace
    from pyunivariate.core.defaults import DEFAULT_MODE_TUNING

    strict = replace(DEFAULT_MODE_TUNING, good_symmetricity=0.5)
    sol = mode(data, tuning=strict)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModeTuning:
    """
    Parameters of the mirror-symmetry mode search.

    Attributes:
        min_quantile: Lower end of the initial search interval (quantile)
        max_quantile: Upper end of the initial search interval (quantile)
        sym_low_quantile: Quantile (of the 2m+1 lowest elements) used as
            the scale point when measuring symmetricity
        golden_ratio: (1 + sqrt(5)) / 2
        two_take_gr: 2 - golden_ratio, placement of the probing point
        tolerance: Relative interval width at which the search stops
        good_symmetricity: Symmetricity at or below this is rejected
        max_checks: Upper bound on mirrored points sampled per probe
    """
    min_quantile: float = 0.01
    max_quantile: float = 0.55
    sym_low_quantile: float = 0.01
    golden_ratio: float = 1.618034
    two_take_gr: float = 0.38197
    tolerance: float = 0.01
    good_symmetricity: float = 0.2
    max_checks: int = 1000


@dataclass(frozen=True)
class SigmaClipTuning:
    """
    Parameters of iterative sigma-clipping.

    Attributes:
        max_converge: Round limit when clipping by tolerance
    """
    max_converge: int = 50


DEFAULT_MODE_TUNING = ModeTuning()
DEFAULT_SIGCLIP_TUNING = SigmaClipTuning()

# Default distance multiple used by the mode estimator's error budget
DEFAULT_MIRRORDIST = 1.5

# Added to the data maximum so it falls strictly inside the last bin
BIN_MAX_EPSILON = 1e-6

__all__ = [
    'ModeTuning',
    'SigmaClipTuning',
    'DEFAULT_MODE_TUNING',
    'DEFAULT_SIGCLIP_TUNING',
    'DEFAULT_MIRRORDIST',
    'BIN_MAX_EPSILON',
]
