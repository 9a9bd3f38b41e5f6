"""
Generic result container for PyUnivariate computations.

The Result class provides a standardized envelope for the operations
that return more than a scalar (mode, sigma-clipping, describe). Domains
define their own frozen parameter payloads; the envelope adds timing,
diagnostics and provenance.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (iterations, sizes, tuning used)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from __future__ import annotations

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions that produced a result."""
    from pyunivariate import __version__
    return {
        'pyunivariate_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (mode, clipped statistics, ...)
        info: Structured metadata (iterations, sizes, tuning)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the libraries involved

    Examples:
        >>> Result(
        ...     params=SigmaClipParams(...),
        ...     info={'iterations': 4, 'by_tolerance': True},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_sigclip'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
