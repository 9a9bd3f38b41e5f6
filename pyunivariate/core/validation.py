"""
Input validation utilities for PyUnivariate.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently clamping or
making assumptions about user intent. Every public operation validates
its scalar parameters with these helpers before touching the data.

Design principles:
    - No silent clamping (a quantile of 1.2 is an error, not 1.0)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers
from typing import Any

from pyunivariate.core.exceptions import InvalidParameterError


def check_fraction(value: float, name: str) -> float:
    """
    Verify a value lies in [0, 1] inclusive.

    Args:
        value: Fraction to check
        name: Parameter name for error messages

    Returns:
        The value as a float

    Raises:
        InvalidParameterError: If value is NaN or outside [0, 1]
    """
    value = float(value)
    if not (0.0 <= value <= 1.0):
        raise InvalidParameterError(
            f"{name}: must be between 0.0 and 1.0 (inclusive), got {value:g}",
            parameter=name,
            value=value,
        )
    return value


def check_positive(value: float, name: str) -> float:
    """
    Verify a value is strictly greater than zero.

    Raises:
        InvalidParameterError: If value is NaN or <= 0
    """
    value = float(value)
    if not value > 0.0:
        raise InvalidParameterError(
            f"{name}: must be greater than zero, got {value:g}",
            parameter=name,
            value=value,
        )
    return value


def check_whole_number(value: float, name: str) -> int:
    """
    Verify a value has no fractional part.

    Returns:
        The value as an int

    Raises:
        InvalidParameterError: If value is not integral
    """
    if not math.isfinite(float(value)) or math.ceil(value) != value:
        raise InvalidParameterError(
            f"{name}: must be a whole number, got {value:g}",
            parameter=name,
            value=value,
        )
    return int(value)


def _is_whole(value: Any) -> bool:
    """Whether value is a finite real number with no fractional part."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and int(value) == value


def check_num_bins(num_bins: Any) -> int:
    """
    Verify the number of histogram bins is a positive integer.

    Raises:
        InvalidParameterError: If num_bins is not an integer >= 1
    """
    if not _is_whole(num_bins) or num_bins < 1:
        raise InvalidParameterError(
            f"num_bins: must be a positive integer, got {num_bins!r}",
            parameter='num_bins',
            value=num_bins,
        )
    return int(num_bins)


def check_size(size: Any, name: str) -> int:
    """
    Verify an element count is a positive integer.

    Raises:
        InvalidParameterError: If size is not an integer >= 1
    """
    if not _is_whole(size) or size < 1:
        raise InvalidParameterError(
            f"{name}: must be a positive integer, got {size!r}",
            parameter=name,
            value=size,
        )
    return int(size)


def check_exclusive_flags(**flags: bool) -> None:
    """
    Verify at most one of the given boolean flags is set.

    Example:
        check_exclusive_flags(normalize=normalize, max_one=max_one)

    Raises:
        InvalidParameterError: If two or more flags are True
    """
    given = [name for name, flag in flags.items() if flag]
    if len(given) > 1:
        raise InvalidParameterError(
            f"only one of {', '.join(flags)} may be given, got {', '.join(given)}",
            parameter=given[0],
        )
