"""
Core infrastructure for PyUnivariate.

This module provides shared abstractions used by every statistics
subpackage (order, moments, histogram, mode, sigclip, descriptive).

Key components:
    dtypes: Element types and blank markers
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Parameter validators
    defaults: Tuning constants
    compute: Timing and tolerances
"""

from pyunivariate.core.dtypes import ElementType, element_type_of
from pyunivariate.core.result import Result
from pyunivariate.core.exceptions import (
    PyUnivariateError,
    ValidationError,
    InvalidParameterError,
    UnsupportedElementTypeError,
    TypeMismatchError,
    DimensionError,
    EmptyOrAllBlankError,
)

__all__ = [
    # Element types
    "ElementType",
    "element_type_of",
    # Result
    "Result",
    # Exceptions
    "PyUnivariateError",
    "ValidationError",
    "InvalidParameterError",
    "UnsupportedElementTypeError",
    "TypeMismatchError",
    "DimensionError",
    "EmptyOrAllBlankError",
]
