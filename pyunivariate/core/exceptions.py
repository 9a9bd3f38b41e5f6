"""
Exception hierarchy for PyUnivariate.

All exceptions inherit from PyUnivariateError so a caller (typically a
command-line or table layer) can catch any engine failure in one place and
map it to its own messages and exit codes. Every error here is a caller or
input error: the engine never raises for internal state corruption.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyUnivariateError(Exception):
    """Base exception for all PyUnivariate errors."""
    pass


class ValidationError(PyUnivariateError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidParameterError(ValidationError):
    """
    A scalar parameter is out of its accepted domain.

    Examples: a quantile fraction outside [0, 1], zero histogram bins,
    a non-positive sigma-clipping multiple, or two mutually exclusive
    flags given together. Also raised for features that are recognised
    but not implemented (irregular bins, quantile-derived bin ranges).

    Attributes:
        parameter: Name of the offending parameter, if known
        value: The rejected value, if known
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class UnsupportedElementTypeError(ValidationError):
    """
    The buffer's element type has no code path in the engine.

    Only the ten primitive kinds listed in ``ElementType`` are supported;
    booleans, complex numbers, half floats, strings and objects are not.

    Attributes:
        dtype: The rejected NumPy dtype (as a string)
    """

    def __init__(self, message: str, dtype: str | None = None):
        super().__init__(message)
        self.dtype = dtype


class TypeMismatchError(ValidationError):
    """
    A value was compared against a distribution of a different type.

    Attributes:
        expected: Element type of the distribution
        actual: Element type of the value
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    The engine only works on one-dimensional buffers.
    """
    pass


class EmptyOrAllBlankError(ValidationError):
    """
    No usable (non-blank) elements remain for an operation that has no
    sensible "undefined" result.

    Operations with a natural undefined value (minimum, maximum, sum,
    mean, standard deviation, mode, sigma-clipping) return blank/NaN
    instead of raising this.

    Attributes:
        operation: Name of the operation that needed data
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
