"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyunivariate.core.dtypes import ElementType


INTEGER_TYPES = [e for e in ElementType if e.is_integer]
FLOAT_TYPES = [ElementType.FLOAT32, ElementType.FLOAT64]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=list(ElementType), ids=lambda e: e.value)
def etype(request):
    """Each of the ten supported element types."""
    return request.param


@pytest.fixture(params=INTEGER_TYPES, ids=lambda e: e.value)
def int_etype(request):
    """Each integer element type."""
    return request.param


@pytest.fixture
def small_sample(etype):
    """Ten distinct values, shuffled, representable in every type."""
    return np.array([7, 2, 9, 4, 1, 8, 3, 10, 6, 5], dtype=etype.dtype)


@pytest.fixture
def outlier_sample():
    """One obvious outlier on top of 1..9."""
    return np.array([1, 2, 3, 4, 5, 6, 7, 8, 9, 100], dtype=np.float64)


@pytest.fixture
def symmetric_sample(rng):
    """
    Distribution exactly mirrored about 10.0: 10 +/- the same 5000
    half-normal offsets, plus the center itself.
    """
    offsets = np.abs(rng.standard_normal(5000))
    data = np.concatenate([10.0 - offsets, [10.0], 10.0 + offsets])
    rng.shuffle(data)
    return data
