"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

import pyunivariate
from pyunivariate.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
    defaults.update(kwargs)
    return Result(**defaults)


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"iterations": 3},
            timing={"total_seconds": 0.01},
        )
        assert result.params.value == 42.0
        assert result.info["iterations"] == 3
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_warnings_default_empty(self):
        assert _result().warnings == ()

    def test_frozen(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


class TestHasWarning:

    def test_substring_match(self):
        result = _result(warnings=("mode: symmetricity 0.1 is not above 0.2",))
        assert result.has_warning("symmetricity")
        assert not result.has_warning("converge")

    def test_no_warnings(self):
        assert not _result().has_warning("anything")


class TestProvenance:

    def test_keys(self):
        prov = _default_provenance()
        assert set(prov) == {"pyunivariate_version", "numpy_version", "python_version"}

    def test_version_matches_package(self):
        assert _result().provenance["pyunivariate_version"] == pyunivariate.__version__
