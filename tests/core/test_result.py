"""
Tests for the Result[P] envelope.

Validates:
    - Generic payloads of arbitrary type
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymatrix import __version__
from pymatrix.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu_householder",
    )
    defaults.update(kwargs)
    return Result(**defaults)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_fields(self):
        result = _result(
            info={"method": "householder", "rank": 2},
            timing={"total_seconds": 0.5, "householder": 0.4},
        )
        assert result.params.value == 1.0
        assert result.info["rank"] == 2
        assert result.timing["householder"] == 0.4
        assert result.backend_name == "cpu_householder"

    def test_timing_none_allowed(self):
        assert _result().timing is None


# ═══════════════════════════════════════════════════════════════════════
# Default factories
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_provenance_auto_generated(self):
        result = _result()
        assert result.provenance["pymatrix_version"] == __version__
        assert "numpy_version" in result.provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        with pytest.raises(FrozenInstanceError):
            _result().params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        with pytest.raises(FrozenInstanceError):
            _result().warnings = ("new warning",)


# ═══════════════════════════════════════════════════════════════════════
# has_warning()
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("rank-deficient: rank=2, expected=3",))
        assert result.has_warning("rank-deficient") is True
        assert result.has_warning("expected=3") is True

    def test_no_match(self):
        result = _result(warnings=("rank-deficient",))
        assert result.has_warning("overflow") is False
