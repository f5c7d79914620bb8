"""Tests for the success/failure outcome type."""

import pytest

from src.domain.errors import ValidationError
from src.domain.models import Fail, Ok


def test_ok_exposes_value() -> None:
    """Ok should report success and carry its value."""
    result = Ok(42)

    assert result.is_success is True
    assert result.is_failure is False
    assert result.value == 42
    assert result.error is None


def test_fail_exposes_error_only() -> None:
    """Fail should report failure and refuse to yield a value."""
    error = ValidationError("boom", code="BOOM")
    result = Fail(error)

    assert result.is_success is False
    assert result.is_failure is True
    assert result.error is error
    with pytest.raises(ValueError, match="boom"):
        result.value


def test_outcomes_compare_by_value() -> None:
    """Equal payloads should give equal outcomes."""
    assert Ok("x") == Ok("x")
    assert Fail(ValidationError("a", "A")) == Fail(ValidationError("a", "A"))
    assert Fail(ValidationError("a", "A")) != Fail(ValidationError("b", "A"))


def test_outcome_flags_are_read_only_properties() -> None:
    """Success flags should be properties on both outcome types."""
    for outcome_type in (Ok, Fail):
        assert isinstance(outcome_type.is_success, property)
        assert isinstance(outcome_type.is_failure, property)
