"""Tests for input guards."""
import pytest
from src.guards.policy import (
    apply_guards,
    check_allowed_characters,
    check_expression_length,
    normalize_expression,
)


def test_normalize_expression():
    """Test that surrounding whitespace is stripped."""
    assert normalize_expression("  1 + 2\n") == "1 + 2"
    assert normalize_expression(None) == ""


def test_check_expression_length_within_limit():
    is_valid, error = check_expression_length("1 + 2", max_length=5)
    assert is_valid is True
    assert error is None


def test_check_expression_length_too_long():
    is_valid, error = check_expression_length("1 + 2 + 3", max_length=5)
    assert is_valid is False
    assert "too long" in error.lower()


def test_check_allowed_characters_arithmetic():
    """Test that digits, operators, parentheses and spaces pass."""
    is_valid, error = check_allowed_characters("(1.5 + 2) ^ -3 / 4 * 5")
    assert is_valid is True
    assert error is None


def test_check_allowed_characters_rejects_names():
    """Test that the first unsupported character is reported."""
    is_valid, error = check_allowed_characters("sin(1)")
    assert is_valid is False
    assert "'s'" in error
    assert "position 0" in error


def test_apply_guards_passes():
    passed, refusal, normalized = apply_guards("  3 + 4  ")
    assert passed is True
    assert refusal is None
    assert normalized == "3 + 4"


def test_apply_guards_rejects():
    passed, refusal, normalized = apply_guards("3 + y")
    assert passed is False
    assert "Unsupported character" in refusal
    assert normalized == "3 + y"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
