"""End-to-end tests for the calculation pipeline."""
from concurrent.futures import ThreadPoolExecutor
import pytest
from src.calculator.converter import format_postfix
from src.calculator.errors import (
    CalculatorError, DivisionByZero, InvalidExpression, NumberParseFailure)
from src.calculator.pipeline import calculate, infix_to_postfix


def test_round_trip_sum():
    """Test that '3 + 4' converts to '3 4 +' and evaluates to 7."""
    calc = calculate("3 + 4")
    assert calc.postfix_text == "3 4 +"
    assert calc.result == 7


@pytest.mark.parametrize("expression,expected", [
    ("3 + 4 * 2", 11),
    ("8 - 3 - 2", 3),
    ("(3 + 4) * 2", 14),
    ("-5 + 3", -2),
    ("10 / 4", 2.5),
    ("2 * (3 + 4 * (1 - 5))", -26),
    ("1.5 * -2", -3),
    ("((7))", 7),
])
def test_calculate_values(expression, expected):
    assert calculate(expression).result == pytest.approx(expected)


def test_power_groups_left_to_right():
    """Test that 2^3^2 is (2^3)^2 = 64, not 2^(3^2) = 512."""
    assert calculate("2 ^ 3 ^ 2").result == 64


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        calculate("5 / 0")


@pytest.mark.parametrize("expression", ["3 + + 4", "(3 + 4", "3 4", "", "3 +", "()"])
def test_invalid_expressions(expression):
    with pytest.raises(InvalidExpression):
        calculate(expression)


def test_errors_share_base_class():
    """Test that every pipeline error is a CalculatorError and a ValueError."""
    for expression in ("5 / 0", "3 + + 4", "1.2.3", "x"):
        with pytest.raises(CalculatorError):
            calculate(expression)
    with pytest.raises(ValueError):
        calculate("1.2.3")
    with pytest.raises(NumberParseFailure):
        calculate("1.2.3")


def test_infix_to_postfix_validates():
    assert format_postfix(infix_to_postfix("1 + 2 * 3")) == "1 2 3 * +"
    with pytest.raises(InvalidExpression):
        infix_to_postfix("1 + * 2")


def test_idempotent():
    """Test that repeating a calculation gives the same answer."""
    first = calculate("(1.1 + 2.2) * 3 ^ 2 / 7")
    second = calculate("(1.1 + 2.2) * 3 ^ 2 / 7")
    assert first == second


def test_concurrent_calculations():
    """Test that calculations on separate threads do not interfere."""
    expressions = [f"{i} * 2 + 1" for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda e: calculate(e).result, expressions))
    assert results == [i * 2 + 1 for i in range(200)]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
