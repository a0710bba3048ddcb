"""Tests for infix to postfix conversion."""
import pytest
from src.calculator.converter import format_postfix, to_postfix
from src.calculator.errors import InvalidExpression
from src.calculator.tokenizer import tokenize
from src.calculator.tokens import Token, TokenKind


def _postfix(expression: str) -> str:
    return format_postfix(to_postfix(tokenize(expression)))


def test_simple_sum():
    assert _postfix("3 + 4") == "3 4 +"


def test_precedence():
    """Test that '*' binds tighter than '+'."""
    assert _postfix("3 + 4 * 2") == "3 4 2 * +"
    assert _postfix("3 * 4 + 2") == "3 4 * 2 +"


def test_left_associative_equal_precedence():
    """Test that equal-precedence operators group left to right."""
    assert _postfix("8 - 3 - 2") == "8 3 - 2 -"
    assert _postfix("8 / 4 * 2") == "8 4 / 2 *"


def test_power_is_left_associative():
    """Test that '^' groups left to right like the other operators."""
    assert _postfix("2 ^ 3 ^ 2") == "2 3 ^ 2 ^"


def test_parentheses_override_precedence():
    assert _postfix("(3 + 4) * 2") == "3 4 + 2 *"
    assert _postfix("2 * (3 + 4 * (1 - 5))") == "2 3 4 1 5 - * + *"


def test_output_has_no_parentheses():
    postfix = to_postfix(tokenize("((1 + 2))"))
    assert all(t.kind in (TokenKind.NUMBER, TokenKind.OPERATOR) for t in postfix)


def test_keeps_number_lexemes():
    """Test that numbers keep their source text in the postfix form."""
    assert _postfix("-2.50 * 4") == "-2.50 4 *"


def test_unmatched_close_paren():
    """Test that an unmatched ')' raises instead of reading an empty stack."""
    with pytest.raises(InvalidExpression):
        to_postfix([Token.number("1"), Token.right_paren()])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
