"""Structural checks on an infix token sequence."""
from typing import Iterable, Optional

from src.calculator.errors import InvalidExpression
from src.calculator.tokens import Token, TokenKind


def find_violation(tokens: Iterable[Token]) -> Optional[str]:
    """
    Scan tokens once and describe the first structural problem.

    The scan tracks paren depth and whether an operand is expected next.
    Starting in "operand expected" state rejects a leading operator and
    an empty sequence.

    Returns:
        None if the sequence is well formed, otherwise a short reason
    """
    depth = 0
    last_was_operator = True
    last_was_open_paren = False
    seen_any = False

    for token in tokens:
        seen_any = True
        if token.kind is TokenKind.LEFT_PAREN:
            depth += 1
            last_was_operator = True
            last_was_open_paren = True
        elif token.kind is TokenKind.RIGHT_PAREN:
            depth -= 1
            if depth < 0:
                return "unbalanced parentheses"
            if last_was_operator:
                return "empty or operator-terminated group"
            last_was_operator = False
            last_was_open_paren = False
        elif token.kind is TokenKind.NUMBER:
            if not last_was_operator and not last_was_open_paren:
                return "two operands in a row"
            last_was_operator = False
            last_was_open_paren = False
        else:
            if last_was_operator:
                return "two operators in a row"
            last_was_operator = True
            last_was_open_paren = False

    if not seen_any:
        return "empty expression"
    if depth != 0:
        return "unbalanced parentheses"
    if last_was_operator:
        return "expression ends with an operator"
    return None


def validate_tokens(tokens: Iterable[Token]) -> bool:
    """Return True if the token sequence is a well-formed expression."""
    return find_violation(tokens) is None


def check_tokens(tokens: Iterable[Token]) -> None:
    """Raise InvalidExpression unless the token sequence is well formed."""
    reason = find_violation(tokens)
    if reason is not None:
        raise InvalidExpression(f"Invalid expression: {reason}")
