"""Infix to postfix conversion (shunting-yard)."""
from typing import Iterable, List

from src.calculator.errors import InvalidExpression
from src.calculator.tokens import Token, TokenKind


def to_postfix(tokens: Iterable[Token]) -> List[Token]:
    """
    Reorder validated infix tokens into postfix order.

    An incoming operator first pops every stacked operator of equal or
    higher precedence, so all operators group left to right, '^' included:
    "2 ^ 3 ^ 2" becomes "2 3 ^ 2 ^".

    Args:
        tokens: Infix tokens that already passed validation

    Returns:
        Numbers and operators in postfix order; parentheses are dropped
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            output.append(token)
        elif token.kind is TokenKind.LEFT_PAREN:
            stack.append(token)
        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise InvalidExpression("Invalid expression: unbalanced parentheses")
            stack.pop()
        else:
            while (stack and stack[-1].is_operator
                   and stack[-1].precedence >= token.precedence):
                output.append(stack.pop())
            stack.append(token)

    while stack:
        output.append(stack.pop())

    return output


def format_postfix(postfix: Iterable[Token]) -> str:
    """Join postfix tokens with single spaces, e.g. "3 4 +"."""
    return " ".join(token.text for token in postfix)
