"""Stack evaluation of postfix expressions."""
from typing import Iterable, List, Union

import numpy as np

from src.calculator.errors import DivisionByZero, MalformedPostfix
from src.calculator.tokens import PRECEDENCE, Token

_BINARY_OPS = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
}


def apply_operator(symbol: str, left: float, right: float) -> float:
    """
    Apply a binary operator with float64 semantics.

    Overflow and domain errors follow IEEE-754 (inf / nan) instead of
    raising; only division by an exact zero is an error.
    """
    if symbol == "/" and right == 0:
        raise DivisionByZero()
    op = _BINARY_OPS.get(symbol)
    if op is None:
        raise MalformedPostfix(f"Unknown operator in postfix: {symbol!r}")
    with np.errstate(all="ignore"):
        return float(op(np.float64(left), np.float64(right)))


def _as_tokens(postfix: Union[str, Iterable[Token]]) -> List[Token]:
    if isinstance(postfix, str):
        return [Token.operator(item) if item in PRECEDENCE else Token.number(item)
                for item in postfix.split()]
    return list(postfix)


def evaluate_postfix(postfix: Union[str, Iterable[Token]]) -> float:
    """
    Evaluate a postfix expression.

    Args:
        postfix: Postfix tokens, or their space-separated text form ("3 4 +")

    Returns:
        The single value left on the stack

    Raises:
        DivisionByZero: when '/' meets a zero right operand
        MalformedPostfix: when an operator lacks operands or more than one value remains
        NumberParseFailure: when the text form holds an item that is not a number
    """
    values: List[float] = []

    for token in _as_tokens(postfix):
        if token.is_number:
            values.append(token.value)
            continue
        if len(values) < 2:
            raise MalformedPostfix(
                f"Operator '{token.text}' needs two operands, stack has {len(values)}")
        right = values.pop()
        left = values.pop()
        values.append(apply_operator(token.text, left, right))

    if len(values) != 1:
        raise MalformedPostfix(
            f"Postfix expression left {len(values)} values on the stack, expected 1")
    return values[0]
