"""End-to-end calculation: tokenize, validate, convert, evaluate."""
from dataclasses import dataclass
from typing import List

from src.calculator.converter import format_postfix, to_postfix
from src.calculator.evaluator import evaluate_postfix
from src.calculator.tokenizer import tokenize
from src.calculator.tokens import Token
from src.calculator.validator import check_tokens


@dataclass(frozen=True)
class Calculation:
    expression: str
    postfix: List[Token]
    result: float

    @property
    def postfix_text(self) -> str:
        return format_postfix(self.postfix)


def infix_to_postfix(expression: str) -> List[Token]:
    """Tokenize and validate an infix expression, then convert it to postfix."""
    tokens = tokenize(expression)
    check_tokens(tokens)
    return to_postfix(tokens)


def calculate(expression: str) -> Calculation:
    """
    Evaluate an infix expression.

    Errors from any stage propagate unchanged (all subclass CalculatorError).

    Examples:
        >>> calculate("3 + 4 * 2").result
        11.0
        >>> calculate("(3 + 4) * 2").postfix_text
        '3 4 + 2 *'
    """
    postfix = infix_to_postfix(expression)
    return Calculation(expression=expression, postfix=postfix,
                       result=evaluate_postfix(postfix))
