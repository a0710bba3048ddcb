"""Token model and operator table shared by every pipeline stage."""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.calculator.errors import NumberParseFailure

OPERATORS = "+-*/^"
LEFT_PAREN = "("
RIGHT_PAREN = ")"

# Binding strength; parentheses are handled structurally and rank 0
PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "^": 3,
}

_NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


class TokenKind(str, Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


def precedence(symbol: str) -> int:
    """Return the precedence rank of an operator symbol (0 if not an operator)."""
    return PRECEDENCE.get(symbol, 0)


def is_number(lexeme: str) -> bool:
    """True if the whole lexeme is a decimal literal with an optional leading '-'."""
    return _NUMBER_RE.fullmatch(lexeme) is not None


def parse_number(lexeme: str) -> float:
    """
    Parse a numeric lexeme.

    Args:
        lexeme: Digits with at most one decimal point and an optional sign

    Returns:
        The float value

    Raises:
        NumberParseFailure: if the lexeme is not a valid literal
    """
    if not is_number(lexeme):
        raise NumberParseFailure(lexeme)
    return float(lexeme)


@dataclass(frozen=True)
class Token:
    """One lexical token. Numbers keep their source lexeme in `text`."""
    kind: TokenKind
    text: str
    value: Optional[float] = None

    @classmethod
    def number(cls, lexeme: str) -> "Token":
        return cls(TokenKind.NUMBER, lexeme, parse_number(lexeme))

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        if symbol not in PRECEDENCE:
            raise ValueError(f"Unknown operator: {symbol!r}")
        return cls(TokenKind.OPERATOR, symbol)

    @classmethod
    def left_paren(cls) -> "Token":
        return cls(TokenKind.LEFT_PAREN, LEFT_PAREN)

    @classmethod
    def right_paren(cls) -> "Token":
        return cls(TokenKind.RIGHT_PAREN, RIGHT_PAREN)

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    @property
    def precedence(self) -> int:
        return precedence(self.text) if self.is_operator else 0

    def __str__(self) -> str:
        return self.text
