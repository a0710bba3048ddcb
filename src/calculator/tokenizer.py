"""Split raw expression text into tokens."""
from typing import List, Optional

from src.calculator.errors import InvalidExpression
from src.calculator.tokens import LEFT_PAREN, OPERATORS, RIGHT_PAREN, Token, TokenKind

_NUMBER_CHARS = "0123456789."


def _is_unary_position(previous: Optional[Token]) -> bool:
    return previous is None or previous.kind in (TokenKind.OPERATOR, TokenKind.LEFT_PAREN)


def tokenize(expression: str) -> List[Token]:
    """
    Convert an infix expression into a token list.

    A '-' in operand position is folded into the number that follows it,
    so "-5 + 3" gives [-5, +, 3]. Whitespace separates tokens and is dropped.

    Raises:
        NumberParseFailure: for lexemes such as "1.2.3" or a sign with no digits
        InvalidExpression: for characters that are not part of the grammar
    """
    tokens: List[Token] = []
    lexeme = ""

    for position, ch in enumerate(expression):
        if ch in _NUMBER_CHARS:
            lexeme += ch
            continue

        if lexeme:
            tokens.append(Token.number(lexeme))
            lexeme = ""

        if ch.isspace():
            continue

        previous = tokens[-1] if tokens else None
        if ch == "-" and _is_unary_position(previous):
            lexeme = ch
        elif ch in OPERATORS:
            tokens.append(Token.operator(ch))
        elif ch == LEFT_PAREN:
            tokens.append(Token.left_paren())
        elif ch == RIGHT_PAREN:
            tokens.append(Token.right_paren())
        else:
            raise InvalidExpression(
                f"Unexpected character {ch!r} at position {position}")

    if lexeme:
        tokens.append(Token.number(lexeme))

    return tokens
