"""Exceptions raised by the calculator pipeline."""


class CalculatorError(ValueError):
    """Base class for every error the calculator core raises."""


class InvalidExpression(CalculatorError):
    """Token sequence is not a well-formed infix expression."""


class DivisionByZero(CalculatorError):
    """Right operand of '/' is zero."""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class MalformedPostfix(CalculatorError):
    """Postfix sequence does not reduce to exactly one value."""


class NumberParseFailure(CalculatorError):
    """A numeric lexeme is not a valid floating-point literal."""

    def __init__(self, lexeme: str):
        self.lexeme = lexeme
        super().__init__(f"Invalid number: '{lexeme}'")
