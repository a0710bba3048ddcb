"""Input guards applied before an expression reaches the calculator."""
import logging
from typing import Optional, Tuple
from src.config import MAX_EXPRESSION_LENGTH

logger = logging.getLogger(__name__)

ALLOWED_SYMBOLS = set("0123456789.+-*/^()")


def normalize_expression(expression: str) -> str:
    """Strip surrounding whitespace; a missing expression becomes ''."""
    return (expression or "").strip()


def check_expression_length(
    expression: str,
    max_length: int = MAX_EXPRESSION_LENGTH
) -> Tuple[bool, Optional[str]]:
    """
    Reject expressions longer than the configured limit.

    Args:
        expression: Raw expression text
        max_length: Maximum number of characters accepted

    Returns:
        (is_valid, error_message) tuple
    """
    if len(expression) > max_length:
        error_msg = f"Expression is too long ({len(expression)} > {max_length} characters)"
        logger.warning(error_msg)
        return False, error_msg
    return True, None


def check_allowed_characters(expression: str) -> Tuple[bool, Optional[str]]:
    """
    Report the first character that is not a digit, '.', an operator,
    a parenthesis or whitespace.

    Returns:
        (is_valid, error_message) tuple
    """
    for position, ch in enumerate(expression):
        if ch not in ALLOWED_SYMBOLS and not ch.isspace():
            error_msg = f"Unsupported character {ch!r} at position {position}"
            logger.info(f"Character check failed: {error_msg}")
            return False, error_msg
    return True, None


def apply_guards(expression: str) -> Tuple[bool, Optional[str], str]:
    """
    Apply all guards to an expression.

    Args:
        expression: Raw expression text

    Returns:
        (passed, refusal_message, normalized_expression) tuple
    """
    normalized = normalize_expression(expression)
    logger.debug(f"Applying guards to expression: '{normalized[:100]}'")

    for check in (check_expression_length, check_allowed_characters):
        passed, error = check(normalized)
        if not passed:
            return False, error, normalized

    logger.debug("All guard checks passed")
    return True, None, normalized
