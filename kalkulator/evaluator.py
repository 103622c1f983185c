"""Postfix evaluator.

Tokens are read left to right against a value stack. Numbers are pushed,
binary operators pop their right then left operand and push the result, '!'
replaces the top value with its factorial. A valid expression leaves exactly
one value on the stack.
"""

import logging
import re
import typing as t

from kalkulator.arithmetic import (
    FACTORIAL,
    INT64_MAX,
    INT64_MIN,
    apply_operator,
    is_operator,
)
from kalkulator.errors import ErrorKind, ExpressionError
from kalkulator.factorial import FactorialCache
from kalkulator.stack import Stack

logger = logging.getLogger(__name__)

# int() alone would also accept underscores and non-ASCII digits.
_INTEGER_TOKEN: t.Final = re.compile(r"[+-]?[0-9]+")


def parse_integer(token: str, /) -> int:
    """Parse a base-10 signed 64-bit integer token.

    Raises:
        ExpressionError: INVALID_TOKEN if the token is not such an integer.

    """
    if not _INTEGER_TOKEN.fullmatch(token):
        raise ExpressionError(ErrorKind.INVALID_TOKEN)

    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ExpressionError(ErrorKind.INVALID_TOKEN)
    return value


def evaluate_postfix(postfix: str, factorial_cache: FactorialCache, /) -> int:
    """Evaluate a space separated postfix expression.

    Args:
        postfix: The postfix expression, e.g. ``"3 4 2 * +"``.
        factorial_cache: Shared cache consulted for ``!``.

    Returns:
        int: The single value left on the stack.

    Raises:
        ExpressionError: INSUFFICIENT_OPERANDS, DIVISION_BY_ZERO, OVERFLOW,
            INVALID_TOKEN, or MALFORMED_EXPRESSION when the stack does not end
            with exactly one value. INVALID_EXPRESSION for a negative
            factorial.

    """
    values: t.Final[Stack[int]] = Stack()

    for token in postfix.split():
        if is_operator(token):
            left, right = values.pop_operands(2)
            values.push(apply_operator(token, left, right))
        elif token == FACTORIAL:
            (operand,) = values.pop_operands(1)
            values.push(factorial_cache.factorial(operand))
        else:
            values.push(parse_integer(token))

    if len(values) != 1:
        # Leftover operands (1 2) or nothing at all.
        logger.debug("Postfix %r left %d values", postfix, len(values))
        raise ExpressionError(ErrorKind.MALFORMED_EXPRESSION)

    result = values.pop()
    logger.debug("Evaluated postfix %r to %d", postfix, result)
    return result
