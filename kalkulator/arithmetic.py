"""Operators, precedence and checked signed 64-bit arithmetic."""

import typing as t

from kalkulator.errors import ErrorKind, ExpressionError

INT64_MIN: t.Final = -(2**63)
INT64_MAX: t.Final = 2**63 - 1

# Define Operator as a Literal for strict type checking on keys.
Operator = t.Literal["+", "-", "*", "/"]

FACTORIAL: t.Final = "!"
OPEN_PAREN: t.Final = "("
CLOSE_PAREN: t.Final = ")"

# Anything missing from this table, including "(", binds loosest and is
# never popped by an incoming operator.
precedence_map: t.Final[dict[str, int]] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


def checked(value: int, /) -> int:
    """Return ``value`` if it fits in a signed 64-bit integer.

    Raises:
        ExpressionError: OVERFLOW if the value is out of range.

    """
    if not INT64_MIN <= value <= INT64_MAX:
        raise ExpressionError(ErrorKind.OVERFLOW)
    return value


def _divide(left: int, right: int, /) -> int:
    if right == 0:
        raise ExpressionError(ErrorKind.DIVISION_BY_ZERO)
    # Python's // floors, integer division here truncates toward zero.
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


operator_map: t.Final[dict[Operator, t.Callable[[int, int], int]]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


def is_operator(test_char: str, /) -> t.TypeGuard[Operator]:
    """Type-safe helper to check if a token is a binary Operator.

    Args:
        test_char: The character or token that should be checked.

    Returns:
        bool: True, if the token is one of ``+ - * /``.

    """
    return test_char in operator_map


def precedence(operator: str, /) -> int:
    """Binding strength of ``operator``; 0 for anything unknown."""
    return precedence_map.get(operator, 0)


def has_higher_precedence(first: str, second: str, /) -> bool:
    """Return True if ``first`` binds strictly tighter than ``second``."""
    return precedence(first) > precedence(second)


def apply_operator(operator: Operator, left: int, right: int, /) -> int:
    """Apply a binary operator with overflow checking.

    Raises:
        ExpressionError: DIVISION_BY_ZERO or OVERFLOW.

    """
    return checked(operator_map[operator](left, right))
