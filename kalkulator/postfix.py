"""Infix to postfix conversion.

A shunting-yard conversion done in a single left to right scan.

1) Iterate the characters in the expression.
    - If the character is an ASCII digit, append it to the number buffer.
    - Whitespace flushes the number buffer and is otherwise skipped.
    - A '!' flushes the number buffer and goes straight to the output, it is
    already in postfix position.
    - A binary operator flushes the number buffer, pops every stacked
    operator that binds strictly tighter, then is pushed.
    - A '(' flushes the number buffer and is pushed.
    - A ')' flushes the number buffer and pops operators to the output until
    the matching '(' is discarded.
    - Else the character is invalid.

2) Flush the number buffer and drain the operator stack. A '(' left on the
stack means the parentheses were unbalanced.
"""

import dataclasses
import logging
import typing as t

from kalkulator.arithmetic import (
    CLOSE_PAREN,
    FACTORIAL,
    OPEN_PAREN,
    has_higher_precedence,
    is_operator,
)
from kalkulator.errors import ErrorKind, ExpressionError
from kalkulator.stack import Stack

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class NumberBuffer:
    """Collect the digits of a multi-digit number.

    Attributes:
        pending_number: The digits parsed so far.

    """

    _digits: list[str] = dataclasses.field(default_factory=list)

    @property
    def pending_number(self) -> str | None:
        """The digits being parsed, or None if no number is pending."""
        if not self._digits:
            return None

        return "".join(self._digits)

    def add_digit(self, test_char: str, /) -> bool:
        """Append a digit to the pending number.

        Returns:
            bool: True, if the character is a valid digit.

        """
        if not ("0" <= test_char <= "9"):
            # isdigit() would accept superscripts and other scripts' digits.
            return False

        self._digits.append(test_char)
        return True

    def flush(self, output: list[str], /) -> None:
        """Move the pending number, if any, to the output."""
        if (number := self.pending_number) is not None:
            output.append(number)
            self._digits.clear()


def tokenize(expression: str, /) -> list[str]:
    """Convert an infix expression to a list of postfix tokens.

    Args:
        expression: The infix expression, e.g. ``"3+4*2"``.

    Returns:
        list[str]: Numbers and single character operators in postfix order.

    Raises:
        ExpressionError: INVALID_EXPRESSION on an unknown character,
            MALFORMED_EXPRESSION on unbalanced parentheses.

    """
    output: t.Final[list[str]] = []
    operators: t.Final[Stack[str]] = Stack()
    buffer: t.Final = NumberBuffer()

    for test_char in expression:
        if buffer.add_digit(test_char):
            continue

        # Every other character ends a pending number.
        buffer.flush(output)

        if test_char.isspace():
            continue

        if test_char == FACTORIAL:
            output.append(test_char)
        elif is_operator(test_char):
            _push_operator(test_char, operators, output)
        elif test_char == OPEN_PAREN:
            operators.push(test_char)
        elif test_char == CLOSE_PAREN:
            _close_paren(operators, output)
        else:
            logger.debug("Invalid character %r in %r", test_char, expression)
            raise ExpressionError(ErrorKind.INVALID_EXPRESSION)

    buffer.flush(output)

    while operators:
        if (operator := operators.pop()) == OPEN_PAREN:
            # Opened but never closed. e.g: (1+2
            raise ExpressionError(ErrorKind.MALFORMED_EXPRESSION)
        output.append(operator)

    return output


def infix_to_postfix(expression: str, /) -> str:
    """Convert an infix expression to space separated postfix notation.

    Raises:
        ExpressionError: See :func:`tokenize`.

    """
    postfix = " ".join(tokenize(expression))
    logger.debug("Converted %r to postfix %r", expression, postfix)
    return postfix


def _push_operator(
    operator: str,
    operators: Stack[str],
    output: list[str],
) -> None:
    # Only strictly tighter operators are popped, equal precedence waits.
    while (top := operators.top()) is not None and top != OPEN_PAREN:
        if not has_higher_precedence(top, operator):
            break
        output.append(operators.pop())

    operators.push(operator)


def _close_paren(operators: Stack[str], output: list[str]) -> None:
    while operators:
        if (operator := operators.pop()) == OPEN_PAREN:
            return
        output.append(operator)

    # No matching '(' on the stack. e.g: 1+2)
    raise ExpressionError(ErrorKind.MALFORMED_EXPRESSION)
