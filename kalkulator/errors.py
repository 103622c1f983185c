"""Error kinds raised while converting or evaluating an expression."""

import enum
import typing as t


class ErrorKind(enum.Enum):
    """Closed set of failures, each with a fixed description."""

    INVALID_EXPRESSION = "Invalid expression"
    INSUFFICIENT_OPERANDS = "Insufficient operands"
    DIVISION_BY_ZERO = "Division by zero"
    OVERFLOW = "Overflow"
    INVALID_TOKEN = "Invalid token"
    MALFORMED_EXPRESSION = "Malformed postfix expression"

    @property
    def description(self) -> str:
        """The human-readable description of this error."""
        return self.value

    def __str__(self) -> str:
        return self.value


class ExpressionError(Exception):
    """Raised when an expression cannot be converted or evaluated.

    Args:
        kind: The kind of failure.

    """

    def __init__(self, kind: ErrorKind, /) -> None:
        super().__init__(kind.description)
        self.kind: t.Final = kind


class InvalidStateError(RuntimeError):
    """Raised when an Expression operation is called out of order."""
