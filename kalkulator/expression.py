"""Expression facade: convert then evaluate, as an explicit state machine."""

import enum
import typing as t

from kalkulator.errors import ErrorKind, InvalidStateError
from kalkulator.evaluator import evaluate_postfix
from kalkulator.factorial import FactorialCache
from kalkulator.postfix import infix_to_postfix


class ExpressionState(enum.Enum):
    """Where an Expression is in its convert/evaluate lifecycle."""

    RAW = "raw"
    CONVERTED = "converted"
    EVALUATED = "evaluated"


class Expression:
    """An arithmetic expression, its postfix form and its result.

    Args:
        raw: The infix expression text.
        factorial_cache: Shared cache used when evaluating ``!``.

    Attributes:
        postfix: The postfix text, empty until converted.
        result: The computed value, or INVALID_EXPRESSION until evaluated.
        state: The current lifecycle state.

    """

    __slots__ = ("_factorial_cache", "_postfix", "_raw", "_result", "_state")

    def __init__(self, raw: str, factorial_cache: FactorialCache, /) -> None:
        self._raw: t.Final = raw
        self._factorial_cache: t.Final = factorial_cache
        self._postfix = ""
        self._result: int | ErrorKind = ErrorKind.INVALID_EXPRESSION
        self._state = ExpressionState.RAW

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def postfix(self) -> str:
        return self._postfix

    @property
    def result(self) -> int | ErrorKind:
        return self._result

    @property
    def state(self) -> ExpressionState:
        return self._state

    def convert(self) -> str:
        """Convert the raw text to postfix.

        Returns:
            str: The postfix text.

        Raises:
            InvalidStateError: If the expression was already converted.
            ExpressionError: If the raw text is not a valid expression.

        """
        self._require(ExpressionState.RAW)
        self._postfix = infix_to_postfix(self._raw)
        self._state = ExpressionState.CONVERTED
        return self._postfix

    def evaluate(self) -> int:
        """Evaluate the stored postfix text.

        May be called again once evaluated, the result is unchanged.

        Raises:
            InvalidStateError: If the expression has not been converted.
            ExpressionError: If evaluation fails, ``result`` keeps its
                previous value.

        """
        self._require(ExpressionState.CONVERTED, ExpressionState.EVALUATED)
        self._result = evaluate_postfix(self._postfix, self._factorial_cache)
        self._state = ExpressionState.EVALUATED
        return self._result

    def process(self, compute: bool, /) -> str | int:
        """Convert, and evaluate too if ``compute`` is set.

        Returns:
            str | int: The postfix text if ``compute`` is False, else the
            result.

        """
        postfix = self.convert()
        if not compute:
            return postfix

        return self.evaluate()

    def _require(self, *states: ExpressionState) -> None:
        if self._state not in states:
            raise InvalidStateError(
                f"cannot run from state {self._state.value!r} of {self._raw!r}",
            )

    def __repr__(self) -> str:
        return (
            f"Expression(raw={self._raw!r}, postfix={self._postfix!r}, "
            f"state={self._state.value})"
        )
