"""Integer arithmetic via infix to postfix conversion."""

from kalkulator.errors import ErrorKind, ExpressionError, InvalidStateError
from kalkulator.evaluator import evaluate_postfix
from kalkulator.expression import Expression, ExpressionState
from kalkulator.factorial import FactorialCache
from kalkulator.postfix import infix_to_postfix, tokenize

__version__ = "0.1.1"

__all__ = [
    "ErrorKind",
    "Expression",
    "ExpressionError",
    "ExpressionState",
    "FactorialCache",
    "InvalidStateError",
    "evaluate_postfix",
    "infix_to_postfix",
    "tokenize",
]
