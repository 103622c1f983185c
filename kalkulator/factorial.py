"""Memoized factorials shared across evaluations.

A single FactorialCache is created by the caller and handed to every
evaluation that needs it. Entries are only ever appended, so a failed
extension (overflow) keeps everything computed before it.
"""

import logging
import threading
import typing as t

from kalkulator.arithmetic import INT64_MAX
from kalkulator.errors import ErrorKind, ExpressionError

logger = logging.getLogger(__name__)

# 0! and 1!
FACTORIAL_SEED: t.Final[tuple[int, ...]] = (1, 1)


class FactorialCache:
    """Thread safe, append-only table where index ``i`` holds ``i!``."""

    __slots__ = ("_lock", "_values")

    def __init__(self) -> None:
        self._lock: t.Final = threading.Lock()
        self._values: t.Final[list[int]] = list(FACTORIAL_SEED)

    def factorial(self, n: int, /) -> int:
        """Return ``n!``, extending the table as needed.

        Args:
            n: A non-negative integer.

        Returns:
            int: ``n!``.

        Raises:
            ExpressionError: INVALID_EXPRESSION for a negative ``n``, OVERFLOW
                if ``n!`` does not fit in a signed 64-bit integer.

        """
        if n < 0:
            raise ExpressionError(ErrorKind.INVALID_EXPRESSION)

        with self._lock:
            if n >= len(self._values):
                self._extend_to(n)
            return self._values[n]

    def _extend_to(self, n: int, /) -> None:
        # Caller holds the lock.
        start = len(self._values)
        for index in range(start, n + 1):
            value = self._values[-1] * index
            if value > INT64_MAX:
                logger.debug(
                    "Factorial overflow at %d!, cache holds up to %d!",
                    index,
                    len(self._values) - 1,
                )
                raise ExpressionError(ErrorKind.OVERFLOW)
            self._values.append(value)

        logger.debug("Extended factorial cache from %d! to %d!", start - 1, n)

    def snapshot(self) -> tuple[int, ...]:
        """Return a copy of every cached value, indexed by ``n``."""
        with self._lock:
            return tuple(self._values)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
