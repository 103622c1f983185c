"""Generic stack shared by the postfix converter and evaluator."""

import typing as t

from kalkulator.errors import ErrorKind, ExpressionError

T = t.TypeVar("T")


# Encapsulates the list operations so the converter and evaluator read in
# terms of push/pop/top instead of [-1] indexing.
class Stack(t.Generic[T]):
    """LIFO wrapper around a list."""

    __slots__ = ("_array",)

    def __init__(self) -> None:
        self._array: t.Final[list[T]] = []

    def push(self, item: T, /) -> None:
        self._array.append(item)

    def pop(self) -> T:
        return self._array.pop()

    def top(self) -> T | None:
        """Peek at the last element, or None if the stack is empty."""
        return self._array[-1] if self._array else None

    def pop_operands(self, count: int, /) -> list[T]:
        """Pop ``count`` items, returned in push order.

        Raises:
            ExpressionError: INSUFFICIENT_OPERANDS if fewer than ``count``
                items are on the stack.

        """
        if len(self._array) < count:
            raise ExpressionError(ErrorKind.INSUFFICIENT_OPERANDS)

        # The first pop is the right-hand side, so reverse back into order.
        popped = [self.pop() for _ in range(count)]
        popped.reverse()
        return popped

    def __bool__(self) -> bool:
        return bool(self._array)

    def __len__(self) -> int:
        return len(self._array)
