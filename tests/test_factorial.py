import concurrent.futures
import math

import pytest

from kalkulator import ErrorKind, ExpressionError, FactorialCache


def test_seeded_with_zero_and_one(factorial_cache: FactorialCache) -> None:
    assert factorial_cache.snapshot() == (1, 1)
    assert factorial_cache.factorial(0) == 1
    assert factorial_cache.factorial(1) == 1
    assert len(factorial_cache) == 2


def test_extends_and_memoizes(factorial_cache: FactorialCache) -> None:
    assert factorial_cache.factorial(5) == 120
    assert factorial_cache.snapshot() == (1, 1, 2, 6, 24, 120)

    # Smaller lookups neither shrink nor rewrite the table.
    assert factorial_cache.factorial(3) == 6
    assert factorial_cache.snapshot() == (1, 1, 2, 6, 24, 120)


def test_overflow_keeps_partial_extension(
    factorial_cache: FactorialCache,
) -> None:
    with pytest.raises(ExpressionError) as excinfo:
        factorial_cache.factorial(25)
    assert excinfo.value.kind is ErrorKind.OVERFLOW

    # Everything up to 20! was appended before 21! overflowed.
    assert len(factorial_cache) == 21
    assert factorial_cache.snapshot() == tuple(math.factorial(n) for n in range(21))
    assert factorial_cache.factorial(20) == 2432902008176640000
    assert factorial_cache.factorial(10) == 3628800

    with pytest.raises(ExpressionError):
        factorial_cache.factorial(21)
    assert len(factorial_cache) == 21


def test_rejects_negative(factorial_cache: FactorialCache) -> None:
    with pytest.raises(ExpressionError) as excinfo:
        factorial_cache.factorial(-1)
    assert excinfo.value.kind is ErrorKind.INVALID_EXPRESSION
    assert len(factorial_cache) == 2


def test_huge_argument_fails_fast(factorial_cache: FactorialCache) -> None:
    with pytest.raises(ExpressionError) as excinfo:
        factorial_cache.factorial(2**62)
    assert excinfo.value.kind is ErrorKind.OVERFLOW
    assert len(factorial_cache) == 21


def test_concurrent_extension(factorial_cache: FactorialCache) -> None:
    arguments = [n for n in range(21) for _ in range(8)]
    with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(factorial_cache.factorial, reversed(arguments)))

    assert results == [math.factorial(n) for n in reversed(arguments)]
    assert factorial_cache.snapshot() == tuple(math.factorial(n) for n in range(21))
