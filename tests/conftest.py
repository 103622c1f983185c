import pytest

from kalkulator import FactorialCache


@pytest.fixture
def factorial_cache() -> FactorialCache:
    return FactorialCache()
