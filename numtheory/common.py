"""Shared constants, error types and small helpers for the number-theory tools."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import count, islice

MAX_ULL = 2**64 - 1
"""Largest value of an unsigned 64-bit integer."""

MAX_PRIME_SUPPORT = 10**10
"""Upper bound of the numbers the prime routines are meant to handle."""

_TABLE_MAGNITUDES = (10**2, 10**3, 10**4, 10**5, 10**6)
_TABLE_ROWS = 50


def _is_small_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def _primes_above(start: int) -> Iterator[int]:
    return (n for n in count(start + 1) if _is_small_prime(n))


def _build_prime_table() -> tuple[int, ...]:
    columns = [
        list(islice(_primes_above(magnitude), _TABLE_ROWS))
        for magnitude in _TABLE_MAGNITUDES
    ]
    return tuple(value for row in zip(*columns) for value in row)


PRIME_TABLE: tuple[int, ...] = _build_prime_table()
"""Known primes: the first fifty above 10**2 .. 10**6, one of each per row."""


class NumberTheoryError(Exception):
    """Base class of every error raised by this package."""


class InvalidParameterError(NumberTheoryError, ValueError):
    """An argument is outside the values the operation accepts."""


class ExceedPrimeRangeError(NumberTheoryError, ValueError):
    """A number is larger than the prime routines support."""


class NoCoprimeError(NumberTheoryError, ValueError):
    """The operation needs coprime numbers and was given others."""


class CalcTiError(NumberTheoryError, ArithmeticError):
    """A modular inverse needed by the remainder theorem does not exist."""


class CoprimeCountError(NumberTheoryError, ArithmeticError):
    """The number of coprimes could not be worked out for this input."""


def is_repeat(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False