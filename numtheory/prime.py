"""Prime sieves, primality tests, gcd, factorisation and related functions."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from numtheory.common import (
    MAX_PRIME_SUPPORT,
    CalcTiError,
    CoprimeCountError,
    ExceedPrimeRangeError,
    InvalidParameterError,
    NoCoprimeError,
    is_repeat,
)

DEFAULT_ROUNDS = 47


def _check_prime_range(n: int) -> None:
    if n <= 1:
        raise InvalidParameterError(f"expected a number above 1, got {n}")
    if n >= MAX_PRIME_SUPPORT:
        raise ExceedPrimeRangeError(f"{n} is not below {MAX_PRIME_SUPPORT}")


def find_primes_eratosthenes(n: int) -> list[int]:
    """Return all primes up to and including n, in ascending order."""
    if n < 2:
        raise InvalidParameterError(f"expected n >= 2, got {n}")
    if n > MAX_PRIME_SUPPORT:
        raise ExceedPrimeRangeError(f"{n} exceeds {MAX_PRIME_SUPPORT}")

    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for j in range(2, math.isqrt(n) + 1):
        if sieve[j]:
            sieve[j * j :: j] = bytes(len(range(j * j, n + 1, j)))
    return [i for i, flag in enumerate(sieve) if flag]


def gcd_euclidean(a: int, b: int) -> int:
    """Return the greatest common divisor of a and b."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def extended_euclidean(a: int, b: int) -> tuple[int, int, int]:
    """Return (gcd, x, y) with a*x + b*y == gcd for coprime a and b."""
    if gcd_euclidean(a, b) != 1:
        raise NoCoprimeError(f"{a} and {b} are not coprime")

    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def _miller_test(d: int, n: int) -> bool:
    a = random.randrange(2, n - 2)
    x = pow(a, d, n)
    if x in (1, n - 1):
        return True
    while d != n - 1:
        x = x * x % n
        d *= 2
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_prime_baillie_psw(n: int, rounds: int = DEFAULT_ROUNDS) -> bool:
    """Probabilistic primality test with the given number of random rounds."""
    if n <= 1 or n == 4:
        return False
    if n <= 3:
        return True

    d = n - 1
    while d % 2 == 0:
        d //= 2
    return all(_miller_test(d, n) for _ in range(rounds))


def is_prime(n: int) -> bool:
    """Return True if n is prime; n must lie in (1, MAX_PRIME_SUPPORT)."""
    _check_prime_range(n)
    return is_prime_baillie_psw(n, DEFAULT_ROUNDS)


def is_prime_fermat(n: int) -> bool:
    """Fermat base-2 test; gives false positives on pseudoprimes."""
    _check_prime_range(n)
    return (pow(2, n, n) - 2) % n == 0


def factorization(n: int) -> list[int]:
    """Return the prime factors of a composite n with multiplicity.

    Numbers below 4 and primes give an empty list.
    """
    if n < 4:
        return []

    factors: list[int] = []
    rest = n
    divisor = 2
    while divisor * divisor <= rest:
        while rest % divisor == 0:
            factors.append(divisor)
            rest //= divisor
        divisor += 1
    if rest > 1 and rest != n:
        factors.append(rest)
    return factors


def is_coprime(values: Sequence[int]) -> bool:
    """Return True if there are at least two values and all are pairwise coprime."""
    if len(values) < 2:
        return False
    return all(
        gcd_euclidean(a, b) == 1
        for i, a in enumerate(values)
        for b in values[i + 1 :]
    )


def chinese_remainder_theorem(
    remainders: Sequence[int], moduli: Sequence[int]
) -> int:
    """Return the smallest x >= 0 with x % m == r for each remainder r and modulus m."""
    if len(remainders) < 2 or len(remainders) != len(moduli):
        raise InvalidParameterError("need at least two remainders, one per modulus")
    if any(m <= 0 for m in moduli):
        raise InvalidParameterError("moduli must be positive")
    if is_repeat(moduli):
        raise InvalidParameterError("moduli must be distinct")
    if not is_coprime(moduli):
        raise InvalidParameterError("moduli must be pairwise coprime")

    product = math.prod(moduli)
    total = 0
    for remainder, modulus in zip(remainders, moduli):
        partial = product // modulus
        if modulus == 1:
            raise CalcTiError(f"no inverse of {partial} modulo 1")
        try:
            inverse = pow(partial, -1, modulus)
        except ValueError as exc:
            raise CalcTiError(f"no inverse of {partial} modulo {modulus}") from exc
        total += remainder * partial * inverse
    return total % product


def count_coprimes_within_n(n: int) -> int:
    """Euler's totient of n for 1, primes, prime powers and square-free numbers."""
    if n == 1:
        return 1
    if is_prime(n):
        return n - 1

    factors = factorization(n)
    first = factors[0]
    if all(f == first for f in factors):
        k = len(factors)
        return first**k - first ** (k - 1)
    if is_coprime(factors):
        return math.prod(f - 1 for f in factors)
    raise CoprimeCountError(f"cannot count the coprimes of {n}")


def unit_order(a: int, n: int) -> int:
    """Return the smallest i >= 1 with a**i % n == 1."""
    if n < 2:
        raise InvalidParameterError(f"modulus must be at least 2, got {n}")
    if gcd_euclidean(a, n) != 1:
        raise NoCoprimeError(f"{a} has no order modulo {n}")
    value = 1
    for i in range(1, n + 1):
        value = value * a % n
        if value == 1:
            return i
    raise NoCoprimeError(f"{a} has no order modulo {n}")