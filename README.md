# numtheory

Small, readable implementations of elementary number theory, and a
checker for finite sets of integers that form a group under modular
multiplication.

## Installation

    pip install numtheory

## Primes and divisibility

All of these live in `numtheory.prime`.

```python
from numtheory.prime import (
    find_primes_eratosthenes,
    gcd_euclidean,
    extended_euclidean,
    is_prime,
    is_prime_baillie_psw,
    is_prime_fermat,
    factorization,
    chinese_remainder_theorem,
    count_coprimes_within_n,
    unit_order,
    is_coprime,
)

primes = find_primes_eratosthenes(10_000)   # ascending list of primes <= n
len(primes)                                 # 1229

gcd_euclidean(300, 45)                      # 15

gcd, x, y = extended_euclidean(64, 23)      # 64*x + 23*y == gcd == 1

is_prime(97)                                # True
is_prime_baillie_psw(97, 50)                # True, 50 random rounds
is_prime_fermat(97)                         # True

factorization(60)                           # [2, 2, 3, 5]
factorization(13)                           # [] for primes and n < 4

chinese_remainder_theorem([2, 3, 2], [3, 5, 7])   # 23

count_coprimes_within_n(15)                 # 8
unit_order(2, 5)                            # 4
is_coprime([3, 5, 7])                       # True
```

Notes on behaviour:

- `find_primes_eratosthenes(n)` needs `2 <= n <= 10**10`.
- `is_prime` and `is_prime_fermat` need `1 < n < 10**10`. `is_prime` is a
  random-base Miller test repeated 47 times; `is_prime_fermat` is the
  base-2 Fermat test and accepts pseudoprimes such as 341.
- `extended_euclidean(a, b)` only works for coprime `a` and `b` and
  returns `(gcd, x, y)`.
- `chinese_remainder_theorem` needs at least two remainders, one per
  modulus, with positive, distinct, pairwise coprime moduli. It returns
  the smallest non-negative solution.
- `count_coprimes_within_n(n)` gives Euler's totient for 1, primes, prime
  powers and products of distinct primes; for any other `n` it raises
  `CoprimeCountError`.
- `unit_order(a, n)` returns the smallest `i >= 1` with `a**i % n == 1`;
  `a` must be coprime to `n` and `n` at least 2.
- `is_coprime(values)` is False for fewer than two values.

## Errors and shared helpers

`numtheory.common` holds the error types, all subclasses of
`NumberTheoryError`:

- `InvalidParameterError` (also a `ValueError`)
- `ExceedPrimeRangeError` (also a `ValueError`)
- `NoCoprimeError` (also a `ValueError`)
- `CalcTiError` (also an `ArithmeticError`)
- `CoprimeCountError` (also an `ArithmeticError`)

It also provides `MAX_PRIME_SUPPORT` (`10**10`), `MAX_ULL` (`2**64 - 1`),
`PRIME_TABLE` (the first fifty primes above each of 10**2 to 10**6) and
`is_repeat(values)`, which tells whether any value occurs twice.

## Groups

```python
from numtheory.group import Group, OperationRule

g = Group([1, 2, 3, 4], OperationRule.MODULO, 5)
3 in g          # True
len(g)          # 4
g.identity      # 1
print(g.format())
# Element of current group:
# 1 2 3 4
# Group identity: 1
```

Constructing a `Group` checks the elements against the chosen
`OperationRule` (`ADDITION`, `MULTIPLICATION` or `MODULO`) and raises
`numtheory.group.GroupError` when a check fails:

- under `MODULO`, every element must be below the modulus;
- closure: sums (or products) of distinct pairs must be in the set, or,
  under `MODULO`, each element reduced by the modulus;
- associativity under `MODULO` is checked on ten randomly sampled triples;
- an identity element is searched for under `MODULO` only;
- every element must have a multiplicative inverse modulo `mod`, whatever
  the operation.

`GroupKind` lists broad classes of groups (`FINITE`, `INFINITE`,
`ORDINARY`, `SUBGROUP`) for labelling.

## What it does not do

The package is a library only: it has no command-line program. `Group`
does not enumerate subgroups or test whether one set is a subgroup of
another.

## Running the tests

    pip install "numtheory[test]"
    pytest