"""Elementary number theory: primes, gcd, CRT, totients and modular groups."""

__version__ = "0.1.0"
__all__ = ["common", "prime", "group"]