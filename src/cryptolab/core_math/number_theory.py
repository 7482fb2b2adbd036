"""
Number Theory Helpers

Integer arithmetic shared by the Affine, Hill and RSA ciphers:
- Greatest common divisor (Euclidean algorithm)
- Extended Euclidean Algorithm
- Modular inverse
- Modular exponentiation (square-and-multiply algorithm)
- Trial-division primality test
- Random selection of small teaching primes

Note: Modular exponentiation is written out as square-and-multiply instead
      of calling pow(a, b, mod) so every squaring can be shown to a student.
      Python integers are arbitrary precision, so large moduli are safe.
"""

import math
import secrets
from typing import List, Optional, Sequence, Tuple

from ..config import SMALL_PRIMES


class NoInverseError(ValueError):
    """Raised when a modular inverse does not exist (gcd(a, m) != 1)."""

    def __init__(self, a: int, m: int, g: int):
        super().__init__(f"Modular inverse doesn't exist (gcd({a}, {m}) = {g})")
        self.a = a
        self.m = m
        self.gcd = g


def gcd(a: int, b: int) -> int:
    """
    Compute the greatest common divisor using Euclidean algorithm.

    Args:
        a: First integer
        b: Second integer

    Returns:
        GCD of a and b (always non-negative)
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm (iterative).

    Finds integers x, y such that: a*x + b*y = gcd(a, b)

    Args:
        a: First integer
        b: Second integer

    Returns:
        Tuple (gcd, x, y) where a*x + b*y = gcd
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y

    if old_r < 0:
        old_r, old_x, old_y = -old_r, -old_x, -old_y

    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """
    Compute modular multiplicative inverse using Extended Euclidean Algorithm.

    Finds x in [0, m) such that (a * x) mod m = 1

    Args:
        a: The number to find inverse of
        m: The modulus (must be positive)

    Returns:
        Modular inverse of a mod m

    Raises:
        ValueError: If m is not positive
        NoInverseError: If inverse doesn't exist (gcd(a, m) != 1)
    """
    if m <= 0:
        raise ValueError("Modulus must be positive")

    g, x, _ = extended_gcd(a % m, m)

    if g != 1:
        raise NoInverseError(a, m, g)

    return x % m


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation using square-and-multiply algorithm.

    Algorithm (right-to-left binary method):
    1. Start with result = 1
    2. For each bit of exponent (from LSB to MSB):
       - If bit is 1, multiply result by base (mod modulus)
       - Square the base (mod modulus)

    Args:
        base: The base number
        exponent: The exponent (must be non-negative)
        modulus: The modulus (must be positive)

    Returns:
        (base^exponent) mod modulus

    Raises:
        ValueError: If exponent < 0 or modulus <= 0
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("Modulus must be positive")
    if modulus == 1:
        return 0

    base = base % modulus
    result = 1

    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1

    return result


def is_prime(n: int) -> bool:
    """
    Deterministic primality test by trial division up to floor(sqrt(n)).

    Plenty fast for the two- and three-digit primes used in the classroom.

    Args:
        n: Number to test

    Returns:
        True if n is prime, False otherwise (n < 2 is never prime)
    """
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False

    for divisor in range(3, math.isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False

    return True


def smallest_factor(n: int) -> Optional[int]:
    """Return the smallest factor of n greater than 1, or None if n is prime or < 2."""
    if n < 2 or is_prime(n):
        return None
    for divisor in range(2, math.isqrt(n) + 1):
        if n % divisor == 0:
            return divisor
    return None


def coprime_values(m: int) -> List[int]:
    """
    List every residue in [1, m) that is coprime with m.

    For m = 26 these are exactly the usable Affine multipliers:
    1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25.
    """
    return [a for a in range(1, m) if gcd(a, m) == 1]


def random_prime_pair(rng=None, primes: Sequence[int] = SMALL_PRIMES) -> Tuple[int, int]:
    """
    Pick two distinct primes for an RSA exercise.

    Args:
        rng: Source of randomness exposing ``choice`` (e.g. ``random.Random``).
             Defaults to ``secrets.SystemRandom()``; pass a seeded generator
             for repeatable results.
        primes: Candidate primes (at least two distinct values)

    Returns:
        Tuple (p, q) with p != q

    Raises:
        ValueError: If fewer than two distinct candidates are given
    """
    candidates = sorted(set(primes))
    if len(candidates) < 2:
        raise ValueError("Need at least two distinct primes to choose from")

    rng = rng or secrets.SystemRandom()
    p = rng.choice(candidates)
    q = rng.choice(candidates)
    while q == p:
        q = rng.choice(candidates)

    return p, q
