"""
Key Material

One small immutable record per cipher. Records only hold what the caller
supplied; the cipher that consumes a key validates it so the
failed check can be shown in the trace.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class ShiftKey:
    """Caesar shift, 0-25."""
    amount: int


@dataclass(frozen=True)
class AffineKey:
    """E(x) = (a*x + b) mod 26; a must be coprime with 26."""
    a: int
    b: int


@dataclass(frozen=True)
class PolyalphabeticKey:
    """Keyword for Vigenère and Playfair."""
    word: str


@dataclass(frozen=True)
class BinaryKey:
    """Vernam pad as a string of 0/1 characters (whitespace allowed)."""
    bits: str


@dataclass(frozen=True)
class RailCount:
    """Number of rails for the Rail Fence cipher (>= 2)."""
    rails: int


@dataclass(frozen=True)
class PermutationKey:
    """
    Column order for Row Transposition.

    ``order[i]`` is the rank of grid column i; columns are read in
    ascending order of rank.
    """
    order: Tuple[int, ...]

    def __init__(self, order: Sequence[int]):
        object.__setattr__(self, "order", tuple(order))


@dataclass(frozen=True)
class MatrixKey:
    """Square Hill key matrix, stored as a tuple of row tuples."""
    rows: Tuple[Tuple[int, ...], ...]

    def __init__(self, rows: Sequence[Sequence[int]]):
        object.__setattr__(self, "rows", tuple(tuple(row) for row in rows))

    @property
    def size(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class RSAKeyPair:
    """
    RSA key pair produced by rsa.generate_key_pair().

    Public key is (n, e), private key is (n, d). The factors and the
    totient are kept for display only.
    """
    n: int
    e: int
    d: int
    p: Optional[int] = None
    q: Optional[int] = None
    phi: Optional[int] = None

    @property
    def public_key(self) -> Tuple[int, int]:
        """Public key (n, e)."""
        return self.n, self.e

    @property
    def private_key(self) -> Tuple[int, int]:
        """Private key (n, d)."""
        return self.n, self.d

    def __repr__(self) -> str:
        return f"RSAKeyPair(n={self.n}, e={self.e}, d={self.d})"
