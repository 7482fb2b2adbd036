"""
CryptoLab Configuration

Shared constants and per-call options for the cipher engine.

Defaults mirror the values the CryptoLab front-end pre-fills in its forms,
so a caller that has nothing better to offer gets the textbook examples.
"""

from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Alphabet
# ============================================================================

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MODULUS = len(ALPHABET)  # 26

# Padding letter for Playfair digraphs, Hill blocks and transposition grids
FILLER = "X"

# Playfair folds J into I to fit a 5x5 square
PLAYFAIR_SIZE = 5
PLAYFAIR_MERGED = ("J", "I")


# ============================================================================
# RSA
# ============================================================================

# Teaching primes offered by the "random primes" button
SMALL_PRIMES: Tuple[int, ...] = (
    11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
)

# Single-letter ciphertext only round-trips while every numeral fits A-Z
SINGLE_LETTER_MAX_MODULUS = MODULUS


# ============================================================================
# Form defaults
# ============================================================================

DEFAULT_CAESAR_SHIFT = 3
DEFAULT_AFFINE_KEY = (5, 8)
DEFAULT_RAILS = 3
DEFAULT_HILL_MATRIX = ((6, 24), (1, 13))
DEFAULT_RSA_PARAMETERS = (61, 53, 17)  # p, q, e


@dataclass(frozen=True)
class CipherOptions:
    """
    Per-call options recognised by the cipher modules.

    Attributes:
        letter_encoding: RSA ciphertext numerals are written as base-26
            letter tokens (A=0, B=1, ..., BA=26) instead of decimal numbers.
        single_letter: RSA ciphertext numerals are written as exactly one
            letter each. Only valid while n <= 26.
        char_codes: RSA plaintext letters map to their character codes
            (A=65) rather than their alphabet ordinals (A=0).
        filler: Padding letter used by Playfair, Hill and Row Transposition.
    """
    letter_encoding: bool = True
    single_letter: bool = False
    char_codes: bool = False
    filler: str = FILLER

    def __post_init__(self):
        if len(self.filler) != 1 or self.filler not in ALPHABET + ALPHABET.lower():
            raise ValueError("Filler must be a single letter A-Z")
        object.__setattr__(self, "filler", self.filler.upper())


DEFAULT_OPTIONS = CipherOptions()
