"""
Alphabet Codec

Maps letters A-Z to the integers 0-25 and back, and normalizes input text.

Two normalization policies are used by the ciphers:
- pass-through: non-letters are copied to the output unchanged (Caesar, Affine)
- strip: non-letters are removed before processing (every other cipher)

Only the 26 ASCII letters count as letters; accented characters and other
scripts are treated like punctuation.
"""

from typing import List, Sequence

from ..config import ALPHABET, MODULUS

_LETTERS = ALPHABET + ALPHABET.lower()


def is_letter(ch: str) -> bool:
    """True for a single ASCII letter, either case."""
    return len(ch) == 1 and ch in _LETTERS


def to_ordinal(ch: str) -> int:
    """
    Position of a letter in the alphabet (case-insensitive).

    Raises:
        ValueError: If ch is not an ASCII letter
    """
    if not is_letter(ch):
        raise ValueError(f"'{ch}' is not a letter A-Z")
    return ALPHABET.index(ch.upper())


def from_ordinal(value: int, upper: bool = True) -> str:
    """Letter at position value mod 26."""
    letter = ALPHABET[value % MODULUS]
    return letter if upper else letter.lower()


def shift_letter(ch: str, amount: int) -> str:
    """Shift a letter by amount positions, keeping its case."""
    return from_ordinal(to_ordinal(ch) + amount, upper=ch.isupper())


def strip_letters(text: str) -> str:
    """Upper-case letters of text with everything else removed."""
    return "".join(ch.upper() for ch in text if is_letter(ch))


def to_ordinals(text: str) -> List[int]:
    """Ordinals of the letters of text, skipping anything else."""
    return [to_ordinal(ch) for ch in text if is_letter(ch)]


def from_ordinals(values: Sequence[int]) -> str:
    """Upper-case string for a list of ordinals."""
    return "".join(from_ordinal(v) for v in values)
