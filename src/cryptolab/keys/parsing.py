"""
Raw Key Parsing

Turns the strings a user types into the front-end forms into key records.

Accepted formats:
    shift          "3"
    affine         "5 8" or "5, 8"
    rails          "3"
    permutation    "3 1 4 2" (spaces and/or commas)
    matrix         "6 24; 1 13" (rows split by ';', '/' or newlines)
    rsa            "61 53 17" (p q e)

Parsers only check the format. Whether a well-formed key is also a usable
one (coprime, invertible, distinct, ...) is decided by the cipher itself.
"""

import math
import re
from typing import List, Tuple

from .material import (
    AffineKey,
    BinaryKey,
    MatrixKey,
    PermutationKey,
    PolyalphabeticKey,
    RailCount,
    ShiftKey,
)

_TOKEN_SPLIT = re.compile(r"[\s,]+")
_ROW_SPLIT = re.compile(r"[;/\n]+")


class KeyFormatError(ValueError):
    """Raw key string could not be parsed into the expected structure."""


class EmptyKeyError(KeyFormatError):
    """No key was entered at all."""


def _tokens(raw: str, what: str) -> List[str]:
    if raw is None or not raw.strip():
        raise EmptyKeyError(f"No {what} provided")
    return [t for t in _TOKEN_SPLIT.split(raw.strip()) if t]


def parse_int(raw: str, what: str = "number") -> int:
    """
    Parse a single integer.

    Raises:
        EmptyKeyError: If raw is blank
        KeyFormatError: If raw is not exactly one integer
    """
    tokens = _tokens(raw, what)
    if len(tokens) != 1:
        raise KeyFormatError(f"Expected a single {what}, got {len(tokens)} values")
    return _to_int(tokens[0], what)


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise KeyFormatError(f"'{token}' is not a valid {what}") from None


def _ints(raw: str, what: str) -> List[int]:
    return [_to_int(token, what) for token in _tokens(raw, what)]


def parse_shift_key(raw: str) -> ShiftKey:
    return ShiftKey(parse_int(raw, "shift amount"))


def parse_affine_key(raw: str) -> AffineKey:
    """Parse "a b" into an AffineKey."""
    values = _ints(raw, "affine key")
    if len(values) != 2:
        raise KeyFormatError("Affine key needs exactly two numbers: a and b")
    return AffineKey(*values)


def parse_word_key(raw: str) -> PolyalphabeticKey:
    # Letter content is validated by the cipher, which can explain it.
    return PolyalphabeticKey(raw or "")


def parse_binary_key(raw: str) -> BinaryKey:
    return BinaryKey(raw or "")


def parse_rail_count(raw: str) -> RailCount:
    return RailCount(parse_int(raw, "rail count"))


def parse_permutation_key(raw: str) -> PermutationKey:
    """
    Parse a column order such as "3 1 4 2".

    Raises:
        EmptyKeyError: If raw is blank
        KeyFormatError: If any token is not an integer
    """
    return PermutationKey(_ints(raw, "column number"))


def parse_matrix_key(raw: str) -> MatrixKey:
    """
    Parse a matrix such as "6 24; 1 13".

    A single row of k*k numbers ("6 24 1 13") is also accepted and
    folded into a k x k square.

    Raises:
        EmptyKeyError: If raw is blank
        KeyFormatError: If an entry is not an integer or the shape is ragged
    """
    if raw is None or not raw.strip():
        raise EmptyKeyError("No key matrix provided")

    rows = [_ints(row, "matrix entry") for row in _ROW_SPLIT.split(raw.strip()) if row.strip()]

    if len(rows) == 1:
        flat = rows[0]
        size = math.isqrt(len(flat))
        if size * size != len(flat):
            raise KeyFormatError(f"{len(flat)} entries cannot form a square matrix")
        rows = [flat[i * size:(i + 1) * size] for i in range(size)]

    if any(len(row) != len(rows[0]) for row in rows):
        raise KeyFormatError("Matrix rows must all have the same length")

    return MatrixKey(rows)


def parse_rsa_parameters(raw: str) -> Tuple[int, int, int]:
    """Parse "p q e" into a tuple of three integers."""
    values = _ints(raw, "RSA parameter")
    if len(values) != 3:
        raise KeyFormatError("RSA needs exactly three numbers: p, q and e")
    return values[0], values[1], values[2]
