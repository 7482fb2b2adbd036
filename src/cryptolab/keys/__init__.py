# Keys Module
"""
Key material records (material.py) and raw user-input parsers (parsing.py).
"""

from .material import (
    ShiftKey,
    AffineKey,
    PolyalphabeticKey,
    BinaryKey,
    RailCount,
    PermutationKey,
    MatrixKey,
    RSAKeyPair,
)

from .parsing import (
    KeyFormatError,
    EmptyKeyError,
    parse_int,
    parse_shift_key,
    parse_affine_key,
    parse_word_key,
    parse_binary_key,
    parse_rail_count,
    parse_permutation_key,
    parse_matrix_key,
    parse_rsa_parameters,
)

__all__ = [
    # Material
    'ShiftKey',
    'AffineKey',
    'PolyalphabeticKey',
    'BinaryKey',
    'RailCount',
    'PermutationKey',
    'MatrixKey',
    'RSAKeyPair',
    # Parsing
    'KeyFormatError',
    'EmptyKeyError',
    'parse_int',
    'parse_shift_key',
    'parse_affine_key',
    'parse_word_key',
    'parse_binary_key',
    'parse_rail_count',
    'parse_permutation_key',
    'parse_matrix_key',
    'parse_rsa_parameters',
]
