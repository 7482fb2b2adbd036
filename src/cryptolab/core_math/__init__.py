# Core Math Module
"""
Arithmetic shared by the cipher implementations:
- Number theory (gcd, extended gcd, modular inverse, square-and-multiply, primality)
- Matrix arithmetic modulo m (Hill cipher)
- Alphabet codec (A-Z <-> 0-25, text normalization)
"""

from .number_theory import (
    NoInverseError,
    gcd,
    extended_gcd,
    mod_inverse,
    mod_exp,
    is_prime,
    smallest_factor,
    coprime_values,
    random_prime_pair,
)

from .matrix import (
    determinant,
    adjugate,
    inverse_mod,
    multiply_vector_mod,
    reduce_mod,
    is_square,
)

from .alphabet import (
    is_letter,
    to_ordinal,
    from_ordinal,
    shift_letter,
    strip_letters,
    to_ordinals,
    from_ordinals,
)

__all__ = [
    # Number theory
    'NoInverseError',
    'gcd',
    'extended_gcd',
    'mod_inverse',
    'mod_exp',
    'is_prime',
    'smallest_factor',
    'coprime_values',
    'random_prime_pair',
    # Matrix
    'determinant',
    'adjugate',
    'inverse_mod',
    'multiply_vector_mod',
    'reduce_mod',
    'is_square',
    # Alphabet
    'is_letter',
    'to_ordinal',
    'from_ordinal',
    'shift_letter',
    'strip_letters',
    'to_ordinals',
    'from_ordinals',
]
