"""
Affine Cipher

    E(x) = (a*x + b) mod 26
    D(y) = a^-1 * (y - b) mod 26

The multiplier a must be coprime with 26, otherwise two letters collide
and the inverse a^-1 does not exist. Only twelve values qualify.
Non-letters pass through unchanged; letters keep their case.
"""

from typing import Optional

from ..config import MODULUS, CipherOptions
from ..core_math.alphabet import from_ordinal, is_letter, to_ordinal
from ..core_math.number_theory import coprime_values, gcd, mod_inverse
from ..keys.material import AffineKey
from ..trace.outcome import CipherError, CipherMode, ErrorKind, Outcome, assemble, require_text
from ..trace.steps import TraceRecorder

VALID_MULTIPLIERS = tuple(coprime_values(MODULUS))


def _validate(key: AffineKey) -> None:
    divisor = gcd(key.a, MODULUS)
    if divisor != 1:
        raise CipherError(
            ErrorKind.INVALID_KEY,
            f"Key A ({key.a}) must be coprime with {MODULUS}!",
            f"gcd({key.a}, {MODULUS}) = {divisor} ≠ 1",
            "Valid values for A: " + ", ".join(str(a) for a in VALID_MULTIPLIERS),
        )


def _process(text: str, key: AffineKey, mode: CipherMode, trace: TraceRecorder) -> str:
    require_text(text)
    _validate(key)

    a, b = key.a % MODULUS, key.b % MODULUS
    trace.note(f"Key A: {key.a}, Key B: {key.b}")
    trace.note(f"gcd({key.a}, {MODULUS}) = 1 ✓")
    trace.note(f"Formula for encryption: E(x) = ({a}x + {b}) mod {MODULUS}")

    a_inv = None
    if mode is CipherMode.DECRYPT:
        a_inv = mod_inverse(a, MODULUS)
        trace.note(f"Modular inverse of {a}: {a_inv} (since {a} × {a_inv} mod {MODULUS} = 1)")
        trace.note(f"Formula for decryption: D(y) = {a_inv}(y - {b}) mod {MODULUS}")
    trace.separator()

    output = []
    for position, ch in enumerate(text, start=1):
        if not is_letter(ch):
            output.append(ch)
            trace.note(f"Position {position}: '{ch}' is not a letter, keep as is")
            continue

        x = to_ordinal(ch)
        if a_inv is None:
            y = (a * x + b) % MODULUS
            formula = f"({a}×{x} + {b}) mod {MODULUS}"
        else:
            y = (a_inv * (x - b)) % MODULUS
            formula = f"{a_inv}×({x} - {b}) mod {MODULUS}"

        result_char = from_ordinal(y, upper=ch.isupper())
        output.append(result_char)
        trace.note(f"Position {position}: '{ch}' ({x}) → {formula} = {y} → '{result_char}'")

    result = "".join(output)
    trace.separator()
    trace.note(f"Final result: {result}")
    return result


def encrypt(text: str, key: AffineKey, options: Optional[CipherOptions] = None) -> Outcome:
    return assemble("affine", CipherMode.ENCRYPT,
                    lambda trace: _process(text, key, CipherMode.ENCRYPT, trace))


def decrypt(text: str, key: AffineKey, options: Optional[CipherOptions] = None) -> Outcome:
    return assemble("affine", CipherMode.DECRYPT,
                    lambda trace: _process(text, key, CipherMode.DECRYPT, trace))
