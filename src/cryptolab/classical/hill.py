"""
Hill Cipher

Treats each block of k letters as a column vector and multiplies it by a
k x k key matrix modulo 26:

    C = K · P mod 26
    P = K^-1 · C mod 26

K^-1 = det(K)^-1 · adj(K) mod 26, which exists only when
gcd(det(K) mod 26, 26) = 1. The classroom key is 2x2, but any square
matrix works.
"""

from typing import Optional, Sequence

from ..config import DEFAULT_OPTIONS, MODULUS, CipherOptions
from ..core_math.alphabet import from_ordinals, strip_letters, to_ordinals
from ..core_math.matrix import determinant, inverse_mod, is_square, multiply_vector_mod, reduce_mod
from ..core_math.number_theory import NoInverseError, gcd, mod_inverse
from ..keys.material import MatrixKey
from ..trace.outcome import CipherError, CipherMode, ErrorKind, Outcome, assemble, require_text
from ..trace.steps import TraceRecorder


def _matrix_lines(trace: TraceRecorder, matrix: Sequence[Sequence[int]]) -> None:
    for row in matrix:
        trace.note("  [" + ", ".join(str(v) for v in row) + "]")


def _product_lines(trace: TraceRecorder, matrix, vector, result, letters: str) -> None:
    middle = len(matrix) // 2
    for i, row in enumerate(matrix):
        row_text = "[" + ", ".join(str(v) for v in row) + "]"
        times = "×" if i == middle else " "
        equals = "=" if i == middle else " "
        tail = f" = \"{letters}\"" if i == middle else ""
        trace.note(f"  {row_text} {times} [{vector[i]}] {equals} [{result[i]}]{tail}")


def _validate_shape(key: MatrixKey) -> None:
    if not is_square(key.rows):
        shape = f"{len(key.rows)}×{len(key.rows[0]) if key.rows else 0}"
        raise CipherError(
            ErrorKind.INVALID_KEY,
            "Key matrix must be square!",
            f"Got a {shape} matrix",
        )


def _process(text: str, key: MatrixKey, mode: CipherMode,
             options: CipherOptions, trace: TraceRecorder) -> str:
    require_text(text)
    _validate_shape(key)

    size = key.size
    clean_text = strip_letters(text)
    if not clean_text:
        raise CipherError(ErrorKind.EMPTY_INPUT, "Text must contain at least one letter!")

    trace.note(f"Key Matrix ({size}×{size}):")
    _matrix_lines(trace, key.rows)
    trace.separator()

    det = determinant(key.rows)
    det_mod = det % MODULUS
    working = reduce_mod(key.rows, MODULUS)

    if mode is CipherMode.DECRYPT:
        try:
            working = inverse_mod(key.rows, MODULUS)
        except NoInverseError:
            raise CipherError(
                ErrorKind.INVALID_KEY,
                "Key matrix is not invertible!",
                f"Determinant = {det}, determinant mod {MODULUS} = {det_mod}",
                f"gcd({det_mod}, {MODULUS}) = {gcd(det_mod, MODULUS)} ≠ 1, so it has no inverse mod {MODULUS}",
            ) from None

        det_inv = mod_inverse(det_mod, MODULUS)
        trace.note(f"Determinant = {det}, mod {MODULUS} = {det_mod}")
        trace.note(f"Inverse of determinant: {det_inv} (since {det_mod} × {det_inv} mod {MODULUS} = 1)")
        trace.note("Inverse Key Matrix (for decryption):")
        _matrix_lines(trace, working)
        trace.separator()
    elif gcd(det_mod, MODULUS) != 1:
        trace.note(
            f"Warning: determinant mod {MODULUS} = {det_mod} has no inverse; "
            f"this ciphertext cannot be decrypted"
        )
        trace.separator()

    padding = -len(clean_text) % size
    padded = clean_text + options.filler * padding

    trace.note(f"Input text: {padded}")
    if padding:
        trace.note(f"Padded with {padding} × '{options.filler}' to a multiple of {size}")
    trace.note(f"Processing in blocks of {size}:")
    trace.separator()

    output = []
    for start in range(0, len(padded), size):
        block = padded[start:start + size]
        vector = to_ordinals(block)
        result = multiply_vector_mod(working, vector, MODULUS)
        letters = from_ordinals(result)

        trace.note(f"Block \"{block}\" = [{', '.join(str(v) for v in vector)}]")
        _product_lines(trace, working, vector, result, letters)
        output.append(letters)

    result_text = "".join(output)
    trace.attach("matrix", working)
    trace.separator()
    trace.note(f"Final result: {result_text}")
    return result_text


def encrypt(text: str, key: MatrixKey, options: Optional[CipherOptions] = None) -> Outcome:
    options = options or DEFAULT_OPTIONS
    return assemble("hill", CipherMode.ENCRYPT,
                    lambda trace: _process(text, key, CipherMode.ENCRYPT, options, trace))


def decrypt(text: str, key: MatrixKey, options: Optional[CipherOptions] = None) -> Outcome:
    options = options or DEFAULT_OPTIONS
    return assemble("hill", CipherMode.DECRYPT,
                    lambda trace: _process(text, key, CipherMode.DECRYPT, options, trace))
