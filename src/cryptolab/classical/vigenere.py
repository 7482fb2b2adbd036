"""
Vigenère Cipher

A Caesar shift that changes with every letter. The keyword is repeated
under the (letters-only) text and each key letter supplies the shift:

    E(x_i) = (x_i + k_i) mod 26
    D(y_i) = (y_i - k_i + 26) mod 26
"""

from typing import Optional

from ..config import MODULUS, CipherOptions
from ..core_math.alphabet import from_ordinal, strip_letters, to_ordinal
from ..keys.material import PolyalphabeticKey
from ..trace.outcome import CipherError, CipherMode, ErrorKind, Outcome, assemble, require_text
from ..trace.steps import TraceRecorder


def clean_keyword(key: PolyalphabeticKey) -> str:
    """
    Letters of the keyword, upper-cased.

    Raises:
        CipherError: EMPTY_INPUT if nothing was entered, INVALID_KEY if the
            keyword has no letters at all
    """
    require_text(key.word, "key")
    word = strip_letters(key.word)
    if not word:
        raise CipherError(
            ErrorKind.INVALID_KEY,
            "Key must contain at least one letter!",
            f"Key entered: \"{key.word}\"",
        )
    return word


def repeat_key(word: str, length: int) -> str:
    """Repeat word cyclically to exactly length letters."""
    return "".join(word[i % len(word)] for i in range(length))


def _process(text: str, key: PolyalphabeticKey, mode: CipherMode, trace: TraceRecorder) -> str:
    require_text(text)
    word = clean_keyword(key)
    clean_text = strip_letters(text)
    if not clean_text:
        raise CipherError(ErrorKind.EMPTY_INPUT, "Text must contain at least one letter!")

    repeated = repeat_key(word, len(clean_text))

    trace.note(f"{mode.noun.capitalize()} using Vigenère Cipher")
    trace.note(f"Key: \"{word}\"")
    trace.note(f"Text:         {clean_text}")
    trace.note(f"Repeated Key: {repeated}")
    trace.separator()

    operator = "+" if mode is CipherMode.ENCRYPT else "-"
    output = []
    for position, (text_char, key_char) in enumerate(zip(clean_text, repeated), start=1):
        x = to_ordinal(text_char)
        k = to_ordinal(key_char)
        if mode is CipherMode.ENCRYPT:
            value = (x + k) % MODULUS
        else:
            value = (x - k + MODULUS) % MODULUS

        result_char = from_ordinal(value)
        output.append(result_char)
        trace.note(
            f"Position {position}: '{text_char}' ({x}) {operator} '{key_char}' ({k}) "
            f"= {value} → '{result_char}'"
        )

    result = "".join(output)
    trace.separator()
    trace.note(f"Final result: {result}")
    return result


def encrypt(text: str, key: PolyalphabeticKey, options: Optional[CipherOptions] = None) -> Outcome:
    return assemble("vigenere", CipherMode.ENCRYPT,
                    lambda trace: _process(text, key, CipherMode.ENCRYPT, trace))


def decrypt(text: str, key: PolyalphabeticKey, options: Optional[CipherOptions] = None) -> Outcome:
    return assemble("vigenere", CipherMode.DECRYPT,
                    lambda trace: _process(text, key, CipherMode.DECRYPT, trace))
