"""
Vernam Cipher (One-Time Pad), binary form

Text and key are strings of bits; whitespace is ignored. Each output bit
is the XOR of the text bit and the key bit at the same position:

    0⊕0=0, 0⊕1=1, 1⊕0=1, 1⊕1=0

XOR is its own inverse, so encryption and decryption are the same
operation with the same key.

Security Note:
    A one-time pad is only unbreakable if the key is truly random, at least
    as long as the message and never reused. None of that is enforced here.
"""

import re
from typing import Optional

from ..config import CipherOptions
from ..keys.material import BinaryKey
from ..trace.outcome import CipherError, CipherMode, ErrorKind, Outcome, assemble, require_text
from ..trace.steps import TraceRecorder

_BINARY = re.compile(r"^[01\s]+$")
_WHITESPACE = re.compile(r"\s")


def clean_bits(raw: str) -> str:
    """Drop whitespace from a bit string."""
    return _WHITESPACE.sub("", raw)


def xor_bits(text_bits: str, key_bits: str) -> str:
    """XOR two bit strings position by position (stops at the shorter one)."""
    return "".join("0" if t == k else "1" for t, k in zip(text_bits, key_bits))


def _process(text: str, key: BinaryKey, mode: CipherMode, trace: TraceRecorder) -> str:
    require_text(text)
    require_text(key.bits, "key")

    if not _BINARY.match(text):
        raise CipherError(ErrorKind.NON_BINARY_INPUT, "Input text must be binary (only 0s and 1s)!")
    if not _BINARY.match(key.bits):
        raise CipherError(ErrorKind.NON_BINARY_INPUT, "Key must be binary (only 0s and 1s)!")

    text_bits = clean_bits(text)
    key_bits = clean_bits(key.bits)

    if len(key_bits) < len(text_bits):
        raise CipherError(
            ErrorKind.KEY_TOO_SHORT,
            "Key must be at least as long as the text!",
            f"Text length: {len(text_bits)}, Key length: {len(key_bits)}",
        )

    pad = key_bits[:len(text_bits)]
    trace.note("Vernam Cipher (One-Time Pad) - Binary XOR")
    trace.note(f"Text: {text_bits}")
    trace.note(f"Key:  {pad}")
    if len(key_bits) > len(text_bits):
        trace.note(f"Only the first {len(text_bits)} of {len(key_bits)} key bits are used")
    trace.note("Operation: XOR (⊕)")
    trace.separator()
    trace.note("XOR Truth Table: 0⊕0=0, 0⊕1=1, 1⊕0=1, 1⊕1=0")
    trace.separator()

    result = xor_bits(text_bits, pad)
    for position, (t, k, r) in enumerate(zip(text_bits, pad, result), start=1):
        trace.note(f"Position {position}: {t} ⊕ {k} = {r}")

    trace.separator()
    trace.note(f"Result: {result}")
    trace.blank()
    if mode is CipherMode.ENCRYPT:
        trace.note("Note: To decrypt, XOR the ciphertext with the same key")
    else:
        trace.note("Note: Decryption is the same XOR as encryption")
    return result


def encrypt(text: str, key: BinaryKey, options: Optional[CipherOptions] = None) -> Outcome:
    return assemble("vernam", CipherMode.ENCRYPT,
                    lambda trace: _process(text, key, CipherMode.ENCRYPT, trace))


def decrypt(text: str, key: BinaryKey, options: Optional[CipherOptions] = None) -> Outcome:
    return assemble("vernam", CipherMode.DECRYPT,
                    lambda trace: _process(text, key, CipherMode.DECRYPT, trace))
