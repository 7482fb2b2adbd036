"""
Caesar Cipher

Shifts every letter a fixed number of positions along the alphabet:

    E(x) = (x + k) mod 26
    D(y) = (y - k) mod 26

Letters keep their case; anything that is not a letter is copied through
and noted as untouched.
"""

from typing import Optional

from ..config import MODULUS, CipherOptions
from ..core_math.alphabet import is_letter, shift_letter, to_ordinal
from ..keys.material import ShiftKey
from ..trace.outcome import CipherError, CipherMode, ErrorKind, Outcome, assemble, require_text
from ..trace.steps import TraceRecorder


def _validate(key: ShiftKey) -> None:
    if not 0 <= key.amount < MODULUS:
        raise CipherError(
            ErrorKind.INVALID_KEY,
            f"Shift amount must be between 0 and {MODULUS - 1}!",
            f"Got shift = {key.amount}",
        )


def _process(text: str, key: ShiftKey, mode: CipherMode, trace: TraceRecorder) -> str:
    require_text(text)
    _validate(key)

    shift = key.amount if mode is CipherMode.ENCRYPT else -key.amount
    direction = "forward" if shift > 0 else "backward"
    if shift == 0:
        direction = "nowhere"

    trace.note(f"Starting {mode.noun} with shift {key.amount}")
    trace.note(f"Shift direction: {direction} by {abs(shift)} positions")
    trace.separator()

    output = []
    for position, ch in enumerate(text, start=1):
        if not is_letter(ch):
            output.append(ch)
            trace.note(f"Position {position}: '{ch}' is not a letter, keep as is")
            continue

        shifted = shift_letter(ch, shift)
        output.append(shifted)
        trace.note(
            f"Position {position}: '{ch}' (pos {to_ordinal(ch)}) {'+' if shift >= 0 else '-'} "
            f"{abs(shift)} = '{shifted}' (pos {to_ordinal(shifted)})"
        )

    result = "".join(output)
    trace.separator()
    trace.note(f"Final result: {result}")
    return result


def encrypt(text: str, key: ShiftKey, options: Optional[CipherOptions] = None) -> Outcome:
    """Shift every letter of text forward by key.amount."""
    return assemble("caesar", CipherMode.ENCRYPT,
                    lambda trace: _process(text, key, CipherMode.ENCRYPT, trace))


def decrypt(text: str, key: ShiftKey, options: Optional[CipherOptions] = None) -> Outcome:
    """Shift every letter of text backward by key.amount."""
    return assemble("caesar", CipherMode.DECRYPT,
                    lambda trace: _process(text, key, CipherMode.DECRYPT, trace))
