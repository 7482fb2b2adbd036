"""
Rail Fence Cipher

Writes the text in a zig-zag across r rails, bouncing off the top and
bottom rail, then reads the rails top to bottom:

    W . . . E . . . C      (3 rails)
    . E . R . D . S . ...
    . . A . . . I . . .

Decryption rebuilds the same zig-zag pattern, works out how many letters
each rail holds, slices the ciphertext into those runs and walks the
pattern again taking one letter from the visited rail each time.
"""

from typing import List, Optional

from ..config import CipherOptions
from ..core_math.alphabet import strip_letters
from ..keys.material import RailCount
from ..trace.outcome import CipherError, CipherMode, ErrorKind, Outcome, assemble, require_text
from ..trace.steps import TraceRecorder


def zigzag_pattern(length: int, rails: int) -> List[int]:
    """
    Rail index visited by each of length characters.

    Example:
        >>> zigzag_pattern(6, 3)
        [0, 1, 2, 1, 0, 1]
    """
    pattern = []
    rail, direction = 0, 1
    for _ in range(length):
        pattern.append(rail)
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1
        rail += direction
    return pattern


def rail_lengths(pattern: List[int], rails: int) -> List[int]:
    """Number of characters that land on each rail."""
    counts = [0] * rails
    for rail in pattern:
        counts[rail] += 1
    return counts


def _prepare(text: str, key: RailCount) -> str:
    require_text(text)
    if key.rails < 2:
        raise CipherError(
            ErrorKind.INVALID_KEY,
            "Number of rails must be at least 2!",
            f"Got rails = {key.rails}",
        )
    clean_text = strip_letters(text)
    if not clean_text:
        raise CipherError(ErrorKind.EMPTY_INPUT, "Text must contain at least one letter!")
    return clean_text


def _encrypt(text: str, key: RailCount, trace: TraceRecorder) -> str:
    clean_text = _prepare(text, key)
    rails = key.rails

    trace.note(f"Encrypting with {rails} rails")
    trace.note(f"Text: {clean_text}")
    trace.separator()
    trace.note("Building the rail fence pattern:")

    fence: List[List[str]] = [[] for _ in range(rails)]
    for index, (ch, rail) in enumerate(zip(clean_text, zigzag_pattern(len(clean_text), rails)), start=1):
        fence[rail].append(ch)
        visual = " ".join(ch if r == rail else "." for r in range(rails))
        trace.note(f"  Char {index} '{ch}' → Rail {rail + 1}: {visual}")

    trace.separator()
    trace.note("Reading rails from top to bottom:")
    rail_texts = ["".join(rail) for rail in fence]
    for index, rail_text in enumerate(rail_texts, start=1):
        trace.note(f"  Rail {index}: {rail_text}")

    result = "".join(rail_texts)
    trace.attach("rails", tuple(rail_texts))
    trace.separator()
    trace.note(f"Final encrypted text: {result}")
    return result


def _decrypt(text: str, key: RailCount, trace: TraceRecorder) -> str:
    clean_text = _prepare(text, key)
    rails = key.rails

    trace.note(f"Decrypting with {rails} rails")
    trace.note(f"Ciphertext: {clean_text}")
    trace.separator()

    pattern = zigzag_pattern(len(clean_text), rails)
    lengths = rail_lengths(pattern, rails)

    trace.note("Rail pattern and lengths:")
    for index, length in enumerate(lengths, start=1):
        trace.note(f"  Rail {index}: {length} characters")
    trace.separator()

    runs: List[str] = []
    start = 0
    for index, length in enumerate(lengths, start=1):
        runs.append(clean_text[start:start + length])
        start += length
        trace.note(f"  Rail {index} filled: {runs[-1]}")

    trace.separator()
    trace.note("Reading in zigzag pattern:")

    cursors = [0] * rails
    output = []
    for position, rail in enumerate(pattern, start=1):
        ch = runs[rail][cursors[rail]]
        cursors[rail] += 1
        output.append(ch)
        trace.note(f"  Position {position}: '{ch}' from rail {rail + 1}")

    result = "".join(output)
    trace.attach("rails", tuple(runs))
    trace.separator()
    trace.note(f"Final decrypted text: {result}")
    return result


def encrypt(text: str, key: RailCount, options: Optional[CipherOptions] = None) -> Outcome:
    return assemble("rail_fence", CipherMode.ENCRYPT, lambda trace: _encrypt(text, key, trace))


def decrypt(text: str, key: RailCount, options: Optional[CipherOptions] = None) -> Outcome:
    return assemble("rail_fence", CipherMode.DECRYPT, lambda trace: _decrypt(text, key, trace))
