"""
Playfair Cipher

Encrypts pairs of letters (digraphs) using a 5x5 square built from a
keyword. J is folded into I so the alphabet fits 25 cells.

Rules per digraph:
    Same row      -> each letter moves one column right (left to decrypt)
    Same column   -> each letter moves one row down (up to decrypt)
    Rectangle     -> each letter takes the column of the other letter

Preparing the text: letters only, J -> I, split into pairs. When both
letters of a pending pair are equal the filler X is put between them, and
an odd letter left over at the end is padded with X.
"""

from typing import Dict, List, Optional, Tuple

from ..config import ALPHABET, DEFAULT_OPTIONS, PLAYFAIR_MERGED, PLAYFAIR_SIZE, CipherOptions
from ..core_math.alphabet import strip_letters
from ..keys.material import PolyalphabeticKey
from ..trace.outcome import CipherError, CipherMode, ErrorKind, Outcome, assemble, require_text
from ..trace.steps import TraceRecorder

Square = Tuple[Tuple[str, ...], ...]


def _fold(text: str) -> str:
    merged, into = PLAYFAIR_MERGED
    return strip_letters(text).replace(merged, into)


def build_square(keyword: str) -> Square:
    """
    5x5 Playfair square: unique keyword letters, then the rest of the alphabet.

    Example:
        >>> build_square("MONARCHY")[0]
        ('M', 'O', 'N', 'A', 'R')
    """
    seen: List[str] = []
    for ch in _fold(keyword) + ALPHABET:
        if ch != PLAYFAIR_MERGED[0] and ch not in seen:
            seen.append(ch)
    return tuple(
        tuple(seen[row * PLAYFAIR_SIZE:(row + 1) * PLAYFAIR_SIZE])
        for row in range(PLAYFAIR_SIZE)
    )


def _positions(square: Square) -> Dict[str, Tuple[int, int]]:
    return {ch: (r, c) for r, row in enumerate(square) for c, ch in enumerate(row)}


def prepare_digraphs(text: str, filler: str = "X") -> List[str]:
    """
    Split text into Playfair digraphs.

    Example:
        >>> prepare_digraphs("balloon")
        ['BA', 'LX', 'LO', 'ON']
    """
    clean = _fold(text)
    filler = _fold(filler)
    pairs = []
    i = 0
    while i < len(clean):
        first = clean[i]
        second = clean[i + 1] if i + 1 < len(clean) else filler
        if first == second:
            second = filler
            i += 1
        else:
            i += 2
        pairs.append(first + second)
    return pairs


def transform_digraph(pair: str, square: Square, mode: CipherMode) -> Tuple[str, str]:
    """
    Apply the Playfair rules to one digraph.

    Returns:
        Tuple (result pair, explanation for the trace)
    """
    positions = _positions(square)
    (row1, col1), (row2, col2) = positions[pair[0]], positions[pair[1]]
    step = 1 if mode is CipherMode.ENCRYPT else -1
    size = PLAYFAIR_SIZE

    if row1 == row2:
        first = square[row1][(col1 + step) % size]
        second = square[row2][(col2 + step) % size]
        explanation = f"Same row [{row1}]: shift columns {'right' if step > 0 else 'left'}"
    elif col1 == col2:
        first = square[(row1 + step) % size][col1]
        second = square[(row2 + step) % size][col2]
        explanation = f"Same column [{col1}]: shift rows {'down' if step > 0 else 'up'}"
    else:
        first = square[row1][col2]
        second = square[row2][col1]
        explanation = (
            f"Rectangle: swap columns [{pair[0]}({row1},{col1}) → {first}, "
            f"{pair[1]}({row2},{col2}) → {second}]"
        )

    return first + second, explanation


def _process(text: str, key: PolyalphabeticKey, mode: CipherMode,
             options: CipherOptions, trace: TraceRecorder) -> str:
    require_text(text)
    require_text(key.word, "key")
    if not strip_letters(key.word):
        raise CipherError(
            ErrorKind.INVALID_KEY,
            "Key must contain at least one letter!",
            f"Key entered: \"{key.word}\"",
        )
    if not strip_letters(text):
        raise CipherError(ErrorKind.EMPTY_INPUT, "Text must contain at least one letter!")

    square = build_square(key.word)
    trace.attach("matrix", square)

    trace.note(f"Key: \"{key.word}\"")
    trace.note(f"Generated {PLAYFAIR_SIZE}×{PLAYFAIR_SIZE} Playfair Matrix (J merged with I):")
    for row in square:
        trace.note("  " + " ".join(row))
    trace.separator()

    pairs = prepare_digraphs(text, options.filler)
    trace.note(f"Prepared text into pairs: {' '.join(pairs)}")
    trace.separator()

    output = []
    for index, pair in enumerate(pairs, start=1):
        result, explanation = transform_digraph(pair, square, mode)
        output.append(result)
        trace.note(f"Pair {index}: \"{pair}\" → \"{result}\" ({explanation})")

    result = "".join(output)
    trace.separator()
    trace.note(f"Final result: {result}")
    return result


def encrypt(text: str, key: PolyalphabeticKey, options: Optional[CipherOptions] = None) -> Outcome:
    options = options or DEFAULT_OPTIONS
    return assemble("playfair", CipherMode.ENCRYPT,
                    lambda trace: _process(text, key, CipherMode.ENCRYPT, options, trace))


def decrypt(text: str, key: PolyalphabeticKey, options: Optional[CipherOptions] = None) -> Outcome:
    options = options or DEFAULT_OPTIONS
    return assemble("playfair", CipherMode.DECRYPT,
                    lambda trace: _process(text, key, CipherMode.DECRYPT, options, trace))
