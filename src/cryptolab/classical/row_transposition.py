"""
Row (Columnar) Transposition Cipher

The text is written row by row into a grid with one column per key number,
the last row padded with the filler letter. Ciphertext is the grid read
column by column, taking columns in ascending order of their key number.

    Key:   3 1 4 2
           A T T A
           C K A T
           D A W N
    ->     TKA ATN ACD TAW    (key 1, 2, 3, 4)

Decryption computes how many letters each column holds, fills the columns
back in key order and reads the grid row by row.
"""

from typing import List, Optional, Tuple

from ..config import DEFAULT_OPTIONS, CipherOptions
from ..core_math.alphabet import strip_letters
from ..keys.material import PermutationKey
from ..trace.outcome import CipherError, CipherMode, ErrorKind, Outcome, assemble, require_text
from ..trace.steps import TraceRecorder


def read_order(order: Tuple[int, ...]) -> List[int]:
    """Grid column indices sorted by ascending key number."""
    return sorted(range(len(order)), key=lambda index: order[index])


def column_lengths(length: int, columns: int) -> List[int]:
    """
    Letters held by each grid column when length letters are laid out row-major.

    Columns whose index is below ``length % columns`` get one extra letter.
    """
    full, extra = divmod(length, columns)
    return [full + 1 if index < extra else full for index in range(columns)]


def _validate(key: PermutationKey) -> None:
    if not key.order:
        raise CipherError(
            ErrorKind.INVALID_KEY,
            "Invalid key format! Use space-separated numbers (e.g., \"3 1 4 2\")",
        )
    bad = [value for value in key.order if value < 1]
    if bad:
        raise CipherError(
            ErrorKind.INVALID_KEY,
            "Key numbers must be positive!",
            "Offending values: " + " ".join(str(v) for v in bad),
        )
    if len(set(key.order)) != len(key.order):
        duplicates = sorted({v for v in key.order if key.order.count(v) > 1})
        raise CipherError(
            ErrorKind.INVALID_KEY,
            "Key numbers must be distinct!",
            "Repeated values: " + " ".join(str(v) for v in duplicates),
        )


def _grid_lines(trace: TraceRecorder, order: Tuple[int, ...], grid: List[List[str]]) -> None:
    trace.note("  " + " ".join(str(v) for v in order))
    for row in grid:
        trace.note("  " + " ".join(ch or "." for ch in row))


def _prepare(text: str, key: PermutationKey) -> str:
    require_text(text)
    _validate(key)
    clean_text = strip_letters(text)
    if not clean_text:
        raise CipherError(ErrorKind.EMPTY_INPUT, "Text must contain at least one letter!")
    return clean_text


def _encrypt(text: str, key: PermutationKey, options: CipherOptions, trace: TraceRecorder) -> str:
    clean_text = _prepare(text, key)
    order = key.order
    columns = len(order)
    rows = -(-len(clean_text) // columns)
    padding = rows * columns - len(clean_text)

    trace.note(f"Key order: {' '.join(str(v) for v in order)}")
    trace.note(f"Text length: {len(clean_text)}, Columns: {columns}, Rows: {rows}")
    if padding:
        trace.note(f"Padding last row with {padding} × '{options.filler}'")
    trace.separator()

    padded = clean_text + options.filler * padding
    grid = [list(padded[r * columns:(r + 1) * columns]) for r in range(rows)]

    trace.note("Grid created:")
    _grid_lines(trace, order, grid)
    trace.separator()

    output = []
    for col in read_order(order):
        column = "".join(grid[r][col] for r in range(rows))
        output.append(column)
        trace.note(f"Column with order {order[col]} (index {col}): {column}")

    result = "".join(output)
    trace.attach("grid", tuple(tuple(row) for row in grid))
    trace.separator()
    trace.note(f"Final encrypted text: {result}")
    return result


def _decrypt(text: str, key: PermutationKey, trace: TraceRecorder) -> str:
    clean_text = _prepare(text, key)
    order = key.order
    columns = len(order)
    rows = -(-len(clean_text) // columns)

    trace.note(f"Key order: {' '.join(str(v) for v in order)}")
    trace.note(f"Text length: {len(clean_text)}, Columns: {columns}, Rows: {rows}")
    trace.separator()

    lengths = column_lengths(len(clean_text), columns)
    trace.note("Column lengths:")
    for col, length in enumerate(lengths):
        trace.note(f"  Column {order[col]}: {length} characters")
    trace.separator()

    grid = [[""] * columns for _ in range(rows)]
    cursor = 0
    for col in read_order(order):
        column = clean_text[cursor:cursor + lengths[col]]
        cursor += lengths[col]
        for r, ch in enumerate(column):
            grid[r][col] = ch
        trace.note(f"Fill column {order[col]} (index {col}): {column}")

    trace.separator()
    trace.note("Reconstructed grid:")
    _grid_lines(trace, order, grid)
    trace.separator()

    output = []
    for r, row in enumerate(grid, start=1):
        row_text = "".join(row)
        output.append(row_text)
        trace.note(f"Row {r}: {row_text}")

    result = "".join(output)
    trace.attach("grid", tuple(tuple(row) for row in grid))
    trace.separator()
    trace.note(f"Final decrypted text: {result}")
    return result


def encrypt(text: str, key: PermutationKey, options: Optional[CipherOptions] = None) -> Outcome:
    options = options or DEFAULT_OPTIONS
    return assemble("row_transposition", CipherMode.ENCRYPT,
                    lambda trace: _encrypt(text, key, options, trace))


def decrypt(text: str, key: PermutationKey, options: Optional[CipherOptions] = None) -> Outcome:
    return assemble("row_transposition", CipherMode.DECRYPT,
                    lambda trace: _decrypt(text, key, trace))
