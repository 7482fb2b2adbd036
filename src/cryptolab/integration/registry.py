"""
Algorithm Registry

Lists the nine algorithms in the order the front-end shows its tabs and
turns raw form input (plain strings) into engine calls.

    >>> outcome = run("caesar", "encrypt", "HELLO", "3")
    >>> outcome.output
    'KHOOR'

Key strings are parsed here; a key that cannot be parsed comes back as a
failed Outcome (MALFORMED_KEY_FORMAT, or EMPTY_INPUT when nothing was
typed) instead of an exception, so the front-end can render it like any
other failure.
"""

import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ..classical import affine, caesar, hill, playfair, rail_fence, row_transposition, vernam, vigenere
from ..config import (
    DEFAULT_AFFINE_KEY,
    DEFAULT_CAESAR_SHIFT,
    DEFAULT_HILL_MATRIX,
    DEFAULT_RAILS,
    DEFAULT_RSA_PARAMETERS,
    CipherOptions,
)
from ..keys.parsing import (
    EmptyKeyError,
    KeyFormatError,
    parse_affine_key,
    parse_binary_key,
    parse_matrix_key,
    parse_permutation_key,
    parse_rail_count,
    parse_rsa_parameters,
    parse_shift_key,
    parse_word_key,
)
from ..public_key import rsa
from ..trace.outcome import CipherError, CipherMode, ErrorKind, Outcome, reject
from ..trace.steps import SEPARATOR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Algorithm:
    """One selectable algorithm."""
    id: str
    name: str
    module: ModuleType
    parse_key: Callable[[str], Any]
    key_hint: str
    # Key the front-end pre-fills, as raw text; None when the field starts empty
    default_key: Optional[str] = None


def _numbers(values) -> str:
    return " ".join(str(v) for v in values)


ALGORITHMS: Tuple[Algorithm, ...] = (
    Algorithm("caesar", "Caesar", caesar, parse_shift_key, "shift 0-25, e.g. \"3\"",
              str(DEFAULT_CAESAR_SHIFT)),
    Algorithm("playfair", "Playfair", playfair, parse_word_key, "keyword, e.g. \"MONARCHY\""),
    Algorithm("rowtrans", "Row Transposition", row_transposition, parse_permutation_key,
              "column order, e.g. \"3 1 4 2\""),
    Algorithm("hill", "Hill", hill, parse_matrix_key, "square matrix, e.g. \"6 24; 1 13\"",
              "; ".join(_numbers(row) for row in DEFAULT_HILL_MATRIX)),
    Algorithm("affine", "Affine", affine, parse_affine_key, "a and b, e.g. \"5 8\"",
              _numbers(DEFAULT_AFFINE_KEY)),
    Algorithm("vernam", "Vernam", vernam, parse_binary_key, "bit string, e.g. \"10110\""),
    Algorithm("vigenere", "Vigenère", vigenere, parse_word_key, "keyword, e.g. \"LEMON\""),
    Algorithm("railfence", "Rail Fence", rail_fence, parse_rail_count, "rails >= 2, e.g. \"3\"",
              str(DEFAULT_RAILS)),
    Algorithm("rsa", "RSA", rsa, parse_rsa_parameters, "p q e, e.g. \"61 53 17\"",
              _numbers(DEFAULT_RSA_PARAMETERS)),
)

_BY_ID: Dict[str, Algorithm] = {algorithm.id: algorithm for algorithm in ALGORITHMS}


def get_algorithm(algorithm_id: str) -> Algorithm:
    """
    Look up an algorithm by id.

    Raises:
        KeyError: If the id is unknown
    """
    try:
        return _BY_ID[algorithm_id]
    except KeyError:
        raise KeyError(f"Unknown algorithm '{algorithm_id}'. "
                       f"Choose one of: {', '.join(_BY_ID)}") from None


def _parse(algorithm: Algorithm, raw_key: str) -> Any:
    try:
        return algorithm.parse_key(raw_key)
    except EmptyKeyError as exc:
        raise CipherError(ErrorKind.EMPTY_INPUT, f"{exc}!") from None
    except KeyFormatError as exc:
        raise CipherError(
            ErrorKind.MALFORMED_KEY_FORMAT,
            f"{exc}!",
            f"Expected {algorithm.key_hint}",
        ) from None


def _run_rsa(mode: CipherMode, text: str, parameters: Tuple[int, int, int],
             options: Optional[CipherOptions]) -> Outcome:
    keys = rsa.generate_key_pair(*parameters)
    if not keys.ok:
        return Outcome(ok=False, output="", trace=keys.trace, error_kind=keys.error_kind)

    operation = rsa.encrypt if mode is CipherMode.ENCRYPT else rsa.decrypt
    outcome = operation(text, keys.key_pair, options)
    return Outcome(
        ok=outcome.ok,
        output=outcome.output,
        trace=keys.trace + (SEPARATOR,) + outcome.trace,
        error_kind=outcome.error_kind,
        artifacts=outcome.artifacts,
    )


def run(algorithm_id: str, mode: Union[CipherMode, str], text: str, raw_key: str,
        options: Optional[CipherOptions] = None) -> Outcome:
    """
    Run one algorithm on raw form input.

    Args:
        algorithm_id: One of the ids in ALGORITHMS
        mode: CipherMode or "encrypt" / "decrypt"
        text: Text as typed by the user
        raw_key: Key as typed by the user (see each Algorithm.key_hint)
        options: Optional CipherOptions

    Returns:
        The Outcome of the cipher. For RSA the trace starts with the key
        generation steps.

    Raises:
        KeyError: If algorithm_id is unknown
        ValueError: If mode is not a valid CipherMode value
    """
    algorithm = get_algorithm(algorithm_id)
    mode = CipherMode(mode)
    logger.debug("dispatching %s %s", algorithm.id, mode.value)

    try:
        key = _parse(algorithm, raw_key)
    except CipherError as exc:
        return reject(algorithm.id, mode, exc)

    if algorithm.module is rsa:
        return _run_rsa(mode, text, key, options)

    operation = algorithm.module.encrypt if mode is CipherMode.ENCRYPT else algorithm.module.decrypt
    return operation(text, key, options)
