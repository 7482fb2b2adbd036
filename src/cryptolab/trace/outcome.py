"""
Outcome Assembler

Packages the result of one cipher call: output text, ordered trace and,
on failure, a classified error.

Error flow:
    Validation code raises CipherError(kind, message, *diagnostics).
    assemble() catches it, writes the message and diagnostics into the
    trace, and returns a failed Outcome with no output. Anything that is
    not a CipherError is a bug and propagates to the caller.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Tuple

from .steps import TraceRecorder, TraceStep, note_texts

logger = logging.getLogger(__name__)


# ============================================================================
# Modes and error kinds
# ============================================================================

class CipherMode(Enum):
    """Direction of a cipher operation."""
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @property
    def noun(self) -> str:
        return "encryption" if self is CipherMode.ENCRYPT else "decryption"


class ErrorKind(Enum):
    """Classified reasons an operation can fail."""

    # Key breaks a structural or mathematical rule of its algorithm
    INVALID_KEY = "invalid_key"
    # Vernam key has fewer bits than the text
    KEY_TOO_SHORT = "key_too_short"
    # Vernam operand has characters outside {0, 1}
    NON_BINARY_INPUT = "non_binary_input"
    # RSA numeral does not fit below the modulus (or into one letter)
    VALUE_TOO_LARGE = "value_too_large"
    # Text or key missing entirely
    EMPTY_INPUT = "empty_input"
    # Raw key string cannot be parsed into the expected structure
    MALFORMED_KEY_FORMAT = "malformed_key_format"
    # RSA ciphertext token cannot be parsed in the selected encoding
    MALFORMED_CIPHERTEXT = "malformed_ciphertext"


class CipherError(Exception):
    """
    Validation failure inside a cipher operation.

    Args:
        kind: Classified error kind
        message: Headline for the trace (written as "ERROR: <message>")
        *diagnostics: Extra trace lines explaining the failed check
    """

    def __init__(self, kind: ErrorKind, message: str, *diagnostics: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.diagnostics = diagnostics


# ============================================================================
# Outcomes
# ============================================================================

@dataclass(frozen=True)
class Outcome:
    """
    Result of one encrypt/decrypt call.

    ``output`` is empty whenever ``ok`` is False.
    """
    ok: bool
    output: str
    trace: Tuple[TraceStep, ...]
    error_kind: Optional[ErrorKind] = None
    artifacts: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def notes(self) -> List[str]:
        """Text lines of the trace, separators and blanks dropped."""
        return note_texts(self.trace)


@dataclass(frozen=True)
class KeyPairOutcome:
    """Result of RSA key generation: a key pair or a classified error."""
    ok: bool
    key_pair: Optional[Any]
    trace: Tuple[TraceStep, ...]
    error_kind: Optional[ErrorKind] = None

    @property
    def notes(self) -> List[str]:
        return note_texts(self.trace)


def require_text(text: Optional[str], what: str = "text") -> str:
    """Fail with EMPTY_INPUT if text is missing or blank."""
    if text is None or not text.strip():
        raise CipherError(ErrorKind.EMPTY_INPUT, f"No {what} provided!")
    return text


def _run(name: str, action: str, body: Callable[[TraceRecorder], Any]):
    """Run body against a fresh trace; returns (trace, value, error_kind)."""
    trace = TraceRecorder()
    logger.debug("%s %s started", name, action)

    try:
        value = body(trace)
    except CipherError as exc:
        trace.error(exc.message, *exc.diagnostics)
        logger.info("%s %s rejected: %s (%s)", name, action, exc.message, exc.kind.value)
        return trace, None, exc.kind

    logger.debug("%s %s finished with %d trace steps", name, action, len(trace))
    return trace, value, None


def assemble(name: str, mode: CipherMode, body: Callable[[TraceRecorder], str]) -> Outcome:
    """
    Run a cipher body against a fresh trace and package the Outcome.

    Args:
        name: Algorithm name, for logging
        mode: Direction of the operation, for logging
        body: Callable that records steps and returns the output text

    Returns:
        Successful Outcome with output and artifacts, or a failed Outcome
        carrying the error kind and the trace up to the failed check
    """
    trace, output, error_kind = _run(name, mode.value, body)

    if error_kind is not None:
        return Outcome(ok=False, output="", trace=trace.steps, error_kind=error_kind)

    return Outcome(
        ok=True,
        output=output,
        trace=trace.steps,
        artifacts=MappingProxyType(trace.artifacts),
    )


def assemble_key_pair(name: str, body: Callable[[TraceRecorder], Any]) -> KeyPairOutcome:
    """Like assemble(), for a body that derives a key pair instead of text."""
    trace, key_pair, error_kind = _run(name, "key generation", body)

    if error_kind is not None:
        return KeyPairOutcome(ok=False, key_pair=None, trace=trace.steps, error_kind=error_kind)

    return KeyPairOutcome(ok=True, key_pair=key_pair, trace=trace.steps)


def reject(name: str, mode: CipherMode, error: CipherError) -> Outcome:
    """Failed Outcome for an error caught before any cipher ran (e.g. an unparseable key)."""
    trace = TraceRecorder()
    trace.error(error.message, *error.diagnostics)
    logger.info("%s %s rejected: %s (%s)", name, mode.value, error.message, error.kind.value)
    return Outcome(ok=False, output="", trace=trace.steps, error_kind=error.kind)
