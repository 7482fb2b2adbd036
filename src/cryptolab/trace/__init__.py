# Trace Module
"""
Step-by-step trace model and outcome packaging:
- TraceStep variants (Note, Separator, Blank) and TraceRecorder - steps.py
- CipherMode, ErrorKind, CipherError, Outcome, assemble() - outcome.py
"""

from .steps import (
    TraceStep,
    Note,
    Separator,
    Blank,
    SEPARATOR,
    BLANK,
    TraceRecorder,
    note_texts,
)

from .outcome import (
    CipherMode,
    ErrorKind,
    CipherError,
    Outcome,
    KeyPairOutcome,
    assemble,
    assemble_key_pair,
    reject,
    require_text,
)

__all__ = [
    # Steps
    'TraceStep',
    'Note',
    'Separator',
    'Blank',
    'SEPARATOR',
    'BLANK',
    'TraceRecorder',
    'note_texts',
    # Outcomes
    'CipherMode',
    'ErrorKind',
    'CipherError',
    'Outcome',
    'KeyPairOutcome',
    'assemble',
    'assemble_key_pair',
    'reject',
    'require_text',
]
