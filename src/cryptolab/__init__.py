"""
CryptoLab
=========
Nine textbook ciphers with a step-by-step trace of every calculation.

Substitution:   Caesar, Affine, Vigenère, Vernam
Transposition:  Rail Fence, Row (Columnar) Transposition
Polygraphic:    Playfair, Hill
Public key:     RSA

Every operation is a pure function returning an Outcome:

    >>> from cryptolab.classical import caesar
    >>> from cryptolab.keys import ShiftKey
    >>> caesar.encrypt("HELLO", ShiftKey(3)).output
    'KHOOR'

For teaching only. None of these ciphers protect real data.
"""

__version__ = "1.0.0"

from .config import CipherOptions
from .trace import CipherMode, ErrorKind, Outcome, KeyPairOutcome, TraceStep, Note, Separator, Blank
from .classical import caesar, affine, vigenere, vernam, rail_fence, row_transposition, playfair, hill
from .public_key import rsa

__all__ = [
    "CipherOptions",
    "CipherMode",
    "ErrorKind",
    "Outcome",
    "KeyPairOutcome",
    "TraceStep",
    "Note",
    "Separator",
    "Blank",
    "caesar",
    "affine",
    "vigenere",
    "vernam",
    "rail_fence",
    "row_transposition",
    "playfair",
    "hill",
    "rsa",
]
