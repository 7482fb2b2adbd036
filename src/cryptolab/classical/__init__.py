# Classical Ciphers Module
"""
Textbook ciphers, each exposing encrypt(text, key, options) and
decrypt(text, key, options) returning an Outcome with a full trace:

Substitution:
- Caesar - caesar.py
- Affine - affine.py
- Vigenère - vigenere.py
- Vernam (binary one-time pad) - vernam.py

Transposition:
- Rail Fence - rail_fence.py
- Row (Columnar) Transposition - row_transposition.py

Polygraphic:
- Playfair - playfair.py
- Hill - hill.py
"""

from . import (
    affine,
    caesar,
    hill,
    playfair,
    rail_fence,
    row_transposition,
    vernam,
    vigenere,
)

__all__ = [
    'caesar',
    'affine',
    'vigenere',
    'vernam',
    'rail_fence',
    'row_transposition',
    'playfair',
    'hill',
]
