# Public Key Module
"""
Public-key ciphers:
- RSA key generation, encryption and decryption with small teaching primes - rsa.py
"""

from . import rsa

__all__ = [
    'rsa',
]
