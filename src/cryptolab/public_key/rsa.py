"""
RSA, letter by letter

Key generation from two primes p, q and a public exponent e:
1. n = p × q
2. φ(n) = (p-1) × (q-1)
3. check 1 < e < φ(n) and gcd(e, φ(n)) = 1
4. d = e^-1 mod φ(n)   (Extended Euclidean Algorithm)

Public key (n, e), private key (n, d):
    C = M^e mod n
    M = C^d mod n

Each letter is encrypted on its own, using either its alphabet ordinal
(A=0) or, with ``char_codes``, its character code (A=65). Every value must
be below n.

Ciphertext numerals can be written three ways:
- base-26 letter tokens, A=0 ... Z=25, BA=26 (default, lossless for any n)
- decimal numbers
- exactly one letter per numeral (only while n <= 26)

Security Note:
    Encrypting single letters with tiny primes is a classroom device.
    Identical letters give identical ciphertext and n factors instantly.
"""

import sys
from typing import List, Optional

from ..config import ALPHABET, DEFAULT_OPTIONS, MODULUS, SINGLE_LETTER_MAX_MODULUS, CipherOptions
from ..core_math.alphabet import from_ordinal, is_letter, strip_letters, to_ordinal
from ..core_math.number_theory import NoInverseError, gcd, is_prime, mod_exp, mod_inverse, smallest_factor
from ..keys.material import RSAKeyPair
from ..trace.outcome import (
    CipherError,
    CipherMode,
    ErrorKind,
    KeyPairOutcome,
    Outcome,
    assemble,
    assemble_key_pair,
    require_text,
)
from ..trace.steps import TraceRecorder


# ============================================================================
# Numeral <-> letter token encoding
# ============================================================================

def number_to_letters(number: int) -> str:
    """
    Write a non-negative integer in base 26 with digits A-Z.

    Example:
        >>> number_to_letters(0), number_to_letters(25), number_to_letters(2790)
        ('A', 'Z', 'EDI')
    """
    if number < 0:
        raise ValueError("Only non-negative numbers can be written as letters")
    if number == 0:
        return ALPHABET[0]

    digits = []
    while number > 0:
        number, remainder = divmod(number, MODULUS)
        digits.append(ALPHABET[remainder])
    return "".join(reversed(digits))


def letters_to_number(letters: str) -> int:
    """Inverse of number_to_letters (case-insensitive)."""
    value = 0
    for ch in letters:
        value = value * MODULUS + to_ordinal(ch)
    return value


# ============================================================================
# Key generation
# ============================================================================

def _check_prime(name: str, value: int) -> None:
    if is_prime(value):
        return
    factor = smallest_factor(value)
    details = [f"{value} = {factor} × {value // factor}"] if factor else [f"{value} < 2"]
    raise CipherError(ErrorKind.INVALID_KEY, f"{name} = {value} is not a prime number!", *details)


def _generate(p: int, q: int, e: int, trace: TraceRecorder) -> RSAKeyPair:
    _check_prime("p", p)
    _check_prime("q", q)
    if p == q:
        raise CipherError(
            ErrorKind.INVALID_KEY,
            "p and q must be different primes!",
            f"p = q = {p} would make n = p² trivially factorable",
        )

    trace.note("RSA Key Generation")
    trace.separator()
    trace.note("Step 1: Select two prime numbers")
    trace.note(f"  p = {p}")
    trace.note(f"  q = {q}")
    trace.separator()

    n = p * q
    trace.note("Step 2: Calculate n = p × q")
    trace.note(f"  n = {p} × {q} = {n}")
    trace.separator()

    phi = (p - 1) * (q - 1)
    trace.note("Step 3: Calculate φ(n) = (p-1) × (q-1)")
    trace.note(f"  φ(n) = {p - 1} × {q - 1} = {phi}")
    trace.separator()

    if not 1 < e < phi:
        raise CipherError(
            ErrorKind.INVALID_KEY,
            f"e = {e} must satisfy 1 < e < φ(n) = {phi}!",
        )
    divisor = gcd(e, phi)
    if divisor != 1:
        raise CipherError(
            ErrorKind.INVALID_KEY,
            f"e = {e} is not coprime with φ(n) = {phi}!",
            f"  gcd({e}, {phi}) = {divisor} ≠ 1",
        )

    trace.note("Step 4: Select e (public exponent)")
    trace.note(f"  e = {e}")
    trace.note(f"  Verify: gcd(e, φ(n)) = gcd({e}, {phi}) = 1 ✓")
    trace.separator()

    try:
        d = mod_inverse(e, phi)
    except NoInverseError:
        raise CipherError(ErrorKind.INVALID_KEY, "Cannot find modular inverse of e!") from None

    trace.note("Step 5: Calculate d (private exponent)")
    trace.note("  d ≡ e⁻¹ (mod φ(n))")
    trace.note(f"  d = {d}")
    trace.note(f"  Verify: (e × d) mod φ(n) = ({e} × {d}) mod {phi} = {(e * d) % phi} ✓")
    trace.separator()

    trace.note(f"Public Key: (n={n}, e={e})")
    trace.note(f"Private Key: (n={n}, d={d})")

    return RSAKeyPair(n=n, e=e, d=d, p=p, q=q, phi=phi)


def generate_key_pair(p: int, q: int, e: int) -> KeyPairOutcome:
    """
    Derive an RSA key pair from two primes and a public exponent.

    Args:
        p: First prime
        q: Second prime (different from p)
        e: Public exponent, coprime with (p-1)(q-1)

    Returns:
        KeyPairOutcome holding the RSAKeyPair and the derivation trace,
        or INVALID_KEY with the failed check in the trace
    """
    return assemble_key_pair("rsa", lambda trace: _generate(p, q, e, trace))


# ============================================================================
# Encryption / decryption
# ============================================================================

def _require_key(key_pair: Optional[RSAKeyPair]) -> RSAKeyPair:
    if key_pair is None:
        raise CipherError(ErrorKind.EMPTY_INPUT, "Please generate keys first!")
    return key_pair


def _plain_value(ch: str, options: CipherOptions) -> int:
    return ord(ch) if options.char_codes else to_ordinal(ch)


def _value_label(options: CipherOptions) -> str:
    return "ASCII" if options.char_codes else "index"


def _encode(number: int, options: CipherOptions) -> str:
    if options.single_letter:
        return from_ordinal(number)
    if options.letter_encoding:
        return number_to_letters(number)
    return str(number)


def _encrypt(text: str, key_pair: Optional[RSAKeyPair], options: CipherOptions,
             trace: TraceRecorder) -> str:
    key_pair = _require_key(key_pair)
    require_text(text)
    n, e = key_pair.public_key

    clean_text = strip_letters(text)
    if not clean_text:
        raise CipherError(ErrorKind.EMPTY_INPUT, "Text must contain at least one letter!")

    if options.single_letter and n > SINGLE_LETTER_MAX_MODULUS:
        raise CipherError(
            ErrorKind.VALUE_TOO_LARGE,
            f"Single-letter output needs n ≤ {SINGLE_LETTER_MAX_MODULUS}, but n = {n}",
            "Ciphertext numerals up to n-1 would not fit in one letter.",
            "Use letter tokens or numbers for larger keys.",
        )

    for ch in clean_text:
        m = _plain_value(ch, options)
        if m >= n:
            raise CipherError(
                ErrorKind.VALUE_TOO_LARGE,
                f"Character '{ch}' ({_value_label(options)} {m}) is >= n ({n})",
                "Please use larger primes so every value is below n.",
            )

    trace.note("RSA Encryption")
    trace.note(f"Public Key: (n={n}, e={e})")
    trace.separator()
    trace.note("Converting characters to ciphertext:")
    trace.note("Formula: C = M^e mod n")
    trace.separator()

    tokens: List[str] = []
    for ch in clean_text:
        m = _plain_value(ch, options)
        c = mod_exp(m, e, n)
        token = _encode(c, options)
        tokens.append(token)
        line = f"'{ch}' ({_value_label(options)} {m}): {m}^{e} mod {n} = {c}"
        if token != str(c):
            line += f" → {token}"
        trace.note(line)

    result = "".join(tokens) if options.single_letter else " ".join(tokens)
    trace.attach("key_pair", key_pair)
    trace.separator()
    trace.note(f"Encrypted: {result}")
    return result


def _parse_ciphertext(text: str, options: CipherOptions, trace: TraceRecorder) -> List[int]:
    if options.single_letter:
        tokens = [ch for ch in text if not ch.isspace()]
    else:
        tokens = text.split()

    numbers = []
    converted = []
    for token in tokens:
        if (options.single_letter or options.letter_encoding) and all(is_letter(ch) for ch in token):
            number = letters_to_number(token)
            converted.append(f"{token.upper()} → {number}")
        elif token.isascii() and token.isdigit() and not options.single_letter:
            number = int(token)
        else:
            raise CipherError(
                ErrorKind.MALFORMED_CIPHERTEXT,
                "Invalid ciphertext format!",
                f"Cannot read '{token}' as a ciphertext value",
            )
        numbers.append(number)

    if converted:
        trace.note("Converting letter codes to numbers...")
        trace.notes(*converted)
        trace.separator()

    return numbers


def _decrypt(text: str, key_pair: Optional[RSAKeyPair], options: CipherOptions,
             trace: TraceRecorder) -> str:
    key_pair = _require_key(key_pair)
    require_text(text)
    n, d = key_pair.private_key

    trace.note("RSA Decryption")
    trace.note(f"Private Key: (n={n}, d={d})")
    trace.separator()

    numbers = _parse_ciphertext(text, options, trace)
    for c in numbers:
        if c >= n:
            raise CipherError(
                ErrorKind.VALUE_TOO_LARGE,
                f"Ciphertext value {c} is >= n ({n})",
                "It cannot have been produced with this key.",
            )

    trace.note("Converting ciphertext to plaintext:")
    trace.note("Formula: M = C^d mod n")
    trace.separator()

    output = []
    for c in numbers:
        m = mod_exp(c, d, n)
        if options.char_codes and m <= sys.maxunicode:
            ch = chr(m)
        elif options.char_codes:
            raise CipherError(
                ErrorKind.VALUE_TOO_LARGE,
                f"Decrypted value {m} is not a character code (0-{sys.maxunicode})",
                "The ciphertext was probably made with a different key or value mode.",
            )
        elif m < MODULUS:
            ch = from_ordinal(m)
        else:
            raise CipherError(
                ErrorKind.VALUE_TOO_LARGE,
                f"Decrypted value {m} is outside the alphabet (0-{MODULUS - 1})",
                "The ciphertext was probably made with a different key or value mode.",
            )
        output.append(ch)
        trace.note(f"{c}^{d} mod {n} = {m} ({_value_label(options)}) = '{ch}'")

    result = "".join(output)
    trace.attach("key_pair", key_pair)
    trace.separator()
    trace.note(f"Decrypted text: {result}")
    return result


def encrypt(text: str, key_pair: Optional[RSAKeyPair], options: Optional[CipherOptions] = None) -> Outcome:
    """Encrypt the letters of text with the public key (n, e)."""
    options = options or DEFAULT_OPTIONS
    return assemble("rsa", CipherMode.ENCRYPT,
                    lambda trace: _encrypt(text, key_pair, options, trace))


def decrypt(text: str, key_pair: Optional[RSAKeyPair], options: Optional[CipherOptions] = None) -> Outcome:
    """Decrypt ciphertext tokens with the private key (n, d)."""
    options = options or DEFAULT_OPTIONS
    return assemble("rsa", CipherMode.DECRYPT,
                    lambda trace: _decrypt(text, key_pair, options, trace))
