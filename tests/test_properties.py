"""
Property tests for CryptoLab

Round trips and algebraic laws checked with hypothesis over generated
keys and texts rather than a handful of textbook examples.
"""

import string

import hypothesis.strategies as st
from hypothesis import assume, given, settings, Verbosity

from cryptolab.classical import affine, caesar, hill, playfair, rail_fence, row_transposition, vernam, vigenere
from cryptolab.config import SMALL_PRIMES
from cryptolab.core_math.alphabet import strip_letters
from cryptolab.core_math.matrix import determinant
from cryptolab.core_math.number_theory import extended_gcd, gcd, mod_exp, mod_inverse
from cryptolab.keys import (
    AffineKey, BinaryKey, MatrixKey, PermutationKey, PolyalphabeticKey, RailCount, ShiftKey,
)
from cryptolab.public_key import rsa


# Hypothesis strategies
any_text = st.text(alphabet=string.ascii_letters + string.digits + " .,!?'-", min_size=1, max_size=60) \
    .filter(lambda t: t.strip())
letters = st.text(alphabet=string.ascii_uppercase, min_size=1, max_size=60)
keywords = st.text(alphabet=string.ascii_letters, min_size=1, max_size=12)
bits = st.text(alphabet="01", min_size=1, max_size=64)
permutations = st.integers(min_value=1, max_value=8).flatmap(
    lambda n: st.permutations(list(range(1, n + 1)))
)
# No X (the filler) and no J (folded into I): these round-trip exactly.
playfair_text = st.text(alphabet=string.ascii_uppercase.replace("X", "").replace("J", ""),
                        min_size=1, max_size=40)
matrices_2x2 = st.lists(st.integers(min_value=0, max_value=25), min_size=4, max_size=4) \
    .map(lambda v: [v[:2], v[2:]])


class TestNumberTheoryLaws:
    """Algebraic identities."""

    @given(a=st.integers(-10**6, 10**6), b=st.integers(-10**6, 10**6))
    @settings(verbosity=Verbosity.quiet, max_examples=200)
    def test_bezout(self, a, b):
        g, x, y = extended_gcd(a, b)
        assert a * x + b * y == g
        assert g == gcd(a, b)

    @given(a=st.integers(1, 10**6), m=st.integers(2, 10**4))
    @settings(verbosity=Verbosity.quiet, max_examples=200)
    def test_inverse_law(self, a, m):
        assume(gcd(a, m) == 1)
        assert (a * mod_inverse(a, m)) % m == 1

    @given(base=st.integers(0, 10**6), exponent=st.integers(0, 500), modulus=st.integers(1, 10**5))
    @settings(verbosity=Verbosity.quiet, max_examples=200)
    def test_square_and_multiply_matches_pow(self, base, exponent, modulus):
        assert mod_exp(base, exponent, modulus) == pow(base, exponent, modulus)


class TestRoundTrips:
    """decrypt(encrypt(x)) gives x back (after normalization)."""

    @given(text=any_text, shift=st.integers(0, 25))
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_caesar(self, text, shift):
        encrypted = caesar.encrypt(text, ShiftKey(shift))
        assert caesar.decrypt(encrypted.output, ShiftKey(shift)).output == text

    @given(text=any_text, a=st.sampled_from(affine.VALID_MULTIPLIERS), b=st.integers(0, 25))
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_affine(self, text, a, b):
        key = AffineKey(a, b)
        assert affine.decrypt(affine.encrypt(text, key).output, key).output == text

    @given(text=letters, word=keywords)
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_vigenere(self, text, word):
        key = PolyalphabeticKey(word)
        assert vigenere.decrypt(vigenere.encrypt(text, key).output, key).output == text

    @given(text=bits, extra=st.text(alphabet="01", max_size=8), data=st.data())
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_vernam_is_an_involution(self, text, extra, data):
        pad = data.draw(st.text(alphabet="01", min_size=len(text), max_size=len(text))) + extra
        once = vernam.encrypt(text, BinaryKey(pad)).output
        assert vernam.encrypt(once, BinaryKey(pad)).output == text

    @given(text=letters, rails=st.integers(2, 10))
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_rail_fence(self, text, rails):
        encrypted = rail_fence.encrypt(text, RailCount(rails)).output
        assert sorted(encrypted) == sorted(text)
        assert rail_fence.decrypt(encrypted, RailCount(rails)).output == text

    @given(text=letters, order=permutations)
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_row_transposition(self, text, order):
        key = PermutationKey(order)
        decrypted = row_transposition.decrypt(row_transposition.encrypt(text, key).output, key).output
        padding = decrypted[len(text):]
        assert decrypted.startswith(text)
        assert set(padding) <= {"X"}
        assert len(padding) < len(order)

    @given(text=letters, order=permutations)
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_row_transposition_unpadded_ciphertext(self, text, order):
        """Any ciphertext length decrypts, columns may be uneven."""
        key = PermutationKey(order)
        decrypted = row_transposition.decrypt(text, key)
        assert decrypted.ok
        assert sorted(decrypted.output) == sorted(text)

    @given(text=playfair_text, word=keywords)
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_playfair(self, text, word):
        key = PolyalphabeticKey(word)
        encrypted = playfair.encrypt(text, key).output
        assert playfair.decrypt(encrypted, key).output == "".join(playfair.prepare_digraphs(text))

    @given(text=letters, rows=matrices_2x2)
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_hill(self, text, rows):
        assume(gcd(determinant(rows) % 26, 26) == 1)
        key = MatrixKey(rows)
        decrypted = hill.decrypt(hill.encrypt(text, key).output, key).output
        assert decrypted.startswith(text)
        assert set(decrypted[len(text):]) <= {"X"}

    @given(pair=st.lists(st.sampled_from(SMALL_PRIMES), min_size=2, max_size=2, unique=True),
           e=st.sampled_from([3, 5, 7, 11, 13, 17, 19, 23]), data=st.data())
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_rsa_correctness(self, pair, e, data):
        keys = rsa.generate_key_pair(pair[0], pair[1], e)
        assume(keys.ok)
        key_pair = keys.key_pair
        m = data.draw(st.integers(0, key_pair.n - 1))
        assert mod_exp(mod_exp(m, key_pair.e, key_pair.n), key_pair.d, key_pair.n) == m

    @given(pair=st.lists(st.sampled_from(SMALL_PRIMES), min_size=2, max_size=2, unique=True),
           text=letters)
    @settings(verbosity=Verbosity.quiet, max_examples=50)
    def test_rsa_round_trip(self, pair, text):
        keys = rsa.generate_key_pair(pair[0], pair[1], 5)
        assume(keys.ok)
        encrypted = rsa.encrypt(text, keys.key_pair)
        assert rsa.decrypt(encrypted.output, keys.key_pair).output == text


class TestOutcomeInvariants:
    """Properties every outcome has."""

    @given(text=any_text, shift=st.integers(-50, 50))
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_failure_has_no_output(self, text, shift):
        outcome = caesar.encrypt(text, ShiftKey(shift))
        assert outcome.ok == (0 <= shift <= 25)
        if not outcome.ok:
            assert outcome.output == ""
            assert outcome.notes[0].startswith("ERROR: ")

    @given(text=letters, word=keywords)
    @settings(verbosity=Verbosity.quiet, max_examples=50)
    def test_last_note_reports_output(self, text, word):
        outcome = vigenere.encrypt(text, PolyalphabeticKey(word))
        assert outcome.notes[-1] == f"Final result: {outcome.output}"

    @given(text=any_text)
    @settings(verbosity=Verbosity.quiet, max_examples=50)
    def test_stripping_keeps_letters_only(self, text):
        assert set(strip_letters(text)) <= set(string.ascii_uppercase)
