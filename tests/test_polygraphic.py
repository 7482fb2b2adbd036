"""
Unit tests for the polygraphic ciphers.

Tests:
- Playfair square, digraph preparation and rules
- Hill encryption, decryption and key checks
"""

import pytest

from cryptolab.classical import hill, playfair
from cryptolab.keys import MatrixKey, PolyalphabeticKey
from cryptolab.trace import CipherMode, ErrorKind


class TestPlayfair:
    """Unit tests for the Playfair cipher."""

    def test_square(self):
        """MONARCHY fills the square before the remaining letters."""
        square = playfair.build_square("MONARCHY")
        assert square == (
            ("M", "O", "N", "A", "R"),
            ("C", "H", "Y", "B", "D"),
            ("E", "F", "G", "I", "K"),
            ("L", "P", "Q", "S", "T"),
            ("U", "V", "W", "X", "Z"),
        )

    def test_square_merges_j(self):
        """J never appears; a J in the keyword counts as I."""
        square = playfair.build_square("JAZZ")
        letters = [ch for row in square for ch in row]
        assert "J" not in letters
        assert letters[:3] == ["I", "A", "Z"]
        assert len(set(letters)) == 25

    def test_prepare_digraphs(self):
        """Doubled letters are split with X."""
        assert playfair.prepare_digraphs("balloon") == ["BA", "LX", "LO", "ON"]

    def test_prepare_odd_length(self):
        """A lone last letter is padded with X."""
        assert playfair.prepare_digraphs("HELLO") == ["HE", "LX", "LO"]

    def test_prepare_folds_j(self):
        assert playfair.prepare_digraphs("JI") == ["IX", "IX"]

    def test_textbook_example(self):
        """INSTRUMENTS under MONARCHY."""
        outcome = playfair.encrypt("instruments", PolyalphabeticKey("MONARCHY"))
        assert outcome.output == "GATLMZCLRQXA"

    def test_decrypt(self):
        outcome = playfair.decrypt("GATLMZCLRQXA", PolyalphabeticKey("MONARCHY"))
        assert outcome.output == "INSTRUMENTSX"

    @pytest.mark.parametrize("pair, expected", [
        ("ST", "TL"),   # same row, wraps to column 0
        ("ME", "CL"),   # same column
        ("SX", "XA"),   # same column, wraps to row 0
        ("IN", "GA"),   # rectangle
    ])
    def test_rules(self, pair, expected):
        square = playfair.build_square("MONARCHY")
        result, _ = playfair.transform_digraph(pair, square, CipherMode.ENCRYPT)
        assert result == expected
        back, _ = playfair.transform_digraph(result, square, CipherMode.DECRYPT)
        assert back == pair

    def test_matrix_artifact(self):
        outcome = playfair.encrypt("HELLO", PolyalphabeticKey("MONARCHY"))
        assert outcome.artifacts["matrix"][0] == ("M", "O", "N", "A", "R")

    def test_trace(self):
        outcome = playfair.encrypt("instruments", PolyalphabeticKey("MONARCHY"))
        assert "Prepared text into pairs: IN ST RU ME NT SX" in outcome.notes
        assert "  M O N A R" in outcome.notes
        assert any(line.startswith('Pair 1: "IN" → "GA"') for line in outcome.notes)
        assert outcome.notes[-1] == "Final result: GATLMZCLRQXA"

    def test_key_without_letters(self):
        outcome = playfair.encrypt("HELLO", PolyalphabeticKey("42"))
        assert outcome.error_kind is ErrorKind.INVALID_KEY

    def test_empty_text(self):
        outcome = playfair.encrypt("", PolyalphabeticKey("MONARCHY"))
        assert outcome.error_kind is ErrorKind.EMPTY_INPUT


class TestHill:
    """Unit tests for the Hill cipher."""

    def test_default_key_example(self):
        """HI under [[6, 24], [1, 13]] is AH."""
        outcome = hill.encrypt("HI", MatrixKey([[6, 24], [1, 13]]))
        assert outcome.output == "AH"

    def test_encrypt(self):
        assert hill.encrypt("HELP", MatrixKey([[3, 3], [2, 5]])).output == "HIAT"

    def test_decrypt(self):
        outcome = hill.decrypt("HIAT", MatrixKey([[3, 3], [2, 5]]))
        assert outcome.output == "HELP"
        assert "Inverse of determinant: 3 (since 9 × 3 mod 26 = 1)" in outcome.notes
        assert outcome.artifacts["matrix"] == ((15, 17), (20, 9))

    def test_padding(self):
        """Odd-length text is padded with X."""
        outcome = hill.encrypt("HEL", MatrixKey([[3, 3], [2, 5]]))
        assert "Input text: HELX" in outcome.notes
        assert hill.decrypt(outcome.output, MatrixKey([[3, 3], [2, 5]])).output == "HELX"

    def test_three_by_three(self):
        """ACT under the GYBNQKURP key is POH."""
        key = MatrixKey([[6, 24, 1], [13, 16, 10], [20, 17, 15]])
        assert hill.encrypt("ACT", key).output == "POH"
        assert hill.decrypt("POH", key).output == "ACT"

    def test_product_lines(self):
        """Each block shows the matrix-vector product."""
        outcome = hill.encrypt("HI", MatrixKey([[6, 24], [1, 13]]))
        assert 'Block "HI" = [7, 8]' in outcome.notes
        assert '  [1, 13] × [8] = [7] = "AH"' in outcome.notes

    def test_singular_key_cannot_decrypt(self):
        """det mod 26 = 2 shares a factor with 26."""
        outcome = hill.decrypt("AH", MatrixKey([[6, 24], [1, 13]]))
        assert outcome.error_kind is ErrorKind.INVALID_KEY
        assert "ERROR: Key matrix is not invertible!" in outcome.notes
        assert "Determinant = 54, determinant mod 26 = 2" in outcome.notes

    def test_zero_determinant(self):
        outcome = hill.decrypt("ABCD", MatrixKey([[4, 8], [2, 4]]))
        assert outcome.error_kind is ErrorKind.INVALID_KEY
        assert "Determinant = 0, determinant mod 26 = 0" in outcome.notes

    def test_singular_key_encrypt_warns(self):
        """Encryption still works but says it cannot be undone."""
        outcome = hill.encrypt("HI", MatrixKey([[6, 24], [1, 13]]))
        assert outcome.ok
        assert any(line.startswith("Warning:") for line in outcome.notes)

    def test_non_square_key(self):
        outcome = hill.encrypt("HELLO", MatrixKey([[1, 2, 3], [4, 5, 6]]))
        assert outcome.error_kind is ErrorKind.INVALID_KEY
        assert "Got a 2×3 matrix" in outcome.notes

    def test_no_letters(self):
        outcome = hill.encrypt("12", MatrixKey([[3, 3], [2, 5]]))
        assert outcome.error_kind is ErrorKind.EMPTY_INPUT
