"""
Integration tests for CryptoLab.

Tests the complete path from raw form input to rendered output:
- Key parsing
- Registry dispatch for all nine algorithms
- RSA key generation + operation in one trace
- Console rendering and the command line entry point
"""

import pytest
from rich.console import Console

from cryptolab.config import CipherOptions
from cryptolab.integration.console import render_outcome
from cryptolab.integration.registry import ALGORITHMS, get_algorithm, run
from cryptolab.keys import (
    AffineKey, EmptyKeyError, KeyFormatError, MatrixKey, PermutationKey,
    parse_affine_key, parse_matrix_key, parse_permutation_key, parse_rail_count,
    parse_rsa_parameters, parse_shift_key,
)
from cryptolab.main import main
from cryptolab.trace import CipherMode, ErrorKind, Separator


class TestKeyParsing:
    """Raw key strings -> key records."""

    def test_shift(self):
        assert parse_shift_key(" 3 ").amount == 3

    def test_affine(self):
        assert parse_affine_key("5, 8") == AffineKey(5, 8)

    def test_permutation(self):
        assert parse_permutation_key("3 1,4  2") == PermutationKey([3, 1, 4, 2])

    def test_matrix_rows(self):
        assert parse_matrix_key("6 24; 1 13") == MatrixKey([[6, 24], [1, 13]])
        assert parse_matrix_key("6 24\n1 13") == MatrixKey([[6, 24], [1, 13]])

    def test_matrix_flat(self):
        """k*k numbers on one line fold into a square."""
        assert parse_matrix_key("6 24 1 13") == MatrixKey([[6, 24], [1, 13]])

    def test_rsa(self):
        assert parse_rsa_parameters("61 53 17") == (61, 53, 17)

    @pytest.mark.parametrize("parser, raw", [
        (parse_shift_key, "three"),
        (parse_shift_key, "3 4"),
        (parse_affine_key, "5"),
        (parse_permutation_key, "3 x 4 2"),
        (parse_matrix_key, "1 2 3"),
        (parse_matrix_key, "1 2; 3"),
        (parse_rail_count, "2.5"),
        (parse_rsa_parameters, "61 53"),
    ])
    def test_malformed(self, parser, raw):
        with pytest.raises(KeyFormatError):
            parser(raw)

    @pytest.mark.parametrize("parser", [parse_shift_key, parse_permutation_key, parse_matrix_key])
    def test_blank(self, parser):
        with pytest.raises(EmptyKeyError):
            parser("   ")


class TestRegistry:
    """Dispatch of raw input through the registry."""

    def test_order(self):
        """Tabs are listed in front-end order."""
        assert [a.id for a in ALGORITHMS] == [
            "caesar", "playfair", "rowtrans", "hill", "affine",
            "vernam", "vigenere", "railfence", "rsa",
        ]

    def test_unknown_algorithm(self):
        with pytest.raises(KeyError):
            get_algorithm("enigma")

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            run("caesar", "sideways", "HELLO", "3")

    @pytest.mark.parametrize("algorithm_id, mode, text, raw_key, expected", [
        ("caesar", "encrypt", "HELLO", "3", "KHOOR"),
        ("playfair", "encrypt", "INSTRUMENTS", "MONARCHY", "GATLMZCLRQXA"),
        ("rowtrans", "encrypt", "ATTACK AT DAWN", "3 1 4 2", "TKAATNACDTAW"),
        ("hill", "encrypt", "HI", "6 24; 1 13", "AH"),
        ("hill", "decrypt", "HIAT", "3 3 2 5", "HELP"),
        ("affine", "encrypt", "AFFINE", "5 8", "IHHWVC"),
        ("vernam", "encrypt", "10110110", "01101100", "11011010"),
        ("vigenere", "decrypt", "LXFOPVEFRNHR", "LEMON", "ATTACKATDAWN"),
        ("railfence", "decrypt", "WECRLTEERDSOEEFEAOCAIVDEN", "3", "WEAREDISCOVEREDFLEEATONCE"),
        ("rsa", "decrypt", "DND", "61 53 17", "H"),
    ])
    def test_run(self, algorithm_id, mode, text, raw_key, expected):
        outcome = run(algorithm_id, mode, text, raw_key)
        assert outcome.ok, outcome.notes
        assert outcome.output == expected

    def test_mode_enum_accepted(self):
        assert run("caesar", CipherMode.DECRYPT, "KHOOR", "3").output == "HELLO"

    def test_malformed_key(self):
        outcome = run("rowtrans", "encrypt", "ATTACKATDAWN", "3 x 4 2")
        assert outcome.error_kind is ErrorKind.MALFORMED_KEY_FORMAT
        assert outcome.notes[0].startswith("ERROR: 'x' is not a valid column number")
        assert 'Expected column order, e.g. "3 1 4 2"' in outcome.notes

    def test_empty_key(self):
        outcome = run("caesar", "encrypt", "HELLO", "")
        assert outcome.error_kind is ErrorKind.EMPTY_INPUT
        assert outcome.output == ""

    def test_rsa_trace_starts_with_key_generation(self):
        outcome = run("rsa", "encrypt", "H", "61 53 17")
        assert outcome.output == "DND"
        assert outcome.notes[0] == "RSA Key Generation"
        assert "RSA Encryption" in outcome.notes
        # key generation and encryption are separated
        split = outcome.notes.index("Private Key: (n=3233, d=2753)")
        assert outcome.notes[split + 1] == "RSA Encryption"
        assert any(isinstance(step, Separator) for step in outcome.trace)

    def test_rsa_bad_parameters(self):
        outcome = run("rsa", "encrypt", "H", "61 61 17")
        assert outcome.error_kind is ErrorKind.INVALID_KEY

    def test_default_keys(self):
        """Pre-filled keys parse and run."""
        defaults = {a.id: a.default_key for a in ALGORITHMS if a.default_key}
        assert defaults == {
            "caesar": "3",
            "hill": "6 24; 1 13",
            "affine": "5 8",
            "railfence": "3",
            "rsa": "61 53 17",
        }
        for algorithm_id, key in defaults.items():
            assert run(algorithm_id, "encrypt", "HI", key).ok

    def test_options_forwarded(self):
        options = CipherOptions(letter_encoding=False, char_codes=True)
        assert run("rsa", "encrypt", "A", "61 53 17", options).output == "2790"


class TestConsole:
    """Rendering with rich."""

    def _render(self, outcome):
        console = Console(record=True, width=120, color_system=None)
        console.print(render_outcome(outcome, "Demo"))
        return console.export_text()

    def test_success_panel(self):
        text = self._render(run("caesar", "encrypt", "HI", "3"))
        assert "Result: KL" in text
        assert "Final result: KL" in text

    def test_failure_panel(self):
        text = self._render(run("affine", "encrypt", "HI", "13 8"))
        assert "ERROR: Key A (13) must be coprime with 26!" in text
        assert "Failed: invalid_key" in text


class TestCommandLine:
    """The cryptolab entry point."""

    def test_welcome(self, capsys):
        assert main([]) == 0
        assert "Welcome to CryptoLab" in capsys.readouterr().out

    def test_success(self, capsys):
        assert main(["caesar", "encrypt", "HELLO", "3"]) == 0
        assert "KHOOR" in capsys.readouterr().out

    def test_failure_exit_code(self):
        assert main(["caesar", "encrypt", "HELLO", "99"]) == 1

    def test_rsa_flags(self, capsys):
        assert main(["--numbers", "--char-codes", "rsa", "encrypt", "A", "61 53 17"]) == 0
        assert "2790" in capsys.readouterr().out

    def test_default_key(self, capsys):
        """Algorithms with a pre-filled key can be run without one."""
        assert main(["hill", "encrypt", "HI"]) == 0
        assert "Final result: AH" in capsys.readouterr().out

    def test_no_default_key(self):
        with pytest.raises(SystemExit):
            main(["vigenere", "encrypt", "HELLO"])

    def test_bad_filler(self):
        with pytest.raises(SystemExit):
            main(["--filler", "7", "playfair", "encrypt", "HELLO", "KEY"])

    def test_missing_arguments(self):
        with pytest.raises(SystemExit):
            main(["caesar", "encrypt"])
