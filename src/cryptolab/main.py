"""
CryptoLab - Main Entry Point
A step-by-step classical cryptography workbench.

Usage:
    python -m cryptolab.main
    python -m cryptolab.main caesar encrypt "HELLO" 3
    python -m cryptolab.main hill encrypt "HI"     # pre-filled key 6 24; 1 13
    python -m cryptolab.main --verbose rsa decrypt "DND" "61 53 17"
    python -m cryptolab.main --numbers --char-codes rsa encrypt "A" "61 53 17"
"""

import argparse
import logging
import sys

from .config import FILLER, CipherOptions
from .integration.console import print_outcome
from .integration.registry import ALGORITHMS, get_algorithm, run


def _welcome() -> None:
    print("=" * 50)
    print("Welcome to CryptoLab")
    print("=" * 50)
    print("\nAvailable algorithms:")
    for algorithm in ALGORITHMS:
        default = f" [default {algorithm.default_key}]" if algorithm.default_key else ""
        print(f"  - {algorithm.name:<18} ({algorithm.id}) key: {algorithm.key_hint}{default}")
    print("\nRun: python -m cryptolab.main <algorithm> <encrypt|decrypt> <text> <key>")
    print("\n")


def main(argv=None) -> int:
    """Main entry point for CryptoLab."""
    parser = argparse.ArgumentParser(prog="cryptolab", description="Step-by-step classical ciphers")
    parser.add_argument("--verbose", action="store_true", help="log engine activity to stderr")
    parser.add_argument("--numbers", action="store_true", help="RSA: write ciphertext as decimal numbers")
    parser.add_argument("--single-letter", action="store_true", help="RSA: one letter per numeral (n <= 26)")
    parser.add_argument("--char-codes", action="store_true", help="RSA: encrypt character codes (A=65)")
    parser.add_argument("--filler", default=FILLER, help="padding letter for Playfair, Hill and Row Transposition")
    parser.add_argument("algorithm", nargs="?", choices=[a.id for a in ALGORITHMS])
    parser.add_argument("mode", nargs="?", choices=["encrypt", "decrypt"])
    parser.add_argument("text", nargs="?")
    parser.add_argument("key", nargs="?")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s  %(levelname)s  %(name)s  %(message)s")

    if args.algorithm is None:
        _welcome()
        return 0

    algorithm = get_algorithm(args.algorithm)
    key = args.key if args.key is not None else algorithm.default_key
    if args.mode is None or args.text is None or key is None:
        parser.error("algorithm, mode, text and key are all required")

    try:
        options = CipherOptions(
            letter_encoding=not args.numbers,
            single_letter=args.single_letter,
            char_codes=args.char_codes,
            filler=args.filler,
        )
    except ValueError as exc:
        parser.error(str(exc))

    outcome = run(algorithm.id, args.mode, args.text, key, options)
    print_outcome(outcome, f"{algorithm.name} - {args.mode}")
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())
