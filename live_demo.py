#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                          CRYPTOLAB LIVE DEMO                                  ║
║                  Classical Ciphers, One Step at a Time                        ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks an audience through the textbook example of every cipher:
- Substitution: Caesar, Affine, Vigenère, Vernam
- Transposition: Rail Fence, Row Transposition
- Polygraphic: Playfair, Hill
- Public key: RSA key generation, encryption and decryption

Run with --no-pause to print everything without waiting for ENTER.
"""

import random
import sys

from rich.console import Console

from cryptolab.classical import affine, caesar, hill, playfair, rail_fence, row_transposition, vernam, vigenere
from cryptolab.config import CipherOptions
from cryptolab.core_math.number_theory import random_prime_pair
from cryptolab.integration.console import print_outcome
from cryptolab.keys import AffineKey, BinaryKey, MatrixKey, PermutationKey, PolyalphabeticKey, RailCount, ShiftKey
from cryptolab.public_key import rsa

console = Console()
INTERACTIVE = "--no-pause" not in sys.argv


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if INTERACTIVE:
        print(f"\n  [PAUSE] {message}")
        input()


def show(outcome, title):
    print_outcome(outcome, title, console)
    pause()


def main():

    print("\n" * 2)
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + "        CRYPTOLAB - STEP-BY-STEP CLASSICAL CRYPTOGRAPHY".center(68) + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")

    pause("Press ENTER to begin the demonstration...")

    print_header("PART 1: SUBSTITUTION CIPHERS")

    print_step("1.1", "Caesar: shift HELLO by 3")
    show(caesar.encrypt("HELLO", ShiftKey(3)), "Caesar - encrypt")

    print_step("1.2", "Affine: a=5, b=8 on AFFINE")
    show(affine.encrypt("AFFINE", AffineKey(5, 8)), "Affine - encrypt")

    print_step("1.3", "Affine: a=13 is rejected (gcd(13, 26) = 13)")
    show(affine.encrypt("AFFINE", AffineKey(13, 8)), "Affine - invalid key")

    print_step("1.4", "Vigenère: ATTACKATDAWN with LEMON")
    show(vigenere.encrypt("ATTACK AT DAWN", PolyalphabeticKey("LEMON")), "Vigenère - encrypt")

    print_step("1.5", "Vernam: XOR with a one-time pad")
    show(vernam.encrypt("1011 0110", BinaryKey("0110 1100")), "Vernam - encrypt")

    print_header("PART 2: TRANSPOSITION CIPHERS")

    print_step("2.1", "Rail Fence with 3 rails")
    show(rail_fence.encrypt("WE ARE DISCOVERED. FLEE AT ONCE", RailCount(3)), "Rail Fence - encrypt")

    print_step("2.2", "Rail Fence decryption")
    show(rail_fence.decrypt("WECRLTEERDSOEEFEAOCAIVDEN", RailCount(3)), "Rail Fence - decrypt")

    print_step("2.3", "Row Transposition with key 3 1 4 2")
    show(row_transposition.encrypt("ATTACK AT DAWN", PermutationKey([3, 1, 4, 2])), "Row Transposition - encrypt")

    print_header("PART 3: POLYGRAPHIC CIPHERS")

    print_step("3.1", "Playfair with keyword MONARCHY")
    show(playfair.encrypt("INSTRUMENTS", PolyalphabeticKey("MONARCHY")), "Playfair - encrypt")

    print_step("3.2", "Hill with key [[3, 3], [2, 5]]")
    show(hill.encrypt("HELP", MatrixKey([[3, 3], [2, 5]])), "Hill - encrypt")
    show(hill.decrypt("HIAT", MatrixKey([[3, 3], [2, 5]])), "Hill - decrypt")

    print_step("3.3", "Hill with a singular key cannot decrypt")
    show(hill.decrypt("HIAT", MatrixKey([[4, 8], [2, 4]])), "Hill - singular key")

    print_header("PART 4: RSA")

    print_step("4.1", "Key generation with p=61, q=53, e=17")
    keys = rsa.generate_key_pair(61, 53, 17)
    for line in keys.notes:
        print(f"  {line}")
    pause()

    print_step("4.2", "Encrypt HELLO, one letter at a time")
    encrypted = rsa.encrypt("HELLO", keys.key_pair)
    show(encrypted, "RSA - encrypt")

    print_step("4.3", "Decrypt the letter tokens with d")
    show(rsa.decrypt(encrypted.output, keys.key_pair), "RSA - decrypt")

    print_step("4.4", "ASCII codes as decimal numbers")
    show(rsa.encrypt("A", keys.key_pair, CipherOptions(letter_encoding=False, char_codes=True)),
         "RSA - numeric")

    print_step("4.5", "Random primes (seeded so the demo repeats)")
    p, q = random_prime_pair(random.Random(364))
    print(f"\n  Picked p = {p}, q = {q}")
    for line in rsa.generate_key_pair(p, q, 17).notes:
        print(f"  {line}")

    print("\n\n" + "═" * 70)
    print("  DEMONSTRATION COMPLETE!")
    print("═" * 70)


if __name__ == "__main__":
    main()
