"""
---
version: 0.1.0
created: 2026-10-13
updated: 2026-10-13
---

encryption_example.py — Print a few generated challenges.

Usage:
    python3 encryption_example.py [--count N] [--randomness R] [--seed S]
"""

from __future__ import annotations

import argparse

import numpy as np

from candidates import get_candidates
from challenge import DEFAULT_RANDOMNESS, generate_challenge


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate noisy substitution challenges")
    parser.add_argument("--count", type=int, default=4, help="Number of challenges")
    parser.add_argument("--randomness", type=float, default=DEFAULT_RANDOMNESS,
                        help="Insertion probability in [0, 1)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    if not 0.0 <= args.randomness < 1.0:
        parser.error("--randomness must be in [0, 1)")

    rng = np.random.default_rng(args.seed)
    plaintexts = get_candidates()
    for _ in range(args.count):
        plaintext, ciphertext = generate_challenge(plaintexts, args.randomness, rng)
        print(f"plaintext:{plaintext}")
        print(f"ciphertext:{ciphertext}")
        print()


if __name__ == "__main__":
    main()
