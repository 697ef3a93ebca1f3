"""
---
version: 0.2.0
created: 2026-10-13
updated: 2026-10-18
---

decrypt.py — Guess which hardcoded candidate produced a ciphertext.

Reads one ciphertext line (from --ciphertext or stdin), refutes every
candidate in candidates.py, and prints the guess. Prints "None" when no
decision can be made.

Usage:
    echo "<ciphertext>" | python3 decrypt.py
    python3 decrypt.py --ciphertext "<ciphertext>" --verbose --plot tables.png
"""

from __future__ import annotations

import argparse
import sys

from candidates import get_candidates
from disproof import (
    DisproofStats,
    analyze_candidates, decide, format_candidate_report, plot_disproof_tables,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Identify the candidate plaintext behind a ciphertext")
    parser.add_argument("--ciphertext", type=str, default=None,
                        help="Ciphertext (read from stdin when omitted)")
    parser.add_argument("--verbose", action="store_true",
                        help="Print every candidate's disproof table and statistics")
    parser.add_argument("--right-alignment", action="store_true",
                        help="Also run the right-alignment mirror test")
    parser.add_argument("--secondary", action="store_true",
                        help="Run the secondary disproof pass")
    parser.add_argument("--plot", type=str, default=None,
                        help="Save a heatmap of every disproof table to this path")
    args = parser.parse_args()

    if args.ciphertext is None:
        print("Enter the ciphertext:")
        ciphertext = sys.stdin.readline().rstrip("\n")
    else:
        ciphertext = args.ciphertext

    candidates = get_candidates()
    stats = DisproofStats()
    try:
        results = analyze_candidates(
            candidates, ciphertext, stats,
            right_alignment=args.right_alignment, secondary=args.secondary,
        )
    except ValueError as e:
        if args.verbose:
            print(f"Invalid input: {e}", file=sys.stderr)
        results = None

    guess = None
    if results is not None:
        if args.verbose:
            for i, r in enumerate(results):
                print(f"\n--- Candidate {i} ---")
                print(r["table"])
                print(r["stats"].format_report())
            print()
            print(format_candidate_report(results))
            print()
            print(stats.format_report())
        if args.plot:
            plot_disproof_tables(results, args.plot)
        index = decide(results, ciphertext)
        if index is not None:
            guess = candidates[index]

    print(f"My plaintext guess is:{guess}")


if __name__ == "__main__":
    main()
