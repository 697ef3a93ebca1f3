"""
---
version: 0.2.0
created: 2026-10-14
updated: 2026-10-18
---

decryption_trial.py — Repeated generate-then-identify trials.

Each trial draws a random key and candidate from candidates.py, encrypts it
with random insertions, and runs the selector on the ciphertext. Reports
correct / wrong / no-decision counts, timing, and aggregated disproof
statistics. --sweep repeats the trials across several insertion
probabilities.

Usage:
    python3 decryption_trial.py [--n-trials N] [--randomness R] [--seed S]
    python3 decryption_trial.py --sweep --n-trials 200 --no-plots
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path

import numpy as np

from candidates import get_candidates
from challenge import DEFAULT_RANDOMNESS, DEFAULT_SEED, generate_challenge
from disproof import DisproofStats, select

SWEEP_LEVELS: tuple[float, ...] = (0.0, 0.05, 0.1, 0.2, 0.3, 0.4, 0.5)


def run_trials(
    n_trials: int,
    randomness: float,
    seed: int = DEFAULT_SEED,
    right_alignment: bool = False,
    secondary: bool = False,
) -> dict:
    """
    Run n_trials challenges at one insertion probability.

    Returns dict with:
        correct, wrong, no_decision: outcome counts
        durations: per-trial selector wall time (seconds)
        stats: aggregated DisproofStats
    """
    rng = np.random.default_rng(seed)
    plaintexts = get_candidates()
    stats = DisproofStats()
    correct = wrong = no_decision = 0
    durations: list[float] = []

    for _ in range(n_trials):
        plaintext, ciphertext = generate_challenge(plaintexts, randomness, rng)
        t0 = time.perf_counter()
        guess = select(plaintexts, ciphertext, stats,
                       right_alignment=right_alignment, secondary=secondary)
        durations.append(time.perf_counter() - t0)
        if guess is None:
            no_decision += 1
        elif guess == plaintext:
            correct += 1
        else:
            wrong += 1

    return {
        "randomness": randomness,
        "n_trials": n_trials,
        "correct": correct,
        "wrong": wrong,
        "no_decision": no_decision,
        "durations": durations,
        "stats": stats,
    }


def print_trial_summary(result: dict) -> None:
    n = result["n_trials"]
    durations = np.array(result["durations"]) if result["durations"] else np.zeros(1)
    print(f"Randomness: {result['randomness']}, Iterations: {n}")
    print(f"Duration: {durations.sum():.3f}s, Duration/run: {durations.mean() * 1000:.2f}ms")
    print(f"Correct guesses: {result['correct']}, Incorrect guesses: {result['wrong']}, "
          f"No decision: {result['no_decision']}")
    rate = result["correct"] / n if n else 0.0
    print(f"Success rate: {rate:.2%}")


def print_sweep_table(results: list[dict]) -> None:
    print(f"\n{'Randomness':>10} {'Correct':>8} {'Wrong':>6} {'None':>6} {'Success':>8} {'ms/run':>8}")
    print("-" * 52)
    for r in results:
        n = r["n_trials"]
        rate = r["correct"] / n if n else 0.0
        ms = float(np.mean(r["durations"])) * 1000 if r["durations"] else 0.0
        print(f"{r['randomness']:>10.2f} {r['correct']:>8} {r['wrong']:>6} "
              f"{r['no_decision']:>6} {rate:>7.1%} {ms:>8.2f}")


def plot_sweep(results: list[dict], save_dir: Path) -> None:
    """Success / no-decision rate against insertion probability."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("  matplotlib not available; skipping plots")
        return

    levels = [r["randomness"] for r in results]
    success = [r["correct"] / r["n_trials"] for r in results]
    undecided = [r["no_decision"] / r["n_trials"] for r in results]

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(levels, success, marker="o", label="Correct")
    ax.plot(levels, undecided, marker="s", linestyle="--", label="No decision")
    ax.set_xlabel("Insertion probability")
    ax.set_ylabel("Fraction of trials")
    ax.set_ylim(0, 1.05)
    ax.legend(fontsize=8)
    plt.tight_layout()
    path = save_dir / "decryption_sweep.png"
    plt.savefig(str(path), dpi=150, bbox_inches="tight")
    print(f"  Saved: {path}")
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(description="Repeated decryption trials")
    parser.add_argument("--n-trials", type=int, default=100, help="Trials per insertion probability")
    parser.add_argument("--randomness", type=float, default=DEFAULT_RANDOMNESS,
                        help="Insertion probability in [0, 1)")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")
    parser.add_argument("--sweep", action="store_true",
                        help=f"Run every level in {SWEEP_LEVELS}")
    parser.add_argument("--right-alignment", action="store_true",
                        help="Also run the right-alignment mirror test")
    parser.add_argument("--secondary", action="store_true",
                        help="Run the secondary disproof pass")
    parser.add_argument("--no-plots", action="store_true", help="Skip plot generation")
    parser.add_argument("--save-dir", type=str, default=".", help="Directory for output")
    args = parser.parse_args()

    if args.n_trials <= 0:
        parser.error("--n-trials must be positive")
    if not 0.0 <= args.randomness < 1.0:
        parser.error("--randomness must be in [0, 1)")

    levels = SWEEP_LEVELS if args.sweep else (args.randomness,)

    print("=" * 70)
    print("DECRYPTION TRIALS")
    print(f"Trials per level: {args.n_trials}, levels: {list(levels)}")
    print("=" * 70)

    results: list[dict] = []
    for level in levels:
        print()
        result = run_trials(args.n_trials, level, seed=args.seed,
                            right_alignment=args.right_alignment,
                            secondary=args.secondary)
        print_trial_summary(result)
        print(result["stats"].format_report())
        results.append(result)

    if args.sweep:
        print_sweep_table(results)
        if not args.no_plots:
            print("\nGenerating plots...")
            plot_sweep(results, Path(args.save_dir))


if __name__ == "__main__":
    main()
