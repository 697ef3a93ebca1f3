"""
---
version: 0.3.0
created: 2026-10-12
updated: 2026-10-18
---

disproof.py — Shared module for noisy-substitution candidate disproof.

A ciphertext is a candidate plaintext pushed through one secret bijective
substitution over 27 symbols, with uniformly random symbols inserted at
unknown positions. Given a fixed list of equal-length candidates, the engine
proves candidates impossible ("refutes" them) and picks the survivor.

Seven sections:
  1. Alphabet codec (27 symbols <-> integers 0-26)
  2. Position index (text -> 27 ascending position lists)
  3. Pair disprover (population test, alignment test, right-alignment mirror)
  4. Disproof table and statistics collector
  5. Plaintext refuter (table fill, elimination, axioms, secondary disproof)
  6. Candidate selector (validation, refutation, frequency tie-break)
  7. Output utils (table formatting, plots)
"""

from __future__ import annotations

import string
import warnings
from bisect import bisect_right
from collections.abc import Sequence
from pathlib import Path

import numpy as np

# ============================================================================
# 1. ALPHABET CODEC
# ============================================================================

ALPHABET: str = string.ascii_lowercase + " "
N_SYMBOLS: int = len(ALPHABET)  # 27
SPACE: int = 26

_CHAR_TO_SYMBOL: dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}

# Total pairs tested per candidate.
N_PAIRS: int = N_SYMBOLS * N_SYMBOLS


def char_to_symbol(ch: str) -> int:
    """Map 'a'-'z' to 0-25 and space to 26."""
    try:
        return _CHAR_TO_SYMBOL[ch]
    except KeyError:
        raise ValueError(f"Character {ch!r} is outside the 27-symbol alphabet") from None


def symbol_to_char(symbol: int) -> str:
    """Inverse of char_to_symbol."""
    if not 0 <= symbol < N_SYMBOLS:
        raise ValueError(f"Symbol {symbol} is outside 0-{N_SYMBOLS - 1}")
    return ALPHABET[symbol]


def is_valid_text(text: str) -> bool:
    """True if every character is a lowercase ASCII letter or a space."""
    return all(c in _CHAR_TO_SYMBOL for c in text)


def text_to_symbols(text: str) -> np.ndarray:
    """
    Encode a text as a uint8 symbol array.

    Raises:
        ValueError: If any character is outside the alphabet.
    """
    return np.fromiter((char_to_symbol(c) for c in text), dtype=np.uint8, count=len(text))


def symbols_to_text(symbols: Sequence[int] | np.ndarray) -> str:
    """Decode a symbol sequence back into a string."""
    return "".join(symbol_to_char(int(s)) for s in symbols)


# ============================================================================
# 2. POSITION INDEX
# ============================================================================

def build_position_index(symbols: Sequence[int] | np.ndarray) -> list[list[int]]:
    """
    Build 27 ascending position lists, one per symbol.

    index[s] holds every i with symbols[i] == s, in increasing order. The
    union of all lists recovers the text.
    """
    index: list[list[int]] = [[] for _ in range(N_SYMBOLS)]
    for i, s in enumerate(symbols):
        index[int(s)].append(i)
    return index


def index_text(text: str) -> list[list[int]]:
    """Convenience: codec + position index for a raw string."""
    return build_position_index(text_to_symbols(text))


def mirror_positions(positions: Sequence[int], length: int) -> list[int]:
    """
    Reflect a position list about the end of a text of the given length.

    The result is again ascending: the last occurrence becomes index 0.
    """
    return [length - 1 - i for i in reversed(positions)]


# ============================================================================
# 3. PAIR DISPROVER
# ============================================================================

def population_test(
    cipher_positions: Sequence[int],
    plaintext_positions: Sequence[int],
    noise: int,
) -> bool:
    """
    Count bound: every plaintext occurrence needs one cipher occurrence, and
    at most `noise` cipher occurrences can be inserted symbols.

    Returns True if the pair is disproved.
    """
    cp = len(cipher_positions)
    pp = len(plaintext_positions)
    return cp < pp or cp > pp + noise


def alignment_test(
    cipher_positions: Sequence[int],
    plaintext_positions: Sequence[int],
    noise: int,
) -> bool:
    """
    Order/offset bound via greedy bounded subsequence matching.

    Plaintext occurrence i can only land at cipher index i + n, where n is
    the number of symbols inserted before it: n never decreases along the
    text and never exceeds `noise`. Each occurrence takes the earliest cipher
    position in [i + noise_used, i + noise]. The cursor into cipher_positions
    only moves forward.

    Returns True if the pair is disproved.
    """
    cursor = 0
    n_cipher = len(cipher_positions)
    noise_used = 0
    for i in plaintext_positions:
        low = i + noise_used
        high = i + noise
        while cursor < n_cipher and cipher_positions[cursor] < low:
            cursor += 1
        if cursor == n_cipher or cipher_positions[cursor] > high:
            return True
        noise_used = cipher_positions[cursor] - i
        cursor += 1
    return False


def right_alignment_test(
    cipher_positions: Sequence[int],
    plaintext_positions: Sequence[int],
    noise: int,
    plaintext_length: int,
) -> bool:
    """
    Alignment test run from the end of both texts.

    Counts noise inserted after each occurrence instead of before it.
    The ciphertext length is plaintext_length + noise.
    """
    return alignment_test(
        mirror_positions(cipher_positions, plaintext_length + noise),
        mirror_positions(plaintext_positions, plaintext_length),
        noise,
    )


def disprove_pair(
    cipher_positions: Sequence[int],
    plaintext_positions: Sequence[int],
    noise: int,
    stats: DisproofStats | None = None,
    plaintext_length: int | None = None,
) -> bool:
    """
    Decide whether cipher symbol -> plaintext symbol is structurally impossible.

    Args:
        cipher_positions: Ascending positions of the cipher symbol.
        plaintext_positions: Ascending positions of the plaintext symbol.
        noise: Ciphertext length minus plaintext length.
        stats: Optional collector; the first test that fires is credited.
        plaintext_length: If given, also run the right-alignment mirror.

    Returns:
        True if the pair is disproved.
    """
    if population_test(cipher_positions, plaintext_positions, noise):
        if stats is not None:
            stats.population += 1
        return True
    if alignment_test(cipher_positions, plaintext_positions, noise):
        if stats is not None:
            stats.alignment += 1
        return True
    if plaintext_length is not None and right_alignment_test(
        cipher_positions, plaintext_positions, noise, plaintext_length
    ):
        if stats is not None:
            stats.right_alignment += 1
        return True
    return False


# ============================================================================
# 4. DISPROOF TABLE AND STATISTICS
# ============================================================================

class DisproofTable:
    """
    27x27 record of disproved (cipher symbol, plaintext symbol) pairs.

    cells[c, p] is True when cipher symbol c cannot encrypt plaintext
    symbol p. Cells are only ever set, never cleared. One table belongs to
    one refutation of one candidate.
    """

    def __init__(self) -> None:
        self._cells = np.zeros((N_SYMBOLS, N_SYMBOLS), dtype=bool)

    def write_disproven(self, cipher_symbol: int, plaintext_symbol: int) -> None:
        self._cells[cipher_symbol, plaintext_symbol] = True

    def is_disproven(self, cipher_symbol: int, plaintext_symbol: int) -> bool:
        return bool(self._cells[cipher_symbol, plaintext_symbol])

    def row_fully_eliminated(self, cipher_symbol: int) -> bool:
        """Cipher symbol c can decrypt to nothing."""
        return bool(self._cells[cipher_symbol].all())

    def column_fully_eliminated(self, plaintext_symbol: int) -> bool:
        """Plaintext symbol p can encrypt to nothing."""
        return bool(self._cells[:, plaintext_symbol].all())

    def any_fully_eliminated(self) -> bool:
        return bool(self._cells.all(axis=1).any() or self._cells.all(axis=0).any())

    def axiom_at_row(self, cipher_symbol: int) -> tuple[int, int] | None:
        """The single surviving pair in row c, if exactly one survives."""
        survivors = np.flatnonzero(~self._cells[cipher_symbol])
        if len(survivors) == 1:
            return (cipher_symbol, int(survivors[0]))
        return None

    def axiom_at_column(self, plaintext_symbol: int) -> tuple[int, int] | None:
        """The single surviving pair in column p, if exactly one survives."""
        survivors = np.flatnonzero(~self._cells[:, plaintext_symbol])
        if len(survivors) == 1:
            return (int(survivors[0]), plaintext_symbol)
        return None

    def axiomatic_pairs(self) -> list[tuple[int, int]]:
        """
        Pairs forced by elimination: rows first, then columns, deduplicated.

        A pair found through both its row and its column appears once.
        """
        axioms: list[tuple[int, int]] = []
        for c in range(N_SYMBOLS):
            axiom = self.axiom_at_row(c)
            if axiom is not None:
                axioms.append(axiom)
        for p in range(N_SYMBOLS):
            axiom = self.axiom_at_column(p)
            if axiom is not None and axiom not in axioms:
                axioms.append(axiom)
        return axioms

    def count_disproven(self) -> int:
        return int(self._cells.sum())

    def as_array(self) -> np.ndarray:
        """Read-only copy of the boolean cells."""
        cells = self._cells.copy()
        cells.flags.writeable = False
        return cells

    def format_table(self) -> str:
        """Grid view: rows are cipher symbols, '#' disproved, '.' open."""
        labels = [symbol_to_char(s).replace(" ", "_") for s in range(N_SYMBOLS)]
        lines = ["   " + "".join(labels)]
        for c in range(N_SYMBOLS):
            row = "".join("#" if cell else "." for cell in self._cells[c])
            lines.append(f" {labels[c]} {row}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format_table()


def axioms_conflict(axioms: Sequence[tuple[int, int]]) -> bool:
    """True if two distinct axioms share a cipher or a plaintext symbol."""
    seen_cipher: set[int] = set()
    seen_plain: set[int] = set()
    for c, p in dict.fromkeys(axioms):
        if c in seen_cipher or p in seen_plain:
            return True
        seen_cipher.add(c)
        seen_plain.add(p)
    return False


class DisproofStats:
    """
    Counters for how pairs and candidates were disproved.

    Passed explicitly into refute()/disprove_pair(); callers merge collectors
    when they want totals across candidates or runs.
    """

    FIELDS: tuple[str, ...] = (
        "population", "alignment", "right_alignment", "secondary",
        "candidates", "refuted",
    )

    def __init__(self) -> None:
        self.population = 0
        self.alignment = 0
        self.right_alignment = 0
        self.secondary = 0
        self.candidates = 0
        self.refuted = 0

    def total(self) -> int:
        """Pairs disproved by any test."""
        return self.population + self.alignment + self.right_alignment + self.secondary

    def merge(self, other: DisproofStats) -> DisproofStats:
        for name in self.FIELDS:
            setattr(self, name, getattr(self, name) + getattr(other, name))
        return self

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in self.FIELDS}

    def format_report(self) -> str:
        total = self.total()
        max_pairs = N_PAIRS * max(self.candidates, 1)
        lines = [f"Total disproof: {total}/{max_pairs}, {total / max_pairs:.2%}"]
        for label, count in [
            ("Population disproof", self.population),
            ("Alignment disproof", self.alignment),
            ("Right alignment disproof", self.right_alignment),
            ("Secondary disproof", self.secondary),
        ]:
            share = count / total if total else 0.0
            lines.append(f"{label}: {count}/{total}, {share:.2%}")
        lines.append(f"Candidates refuted: {self.refuted}/{self.candidates}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self.as_dict().items())
        return f"DisproofStats({fields})"


# ============================================================================
# 5. PLAINTEXT REFUTER
# ============================================================================

def _pair_subsequence_holds(
    pair1: tuple[int, int],
    pair2: tuple[int, int],
    candidate_positions: Sequence[Sequence[int]],
    ciphertext_positions: Sequence[Sequence[int]],
) -> bool:
    """
    Check that the candidate, restricted to the two plaintext symbols and
    mapped through both pairs, is a subsequence of the ciphertext.
    """
    (c1, p1), (c2, p2) = pair1, pair2
    events = sorted(
        [(i, c1) for i in candidate_positions[p1]]
        + [(i, c2) for i in candidate_positions[p2]]
    )
    at = -1
    for _, c in events:
        positions = ciphertext_positions[c]
        k = bisect_right(positions, at)
        if k == len(positions):
            return False
        at = positions[k]
    return True


def secondary_disproof(
    table: DisproofTable,
    axioms: list[tuple[int, int]],
    candidate_positions: Sequence[Sequence[int]],
    ciphertext_positions: Sequence[Sequence[int]],
    stats: DisproofStats | None = None,
) -> bool:
    """
    Test every open pair against every axiom; disprove pairs that cannot
    coexist with an axiom.

    Newly forced axioms are appended to `axioms` and tested in turn. Pairs
    sharing a symbol with the axiom under test are skipped.

    Returns:
        True if the candidate is refuted (a row or column empties, or the
        final axiom set conflicts).
    """
    k = 0
    while k < len(axioms):
        c1, p1 = axioms[k]
        for c2 in range(N_SYMBOLS):
            if c2 == c1:
                continue
            for p2 in range(N_SYMBOLS):
                if p2 == p1 or table.is_disproven(c2, p2) or (c2, p2) in axioms:
                    continue
                if _pair_subsequence_holds(
                    (c1, p1), (c2, p2), candidate_positions, ciphertext_positions
                ):
                    continue
                if stats is not None:
                    stats.secondary += 1
                table.write_disproven(c2, p2)
                if table.row_fully_eliminated(c2) or table.column_fully_eliminated(p2):
                    return True
                for axiom in (table.axiom_at_row(c2), table.axiom_at_column(p2)):
                    if axiom is not None and axiom not in axioms:
                        axioms.append(axiom)
        k += 1
    return axioms_conflict(axioms)


def refute(
    candidate_positions: Sequence[Sequence[int]],
    ciphertext_positions: Sequence[Sequence[int]],
    noise: int,
    stats: DisproofStats | None = None,
    table: DisproofTable | None = None,
    right_alignment: bool = False,
    secondary: bool = False,
) -> bool:
    """
    Decide whether a candidate plaintext cannot be the source of a ciphertext.

    Args:
        candidate_positions: 27 position lists of the candidate.
        ciphertext_positions: 27 position lists of the ciphertext.
        noise: Ciphertext length minus candidate length.
        stats: Optional collector for disproof counts.
        table: Table to fill; a fresh one is created when omitted. Cells
            already set are kept and not re-tested.
        right_alignment: Also run the right-alignment mirror test per pair.
        secondary: Run the secondary (axiom + open pair) disproof pass.

    Returns:
        True if refuted, False if the candidate survives.
    """
    if table is None:
        table = DisproofTable()
    refuted = _refute_into(
        candidate_positions, ciphertext_positions, noise, stats, table,
        right_alignment, secondary,
    )
    if stats is not None:
        stats.candidates += 1
        stats.refuted += int(refuted)
    return refuted


def _refute_into(
    candidate_positions: Sequence[Sequence[int]],
    ciphertext_positions: Sequence[Sequence[int]],
    noise: int,
    stats: DisproofStats | None,
    table: DisproofTable,
    right_alignment: bool,
    secondary: bool,
) -> bool:
    # A ciphertext shorter than the candidate cannot come from it.
    if noise < 0:
        return True

    plaintext_length = None
    if right_alignment:
        plaintext_length = sum(len(positions) for positions in candidate_positions)

    for c in range(N_SYMBOLS):
        for p in range(N_SYMBOLS):
            if table.is_disproven(c, p):
                continue
            if disprove_pair(
                ciphertext_positions[c], candidate_positions[p], noise,
                stats, plaintext_length,
            ):
                table.write_disproven(c, p)

    if table.any_fully_eliminated():
        return True

    axioms = table.axiomatic_pairs()
    if axioms_conflict(axioms):
        return True

    if secondary:
        return secondary_disproof(
            table, axioms, candidate_positions, ciphertext_positions, stats
        )
    return False


def refute_text(
    candidate: str,
    ciphertext: str,
    stats: DisproofStats | None = None,
    table: DisproofTable | None = None,
    right_alignment: bool = False,
    secondary: bool = False,
) -> bool:
    """Convenience: refute() straight from raw strings."""
    return refute(
        index_text(candidate),
        index_text(ciphertext),
        len(ciphertext) - len(candidate),
        stats,
        table,
        right_alignment=right_alignment,
        secondary=secondary,
    )


# ============================================================================
# 6. CANDIDATE SELECTOR
# ============================================================================

def validate_input(candidates: Sequence[str], ciphertext: str) -> None:
    """
    Check the corpus and ciphertext before any refutation.

    Raises:
        ValueError: On a non-sequence or empty corpus, non-string input,
            characters outside the alphabet, mixed candidate lengths, or a
            ciphertext shorter than the candidates.
    """
    if isinstance(candidates, str) or not isinstance(candidates, Sequence):
        raise ValueError("Candidates must be a list or tuple of strings")
    if not candidates:
        raise ValueError("Candidate list is empty")
    if not isinstance(ciphertext, str):
        raise ValueError("Ciphertext must be a string")
    if not is_valid_text(ciphertext):
        raise ValueError("Ciphertext contains characters outside a-z and space")
    if not all(isinstance(c, str) for c in candidates):
        raise ValueError("Every candidate must be a string")
    length = len(candidates[0])
    for i, candidate in enumerate(candidates):
        if len(candidate) != length:
            raise ValueError(
                f"Candidate {i} has length {len(candidate)}, expected {length}"
            )
        if not is_valid_text(candidate):
            raise ValueError(f"Candidate {i} contains characters outside a-z and space")
    if len(ciphertext) < length:
        raise ValueError(
            f"Ciphertext length {len(ciphertext)} is shorter than candidate length {length}"
        )


def symbol_histogram(symbols: Sequence[int] | np.ndarray, noise: int) -> np.ndarray:
    """
    27-bin frequency histogram with the noise budget spread evenly.

    Each bin is (count + noise/27) / (length + noise).
    """
    counts = np.bincount(np.asarray(symbols, dtype=np.int64), minlength=N_SYMBOLS)
    denom = len(symbols) + noise
    if denom == 0:
        return np.zeros(N_SYMBOLS, dtype=float)
    return (counts + noise / N_SYMBOLS) / denom


def frequency_distance(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> float:
    """
    Sum of squared differences between the two histograms, each sorted.

    Sorting discards which symbol owns which frequency; only the multiset of
    frequencies is comparable under an unknown substitution.
    """
    from scipy.spatial import distance as sp_distance

    return float(sp_distance.sqeuclidean(np.sort(np.asarray(a, dtype=float)),
                                         np.sort(np.asarray(b, dtype=float))))


def closest_histogram(target: Sequence[float] | np.ndarray, histograms: Sequence) -> int:
    """Index of the histogram nearest to target; first one wins ties."""
    scores = [frequency_distance(target, h) for h in histograms]
    return min(range(len(scores)), key=scores.__getitem__)


def rank_survivors(survivors: Sequence[str], ciphertext: str) -> list[float]:
    """
    Frequency-distance score of each survivor against the ciphertext.

    Lower is closer. Scores are returned in input order.
    """
    noise = len(ciphertext) - len(survivors[0])
    target = symbol_histogram(text_to_symbols(ciphertext), noise)
    return [
        frequency_distance(target, symbol_histogram(text_to_symbols(s), noise))
        for s in survivors
    ]


def analyze_candidates(
    candidates: Sequence[str],
    ciphertext: str,
    stats: DisproofStats | None = None,
    right_alignment: bool = False,
    secondary: bool = False,
) -> list[dict]:
    """
    Refute every candidate against the ciphertext, each with its own table.

    Returns a list (input order) of dicts with:
        candidate: the candidate text
        refuted: bool outcome
        table: the filled DisproofTable
        stats: this candidate's DisproofStats

    Raises:
        ValueError: If validate_input() rejects the input.
    """
    validate_input(candidates, ciphertext)
    cipher_positions = index_text(ciphertext)
    noise = len(ciphertext) - len(candidates[0])

    results: list[dict] = []
    for candidate in candidates:
        table = DisproofTable()
        cand_stats = DisproofStats()
        refuted = refute(
            index_text(candidate), cipher_positions, noise, cand_stats, table,
            right_alignment=right_alignment, secondary=secondary,
        )
        if stats is not None:
            stats.merge(cand_stats)
        results.append({
            "candidate": candidate,
            "refuted": refuted,
            "table": table,
            "stats": cand_stats,
        })
    return results


def decide(results: Sequence[dict], ciphertext: str) -> int | None:
    """
    Pick a candidate index from analyze_candidates() output.

    One survivor wins outright. Several survivors go to the frequency
    tie-break. No survivors means no decision.
    """
    survivors = [i for i, r in enumerate(results) if not r["refuted"]]
    if len(survivors) == 1:
        return survivors[0]
    if not survivors:
        warnings.warn(
            "Every candidate was refuted; the ciphertext matches none of them",
            RuntimeWarning,
        )
        return None
    scores = rank_survivors([results[i]["candidate"] for i in survivors], ciphertext)
    best = min(range(len(scores)), key=scores.__getitem__)
    return survivors[best]


def select_index(
    candidates: Sequence[str],
    ciphertext: str,
    stats: DisproofStats | None = None,
    right_alignment: bool = False,
    secondary: bool = False,
) -> int | None:
    """Index of the chosen candidate, or None for no decision."""
    try:
        results = analyze_candidates(
            candidates, ciphertext, stats,
            right_alignment=right_alignment, secondary=secondary,
        )
    except ValueError:
        return None
    return decide(results, ciphertext)


def select(
    candidates: Sequence[str],
    ciphertext: str,
    stats: DisproofStats | None = None,
    right_alignment: bool = False,
    secondary: bool = False,
) -> str | None:
    """
    Identify which candidate produced the ciphertext.

    Args:
        candidates: Equal-length candidate plaintexts.
        ciphertext: Observed ciphertext.
        stats: Optional collector, accumulated across all candidates.
        right_alignment: Enable the right-alignment mirror test.
        secondary: Enable the secondary disproof pass.

    Returns:
        The chosen candidate, or None when the input is malformed or every
        candidate is refuted.
    """
    index = select_index(
        candidates, ciphertext, stats,
        right_alignment=right_alignment, secondary=secondary,
    )
    if index is None:
        return None
    return candidates[index]


# ============================================================================
# 7. OUTPUT UTILS
# ============================================================================

def format_candidate_report(results: Sequence[dict], width: int = 60) -> str:
    """One line per candidate: index, outcome, pairs disproved, preview."""
    lines = [f"{'#':>3}  {'Outcome':<9} {'Disproved':>10}  Preview"]
    lines.append("-" * (27 + width))
    for i, r in enumerate(results):
        outcome = "REFUTED" if r["refuted"] else "survives"
        disproved = r["table"].count_disproven()
        lines.append(f"{i:>3}  {outcome:<9} {disproved:>6}/{N_PAIRS}  {r['candidate'][:width]}")
    return "\n".join(lines)


def plot_disproof_tables(
    results: Sequence[dict],
    save_path: str | Path | None = None,
) -> None:
    """
    Heatmap of each candidate's disproof table.

    Requires matplotlib (optional dependency).
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        warnings.warn("matplotlib not available; skipping plot")
        return

    labels = [symbol_to_char(s).replace(" ", "_") for s in range(N_SYMBOLS)]
    fig, axes = plt.subplots(1, len(results), figsize=(4 * len(results), 4), squeeze=False)

    for idx, r in enumerate(results):
        ax = axes[0][idx]
        ax.imshow(r["table"].as_array(), cmap="Greys", interpolation="nearest")
        outcome = "refuted" if r["refuted"] else "survives"
        ax.set_title(f"Candidate {idx} ({outcome})", fontsize=9)
        ax.set_xlabel("Plaintext symbol")
        ax.set_ylabel("Cipher symbol")
        ax.set_xticks(range(N_SYMBOLS))
        ax.set_xticklabels(labels, fontsize=5)
        ax.set_yticks(range(N_SYMBOLS))
        ax.set_yticklabels(labels, fontsize=5)

    plt.tight_layout()
    if save_path:
        plt.savefig(str(save_path), dpi=150, bbox_inches="tight")
        print(f"Saved: {save_path}")
    else:
        plt.show()
    plt.close(fig)


# ============================================================================
# SELF-TEST — Run when executed directly
# ============================================================================

def _self_test() -> None:
    """Spot-check the pair disprover, refuter and selector."""
    print("=== disproof.py self-test ===\n")

    # 1. Codec round trip
    text = "the quick brown fox"
    assert symbols_to_text(text_to_symbols(text)) == text
    print("Codec round trip: PASS")

    # 2. Pair disprover examples
    assert disprove_pair([0, 1], [0, 2], 0), "alignment example should disprove"
    assert disprove_pair([0, 1, 2], [0, 1], 0), "population example should disprove"
    assert not disprove_pair([0, 2], [0, 1], 1)
    print("Pair disprover examples: PASS")

    # 3. Selector
    stats = DisproofStats()
    assert select(["cat", "dad"], "xyz", stats) == "cat"
    assert select(["cat", "dog"], "xyz") == "cat"
    assert select([], "xyz") is None
    print("Selector examples: PASS\n")
    print(stats.format_report())

    print("\n=== Self-test complete ===")


if __name__ == "__main__":
    _self_test()
