"""Tests for the codec, position index, pair disprover, table and refuter."""

from __future__ import annotations

import numpy as np
import pytest

from disproof import (
    N_PAIRS, N_SYMBOLS, SPACE,
    DisproofStats, DisproofTable,
    alignment_test, axioms_conflict, build_position_index, char_to_symbol,
    disprove_pair, index_text, is_valid_text, mirror_positions,
    population_test, refute, refute_text, right_alignment_test,
    secondary_disproof, symbol_to_char, symbols_to_text, text_to_symbols,
)


# ----------------------------------------------------------------------------
# Codec
# ----------------------------------------------------------------------------

def test_codec_maps_letters_and_space():
    assert char_to_symbol("a") == 0
    assert char_to_symbol("z") == 25
    assert char_to_symbol(" ") == SPACE
    assert symbol_to_char(26) == " "
    assert symbols_to_text(text_to_symbols("hello world")) == "hello world"


@pytest.mark.parametrize("bad", ["A", "1", ".", "\n", "é"])
def test_codec_rejects_characters_outside_alphabet(bad):
    with pytest.raises(ValueError):
        char_to_symbol(bad)
    assert not is_valid_text(f"ab{bad}")


def test_symbol_to_char_rejects_out_of_range():
    with pytest.raises(ValueError):
        symbol_to_char(N_SYMBOLS)


# ----------------------------------------------------------------------------
# Position index
# ----------------------------------------------------------------------------

def test_position_index_lists_are_ascending_and_complete():
    index = index_text("abca b")
    assert len(index) == N_SYMBOLS
    assert index[0] == [0, 3]
    assert index[1] == [1, 5]
    assert index[2] == [2]
    assert index[SPACE] == [4]
    assert sorted(i for positions in index for i in positions) == list(range(6))


def test_position_index_accepts_numpy_symbols():
    index = build_position_index(np.array([26, 26, 0], dtype=np.uint8))
    assert index[26] == [0, 1]
    assert index[0] == [2]


def test_mirror_positions():
    assert mirror_positions([0, 2, 3], 5) == [1, 2, 4]
    assert mirror_positions([], 5) == []


# ----------------------------------------------------------------------------
# Pair disprover
# ----------------------------------------------------------------------------

def test_alignment_example_is_disproved():
    # plaintext "aba": 'a' at [0, 2]; cipher symbol at [0, 1]; no noise
    assert alignment_test([0, 1], [0, 2], 0)
    assert disprove_pair([0, 1], [0, 2], 0)


def test_population_example_is_disproved():
    # plaintext "aab": 'a' twice; cipher symbol three times; no noise
    assert population_test([0, 1, 2], [0, 1], 0)
    assert disprove_pair([0, 1, 2], [0, 1], 0)


def test_population_bounds():
    assert population_test([0], [0, 1], 5)          # too few
    assert not population_test([0, 1, 4], [0, 1], 1)
    assert population_test([0, 1, 4, 5], [0, 1], 1)  # too many
    assert not population_test([], [], 0)


def test_population_property_on_random_texts():
    rng = np.random.default_rng(7)
    for _ in range(20):
        plain = rng.integers(0, 5, size=12)
        cipher = rng.integers(0, 5, size=int(rng.integers(12, 18)))
        noise = len(cipher) - len(plain)
        p_index = build_position_index(plain)
        c_index = build_position_index(cipher)
        for c in range(5):
            for p in range(5):
                cp, pp = len(c_index[c]), len(p_index[p])
                if cp < pp or cp > pp + noise:
                    assert disprove_pair(c_index[c], p_index[p], noise)


def test_alignment_allows_shift_within_noise():
    assert not alignment_test([0, 2], [0, 1], 1)
    assert not alignment_test([1, 2], [0, 1], 1)
    # second occurrence would need two inserted symbols
    assert alignment_test([0, 3], [0, 1], 1)


def test_alignment_noise_used_is_monotonic():
    # first occurrence consumes the full budget, so the second cannot shift back
    assert alignment_test([2, 3], [0, 3], 2)
    assert not alignment_test([2, 5], [0, 3], 2)


def test_alignment_with_no_plaintext_occurrences():
    assert not alignment_test([0, 1, 2], [], 3)


def test_right_alignment_measures_from_the_end():
    # plaintext length 2, one insertion: plaintext index 0 may sit at cipher 0 or 1
    assert not right_alignment_test([0], [0], 1, 2)
    assert not right_alignment_test([1], [0], 1, 2)
    assert right_alignment_test([2], [0], 1, 2)


def test_right_alignment_agrees_with_left_alignment():
    rng = np.random.default_rng(11)
    for _ in range(200):
        length = int(rng.integers(1, 12))
        noise = int(rng.integers(0, 4))
        plain = sorted(rng.choice(length, size=int(rng.integers(0, length + 1)), replace=False))
        cipher = sorted(rng.choice(length + noise, size=int(rng.integers(0, length + noise + 1)),
                                   replace=False))
        plain = [int(i) for i in plain]
        cipher = [int(i) for i in cipher]
        assert alignment_test(cipher, plain, noise) == right_alignment_test(
            cipher, plain, noise, length
        )


def test_disprove_pair_credits_one_test():
    stats = DisproofStats()
    disprove_pair([0, 1, 2], [0, 1], 0, stats)
    disprove_pair([0, 1], [0, 2], 0, stats)
    disprove_pair([0], [0], 0, stats)
    assert stats.population == 1
    assert stats.alignment == 1
    assert stats.total() == 2


# ----------------------------------------------------------------------------
# Disproof table
# ----------------------------------------------------------------------------

def test_table_write_is_idempotent_and_monotonic():
    table = DisproofTable()
    assert not table.is_disproven(3, 4)
    table.write_disproven(3, 4)
    table.write_disproven(3, 4)
    assert table.is_disproven(3, 4)
    assert table.count_disproven() == 1


def test_row_and_column_elimination():
    table = DisproofTable()
    for p in range(N_SYMBOLS):
        table.write_disproven(5, p)
    assert table.row_fully_eliminated(5)
    assert not table.column_fully_eliminated(0)
    assert table.any_fully_eliminated()

    table = DisproofTable()
    for c in range(N_SYMBOLS):
        table.write_disproven(c, 9)
    assert table.column_fully_eliminated(9)
    assert table.any_fully_eliminated()


def _leave_only(table: DisproofTable, row: int, column: int) -> None:
    for p in range(N_SYMBOLS):
        if p != column:
            table.write_disproven(row, p)


def test_axiomatic_pairs_dedupes_row_and_column():
    table = DisproofTable()
    _leave_only(table, 2, 7)
    for c in range(N_SYMBOLS):
        if c != 2:
            table.write_disproven(c, 7)
    assert table.axiom_at_row(2) == (2, 7)
    assert table.axiom_at_column(7) == (2, 7)
    assert table.axiomatic_pairs() == [(2, 7)]


def test_axioms_conflict():
    assert not axioms_conflict([(1, 2), (3, 4)])
    assert not axioms_conflict([(1, 2), (1, 2)])
    assert axioms_conflict([(1, 2), (3, 2)])
    assert axioms_conflict([(1, 2), (1, 4)])


def test_as_array_is_read_only_copy():
    table = DisproofTable()
    cells = table.as_array()
    assert cells.shape == (N_SYMBOLS, N_SYMBOLS)
    with pytest.raises(ValueError):
        cells[0, 0] = True


def test_format_table_shape():
    table = DisproofTable()
    table.write_disproven(0, 0)
    lines = table.format_table().splitlines()
    assert len(lines) == N_SYMBOLS + 1
    assert lines[1].endswith("#" + "." * (N_SYMBOLS - 1))


# ----------------------------------------------------------------------------
# Refuter
# ----------------------------------------------------------------------------

EMPTY = [[] for _ in range(N_SYMBOLS)]


def test_refute_full_row_elimination():
    table = DisproofTable()
    for p in range(N_SYMBOLS):
        table.write_disproven(4, p)
    assert refute(EMPTY, EMPTY, 0, table=table)


def test_refute_full_column_elimination():
    table = DisproofTable()
    for c in range(N_SYMBOLS):
        table.write_disproven(c, 11)
    assert refute(EMPTY, EMPTY, 0, table=table)


def test_refute_conflicting_axioms():
    table = DisproofTable()
    _leave_only(table, 1, 5)
    _leave_only(table, 2, 5)
    assert refute(EMPTY, EMPTY, 0, table=table)


def _leave_only_in_column(table: DisproofTable, column: int, row: int) -> None:
    for c in range(N_SYMBOLS):
        if c != row:
            table.write_disproven(c, column)


def test_refute_conflicting_column_axioms():
    # two plaintext symbols left with the same single cipher symbol
    table = DisproofTable()
    _leave_only_in_column(table, 5, 1)
    _leave_only_in_column(table, 6, 1)
    assert table.axiomatic_pairs() == [(1, 5), (1, 6)]
    assert refute(EMPTY, EMPTY, 0, table=table)


def test_refute_single_axiom_survives():
    table = DisproofTable()
    _leave_only(table, 1, 5)
    assert not refute(EMPTY, EMPTY, 0, table=table)


def test_refute_text_substitution_only():
    assert not refute_text("cat", "xyz")
    assert not refute_text("dog", "xyz")
    assert refute_text("dad", "xyz")


def test_refute_text_short_ciphertext_is_refuted():
    assert refute_text("abcd", "abc")


def test_refute_counts_into_stats():
    stats = DisproofStats()
    table = DisproofTable()
    refute_text("cat", "xyz", stats, table)
    assert stats.candidates == 1
    assert stats.refuted == 0
    assert stats.total() == table.count_disproven()

    refute_text("dad", "xyz", stats)
    assert stats.candidates == 2
    assert stats.refuted == 1


def test_secondary_disproof_removes_pairs_inconsistent_with_axiom():
    # candidate "ab", ciphertext "ba"; axiom: cipher 'b' encrypts plaintext 'a'
    candidate = index_text("ab")
    cipher = index_text("ba")
    table = DisproofTable()
    stats = DisproofStats()
    refuted = secondary_disproof(table, [(1, 0)], candidate, cipher, stats)
    assert not refuted
    # cipher 'a' after cipher 'b' can still encrypt plaintext 'b'
    assert not table.is_disproven(0, 1)
    # absent cipher symbols cannot encrypt plaintext 'b'
    assert table.is_disproven(2, 1)
    assert table.is_disproven(SPACE, 1)
    assert stats.secondary == N_SYMBOLS - 2


def test_secondary_disproof_refutes_when_a_row_empties():
    candidate = index_text("ab")
    cipher = index_text("ba")
    table = DisproofTable()
    # cipher symbol 'c' is left with plaintext 'b' as its only option
    _leave_only(table, 2, 1)
    stats = DisproofStats()
    assert secondary_disproof(table, [(1, 0)], candidate, cipher, stats)
    assert table.row_fully_eliminated(2)
    assert stats.secondary == 1


def test_secondary_disproof_tests_newly_forced_axioms():
    candidate = index_text("ab")
    cipher = index_text("ba")
    table = DisproofTable()
    table.write_disproven(1, 1)
    axioms = [(1, 0)]
    stats = DisproofStats()
    assert not secondary_disproof(table, axioms, candidate, cipher, stats)
    # column 'b' narrows to cipher 'a', which then forces its own round
    assert axioms == [(1, 0), (0, 1)]
    assert table.is_disproven(5, 0)
    assert not table.is_disproven(0, 0)
    assert stats.secondary == 2 * (N_SYMBOLS - 2)


def test_secondary_disproof_refutes_conflicting_forced_axiom():
    candidate = index_text("ab")
    cipher = index_text("ba")
    table = DisproofTable()
    table.write_disproven(0, 1)
    axioms = [(1, 0)]
    # column 'b' narrows to cipher 'b', which already encrypts 'a'
    assert secondary_disproof(table, axioms, candidate, cipher)
    assert axioms == [(1, 0), (1, 1)]
    assert axioms_conflict(axioms)


def test_stats_merge_and_report():
    a = DisproofStats()
    a.population = 3
    a.candidates = 1
    b = DisproofStats()
    b.alignment = 2
    b.candidates = 1
    b.refuted = 1
    a.merge(b)
    assert a.as_dict() == {
        "population": 3, "alignment": 2, "right_alignment": 0,
        "secondary": 0, "candidates": 2, "refuted": 1,
    }
    report = a.format_report()
    assert f"Total disproof: 5/{2 * N_PAIRS}" in report
    assert "Candidates refuted: 1/2" in report


def test_empty_stats_report_does_not_divide_by_zero():
    assert "Total disproof: 0/" in DisproofStats().format_report()
