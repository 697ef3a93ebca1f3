"""
---
version: 0.2.0
created: 2026-10-12
updated: 2026-10-16
---

challenge.py — Noisy monoalphabetic substitution oracle.

Produces (plaintext, ciphertext) challenges: a uniformly random bijective key
over the 27-symbol alphabet, applied symbol by symbol, with uniformly random
symbols inserted (not substituted) with a fixed probability before each
emitted symbol. The engine in disproof.py never sees the key.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from disproof import N_SYMBOLS, symbols_to_text, text_to_symbols

DEFAULT_RANDOMNESS: float = 0.2
DEFAULT_SEED: int = 42


def generate_key(rng: np.random.Generator | None = None) -> np.ndarray:
    """Uniform random permutation of 0..26: key[p] is the cipher symbol for p."""
    if rng is None:
        rng = np.random.default_rng()
    return rng.permutation(N_SYMBOLS).astype(np.uint8)


def _check_key(key: Sequence[int] | np.ndarray) -> np.ndarray:
    key = np.asarray(key)
    if key.shape != (N_SYMBOLS,) or sorted(int(k) for k in key) != list(range(N_SYMBOLS)):
        raise ValueError(f"Key must be a permutation of 0..{N_SYMBOLS - 1}")
    return key.astype(np.uint8)


def noisy_substitution(
    plaintext: Sequence[int] | np.ndarray,
    key: Sequence[int] | np.ndarray,
    randomness: float,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """
    Encrypt a symbol sequence with random insertions.

    At each step, with probability `randomness` emit a uniformly random
    symbol and stay on the current plaintext symbol; otherwise emit
    key[plaintext symbol] and advance.

    Args:
        plaintext: Symbol sequence (values 0-26).
        key: Permutation of 0..26.
        randomness: Insertion probability, in [0, 1).
        rng: NumPy random generator (for reproducibility).

    Returns:
        uint8 array, at least as long as the plaintext.

    Raises:
        ValueError: If randomness is outside [0, 1) or key is not a permutation.
    """
    if not 0.0 <= randomness < 1.0:
        raise ValueError(f"randomness must be in [0, 1), got {randomness}")
    key = _check_key(key)
    if rng is None:
        rng = np.random.default_rng()

    result: list[int] = []
    index = 0
    while index < len(plaintext):
        if rng.random() < randomness:
            result.append(int(rng.integers(0, N_SYMBOLS)))
        else:
            result.append(int(key[int(plaintext[index])]))
            index += 1
    return np.array(result, dtype=np.uint8)


def encrypt(
    plaintext: str,
    key: Sequence[int] | np.ndarray,
    randomness: float = 0.0,
    rng: np.random.Generator | None = None,
) -> str:
    """String-level wrapper around noisy_substitution()."""
    return symbols_to_text(noisy_substitution(text_to_symbols(plaintext), key, randomness, rng))


def generate_challenge(
    candidates: Sequence[str],
    randomness: float = DEFAULT_RANDOMNESS,
    rng: np.random.Generator | None = None,
) -> tuple[str, str]:
    """
    Draw a key and a candidate, then encrypt it.

    Returns:
        (plaintext, ciphertext)

    Raises:
        ValueError: If candidates is empty or randomness is out of range.
    """
    if not candidates:
        raise ValueError("No candidates to choose from")
    if rng is None:
        rng = np.random.default_rng()
    key = generate_key(rng)
    plaintext = candidates[int(rng.integers(0, len(candidates)))]
    return plaintext, encrypt(plaintext, key, randomness, rng)
