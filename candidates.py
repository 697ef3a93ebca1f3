"""
---
version: 0.1.0
created: 2026-10-12
updated: 2026-10-14
---

candidates.py — Hardcoded candidate plaintext corpus.

Every candidate is exactly CANDIDATE_LENGTH symbols drawn from the 27-symbol
alphabet (lowercase letters and space), so any one of them can be the source
of a challenge ciphertext.
"""

from __future__ import annotations

CANDIDATE_LENGTH: int = 100

CANDIDATES: tuple[str, ...] = (
    "the lighthouse keeper counted ships until the fog rolled over the harbor and every lantern went dark",
    "a quiet garden behind the old library grows tomatoes beans and sunflowers taller than the brick wall",
    "several engineers argued about the bridge design while the river kept rising beneath the scaffolding",
    "my grandmother kept a recipe box full of handwritten cards that smelled faintly of cinnamon and soot",
    "the orchestra tuned slowly as rain tapped against the tall windows of the concert hall on friday eve",
)


def get_candidates() -> list[str]:
    """Return a fresh list of the hardcoded candidate plaintexts."""
    return list(CANDIDATES)
