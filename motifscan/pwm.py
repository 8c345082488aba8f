"""Frequency tables, log-odds score matrices and motif scanning."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

__all__ = [
    "BASES",
    "Hit",
    "background_probabilities",
    "frequency_table",
    "log_odds_matrix",
    "score",
    "scan",
    "find_hits",
]

BASES = "ACGT"

# Base counts of the reference genome used as background.
_AT_COUNT = 7519429
_CG_COUNT = 4637676
_BACKGROUND_COUNTS = {"A": _AT_COUNT, "C": _CG_COUNT, "G": _CG_COUNT, "T": _AT_COUNT}

Matrix = Mapping[str, Sequence[float]]


@dataclass(frozen=True)
class Hit:
    """A window of a sequence whose score reached the threshold."""

    position: int  # 1-based start of the window
    site: str
    score: float


def background_probabilities() -> dict[str, float]:
    """Return the background probability of each base."""
    total = sum(_BACKGROUND_COUNTS.values())
    return {base: count / total for base, count in _BACKGROUND_COUNTS.items()}


def frequency_table(motifs: Sequence[str]) -> dict[str, list[int]]:
    """Count each base at each position of the aligned binding sites.

    The width is that of the first motif; longer motifs are cut to it and
    characters other than A, C, G and T are not counted.
    """
    width = len(motifs[0]) if motifs else 0
    freq = {base: [0] * width for base in BASES}
    for motif in motifs:
        for position, char in enumerate(motif[:width]):
            if char in freq:
                freq[char][position] += 1
    return freq


def log_odds_matrix(freq: Mapping[str, Sequence[int]], seq_count: int) -> dict[str, list[float]]:
    """Build the log-odds score matrix from a frequency table, with a pseudocount of one."""
    background = background_probabilities()
    total = seq_count + len(BASES)
    return {
        base: [math.log(((count + 1) / total) / background[base]) for count in freq[base]]
        for base in BASES
    }


def _width(matrix: Matrix) -> int:
    return len(matrix[BASES[0]])


def score(matrix: Matrix, window: str) -> float:
    """Score *window* against *matrix*; unknown characters and positions past either end add nothing."""
    width = _width(matrix)
    return sum(
        matrix[char][position]
        for position, char in enumerate(window[:width])
        if char in BASES
    )


def scan(matrix: Matrix, sequence: str) -> list[float]:
    """Score every window of *sequence*, stopping one window short of its end."""
    width = _width(matrix)
    return [score(matrix, sequence[start:start + width]) for start in range(len(sequence) - width)]


def find_hits(matrix: Matrix, sequence: str, threshold: float) -> list[Hit]:
    """Return the windows of *sequence* whose score is at least *threshold*."""
    width = _width(matrix)
    return [
        Hit(position=start + 1, site=sequence[start:start + width], score=value)
        for start, value in enumerate(scan(matrix, sequence))
        if value >= threshold
    ]