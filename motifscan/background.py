"""Genome base totals and random background sequences."""

from __future__ import annotations

import random
from os import PathLike
from pathlib import Path
from typing import Protocol

from motifscan.sequences import Promoter

__all__ = [
    "genome_total",
    "random_sequence",
    "random_records",
    "append_random_records",
]

_GENOME_COUNTS = {"A": 7519429, "T": 7519429, "C": 4637676, "G": 4637876}

# Cumulative percent thresholds for drawing A, C and G; the rest is T.
_THRESHOLDS = ((31, "A"), (31 + 19, "C"), (31 + 19 * 2, "G"))


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


def genome_total() -> float:
    """Return the total number of bases in the reference genome."""
    return float(sum(_GENOME_COUNTS.values()))


def _draw(rng: _RandRange) -> str:
    roll = rng.randrange(100)
    for limit, base in _THRESHOLDS:
        if roll < limit:
            return base
    return "T"


def random_sequence(length: int, rng: _RandRange | None = None) -> str:
    """Return a random sequence of *length* bases, 31% A, 19% C, 19% G and 31% T."""
    rng = rng if rng is not None else random.Random()
    return "".join(_draw(rng) for _ in range(length))


def random_records(length: int, count: int = 5, rng: _RandRange | None = None) -> list[Promoter]:
    """Return *count* random sequences named by their index from 0."""
    rng = rng if rng is not None else random.Random()
    return [Promoter(name=str(index), seq=random_sequence(length, rng)) for index in range(count)]


def append_random_records(
    path: str | PathLike[str],
    length: int,
    count: int = 5,
    rng: _RandRange | None = None,
) -> list[Promoter]:
    """Append random records to the FASTA-like file at *path* and return them."""
    records = random_records(length, count, rng)
    with Path(path).open("a") as out:
        for record in records:
            out.write(f">{record.name}\n{record.seq}\n")
    return records