"""Reading binding-site motifs and promoter sequences from text files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

__all__ = [
    "Promoter",
    "parse_motifs",
    "parse_promoters",
    "read_motifs",
    "read_promoters",
]


@dataclass(frozen=True)
class Promoter:
    """A named promoter region of a gene."""

    name: str
    seq: str


def parse_motifs(text: str) -> list[str]:
    """Return the binding-site sequences in *text*, one per whitespace-separated word."""
    return text.split()


def parse_promoters(text: str) -> list[Promoter]:
    """Parse FASTA-like text into promoters.

    A word starting with ``>`` names the next sequence. A sequence with no
    header before it gets an empty name. A header with no sequence after it
    is dropped, and of two headers in a row the later one wins.
    """
    promoters: list[Promoter] = []
    name = ""
    for word in text.split():
        if word.startswith(">"):
            name = word[1:]
        else:
            promoters.append(Promoter(name=name, seq=word))
            name = ""
    return promoters


def read_motifs(path: str | PathLike[str]) -> list[str]:
    """Read binding-site sequences from the file at *path*."""
    return parse_motifs(Path(path).read_text())


def read_promoters(path: str | PathLike[str]) -> list[Promoter]:
    """Read promoter regions from the FASTA-like file at *path*."""
    return parse_promoters(Path(path).read_text())