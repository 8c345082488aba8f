"""Command-line entry point: motif reports, hit scans, score tracks and random backgrounds."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from motifscan.background import append_random_records
from motifscan.pwm import BASES, find_hits, frequency_table, log_odds_matrix, scan, score
from motifscan.sequences import Promoter, read_motifs, read_promoters

__all__ = ["main"]

REPORT_THRESHOLD = 6.0
SCAN_THRESHOLD = 5.0
DEFAULT_OUTPUT = "array.data"
DEFAULT_RECORDS = 5


class _InputError(Exception):
    """An input file could not be read."""


def _load_motifs(path: str) -> list[str]:
    try:
        return read_motifs(path)
    except OSError as exc:
        raise _InputError("motif_region_file open error.") from exc


def _load_promoters(path: str) -> list[Promoter]:
    try:
        return read_promoters(path)
    except OSError as exc:
        raise _InputError("scorefile open error.") from exc


def _reference_length(promoters: Sequence[Promoter]) -> int:
    """Length of the first promoter, which bounds the scan of every gene."""
    return len(promoters[0].seq) if promoters else 0


def _build_matrix(motifs: Sequence[str]) -> tuple[dict[str, list[int]], dict[str, list[float]]]:
    freq = frequency_table(motifs)
    return freq, log_odds_matrix(freq, len(motifs))


def _matrix_lines(matrix: dict[str, list[float]]) -> list[str]:
    return ["".join(f"{value:5.2f} " for value in matrix[base]) for base in BASES]


def _hit_lines(matrix: dict[str, list[float]], promoters: Sequence[Promoter], threshold: float) -> list[str]:
    length = _reference_length(promoters)
    lines: list[str] = []
    for promoter in promoters:
        lines.append(f"gene:{promoter.name}")
        for hit in find_hits(matrix, promoter.seq[:length], threshold):
            lines.append(f"position:{hit.position}")
            lines.append(f"hit({hit.site})={hit.score:.2f}")
        lines.append("")
    return lines


def _report(args: argparse.Namespace) -> list[str]:
    motifs = _load_motifs(args.motifs)
    lines = ["motif region:", *motifs, ""]
    promoters = _load_promoters(args.promoters)
    lines.append("promoter_sequence:")
    for promoter in promoters:
        lines.extend([f">{promoter.name}", promoter.seq])

    freq, matrix = _build_matrix(motifs)
    lines.append(str(len(freq[BASES[0]])))
    lines.extend("".join(f"{count:3d} " for count in freq[base]) for base in BASES)
    lines.extend(_matrix_lines(matrix))

    lines.extend(motifs)
    lines.append("".join(f"{score(matrix, motif):5.2f}" for motif in motifs))

    lines.append(str(_reference_length(promoters)))
    lines.extend(_hit_lines(matrix, promoters, args.threshold))
    return lines


def _scan(args: argparse.Namespace) -> list[str]:
    motifs = _load_motifs(args.motifs)
    lines = [f"Motif:{args.motifs}"]
    promoters = _load_promoters(args.promoters)
    _, matrix = _build_matrix(motifs)
    lines.extend(_hit_lines(matrix, promoters, args.threshold))
    return lines


def _scores(args: argparse.Namespace) -> list[str]:
    motifs = _load_motifs(args.motifs)
    lines = [f"Motif:{args.motifs}"]
    promoters = _load_promoters(args.promoters)
    _, matrix = _build_matrix(motifs)
    lines.extend(_matrix_lines(matrix))
    length = _reference_length(promoters)
    for promoter in promoters:
        lines.append(f"gene:{promoter.name}")
        lines.append("".join(f"{value:8.2f} " for value in scan(matrix, promoter.seq[:length])))
    return lines


def _random(args: argparse.Namespace) -> list[str]:
    promoters = _load_promoters(args.promoters)
    rng = random.Random(args.seed)
    append_random_records(Path(args.output), _reference_length(promoters), args.count, rng)
    return []


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="motifscan",
        description="Score promoter regions against a transcription-factor binding motif.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def add_inputs(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("motifs", help="file of aligned binding-site sequences")
        sub.add_argument("promoters", help="FASTA-like file of promoter regions")

    report = commands.add_parser("report", help="print inputs, tables, matrix and hits")
    add_inputs(report)
    report.add_argument("--threshold", type=float, default=REPORT_THRESHOLD)
    report.set_defaults(handler=_report)

    hits = commands.add_parser("scan", help="print windows scoring at or above a threshold")
    add_inputs(hits)
    hits.add_argument("--threshold", type=float, default=SCAN_THRESHOLD)
    hits.set_defaults(handler=_scan)

    scores = commands.add_parser("scores", help="print the matrix and every window score")
    add_inputs(scores)
    scores.set_defaults(handler=_scores)

    rand = commands.add_parser("random", help="append random background sequences to a file")
    rand.add_argument("promoters", help="FASTA-like file whose first sequence sets the length")
    rand.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    rand.add_argument("-n", "--count", type=int, default=DEFAULT_RECORDS)
    rand.add_argument("--seed", type=int, default=None)
    rand.set_defaults(handler=_random)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _parser().parse_args(argv)
    try:
        lines = args.handler(args)
    except _InputError as exc:
        print(exc, file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())