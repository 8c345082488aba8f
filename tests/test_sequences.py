import pytest

from motifscan.sequences import (
    Promoter,
    parse_motifs,
    parse_promoters,
    read_motifs,
    read_promoters,
)


def test_parse_motifs_splits_on_whitespace():
    assert parse_motifs("ACGT\nTTGA\n  CCCA\n") == ["ACGT", "TTGA", "CCCA"]


def test_parse_motifs_empty_text():
    assert parse_motifs("\n\n") == []


def test_parse_promoters_pairs_headers_with_sequences():
    text = ">YAL001\nACGTACGT\n>YAL002\nTTTTAAAA\n"
    assert parse_promoters(text) == [
        Promoter("YAL001", "ACGTACGT"),
        Promoter("YAL002", "TTTTAAAA"),
    ]


def test_parse_promoters_sequence_without_header_has_empty_name():
    assert parse_promoters("ACGT\n>g2\nGGGG\n") == [
        Promoter("", "ACGT"),
        Promoter("g2", "GGGG"),
    ]


def test_parse_promoters_trailing_header_dropped():
    result = parse_promoters(">g1\nACGT\n>orphan\n")
    assert result == [Promoter("g1", "ACGT")]


def test_parse_promoters_later_header_wins():
    result = parse_promoters(">first\n>second\nACGT\n")
    assert result == [Promoter("second", "ACGT")]


def test_read_motifs_from_file(tmp_path):
    path = tmp_path / "motifs"
    path.write_text("AAGT\nACGT\n")
    assert read_motifs(path) == ["AAGT", "ACGT"]


def test_read_promoters_from_file(tmp_path):
    path = tmp_path / "promoters"
    path.write_text(">gene\nACGTTGCA\n")
    assert read_promoters(str(path)) == [Promoter("gene", "ACGTTGCA")]


def test_read_motifs_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_motifs(tmp_path / "absent")


def test_read_promoters_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_promoters(tmp_path / "absent")