import random

from motifscan.background import (
    append_random_records,
    genome_total,
    random_records,
    random_sequence,
)
from motifscan.sequences import read_promoters


class _FixedRolls:
    def __init__(self, rolls):
        self._rolls = iter(rolls)
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return next(self._rolls)


def test_genome_total():
    assert genome_total() == 24314410


def test_random_sequence_length_and_alphabet():
    seq = random_sequence(200, random.Random(1))
    assert len(seq) == 200
    assert set(seq) <= set("ACGT")


def test_random_sequence_deterministic_with_seed():
    rng = random.Random(7)
    seq = random_sequence(50, rng)
    assert len(seq) == 50
    assert seq == random_sequence(50, random.Random(7))

    reference = random.Random(7)
    for _ in range(50):
        reference.randrange(100)
    assert rng.random() == reference.random()


def test_random_sequence_thresholds():
    rng = _FixedRolls([0, 30, 31, 49, 50, 68, 69, 99])
    assert random_sequence(8, rng) == "AACCGGTT"
    assert rng.stops == [100] * 8


def test_random_sequence_zero_length():
    assert random_sequence(0, random.Random(3)) == ""


def test_random_records_names_and_lengths():
    records = random_records(30, 5, random.Random(2))
    assert [r.name for r in records] == ["0", "1", "2", "3", "4"]
    assert all(len(r.seq) == 30 for r in records)


def test_append_round_trips_through_reader(tmp_path):
    path = tmp_path / "array.data"
    records = append_random_records(path, 40, 5, random.Random(4))
    assert read_promoters(path) == records


def test_append_twice_accumulates(tmp_path):
    path = tmp_path / "array.data"
    first = append_random_records(path, 10, 3, random.Random(5))
    second = append_random_records(path, 10, 3, random.Random(6))
    assert read_promoters(path) == first + second