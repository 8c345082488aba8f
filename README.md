# motifscan

Find candidate transcription factor binding sites in promoter sequences.

Given a set of aligned binding-site sequences for one transcription factor,
motifscan counts how often each base occurs at each position, turns the
counts into a log-odds score matrix against a fixed genomic background (with
a pseudocount of one per base), and slides that matrix along each promoter,
reporting the windows whose score reaches a threshold.

It can also produce random background sequences with a fixed base
composition (31% A, 19% C, 19% G, 31% T), useful for judging how often a
threshold is reached by chance.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Input files

* **Motif file**: binding-site sequences separated by whitespace, usually
  one per line. The width of the matrix is the length of the first one;
  longer sequences are cut to it, and characters other than `A`, `C`, `G`
  and `T` are not counted.

  ```
  TGATGTAA
  TGATGTCA
  TGATGTAT
  ```

* **Promoter file**: FASTA-style records, each a `>name` word followed by
  the sequence as a single word:

  ```
  >YAL001C
  ACGTTGATGTAACCGT
  ```

  A sequence with no header before it gets an empty name; a header with no
  sequence after it is dropped.

## Command line

```
motifscan --help
```

The `motifscan` command has four subcommands.

* `motifscan report MOTIFS PROMOTERS [--threshold T]` prints the motifs, the
  promoters, the motif width, the frequency table, the log-odds matrix
  (rows A, C, G, T), the score of each motif, the length of the first
  promoter, and for each gene the hits: a `position:N` line (1-based) and a
  `hit(SITE)=SCORE` line. The threshold defaults to 6.0.
* `motifscan scan MOTIFS PROMOTERS [--threshold T]` prints `Motif:MOTIFS`
  and then only the hits for each gene. The threshold defaults to 5.0.
* `motifscan scores MOTIFS PROMOTERS` prints `Motif:MOTIFS`, the log-odds
  matrix, and for each gene the score of every window.
* `motifscan random PROMOTERS [-o FILE] [-n COUNT] [--seed SEED]` appends
  COUNT (default 5) random sequences, named `0`, `1`, …, to FILE (default
  `array.data`), each as long as the first promoter in PROMOTERS.

Every gene is scanned only over the length of the first promoter, and the
last window of a sequence is not scored. If an input file cannot be read, a
message is written to standard error and the exit status is 1.

## Library use

```python
from motifscan.sequences import read_motifs, read_promoters
from motifscan.pwm import frequency_table, log_odds_matrix, find_hits

motifs = read_motifs("MATa1")
promoters = read_promoters("promoters")

freq = frequency_table(motifs)
matrix = log_odds_matrix(freq, len(motifs))

for promoter in promoters:
    for hit in find_hits(matrix, promoter.seq, 5.0):
        print(promoter.name, hit.position, hit.site, hit.score)
```

Other pieces:

* `motifscan.sequences.parse_motifs` and `parse_promoters` read the same
  formats from a string; `Promoter` holds a `name` and a `seq`.
* `motifscan.pwm.background_probabilities` gives the background base
  probabilities used for the log-odds scores.
* `motifscan.pwm.score` scores a single window; `motifscan.pwm.scan` returns
  the score of every window along a sequence, and `find_hits` returns the
  `Hit`s (1-based `position`, `site`, `score`) at or above a threshold.
* `motifscan.background.random_sequence`, `random_records` and
  `append_random_records` generate random sequences with the background
  composition, optionally appending them to a file as `>n` records. Each
  takes an optional random generator such as `random.Random(seed)`.
* `motifscan.background.genome_total` gives the total base count of the
  reference genome composition.

## What it does not do

motifscan scans the given strand only; it does not score the reverse
complement. Sequences spanning several lines in the promoter file are read
as separate records, not joined.