"""Tests for sequence drivers and utilities."""

from __future__ import annotations

import pytest

from minimizers.sampling import iter_windows, sample_positions, sampled_kmer_positions
from minimizers.schemes.mod_sampling import ModSampling
from minimizers.utils import encode_sequence, random_sequence, validate_sequence


def test_iter_windows_count_and_length() -> None:
    """A sequence of n symbols has n - (w + k - 1) + 1 windows."""
    windows = list(iter_windows("ACGTACGTAC", w=3, k=4))
    assert len(windows) == 5
    assert all(len(window) == 6 for window in windows)
    assert windows[0] == b"ACGTAC"


def test_sample_positions_rejects_short_sequence() -> None:
    """Sequences shorter than one window are rejected."""
    with pytest.raises(ValueError):
        sample_positions(ModSampling(w=4, k=8, t=3), "ACGT")


def test_sampled_kmer_positions_are_sorted_and_distinct() -> None:
    """Absolute positions are unique and increasing and within range."""
    scheme = ModSampling(w=4, k=8, t=3, seed=1)
    sequence = random_sequence(200, seed=3)
    positions = sampled_kmer_positions(scheme, sequence)
    assert positions == sorted(set(positions))
    assert positions[-1] <= len(sequence) - scheme.k
    # Every window of w k-mers contains at least one sampled k-mer.
    gaps = [b - a for a, b in zip(positions, positions[1:])]
    assert max(gaps) <= scheme.w


def test_lowercase_input_is_normalised() -> None:
    """Lower-case sequences sample like upper-case ones."""
    scheme = ModSampling(w=4, k=8, t=3, seed=1)
    sequence = random_sequence(60, seed=2)
    assert sample_positions(scheme, sequence.lower()) == sample_positions(scheme, sequence)


def test_encode_sequence() -> None:
    """Strings become upper-case ASCII bytes."""
    assert encode_sequence("acGt") == b"ACGT"
    assert encode_sequence(b"aa") == b"AA"


def test_validate_sequence() -> None:
    """Only ACGT (any case) passes by default."""
    assert validate_sequence("ACGTacgt")
    assert validate_sequence(b"GATTACA")
    assert not validate_sequence("ACGN")


def test_random_sequence_is_reproducible() -> None:
    """Seeded draws are reproducible and use the alphabet only."""
    a = random_sequence(100, seed=5)
    assert a == random_sequence(100, seed=5)
    assert len(a) == 100
    assert set(a) <= set(b"ACGT")
    with pytest.raises(ValueError):
        random_sequence(-1)


def test_sample_positions_validation_rejects_non_acgt() -> None:
    """With validate set, symbols outside ACGT are rejected."""
    scheme = ModSampling(w=4, k=8, t=3)
    sequence = "ACGTACGTNACGTACGT"
    with pytest.raises(ValueError):
        sample_positions(scheme, sequence, validate=True)
    with pytest.raises(ValueError):
        sampled_kmer_positions(scheme, sequence, validate=True)
    assert len(sample_positions(scheme, sequence)) == len(sequence) - 10


def test_sample_positions_validation_accepts_lowercase() -> None:
    """Lower-case nucleotides pass validation."""
    scheme = ModSampling(w=4, k=8, t=3, seed=1)
    sequence = random_sequence(40, seed=4)
    assert sample_positions(scheme, sequence.lower(), validate=True) == sample_positions(
        scheme, sequence
    )
