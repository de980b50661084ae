"""Drivers that run a sampling scheme over a whole sequence.

:func:`sample_positions` is the main entry point: it walks every window of a
sequence and collects the offset chosen by the scheme, either incrementally
(``stream=True``) or by recomputing each window from scratch.
"""

from __future__ import annotations

from typing import Iterator

from minimizers.schemes.base import SamplingScheme
from minimizers.utils import encode_sequence, validate_sequence


def iter_windows(sequence: str | bytes, w: int, k: int) -> Iterator[bytes]:
    """Yield every window of ``w + k - 1`` symbols, left to right."""
    data = encode_sequence(sequence)
    length = w + k - 1
    for start in range(len(data) - length + 1):
        yield data[start : start + length]


def sample_positions(
    scheme: SamplingScheme,
    sequence: str | bytes,
    stream: bool = True,
    validate: bool = False,
) -> list[int]:
    """Return the offset selected in each window of *sequence*.

    Args:
        scheme: Sampling scheme. In streaming mode its state is cleared on
            the first window.
        sequence: Input sequence, at least ``w + k - 1`` symbols long.
        stream: Use the incremental path instead of per-window recomputation.
        validate: Reject sequences with symbols outside ACGT.

    Raises:
        ValueError: If the sequence is shorter than one window, or contains
            non-ACGT symbols while ``validate`` is set.
    """
    data = encode_sequence(sequence)
    if validate and not validate_sequence(data):
        raise ValueError("sequence contains symbols outside ACGT")
    if len(data) < scheme.params.window_length:
        raise ValueError(
            f"sequence of length {len(data)} is shorter than one window "
            f"({scheme.params.window_length})"
        )
    windows = iter_windows(data, scheme.w, scheme.k)
    if stream:
        return [scheme.sample_stream(window, clear=i == 0) for i, window in enumerate(windows)]
    return [scheme.sample_batch(window) for window in windows]


def sampled_kmer_positions(
    scheme: SamplingScheme,
    sequence: str | bytes,
    stream: bool = True,
    validate: bool = False,
) -> list[int]:
    """Return the sorted, distinct absolute positions of the sampled k-mers."""
    positions = sample_positions(scheme, sequence, stream=stream, validate=validate)
    return sorted({start + offset for start, offset in enumerate(positions)})
