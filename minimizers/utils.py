"""General-purpose sequence utilities for minimizers.

These functions depend only on ``numpy`` and the Python standard library.
"""

from __future__ import annotations

import numpy as np

# ---------------------------------------------------------------------------
# Internal constants
# ---------------------------------------------------------------------------

NUCLEOTIDES = "ACGT"

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def encode_sequence(sequence: str | bytes) -> bytes:
    """Return *sequence* as upper-case ASCII bytes.

    Examples:
        >>> encode_sequence("acgt")
        b'ACGT'
    """
    if isinstance(sequence, str):
        sequence = sequence.encode("ascii")
    return bytes(sequence).upper()


def validate_sequence(sequence: str | bytes, allowed_chars: str = NUCLEOTIDES) -> bool:
    """Return ``True`` if *sequence* contains only allowed characters."""
    if isinstance(sequence, bytes):
        sequence = sequence.decode("ascii")
    allowed = set(allowed_chars.upper() + allowed_chars.lower())
    return all(c in allowed for c in sequence)


def random_sequence(
    length: int,
    seed: int | None = None,
    alphabet: str = NUCLEOTIDES,
) -> bytes:
    """Draw a uniform random sequence over *alphabet*.

    Args:
        length: Number of symbols.
        seed: Random seed for reproducibility.
        alphabet: Symbols to draw from.

    Returns:
        The sequence as ASCII bytes.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    rng = np.random.default_rng(seed)
    symbols = np.frombuffer(alphabet.encode("ascii"), dtype=np.uint8)
    return rng.choice(symbols, size=length).astype(np.uint8).tobytes()
