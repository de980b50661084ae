"""Lexicographic order as a hash strategy."""

from __future__ import annotations

from minimizers.hashing.base import HashStrategy


class LexicographicHash(HashStrategy):
    """Order elements lexicographically by their bytes.

    Elements of equal length compare the same way as their big-endian
    integer value, so this yields the classical lexicographic minimizer
    order. The seed is ignored.

    Examples:
        >>> h = LexicographicHash()
        >>> h.hash(b"AC", 4, 2, 0) < h.hash(b"CA", 4, 2, 0)
        True
    """

    def hash(self, data: bytes, w: int, length: int, seed: int) -> int:
        return int.from_bytes(data, "big")
