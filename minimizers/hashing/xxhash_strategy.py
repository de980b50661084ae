"""xxHash-based hash strategy."""

from __future__ import annotations

import xxhash

from minimizers.hashing.base import HashStrategy


class XXHashStrategy(HashStrategy):
    """64-bit xxHash of the element bytes, seeded per scheme instance."""

    def hash(self, data: bytes, w: int, length: int, seed: int) -> int:
        """Return the unsigned 64-bit xxh64 digest of ``data``."""
        return xxhash.xxh64_intdigest(data, seed=seed)
