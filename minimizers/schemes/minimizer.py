"""Random minimizer baseline."""

from __future__ import annotations

from minimizers.schemes.base import KmerOrderScheme


class RandomMinimizer(KmerOrderScheme):
    """Leftmost k-mer with the smallest hash."""

    name = "minimizer"

    def order_key(self, kmer: bytes) -> int:
        return self._hash(kmer)
