"""Rotational minimizer, simplified variant."""

from __future__ import annotations

from minimizers.schemes.base import KmerOrderScheme


class RotationalAlt(KmerOrderScheme):
    """Prefer the k-mer with the largest symbol sum at offsets ``0 mod w``.

    The order key is ``(-sum, hash)``, so the largest sum compares smallest
    and the hash breaks ties. Symbols contribute their byte codes.
    """

    name = "rotational_alt"

    def order_key(self, kmer: bytes) -> tuple[int, int]:
        return -sum(kmer[0 : self.k : self.w]), self._hash(kmer)
