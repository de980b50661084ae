"""Rotational minimizer as described by Marçais et al."""

from __future__ import annotations

import numpy as np

from minimizers.errors import InvalidParameterError, InvariantViolatedError
from minimizers.hashing.base import HashStrategy
from minimizers.schemes.base import KmerOrderScheme

ALPHABET_SIZE = 4

# Nucleotide ranks used for the residue-class sums; other bytes rank 0.
_NUCLEOTIDE_RANKS = {"A": 0, "C": 1, "T": 2, "G": 3}


class RotationalOrig(KmerOrderScheme):
    """Sample from a universal hitting set built on residue-class sums.

    For residue ``j`` in ``[0, w)`` let ``sum_j`` be the total rank of the
    symbols at offsets ``j mod w``. A k-mer is in the UHS when
    ``sum_j <= sum_0 + sigma - 1`` for every ``j >= 1``. UHS members beat
    every other k-mer; the hash orders k-mers within each group.

    Requires ``k % w == 0``, which guarantees that each window holds at
    least one UHS k-mer.
    """

    name = "rotational_orig"

    def __init__(
        self,
        w: int,
        k: int,
        t: int | None = None,
        seed: int = 0,
        hasher: HashStrategy | None = None,
    ) -> None:
        super().__init__(w, k, t=t, seed=seed, hasher=hasher)
        remap = np.zeros(256, dtype=np.int64)
        for symbol, rank in _NUCLEOTIDE_RANKS.items():
            remap[ord(symbol)] = rank
        remap.setflags(write=False)
        self._remap = remap

    def _validate(self) -> None:
        if self.k % self.w != 0:
            raise InvalidParameterError(
                f"rotational_orig needs k to be a multiple of w, got k={self.k}, w={self.w}"
            )

    def _in_uhs(self, kmer: bytes) -> bool:
        ranks = self._remap[np.frombuffer(kmer, dtype=np.uint8)]
        sums = ranks.reshape(-1, self.w).sum(axis=0)
        return bool(np.all(sums[1:] <= sums[0] + ALPHABET_SIZE - 1))

    def order_key(self, kmer: bytes) -> tuple[int, int]:
        return (0 if self._in_uhs(kmer) else 1), self._hash(kmer)

    def _check_minimum(self, key: tuple[int, int]) -> None:
        if key[0] != 0:
            raise InvariantViolatedError(
                f"no k-mer of the window is in the UHS (w={self.w}, k={self.k})"
            )
