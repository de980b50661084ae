"""Decycling-set based orders (Pellow et al., 2023)."""

from __future__ import annotations

import numpy as np

from minimizers.hashing.base import HashStrategy
from minimizers.schemes.base import KmerOrderScheme


class _EmbeddingScheme(KmerOrderScheme):
    """Shared unit-root embedding of k-mers onto the complex plane.

    The k-mer ``x`` maps to ``sum_i x_i * exp(2*pi*1j*i/k)``; its argument
    locates the k-mer relative to the cycles of the de Bruijn graph.
    """

    def __init__(
        self,
        w: int,
        k: int,
        t: int | None = None,
        seed: int = 0,
        hasher: HashStrategy | None = None,
    ) -> None:
        super().__init__(w, k, t=t, seed=seed, hasher=hasher)
        roots = np.exp(2j * np.pi * np.arange(self.k) / self.k)
        roots.setflags(write=False)
        self._roots = roots
        self._upper = np.pi - 2 * np.pi / self.k
        self._lower = -2 * np.pi / self.k

    def _argument(self, kmer: bytes) -> float:
        codes = np.frombuffer(kmer, dtype=np.uint8)
        x = np.dot(self._roots, codes)
        # Integer embeddings on an axis carry rounding noise; snap it so
        # boundary arguments (0, pi/2, pi) classify exactly.
        tol = 1e-9 * float(codes.sum())
        re = 0.0 if abs(x.real) <= tol else float(x.real)
        im = 0.0 if abs(x.imag) <= tol else float(x.imag)
        return float(np.angle(complex(re, im)))


class Decycling(_EmbeddingScheme):
    """Prefer k-mers of the decycling set, ``arg > pi - 2*pi/k``."""

    name = "decycling"

    def order_key(self, kmer: bytes) -> tuple[int, int]:
        in_set = self._argument(kmer) > self._upper
        return (0 if in_set else 1), self._hash(kmer)


class DoubleDecycling(_EmbeddingScheme):
    """Three tiers: positive decycling set, negative decycling set, the rest.

    Tier 0 holds ``arg > pi - 2*pi/k``; tier 1 holds
    ``-2*pi/k < arg <= 0``; everything else is tier 2.
    """

    name = "double_decycling"

    def order_key(self, kmer: bytes) -> tuple[int, int]:
        arg = self._argument(kmer)
        if arg > self._upper:
            tier = 0
        elif self._lower < arg <= 0:
            tier = 1
        else:
            tier = 2
        return tier, self._hash(kmer)
